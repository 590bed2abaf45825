import logging
from datetime import datetime, timezone

from tiyende.config import settings
from tiyende.schemas.route import RouteCreate
from tiyende.schemas.ticket import TicketCreate
from tiyende.schemas.user import UserCreate, UserRole
from tiyende.schemas.vendor import VendorCreate

logger = logging.getLogger(__name__)


def seed_admin(storage):
    """
    Seed the default admin user (idempotent).
    """
    if storage.users.get_by_username(settings.DEFAULT_ADMIN_USERNAME):
        logger.info(f"Admin '{settings.DEFAULT_ADMIN_USERNAME}' already exists, skipping.")
        return

    storage.users.create(obj_in=UserCreate(
        username=settings.DEFAULT_ADMIN_USERNAME,
        password=settings.DEFAULT_ADMIN_PASSWORD,
        email=settings.DEFAULT_ADMIN_EMAIL,
        full_name="Admin User",
        role=UserRole.ADMIN,
        active=True,
    ))
    logger.info(f"Admin '{settings.DEFAULT_ADMIN_USERNAME}' created.")


def _vendor_id(storage, name):
    for vendor in storage.vendors.get_all():
        if vendor.name == name:
            return vendor.id
    return None


def _route_id(storage, vendor_id, departure, destination):
    for route in storage.routes.get_by_vendor(vendor_id):
        if route.departure == departure and route.destination == destination:
            return route.id
    return None


def seed_vendors(storage):
    vendors_data = [
        {
            "name": "Mazhandu Bus",
            "contact_person": "John Mazhandu",
            "email": "info@mazhandubus.com",
            "phone": "+260 97 1234567",
            "address": "Lusaka, Zambia",
            "status": "active",
        },
        {
            "name": "Power Tools Bus",
            "contact_person": "Maria Daka",
            "email": "info@powertoolsbus.com",
            "phone": "+260 96 7654321",
            "address": "Kitwe, Zambia",
            "status": "active",
        },
    ]
    for data in vendors_data:
        if _vendor_id(storage, data["name"]) is not None:
            logger.info(f"Vendor '{data['name']}' already exists, skipping.")
            continue
        vendor = storage.vendors.create(obj_in=VendorCreate(**data))
        logger.info(f"Vendor '{vendor.name}' created.")


def seed_routes(storage):
    routes_data = [
        {
            "vendor": "Mazhandu Bus",
            "departure": "Lusaka",
            "destination": "Livingstone",
            "departure_time": "08:00",
            "estimated_arrival": "15:00",
            "fare": 350,
            "capacity": 44,
            "status": "active",
            "days_of_week": ["Monday", "Wednesday", "Friday", "Sunday"],
        },
        {
            "vendor": "Power Tools Bus",
            "departure": "Lusaka",
            "destination": "Ndola",
            "departure_time": "07:30",
            "estimated_arrival": "12:30",
            "fare": 200,
            "capacity": 44,
            "status": "active",
            "days_of_week": ["Monday", "Tuesday", "Thursday", "Saturday"],
        },
    ]
    for data in routes_data:
        data = dict(data)
        vendor_id = _vendor_id(storage, data.pop("vendor"))
        if vendor_id is None:
            logger.warning(f"No vendor for route {data['departure']} → {data['destination']}, skipping.")
            continue
        if _route_id(storage, vendor_id, data["departure"], data["destination"]) is not None:
            continue
        route = storage.routes.create(obj_in=RouteCreate(vendor_id=vendor_id, **data))
        logger.info(f"Route '{route.label}' created.")


def seed_settings(storage):
    storage.settings.upsert("system_name", "Tiyende Bus Reservation")
    storage.settings.upsert("contact_email", "support@tiyende.com")
    storage.settings.upsert("contact_phone", "+260 97 1234567")


def seed_tickets(storage):
    tickets_data = [
        {
            "booking_reference": "TIY-8294",
            "route": ("Mazhandu Bus", "Lusaka", "Livingstone"),
            "customer_name": "John Doe",
            "customer_phone": "+260 97 1234567",
            "customer_email": "john.doe@gmail.com",
            "seat_number": 12,
            "status": "paid",
            "amount": 350,
            "payment_method": "mobile_money",
            "payment_reference": "PAY123456",
            "travel_date": datetime(2023, 6, 15, tzinfo=timezone.utc),
        },
        {
            "booking_reference": "TIY-8293",
            "route": ("Power Tools Bus", "Lusaka", "Ndola"),
            "customer_name": "Maria Sakala",
            "customer_phone": "+260 96 7654321",
            "customer_email": "maria.sakala@gmail.com",
            "seat_number": 5,
            "status": "pending",
            "amount": 200,
            "payment_method": "mobile_money",
            "travel_date": datetime(2023, 6, 16, tzinfo=timezone.utc),
        },
    ]
    for data in tickets_data:
        if storage.tickets.get_by_reference(data["booking_reference"]):
            continue
        data = dict(data)
        vendor_name, departure, destination = data.pop("route")
        vendor_id = _vendor_id(storage, vendor_name)
        route_id = _route_id(storage, vendor_id, departure, destination) if vendor_id else None
        if route_id is None:
            logger.warning(f"No route for ticket {data['booking_reference']}, skipping.")
            continue
        storage.tickets.create(obj_in=TicketCreate(route_id=route_id, vendor_id=vendor_id, **data))


def seed_activities(storage):
    seeded = [
        ("New vendor added", {"vendor_name": "Zambia Royal Bus"}),
        ("New route added", {"route": "Lusaka → Mongu"}),
    ]
    recorded = {a.action for a in storage.activities.recent(storage.activities.count())}
    admin = storage.users.get_by_username(settings.DEFAULT_ADMIN_USERNAME)
    admin_id = admin.id if admin else None
    for action, details in seeded:
        if action not in recorded:
            storage.activities.record(action, details, user_id=admin_id)


def seed_all(storage):
    seed_admin(storage)
    seed_vendors(storage)
    seed_routes(storage)
    seed_settings(storage)
    seed_tickets(storage)
    seed_activities(storage)
    logger.info("✅ Sample data seeding completed successfully.")
