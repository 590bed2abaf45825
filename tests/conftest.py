"""
Pytest configuration and fixtures for testing.
"""
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from main import create_app
from tiyende.auth.utils import create_access_token
from tiyende.schemas.route import RouteCreate
from tiyende.schemas.ticket import TicketCreate
from tiyende.schemas.user import UserCreate, UserRole
from tiyende.schemas.vendor import VendorCreate
from tiyende.storage import MemStorage


@pytest.fixture(scope="function")
def storage():
    """
    A fresh, unseeded store for each test function.
    """
    return MemStorage()


@pytest.fixture(scope="function")
def client(storage):
    """
    Test client bound to the per-test store.
    """
    app = create_app(storage)
    with TestClient(app) as test_client:
        yield test_client


def _issue_token(storage, user):
    token = create_access_token(
        user_id=str(user.id),
        user_type=user.role.value,
        custom_claims={"username": user.username},
    )
    storage.users.set_token(user.id, token)
    return token


@pytest.fixture(scope="function")
def admin_user(storage):
    return storage.users.create(obj_in=UserCreate(
        username="admin",
        password="admin123",
        email="admin@tiyende.com",
        full_name="Admin User",
        role=UserRole.ADMIN,
    ))


@pytest.fixture(scope="function")
def staff_user(storage):
    return storage.users.create(obj_in=UserCreate(
        username="clerk",
        password="clerk123",
        email="clerk@tiyende.com",
        full_name="Booking Clerk",
    ))


@pytest.fixture(scope="function")
def admin_headers(storage, admin_user):
    return {"Authorization": f"Bearer {_issue_token(storage, admin_user)}"}


@pytest.fixture(scope="function")
def staff_headers(storage, staff_user):
    return {"Authorization": f"Bearer {_issue_token(storage, staff_user)}"}


@pytest.fixture(scope="function")
def test_vendor(storage):
    return storage.vendors.create(obj_in=VendorCreate(
        name="Mazhandu Bus",
        contact_person="John Mazhandu",
        email="info@mazhandubus.com",
        phone="+260 97 1234567",
        address="Lusaka, Zambia",
    ))


@pytest.fixture(scope="function")
def test_route(storage, test_vendor):
    return storage.routes.create(obj_in=RouteCreate(
        vendor_id=test_vendor.id,
        departure="Lusaka",
        destination="Livingstone",
        departure_time="08:00",
        estimated_arrival="15:00",
        fare=350,
        capacity=44,
        days_of_week=["Monday", "Wednesday", "Friday"],
    ))


@pytest.fixture(scope="function")
def ticket_factory(storage):
    """
    Create tickets straight in the store; references are not checked there.
    """
    def _create(reference, route_id=1, vendor_id=1, status="pending", amount=350):
        return storage.tickets.create(obj_in=TicketCreate(
            booking_reference=reference,
            route_id=route_id,
            vendor_id=vendor_id,
            customer_name="John Doe",
            customer_phone="+260 97 1234567",
            seat_number=12,
            status=status,
            amount=amount,
            travel_date=datetime(2023, 6, 15, tzinfo=timezone.utc),
        ))
    return _create


@pytest.fixture(scope="function")
def test_ticket(ticket_factory, test_route):
    return ticket_factory("TIY-0001", test_route.id, test_route.vendor_id, status="paid")


@pytest.fixture(scope="function")
def route_payload(test_vendor):
    return {
        "vendor_id": test_vendor.id,
        "departure": "Lusaka",
        "destination": "Ndola",
        "departure_time": "07:30",
        "estimated_arrival": "12:30",
        "fare": 200,
        "capacity": 44,
        "days_of_week": ["Monday", "Tuesday"],
    }


@pytest.fixture(scope="function")
def ticket_payload(test_route):
    return {
        "booking_reference": "TIY-8293",
        "route_id": test_route.id,
        "vendor_id": test_route.vendor_id,
        "customer_name": "Maria Sakala",
        "customer_phone": "+260 96 7654321",
        "customer_email": "maria.sakala@gmail.com",
        "seat_number": 5,
        "status": "pending",
        "amount": 200,
        "payment_method": "mobile_money",
        "travel_date": "2023-06-16T00:00:00Z",
    }
