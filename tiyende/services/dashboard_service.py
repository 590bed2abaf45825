"""
Dashboard aggregation over the in-memory store
"""
from tiyende.crud.activity import ActivityLog
from tiyende.crud.route import CRUDRoute
from tiyende.crud.ticket import CRUDTicket
from tiyende.crud.vendor import CRUDVendor
from tiyende.schemas.dashboard import DashboardStats
from tiyende.schemas.ticket import TicketStatus
from tiyende.schemas.vendor import VendorStatus

RECENT_BOOKINGS_LIMIT = 5
RECENT_ACTIVITIES_LIMIT = 5


class DashboardService:
    """Read-only summary of current store state. Never mutates anything."""

    def __init__(
        self,
        tickets: CRUDTicket,
        vendors: CRUDVendor,
        routes: CRUDRoute,
        activities: ActivityLog,
    ):
        self.tickets = tickets
        self.vendors = vendors
        self.routes = routes
        self.activities = activities

    def snapshot(self) -> DashboardStats:
        all_tickets = self.tickets.get_all()

        total_revenue = sum(
            ticket.amount for ticket in all_tickets if ticket.status == TicketStatus.PAID
        )

        # Newest booking first; equal booking dates keep reverse insertion order
        recent_bookings = sorted(
            reversed(all_tickets), key=lambda t: t.booking_date, reverse=True
        )[:RECENT_BOOKINGS_LIMIT]

        return DashboardStats(
            total_bookings=len(all_tickets),
            total_revenue=total_revenue,
            active_vendors=self.vendors.count(filters={"status": VendorStatus.ACTIVE}),
            active_routes=self.routes.count(filters={"status": "active"}),
            recent_bookings=recent_bookings,
            recent_activities=self.activities.recent(RECENT_ACTIVITIES_LIMIT),
        )
