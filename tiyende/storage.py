"""
Process-wide in-memory store.

One ``MemStorage`` is built by the application factory and handed to the
routers through the ``get_storage`` dependency. Nothing here is persisted;
a restart starts from an empty (or freshly seeded) store.
"""
from fastapi import Request

from tiyende.crud.activity import ActivityLog
from tiyende.crud.route import CRUDRoute
from tiyende.crud.setting import CRUDSetting
from tiyende.crud.ticket import CRUDTicket
from tiyende.crud.user import CRUDUser
from tiyende.crud.vendor import CRUDVendor
from tiyende.services.dashboard_service import DashboardService
from tiyende.core.logging_config import get_logger

logger = get_logger(__name__)


class MemStorage:
    def __init__(self):
        self.activities = ActivityLog()
        self.users = CRUDUser()
        self.vendors = CRUDVendor(self.activities)
        self.routes = CRUDRoute(self.activities, self.vendors)
        self.tickets = CRUDTicket(self.activities)
        self.settings = CRUDSetting(self.activities)
        self.dashboard = DashboardService(self.tickets, self.vendors, self.routes, self.activities)


def build_storage(seed: bool = False) -> MemStorage:
    """Create a storage instance, optionally filled with sample data"""
    storage = MemStorage()
    if seed:
        from tiyende.seed.seed_data import seed_all

        seed_all(storage)
    logger.info(
        f"Storage ready: {storage.users.count()} users, {storage.vendors.count()} vendors, "
        f"{storage.routes.count()} routes, {storage.tickets.count()} tickets"
    )
    return storage


def get_storage(request: Request) -> MemStorage:
    """FastAPI dependency returning the storage attached to the application"""
    return request.app.state.storage
