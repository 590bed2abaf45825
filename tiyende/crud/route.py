from typing import Any, Dict, List, Optional, Union

from tiyende.crud.activity import ActivityLog
from tiyende.crud.base import InMemoryCRUD
from tiyende.crud.vendor import CRUDVendor
from tiyende.schemas.route import Route, RouteCreate, RouteUpdate


class CRUDRoute(InMemoryCRUD[Route, RouteCreate, RouteUpdate]):
    timestamp_fields = ("created_at",)

    def __init__(self, activities: ActivityLog, vendors: CRUDVendor):
        super().__init__(Route)
        self.activities = activities
        self.vendors = vendors

    def get_by_vendor(self, vendor_id: int) -> List[Route]:
        """All routes operated by a vendor"""
        return self.get_multi(filters={"vendor_id": vendor_id})

    def create(self, *, obj_in: Union[RouteCreate, Dict[str, Any]]) -> Route:
        route = super().create(obj_in=obj_in)
        vendor = self.vendors.get(route.vendor_id)
        self.activities.record(
            "Route created",
            {"route": route.label, "vendor": vendor.name if vendor else None},
        )
        return route

    def update(self, id: int, *, obj_in: Union[RouteUpdate, Dict[str, Any]]) -> Optional[Route]:
        previous = self.get(id)
        if previous is None:
            return None
        route = super().update(id, obj_in=obj_in)
        if route is not None:
            self.activities.record("Route updated", {"route": previous.label})
        return route

    def remove(self, id: int) -> bool:
        with self._lock:
            route = self._records.get(id)
            removed = super().remove(id)
        if route is not None and removed:
            self.activities.record("Route deleted", {"route": route.label})
        return removed
