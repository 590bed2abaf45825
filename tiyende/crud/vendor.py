from typing import Any, Dict, Optional, Union

from tiyende.crud.activity import ActivityLog
from tiyende.crud.base import InMemoryCRUD
from tiyende.schemas.vendor import Vendor, VendorCreate, VendorUpdate


class CRUDVendor(InMemoryCRUD[Vendor, VendorCreate, VendorUpdate]):
    timestamp_fields = ("created_at",)

    def __init__(self, activities: ActivityLog):
        super().__init__(Vendor)
        self.activities = activities

    def create(self, *, obj_in: Union[VendorCreate, Dict[str, Any]]) -> Vendor:
        vendor = super().create(obj_in=obj_in)
        self.activities.record("Vendor created", {"vendor_name": vendor.name})
        return vendor

    def update(self, id: int, *, obj_in: Union[VendorUpdate, Dict[str, Any]]) -> Optional[Vendor]:
        previous = self.get(id)
        if previous is None:
            return None
        vendor = super().update(id, obj_in=obj_in)
        if vendor is not None:
            self.activities.record("Vendor updated", {"vendor_name": previous.name})
        return vendor

    def remove(self, id: int) -> bool:
        with self._lock:
            vendor = self._records.get(id)
            removed = super().remove(id)
        if vendor is not None and removed:
            self.activities.record("Vendor deleted", {"vendor_name": vendor.name})
        return removed
