from typing import Any, Dict, List, Optional, Union

from tiyende.crud.activity import ActivityLog
from tiyende.crud.base import InMemoryCRUD
from tiyende.schemas.ticket import Ticket, TicketCreate, TicketUpdate


class CRUDTicket(InMemoryCRUD[Ticket, TicketCreate, TicketUpdate]):
    unique_fields = ("booking_reference",)
    timestamp_fields = ("booking_date",)

    def __init__(self, activities: ActivityLog):
        super().__init__(Ticket)
        self.activities = activities

    def get_by_reference(self, reference: str) -> Optional[Ticket]:
        """Get ticket by unique booking reference"""
        return self._find_first("booking_reference", reference)

    def get_by_route(self, route_id: int) -> List[Ticket]:
        return self.get_multi(filters={"route_id": route_id})

    def get_by_vendor(self, vendor_id: int) -> List[Ticket]:
        return self.get_multi(filters={"vendor_id": vendor_id})

    def create(self, *, obj_in: Union[TicketCreate, Dict[str, Any]]) -> Ticket:
        ticket = super().create(obj_in=obj_in)
        self.activities.record(
            "Ticket created",
            {"reference": ticket.booking_reference, "customer": ticket.customer_name},
        )
        return ticket

    def update(self, id: int, *, obj_in: Union[TicketUpdate, Dict[str, Any]]) -> Optional[Ticket]:
        previous = self.get(id)
        if previous is None:
            return None
        update_data = obj_in if isinstance(obj_in, dict) else obj_in.model_dump(exclude_unset=True)
        ticket = super().update(id, obj_in=update_data)
        if ticket is not None:
            status = update_data.get("status")
            self.activities.record(
                "Ticket updated",
                {
                    "reference": previous.booking_reference,
                    "customer": previous.customer_name,
                    "status": getattr(status, "value", status),
                },
            )
        return ticket
