from pydantic import BaseModel
from typing import List

from tiyende.schemas.activity import Activity
from tiyende.schemas.ticket import Ticket


class DashboardStats(BaseModel):
    total_bookings: int
    total_revenue: float
    active_vendors: int
    active_routes: int
    recent_bookings: List[Ticket]
    recent_activities: List[Activity]
