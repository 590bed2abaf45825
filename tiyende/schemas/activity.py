from pydantic import BaseModel, Field
from typing import Optional, Dict, Any
from datetime import datetime


class ActivityCreate(BaseModel):
    user_id: Optional[int] = None
    action: str = Field(..., min_length=1)  # human readable, e.g. 'Vendor created'
    details: Dict[str, Any] = Field(default_factory=dict)


class Activity(ActivityCreate):
    id: int
    timestamp: datetime
