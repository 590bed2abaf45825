from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import List, Optional
from datetime import datetime

WEEKDAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


def normalize_days(days: Optional[List[str]]) -> Optional[List[str]]:
    """Validate weekday names and drop duplicates, keeping first-seen order"""
    if days is None:
        return days
    normalized = []
    for day in days:
        name = day.strip().capitalize()
        if name not in WEEKDAYS:
            raise ValueError(f"Invalid weekday name: {day}")
        if name not in normalized:
            normalized.append(name)
    return normalized


# -------------------
# Base schema
# -------------------
class RouteBase(BaseModel):
    vendor_id: int
    departure: str = Field(..., min_length=1)
    destination: str = Field(..., min_length=1)
    departure_time: str = Field(..., pattern=TIME_PATTERN)
    estimated_arrival: str = Field(..., pattern=TIME_PATTERN)
    fare: float = Field(..., ge=0)
    capacity: int = Field(..., gt=0)
    status: str = "active"
    days_of_week: List[str] = Field(default_factory=list)

    @field_validator("days_of_week")
    @classmethod
    def check_days(cls, value):
        return normalize_days(value)


# -------------------
# Create schema
# -------------------
class RouteCreate(RouteBase):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "vendor_id": 1,
                "departure": "Lusaka",
                "destination": "Livingstone",
                "departure_time": "08:00",
                "estimated_arrival": "15:00",
                "fare": 350,
                "capacity": 44,
                "status": "active",
                "days_of_week": ["Monday", "Wednesday", "Friday", "Sunday"],
            }
        }
    )


# -------------------
# Update schema
# -------------------
class RouteUpdate(BaseModel):
    vendor_id: Optional[int] = None
    departure: Optional[str] = Field(None, min_length=1)
    destination: Optional[str] = Field(None, min_length=1)
    departure_time: Optional[str] = Field(None, pattern=TIME_PATTERN)
    estimated_arrival: Optional[str] = Field(None, pattern=TIME_PATTERN)
    fare: Optional[float] = Field(None, ge=0)
    capacity: Optional[int] = Field(None, gt=0)
    status: Optional[str] = None
    days_of_week: Optional[List[str]] = None

    @field_validator("days_of_week")
    @classmethod
    def check_days(cls, value):
        return normalize_days(value)


# -------------------
# Stored entity
# -------------------
class Route(RouteBase):
    id: int
    created_at: datetime

    @property
    def label(self) -> str:
        return f"{self.departure} → {self.destination}"
