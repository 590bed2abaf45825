from enum import Enum
from pydantic import BaseModel, EmailStr, Field, ConfigDict
from typing import Optional
from datetime import datetime


class TicketStatus(str, Enum):
    PAID = "paid"
    PENDING = "pending"
    REFUNDED = "refunded"
    CANCELLED = "cancelled"


# -------------------
# Base schema
# -------------------
class TicketBase(BaseModel):
    booking_reference: str = Field(..., min_length=1)
    route_id: int
    vendor_id: int
    customer_name: str = Field(..., min_length=1)
    customer_phone: str = Field(..., min_length=5)
    customer_email: Optional[EmailStr] = None
    seat_number: int = Field(..., ge=1)
    status: TicketStatus = TicketStatus.PENDING
    amount: float = Field(..., ge=0)
    payment_method: Optional[str] = None
    payment_reference: Optional[str] = None
    travel_date: datetime


# -------------------
# Create schema
# -------------------
class TicketCreate(TicketBase):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "booking_reference": "TIY-8294",
                "route_id": 1,
                "vendor_id": 1,
                "customer_name": "John Doe",
                "customer_phone": "+260 97 1234567",
                "customer_email": "john.doe@gmail.com",
                "seat_number": 12,
                "status": "paid",
                "amount": 350,
                "payment_method": "mobile_money",
                "payment_reference": "PAY123456",
                "travel_date": "2023-06-15T00:00:00Z",
            }
        }
    )


# -------------------
# Update schema
# -------------------
class TicketUpdate(BaseModel):
    booking_reference: Optional[str] = Field(None, min_length=1)
    route_id: Optional[int] = None
    vendor_id: Optional[int] = None
    customer_name: Optional[str] = Field(None, min_length=1)
    customer_phone: Optional[str] = Field(None, min_length=5)
    customer_email: Optional[EmailStr] = None
    seat_number: Optional[int] = Field(None, ge=1)
    status: Optional[TicketStatus] = None
    amount: Optional[float] = Field(None, ge=0)
    payment_method: Optional[str] = None
    payment_reference: Optional[str] = None
    travel_date: Optional[datetime] = None


# -------------------
# Stored entity
# -------------------
class Ticket(TicketBase):
    id: int
    booking_date: datetime
