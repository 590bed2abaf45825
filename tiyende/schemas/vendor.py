from enum import Enum
from pydantic import BaseModel, EmailStr, Field, ConfigDict
from typing import Optional
from datetime import datetime


class VendorStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    PENDING = "pending"


# -------------------
# Base schema
# -------------------
class VendorBase(BaseModel):
    name: str = Field(..., min_length=1)
    contact_person: str = Field(..., min_length=1)
    email: EmailStr
    phone: str = Field(..., min_length=5)
    address: Optional[str] = None
    status: VendorStatus = VendorStatus.ACTIVE
    logo: Optional[str] = None


# -------------------
# Create schema
# -------------------
class VendorCreate(VendorBase):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Mazhandu Bus",
                "contact_person": "John Mazhandu",
                "email": "info@mazhandubus.com",
                "phone": "+260 97 1234567",
                "address": "Lusaka, Zambia",
                "status": "active",
                "logo": None,
            }
        }
    )


# -------------------
# Update schema
# -------------------
class VendorUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    contact_person: Optional[str] = Field(None, min_length=1)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, min_length=5)
    address: Optional[str] = None
    status: Optional[VendorStatus] = None
    logo: Optional[str] = None


# -------------------
# Stored entity
# -------------------
class Vendor(VendorBase):
    id: int
    created_at: datetime
