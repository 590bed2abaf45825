from enum import Enum
from pydantic import BaseModel, EmailStr, Field, ConfigDict
from typing import Optional
from datetime import datetime


class UserRole(str, Enum):
    ADMIN = "admin"
    STAFF = "staff"


# -------------------
# Base schema
# -------------------
class UserBase(BaseModel):
    username: str = Field(..., min_length=3, max_length=50)
    email: EmailStr
    full_name: str = Field(..., min_length=1)
    role: UserRole = UserRole.STAFF
    active: bool = True


# -------------------
# Create schema
# -------------------
class UserCreate(UserBase):
    password: str = Field(..., min_length=6)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "mary.banda",
                "password": "s3cret-pass",
                "email": "mary@tiyende.com",
                "full_name": "Mary Banda",
                "role": "staff",
                "active": True,
            }
        }
    )


# -------------------
# Update schema
# -------------------
class UserUpdate(BaseModel):
    username: Optional[str] = Field(None, min_length=3, max_length=50)
    password: Optional[str] = Field(None, min_length=6)
    email: Optional[EmailStr] = None
    full_name: Optional[str] = Field(None, min_length=1)
    role: Optional[UserRole] = None
    active: Optional[bool] = None


# -------------------
# Stored entity
# -------------------
class User(UserBase):
    id: int
    password: str
    last_login: Optional[datetime] = None
    token: Optional[str] = None


# -------------------
# Response schema
# -------------------
class UserResponse(UserBase):
    """User as exposed over the API, without password or token"""
    id: int
    last_login: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
