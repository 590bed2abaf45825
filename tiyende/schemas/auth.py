from pydantic import BaseModel, Field

from tiyende.schemas.user import UserResponse


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class LoginResponse(BaseModel):
    user: UserResponse
    token: str
    token_type: str = "bearer"
