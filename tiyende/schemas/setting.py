from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class SettingValue(BaseModel):
    """Body of a setting upsert; the name comes from the path"""
    value: str
    description: Optional[str] = None


class Setting(BaseModel):
    id: int
    name: str = Field(..., min_length=1)
    value: str
    description: Optional[str] = None
    updated_at: datetime
