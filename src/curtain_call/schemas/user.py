# src/curtain_call/schemas/user.py
"""User-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class UserResponse(BaseModel):
    id: int
    name: str
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)
