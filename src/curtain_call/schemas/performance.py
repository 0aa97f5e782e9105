# src/curtain_call/schemas/performance.py
"""Performance-related Pydantic schemas."""

from datetime import date

from pydantic import BaseModel, ConfigDict


class PerformanceResponse(BaseModel):
    """Schema for performance information passed to views."""

    id: int
    title: str
    venue: str | None = None
    performed_on: date | None = None

    model_config = ConfigDict(from_attributes=True)
