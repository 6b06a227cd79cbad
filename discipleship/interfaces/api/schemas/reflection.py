"""Reflection schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ReflectionRead(BaseModel):
    id: int
    pairing_id: int
    user_id: str
    week_number: int
    reflection_text: str
    is_shared: bool
    created_at: datetime | None
    updated_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class ReflectionCreate(BaseModel):
    reflection_text: str = Field(..., min_length=1, max_length=10000)
    is_shared: bool = False


__all__ = ["ReflectionCreate", "ReflectionRead"]
