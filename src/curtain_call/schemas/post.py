# src/curtain_call/schemas/post.py
"""Post-related Pydantic schemas."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Largest id a signed 64-bit integer column holds.
MAX_ID = 2**63 - 1


class PostForm(BaseModel):
    """Fields submitted by the new and edit post forms.

    Missing fields fall back to empty values so the validation rules, not the
    parser, decide what is acceptable. A ``performance`` that is not an integer,
    or lies outside the range of stored ids, fails here.
    """

    performance: int | None = Field(
        None, ge=1, le=MAX_ID, description="Performance the post is about"
    )
    contents: str = Field("", description="Impression text")
    token: str | None = Field(None, alias="_token", description="Anti-forgery token")

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _blank_to_none(cls, data: object) -> object:
        if isinstance(data, Mapping):
            data = dict(data)
            if data.get("performance") in ("", "0", 0):
                data["performance"] = None
            if data.get("contents") is None:
                data["contents"] = ""
        return data

    @classmethod
    def from_form(cls, form: Mapping[str, Any]) -> PostForm:
        return cls.model_validate({key: form.get(key) for key in ("performance", "contents", "_token")})


class PostResponse(BaseModel):
    """Schema for post information passed to views."""

    id: int
    user_id: int
    user_name: str | None = None
    performance_id: int
    performance_title: str | None = None
    contents: str
    created_at: datetime

    @model_validator(mode="before")
    @classmethod
    def _flatten_relations(cls, data: object) -> object:
        if isinstance(data, dict):
            return data
        extracted: dict[str, object | None] = {}
        for field_name in cls.model_fields:
            extracted[field_name] = getattr(data, field_name, None)
        user = getattr(data, "user", None)
        if user is not None:
            extracted["user_name"] = user.name
        performance = getattr(data, "performance", None)
        if performance is not None:
            extracted["performance_title"] = performance.title
        return extracted

    model_config = ConfigDict(from_attributes=True)
