"""Shared Pydantic schemas for common API elements."""
from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class MessageResponse(BaseModel):
    """Fixed acknowledgement returned by mutating endpoints."""

    message: str = Field(..., description="Human-readable outcome")


class DataResponse(BaseModel, Generic[T]):
    """Envelope around a single resource."""

    message: str = "Success"
    data: T


class ListResponse(BaseModel, Generic[T]):
    """Envelope around a page of resources."""

    message: str = "Success"
    results: int = Field(..., description="Total matches before pagination")
    data: list[T]
