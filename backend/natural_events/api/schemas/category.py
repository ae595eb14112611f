"""Pydantic schemas for category endpoints."""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel


class CategoryPayload(BaseModel):
    id: str
    title: str
    description: str = ""
    link: str = ""


class CategoryListResponse(BaseModel):
    categories: List[CategoryPayload]
    loaded: bool
    request_id: str


class CategoryOption(BaseModel):
    value: str
    label: str
    emoji: str


class CategoryOptionsResponse(BaseModel):
    options: List[CategoryOption]
    default: str
    request_id: str


class CategoryResolution(BaseModel):
    category: Optional[str]
    emoji: str
    title: str
    request_id: str
