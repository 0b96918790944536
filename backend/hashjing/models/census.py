"""Trait distribution models for collection-wide statistics."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Bucket(BaseModel):
    value: str
    count: int = 0
    percent: float = 0.0


class Census(BaseModel):
    total: int = 0
    evenness: list[Bucket] = Field(default_factory=list)
    passages: list[Bucket] = Field(default_factory=list)
    crown: list[Bucket] = Field(default_factory=list)
