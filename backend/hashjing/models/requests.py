"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from hashjing.seeds import parse_seed


class SeedRequest(BaseModel):
    seed: str = Field(..., description="256-bit seed as 64 hex digits, optionally 0x-prefixed")

    @field_validator("seed")
    @classmethod
    def _check_seed(cls, value: str) -> str:
        parse_seed(value)
        return value

    @property
    def seed_bytes(self) -> bytes:
        return parse_seed(self.seed)


class CensusRequest(BaseModel):
    seeds: list[str] = Field(..., min_length=1, description="Seeds to include in the census")

    @field_validator("seeds")
    @classmethod
    def _check_seeds(cls, values: list[str]) -> list[str]:
        for value in values:
            parse_seed(value)
        return values

    @property
    def seed_bytes(self) -> list[bytes]:
        return [parse_seed(s) for s in self.seeds]
