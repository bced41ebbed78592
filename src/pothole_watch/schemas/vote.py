# src/pothole_watch/schemas/vote.py
"""Vote-related Pydantic schemas."""

from typing import Literal

from pydantic import BaseModel, Field

VoteDirection = Literal["up", "down"]


class VoteCreate(BaseModel):
    """Schema for casting a vote on a report."""

    direction: VoteDirection = Field(..., description='"up" or "down"')

    @property
    def value(self) -> int:
        """Return the stored vote value: 1 for up, -1 for down."""
        return 1 if self.direction == "up" else -1
