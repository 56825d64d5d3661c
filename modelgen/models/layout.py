"""Intermediate layout models shared between the packer and wall rules."""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict

from .plan import RoomSpec


class Footprint(BaseModel):
    """Rectangular outline of one story, anchored at the origin."""
    model_config = ConfigDict(frozen=True)

    width: float
    depth: float


class PlacedRoom(BaseModel):
    """A room rectangle on a story. (x, z) is the corner nearest the origin."""
    model_config = ConfigDict(frozen=True)

    room: RoomSpec
    x: float
    z: float
    w: float
    d: float

    def overlaps(self, other: PlacedRoom) -> bool:
        return (
            self.x < other.x + other.w
            and other.x < self.x + self.w
            and self.z < other.z + other.d
            and other.z < self.z + self.d
        )
