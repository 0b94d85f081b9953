"""
Floor plan input records.

Immutable value types describing a measurement-based 2D floor plan:
walls as line segments and rooms as axis-aligned rectangles tagged with a
semantic room type. All coordinates are in plan space.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple, Union

logger = logging.getLogger(__name__)


class PlanValidationError(ValueError):
    """Raised when a plan record is constructed with impossible sizes."""


class RoomType(str, Enum):
    LIVING = "living"
    BEDROOM = "bedroom"
    KITCHEN = "kitchen"
    BATHROOM = "bathroom"
    HALLWAY = "hallway"
    OTHER = "other"

    @classmethod
    def parse(cls, value: Union["RoomType", str, None]) -> "RoomType":
        """Resolve a raw room type by exact value; anything else becomes OTHER."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            logger.warning(f"Unknown room type {value!r}; treating as 'other'")
            return cls.OTHER


@dataclass(frozen=True)
class Point2D:
    x: float
    y: float


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned rectangle in plan space (top-left corner + size)."""

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise PlanValidationError(
                f"Room bounds must have non-negative size, got "
                f"{self.width}x{self.height}"
            )

    @property
    def center(self) -> Point2D:
        return Point2D(self.x + self.width / 2, self.y + self.height / 2)


@dataclass(frozen=True)
class Wall:
    id: str
    start: Point2D
    end: Point2D
    height: float
    thickness: float

    def __post_init__(self):
        if self.height < 0 or self.thickness < 0:
            raise PlanValidationError(
                f"Wall {self.id!r} has negative size "
                f"(height={self.height}, thickness={self.thickness})"
            )


@dataclass(frozen=True)
class Room:
    id: str
    bounds: Bounds
    room_type: RoomType = RoomType.OTHER
    name: str = ""

    def __post_init__(self):
        # frozen: coerce through object.__setattr__
        object.__setattr__(self, "room_type", RoomType.parse(self.room_type))


@dataclass(frozen=True)
class FloorPlan:
    """A whole floor plan. Never mutated by the scene engine."""

    name: str
    scale: float
    walls: Tuple[Wall, ...] = field(default_factory=tuple)
    rooms: Tuple[Room, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not self.scale > 0:
            raise PlanValidationError(f"Plan scale must be positive, got {self.scale}")
        object.__setattr__(self, "walls", tuple(self.walls))
        object.__setattr__(self, "rooms", tuple(self.rooms))

    def __repr__(self) -> str:
        return (
            f"FloorPlan(name={self.name!r}, scale={self.scale}, "
            f"walls={len(self.walls)}, rooms={len(self.rooms)})"
        )
