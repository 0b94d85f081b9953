"""
Procedural furniture layouts per room type.

Every placement is an offset from the room center expressed as a fraction
of the room's own width/depth, so two rooms of the same size get the same
furniture set, only translated. Piece dimensions are fixed aesthetic
constants unless noted (sofa, counters and upper cabinets stretch with
the room width).

Strategies take ``(width, depth)`` in world units and return a tuple of
``FurniturePrimitive``. Offsets are ``(dx, y, dz)`` where ``y`` is the
absolute height of the piece's center above the floor.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Tuple

from .plan import RoomType
from .scene_graph import (
    Geometry, GeometryKind, Group, Material, Mesh, Transform, Vec3,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FurniturePrimitive:
    name: str
    kind: GeometryKind
    dimensions: Tuple[float, ...]
    offset: Vec3
    color: str
    roughness: float = 1.0
    metalness: float = 0.0

    @property
    def material(self) -> Material:
        return Material(self.color, self.roughness, self.metalness)

    def to_mesh(self, scope: str = "") -> Mesh:
        return Mesh(
            name=f"{scope}:{self.name}" if scope else self.name,
            geometry=Geometry(self.kind, self.dimensions),
            material=self.material,
            transform=Transform(position=self.offset),
            cast_shadow=True,
        )


FurnitureStrategy = Callable[[float, float], Tuple[FurniturePrimitive, ...]]


def _box(name, dims, offset, color, roughness=1.0, metalness=0.0):
    return FurniturePrimitive(name, GeometryKind.BOX, dims, offset,
                              color, roughness, metalness)


def _cylinder(name, dims, offset, color, roughness=1.0, metalness=0.0):
    return FurniturePrimitive(name, GeometryKind.CYLINDER, dims, offset,
                              color, roughness, metalness)


# ===========================================================================
# STRATEGIES
# ===========================================================================

def living_room_furniture(width: float, depth: float) -> Tuple[FurniturePrimitive, ...]:
    return (
        _box("sofa", (width / 3, 0.4, 0.8), (-width / 4, 0.2, 0.0), "#4a5568", 0.8),
        _box("coffee_table", (0.8, 0.3, 0.5), (0.0, 0.15, 0.0), "#8B4513", 0.3),
        _box("tv_stand", (1.2, 0.4, 0.3), (width / 3, 0.2, -depth / 3), "#2d3748", 0.7),
        _box("tv", (1.0, 0.6, 0.05), (width / 3, 0.6, -depth / 3), "#1a1a1a", 0.1, 0.8),
        _cylinder("side_table", (0.2, 0.2, 0.5), (-width / 2.5, 0.25, depth / 4),
                  "#8B4513", 0.4),
    )


def bedroom_furniture(width: float, depth: float) -> Tuple[FurniturePrimitive, ...]:
    bed_z = -depth / 4
    return (
        _box("bed", (1.4, 0.3, 2.0), (0.0, 0.15, bed_z), "#e2e8f0", 0.9),
        _box("bed_frame", (1.5, 0.1, 2.1), (0.0, 0.05, bed_z), "#654321", 0.6),
        # Nightstands hug the bed at a fixed distance, not a room fraction
        _box("nightstand_left", (0.4, 0.4, 0.4), (-0.8, 0.2, bed_z), "#8B4513", 0.5),
        _box("nightstand_right", (0.4, 0.4, 0.4), (0.8, 0.2, bed_z), "#8B4513", 0.5),
        _box("dresser", (1.0, 0.6, 0.4), (width / 3, 0.3, depth / 3), "#654321", 0.6),
        _box("wardrobe", (0.6, 1.6, 0.5), (-width / 3, 0.8, depth / 4), "#4a5568", 0.7),
    )


def kitchen_furniture(width: float, depth: float) -> Tuple[FurniturePrimitive, ...]:
    back_wall = -depth / 3
    return (
        _box("counters", (width / 2, 0.8, 0.6), (-width / 3, 0.4, back_wall),
             "#f7fafc", 0.1, 0.1),
        _box("island", (1.2, 0.8, 0.8), (0.0, 0.4, 0.0), "#e2e8f0", 0.2),
        _box("refrigerator", (0.6, 1.6, 0.6), (width / 3, 0.8, back_wall),
             "#f8f9fa", 0.1, 0.3),
        _box("stove", (0.6, 0.1, 0.6), (-width / 4, 0.45, back_wall),
             "#1a1a1a", 0.1, 0.8),
        _box("upper_cabinets", (width / 2, 0.6, 0.3), (-width / 3, 1.2, back_wall),
             "#8B4513", 0.4),
        _box("sink", (0.4, 0.04, 0.3), (-width / 5, 0.42, back_wall),
             "#c0c0c0", 0.1, 0.9),
    )


def bathroom_furniture(width: float, depth: float) -> Tuple[FurniturePrimitive, ...]:
    return (
        _box("bathtub", (1.5, 0.3, 0.7), (-width / 3, 0.15, 0.0), "#ffffff", 0.1),
        _box("toilet", (0.4, 0.4, 0.6), (width / 4, 0.2, depth / 4), "#f8f9fa", 0.2),
        _box("vanity", (1.0, 0.6, 0.5), (0.0, 0.3, -depth / 3), "#8B4513", 0.5),
        _box("mirror", (0.8, 0.6, 0.02), (0.0, 0.8, -depth / 2.8), "#e6f3ff", 0.0, 1.0),
        _cylinder("sink", (0.15, 0.15, 0.04), (0.0, 0.32, -depth / 3), "#ffffff", 0.1),
    )


def no_furniture(width: float, depth: float) -> Tuple[FurniturePrimitive, ...]:
    return ()


FURNITURE_STRATEGIES: Dict[RoomType, FurnitureStrategy] = {
    RoomType.LIVING: living_room_furniture,
    RoomType.BEDROOM: bedroom_furniture,
    RoomType.KITCHEN: kitchen_furniture,
    RoomType.BATHROOM: bathroom_furniture,
    RoomType.HALLWAY: no_furniture,
    RoomType.OTHER: no_furniture,
}


# ===========================================================================
# DISPATCH
# ===========================================================================

def furniture_primitives(room_type, width: float,
                         depth: float) -> Tuple[FurniturePrimitive, ...]:
    """Furniture set for a room type; unknown types get nothing."""
    strategy = FURNITURE_STRATEGIES.get(RoomType.parse(room_type), no_furniture)
    return strategy(width, depth)


def layout_furniture(room_type, center: Tuple[float, float], width: float,
                     depth: float, name: str = "furniture") -> Group:
    """
    Furniture group for one room.

    The group sits at the room center on the floor plane; its meshes carry
    the strategy offsets, so world position = center + offset.
    """
    kind = RoomType.parse(room_type)
    pieces = furniture_primitives(kind, width, depth)
    center_x, center_z = center
    logger.debug(f"{name}: {len(pieces)} pieces for {kind.value} "
                 f"room {width:.2f}x{depth:.2f}")
    return Group(
        name=name,
        children=tuple(p.to_mesh(name) for p in pieces),
        transform=Transform(position=(center_x, 0.0, center_z)),
    )
