"""
Room floor slabs, labels and room-type material profiles.
"""

import math
from dataclasses import dataclass
from typing import Dict, Union

from config import LABEL_FONT
from .coords import DEFAULT_ORIGIN, PlanOrigin, to_world
from .plan import Room, RoomType
from .scene_graph import Label, Material, Mesh, Transform, box

FLOOR_THICKNESS = 0.02
FLOOR_Y = -0.01           # just under y=0 so it doesn't z-fight a ground plane
LABEL_Y = 0.1
LABEL_FONT_RATIO = 0.15
LABEL_COLOR = "#2c3e50"

# Tile-like finish for wet rooms, matte everywhere else
TILE_ROOMS = frozenset({RoomType.KITCHEN, RoomType.BATHROOM})


@dataclass(frozen=True)
class MaterialProfile:
    floor_color: str
    wall_color: str
    floor_roughness: float = 0.8
    floor_metalness: float = 0.0

    @property
    def floor_material(self) -> Material:
        return Material(self.floor_color, self.floor_roughness, self.floor_metalness)


def _profile(room_type: RoomType, floor: str, wall: str) -> MaterialProfile:
    if room_type in TILE_ROOMS:
        return MaterialProfile(floor, wall, floor_roughness=0.1, floor_metalness=0.2)
    return MaterialProfile(floor, wall)


MATERIAL_PROFILES: Dict[RoomType, MaterialProfile] = {
    RoomType.LIVING:   _profile(RoomType.LIVING, "#8B4513", "#F5F5DC"),    # wood / beige
    RoomType.BEDROOM:  _profile(RoomType.BEDROOM, "#D2691E", "#E6E6FA"),   # carpet / lavender
    RoomType.KITCHEN:  _profile(RoomType.KITCHEN, "#696969", "#FFFFFF"),   # tile / white
    RoomType.BATHROOM: _profile(RoomType.BATHROOM, "#708090", "#F0F8FF"),  # slate / alice blue
    RoomType.HALLWAY:  _profile(RoomType.HALLWAY, "#BC8F8F", "#F8F8FF"),   # rosy brown / ghost white
    RoomType.OTHER:    _profile(RoomType.OTHER, "#D3D3D3", "#DCDCDC"),
}

DEFAULT_PROFILE = MATERIAL_PROFILES[RoomType.OTHER]


def resolve_material_profile(room_type: Union[RoomType, str]) -> MaterialProfile:
    """Material profile for a room type. Never fails; unknown types get 'other'."""
    return MATERIAL_PROFILES.get(RoomType.parse(room_type), DEFAULT_PROFILE)


@dataclass(frozen=True)
class RoomGeometry:
    center_x: float
    center_z: float
    width: float
    depth: float


def room_geometry(room: Room, scale: float,
                  origin: PlanOrigin = DEFAULT_ORIGIN) -> RoomGeometry:
    center_x, center_z = to_world(room.bounds.center, scale, origin)
    return RoomGeometry(
        center_x=center_x,
        center_z=center_z,
        width=room.bounds.width / scale,
        depth=room.bounds.height / scale,
    )


def build_floor_mesh(room: Room, geometry: RoomGeometry) -> Mesh:
    profile = resolve_material_profile(room.room_type)
    return Mesh(
        name=f"floor:{room.id}",
        geometry=box(geometry.width, FLOOR_THICKNESS, geometry.depth),
        material=profile.floor_material,
        transform=Transform(position=(geometry.center_x, FLOOR_Y, geometry.center_z)),
        receive_shadow=True,
    )


def build_room_label(room: Room, geometry: RoomGeometry) -> Label:
    """Room name lying flat on the floor, sized to the room's short side."""
    return Label(
        name=f"label:{room.id}",
        text=room.name,
        transform=Transform(
            position=(geometry.center_x, LABEL_Y, geometry.center_z),
            rotation=(-math.pi / 2, 0.0, 0.0),
        ),
        font_size=min(geometry.width, geometry.depth) * LABEL_FONT_RATIO,
        color=LABEL_COLOR,
        font=LABEL_FONT,
    )
