"""
Wall volume generation.

Each wall segment becomes one box oriented along its plan-space direction,
with its base resting on the world floor plane.
"""

import math
from dataclasses import dataclass

from .coords import DEFAULT_ORIGIN, PlanOrigin, to_world
from .plan import Wall
from .scene_graph import Material, Mesh, Transform, box

WALL_MATERIAL = Material(color="#f8fafc", roughness=0.9, metalness=0.0)


@dataclass(frozen=True)
class WallGeometry:
    length: float
    angle: float      # yaw about +Y, radians in (-pi, pi]
    center_x: float
    center_z: float


def wall_geometry(wall: Wall, scale: float,
                  origin: PlanOrigin = DEFAULT_ORIGIN) -> WallGeometry:
    """Length, yaw and midpoint of a wall in world space."""
    start_x, start_z = to_world(wall.start, scale, origin)
    end_x, end_z = to_world(wall.end, scale, origin)

    dx = end_x - start_x
    dz = end_z - start_z

    # atan2(0, 0) == 0, so a zero-length wall is well defined
    return WallGeometry(
        length=math.hypot(dx, dz),
        angle=math.atan2(dz, dx),
        center_x=(start_x + end_x) / 2,
        center_z=(start_z + end_z) / 2,
    )


def build_wall_mesh(wall: Wall, scale: float,
                    origin: PlanOrigin = DEFAULT_ORIGIN) -> Mesh:
    geo = wall_geometry(wall, scale, origin)
    return Mesh(
        name=f"wall:{wall.id}",
        geometry=box(geo.length, wall.height, wall.thickness),
        material=WALL_MATERIAL,
        transform=Transform(
            position=(geo.center_x, wall.height / 2, geo.center_z),
            rotation=(0.0, geo.angle, 0.0),
        ),
        cast_shadow=True,
        receive_shadow=True,
    )
