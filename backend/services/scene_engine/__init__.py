"""
Scene Engine for 3D Floor Plan Visualization.

Turns a measurement-based 2D floor plan into a 3D scene graph: oriented
wall volumes, room floor slabs, per-room-type furniture and text labels.
All functions are pure; the scene is rebuilt on every call.
"""

from .plan import FloorPlan, Wall, Room, Bounds, Point2D, RoomType, PlanValidationError
from .scene_graph import (
    Geometry, GeometryKind, Group, Label, Material, Mesh, SceneNode, Transform,
)
from .coords import PlanOrigin, DEFAULT_ORIGIN, to_world
from .walls import WallGeometry, wall_geometry, build_wall_mesh
from .rooms import (
    MaterialProfile, MATERIAL_PROFILES, resolve_material_profile,
    RoomGeometry, room_geometry, build_floor_mesh, build_room_label,
)
from .furniture import (
    FurniturePrimitive, FURNITURE_STRATEGIES, furniture_primitives, layout_furniture,
)
from .assembler import (
    root_idle_transform, build_room_group, build_floor_plan_scene, generate_scene,
)
from .fallback import build_fallback_scene, fallback_idle_transform

__all__ = [
    "FloorPlan",
    "Wall",
    "Room",
    "Bounds",
    "Point2D",
    "RoomType",
    "PlanValidationError",
    "Geometry",
    "GeometryKind",
    "Group",
    "Label",
    "Material",
    "Mesh",
    "SceneNode",
    "Transform",
    "PlanOrigin",
    "DEFAULT_ORIGIN",
    "to_world",
    "WallGeometry",
    "wall_geometry",
    "build_wall_mesh",
    "MaterialProfile",
    "MATERIAL_PROFILES",
    "resolve_material_profile",
    "RoomGeometry",
    "room_geometry",
    "build_floor_mesh",
    "build_room_label",
    "FurniturePrimitive",
    "FURNITURE_STRATEGIES",
    "furniture_primitives",
    "layout_furniture",
    "root_idle_transform",
    "build_room_group",
    "build_floor_plan_scene",
    "generate_scene",
    "build_fallback_scene",
    "fallback_idle_transform",
]
