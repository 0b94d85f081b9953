"""
Scene assembly.

Composes wall meshes, room floors, furniture and labels into one scene tree
and selects between the floor-plan scene and the demonstration house.

Pipeline for a floor plan:
  1. Walls        – one oriented box per wall segment
  2. Rooms        – floor slab, furniture group and flat name label per room
  3. Title        – plan name floating above the origin
  4. Idle bob     – root transform derived from the supplied elapsed time

Every call rebuilds the tree from scratch; nothing is cached between calls.
"""

import logging
import math
from typing import Optional

from .coords import DEFAULT_ORIGIN, PlanOrigin
from .fallback import build_fallback_scene
from .furniture import layout_furniture
from .plan import FloorPlan, Room
from .rooms import build_floor_mesh, build_room_label, room_geometry
from .scene_graph import Group, Label, Transform
from .walls import build_wall_mesh

logger = logging.getLogger(__name__)

TITLE_HEIGHT = 5.0
TITLE_FONT_SIZE = 0.5
TITLE_COLOR = "#64748b"


def root_idle_transform(elapsed_time: float) -> Transform:
    """Gentle breathing bob: ``position.y = sin(t * 0.5) * 0.05``."""
    return Transform(position=(0.0, math.sin(elapsed_time * 0.5) * 0.05, 0.0))


def build_room_group(room: Room, scale: float,
                     origin: PlanOrigin = DEFAULT_ORIGIN) -> Group:
    geo = room_geometry(room, scale, origin)
    return Group(
        name=f"room:{room.id}",
        children=(
            build_floor_mesh(room, geo),
            layout_furniture(room.room_type, (geo.center_x, geo.center_z),
                             geo.width, geo.depth, name=f"furniture:{room.id}"),
            build_room_label(room, geo),
        ),
    )


def build_floor_plan_scene(plan: FloorPlan, elapsed_time: float = 0.0,
                           origin: PlanOrigin = DEFAULT_ORIGIN) -> Group:
    walls = tuple(build_wall_mesh(w, plan.scale, origin) for w in plan.walls)
    rooms = tuple(build_room_group(r, plan.scale, origin) for r in plan.rooms)
    title = Label(
        name="label:title",
        text=plan.name,
        transform=Transform(position=(0.0, TITLE_HEIGHT, 0.0)),
        font_size=TITLE_FONT_SIZE,
        color=TITLE_COLOR,
    )
    return Group(
        name=plan.name,
        children=walls + rooms + (title,),
        transform=root_idle_transform(elapsed_time),
    )


def generate_scene(plan: Optional[FloorPlan], elapsed_time: float = 0.0,
                   origin: PlanOrigin = DEFAULT_ORIGIN) -> Group:
    """
    Build the scene for one frame.

    Args:
        plan: Floor plan to render, or None for the demonstration house.
        elapsed_time: Seconds supplied by the animation driver; only the
            root idle transform depends on it.
        origin: Plan-space point mapped to the world origin.

    Returns:
        Root scene group.
    """
    if plan is None:
        scene = build_fallback_scene(elapsed_time)
        logger.debug(f"No floor plan; fallback scene with {scene.node_count()} nodes")
        return scene

    scene = build_floor_plan_scene(plan, elapsed_time, origin)
    logger.debug(f"Scene for {plan!r}: {scene.node_count()} nodes")
    return scene
