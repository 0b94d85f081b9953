"""
Demonstration scene shown when no floor plan has been supplied.

A fixed-size house shell: ground slab, four walls, a four-sided cone roof
and an instructional label, swaying slowly about the vertical axis.
"""

import math

from .scene_graph import Group, Label, Material, Mesh, Transform, box, cone

FALLBACK_LABEL = "Upload floor plan to generate 3D model"

_GROUND = Material("#e2e8f0")
_WALL = Material("#f8fafc")
_ROOF = Material("#64748b")


def fallback_idle_transform(elapsed_time: float) -> Transform:
    """Slow sway of the demo house: ``rotation.y = sin(t * 0.1) * 0.1``."""
    return Transform(rotation=(0.0, math.sin(elapsed_time * 0.1) * 0.1, 0.0))


def _fallback_children():
    return (
        Mesh("ground", box(8, 0.2, 6), _GROUND,
             Transform(position=(0.0, -0.1, 0.0)), receive_shadow=True),
        Mesh("wall:back", box(8, 3, 0.2), _WALL,
             Transform(position=(0.0, 1.5, -3.0)), cast_shadow=True),
        Mesh("wall:front", box(8, 3, 0.2), _WALL,
             Transform(position=(0.0, 1.5, 3.0)), cast_shadow=True),
        Mesh("wall:left", box(0.2, 3, 6), _WALL,
             Transform(position=(-4.0, 1.5, 0.0)), cast_shadow=True),
        Mesh("wall:right", box(0.2, 3, 6), _WALL,
             Transform(position=(4.0, 1.5, 0.0)), cast_shadow=True),
        Mesh("roof", cone(5, 1.5, 4), _ROOF,
             Transform(position=(0.0, 3.5, 0.0)), cast_shadow=True),
        Label("label:demo", FALLBACK_LABEL, Transform(position=(0.0, 5.0, 0.0)),
              font_size=0.4, color="#94a3b8"),
    )


def build_fallback_scene(elapsed_time: float = 0.0) -> Group:
    return Group(
        name="default_house",
        children=_fallback_children(),
        transform=fallback_idle_transform(elapsed_time),
    )
