"""
Scene graph node types.

The generated scene is a tree of ``Mesh``, ``Group`` and ``Label`` nodes
rooted at a single ``Group``. Nodes are immutable values; a renderer walks
the tree and draws it, diffing against a previous tree if it wants to.

Coordinates follow the viewer convention: Y is up, the floor plane is XZ,
rotations are XYZ Euler angles in radians.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional, Tuple, Union

Vec3 = Tuple[float, float, float]


class GeometryKind(str, Enum):
    BOX = "box"            # (width, height, depth)
    CYLINDER = "cylinder"  # (radius_top, radius_bottom, height)
    CONE = "cone"          # (radius, height, radial_segments)


@dataclass(frozen=True)
class Transform:
    position: Vec3 = (0.0, 0.0, 0.0)
    rotation: Vec3 = (0.0, 0.0, 0.0)

    def to_dict(self) -> dict:
        return {"position": list(self.position), "rotation": list(self.rotation)}


IDENTITY = Transform()


@dataclass(frozen=True)
class Geometry:
    kind: GeometryKind
    args: Tuple[float, ...]

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, "args": list(self.args)}


@dataclass(frozen=True)
class Material:
    """Standard PBR material. Defaults match an unspecified finish."""

    color: str
    roughness: float = 1.0
    metalness: float = 0.0

    def to_dict(self) -> dict:
        return {
            "color": self.color,
            "roughness": self.roughness,
            "metalness": self.metalness,
        }


@dataclass(frozen=True)
class Mesh:
    name: str
    geometry: Geometry
    material: Material
    transform: Transform = IDENTITY
    cast_shadow: bool = False
    receive_shadow: bool = False

    def to_dict(self) -> dict:
        return {
            "type": "mesh",
            "name": self.name,
            "geometry": self.geometry.to_dict(),
            "material": self.material.to_dict(),
            "transform": self.transform.to_dict(),
            "cast_shadow": self.cast_shadow,
            "receive_shadow": self.receive_shadow,
        }


@dataclass(frozen=True)
class Label:
    name: str
    text: str
    transform: Transform
    font_size: float
    color: str
    anchor_x: str = "center"
    anchor_y: str = "middle"
    font: Optional[str] = None

    def to_dict(self) -> dict:
        d = {
            "type": "label",
            "name": self.name,
            "text": self.text,
            "transform": self.transform.to_dict(),
            "font_size": self.font_size,
            "color": self.color,
            "anchor_x": self.anchor_x,
            "anchor_y": self.anchor_y,
        }
        if self.font:
            d["font"] = self.font
        return d


@dataclass(frozen=True)
class Group:
    name: str
    children: Tuple["SceneNode", ...] = field(default_factory=tuple)
    transform: Transform = IDENTITY

    def __post_init__(self):
        object.__setattr__(self, "children", tuple(self.children))

    def iter_nodes(self) -> Iterator["SceneNode"]:
        """Depth-first walk over all descendants (not including self)."""
        for child in self.children:
            yield child
            if isinstance(child, Group):
                yield from child.iter_nodes()

    def node_count(self) -> int:
        return sum(1 for _ in self.iter_nodes())

    def meshes(self) -> Iterator[Mesh]:
        return (n for n in self.iter_nodes() if isinstance(n, Mesh))

    def find(self, name: str) -> Optional["SceneNode"]:
        """First descendant with the given name, or None."""
        for node in self.iter_nodes():
            if node.name == name:
                return node
        return None

    def to_dict(self) -> dict:
        return {
            "type": "group",
            "name": self.name,
            "transform": self.transform.to_dict(),
            "children": [c.to_dict() for c in self.children],
        }


SceneNode = Union[Mesh, Group, Label]


def box(width: float, height: float, depth: float) -> Geometry:
    return Geometry(GeometryKind.BOX, (width, height, depth))


def cylinder(radius_top: float, radius_bottom: float, height: float) -> Geometry:
    return Geometry(GeometryKind.CYLINDER, (radius_top, radius_bottom, height))


def cone(radius: float, height: float, radial_segments: int) -> Geometry:
    return Geometry(GeometryKind.CONE, (radius, height, radial_segments))
