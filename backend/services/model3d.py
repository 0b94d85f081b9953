"""
3D Scene Model Exporter.

Bakes a scene graph produced by the scene engine into trimesh geometry:
  - Box / cylinder / cone primitives matching the viewer's conventions
  - Group transforms composed down the tree (XYZ Euler rotations)
  - Solid per-mesh colors, PBR finish kept in mesh metadata

Exports as glTF/GLB for Three.js rendering. Text labels are left to the
viewer, which owns glyph rendering.
"""

import trimesh
import numpy as np
from pathlib import Path
from typing import List, Optional
import logging
import math

from services.scene_engine.scene_graph import (
    Geometry, GeometryKind, Group, Mesh, SceneNode, Transform,
)

logger = logging.getLogger(__name__)

MIN_EXTENT = 1e-6
CYLINDER_SECTIONS = 32

# trimesh builds round primitives along +Z; the viewer builds them along +Y
_Z_TO_Y = trimesh.transformations.rotation_matrix(-math.pi / 2, [1, 0, 0])


# ===========================================================================
# GEOMETRY HELPERS
# ===========================================================================

def _hex_to_rgba(color: str) -> List[int]:
    """'#8B4513' -> [139, 69, 19, 255]."""
    h = color.lstrip('#')
    if len(h) == 3:
        h = ''.join(c * 2 for c in h)
    return [int(h[i:i + 2], 16) for i in (0, 2, 4)] + [255]


def _transform_matrix(transform: Transform) -> np.ndarray:
    """Local 4x4 matrix: translate after rotating in X, then Y, then Z order."""
    rx, ry, rz = transform.rotation
    rot = trimesh.transformations.euler_matrix(rx, ry, rz, axes='rxyz')
    return trimesh.transformations.translation_matrix(transform.position) @ rot


def _is_degenerate(geometry: Geometry) -> bool:
    if geometry.kind == GeometryKind.BOX:
        return min(geometry.args) < MIN_EXTENT
    if geometry.kind == GeometryKind.CYLINDER:
        r_top, r_bottom, height = geometry.args
        return max(r_top, r_bottom) < MIN_EXTENT or height < MIN_EXTENT
    radius, height, _ = geometry.args
    return radius < MIN_EXTENT or height < MIN_EXTENT


def _make_primitive(geometry: Geometry) -> Optional[trimesh.Trimesh]:
    """Primitive centered on the origin, or None for zero-size geometry."""
    if _is_degenerate(geometry):
        return None

    if geometry.kind == GeometryKind.BOX:
        return trimesh.creation.box(extents=list(geometry.args))

    if geometry.kind == GeometryKind.CYLINDER:
        r_top, r_bottom, height = geometry.args
        mesh = trimesh.creation.cylinder(radius=max(r_top, r_bottom), height=height,
                                         sections=CYLINDER_SECTIONS)
        mesh.apply_transform(_Z_TO_Y)
        return mesh

    radius, height, segments = geometry.args
    mesh = trimesh.creation.cone(radius=radius, height=height, sections=int(segments))
    # base at z=0, apex at z=height -> centered like the viewer's cone
    mesh.apply_translation([0, 0, -height / 2])
    mesh.apply_transform(_Z_TO_Y)
    return mesh


def _mesh_to_trimesh(node: Mesh, world: np.ndarray) -> Optional[trimesh.Trimesh]:
    mesh = _make_primitive(node.geometry)
    if mesh is None:
        logger.debug(f"  Skipping zero-size mesh {node.name}")
        return None
    mesh.apply_transform(world)
    mesh.visual = trimesh.visual.ColorVisuals(
        mesh=mesh, face_colors=_hex_to_rgba(node.material.color))
    mesh.metadata['name'] = node.name
    mesh.metadata['material'] = node.material.to_dict()
    return mesh


def _collect(node: SceneNode, parent: np.ndarray, out: List[trimesh.Trimesh]):
    # Labels carry no geometry here
    world = parent @ _transform_matrix(node.transform)
    if isinstance(node, Group):
        for child in node.children:
            _collect(child, world, out)
    elif isinstance(node, Mesh):
        mesh = _mesh_to_trimesh(node, world)
        if mesh is not None:
            out.append(mesh)


def _is_valid_mesh(mesh):
    """Check if a mesh has valid geometry."""
    return (mesh is not None and hasattr(mesh, 'vertices')
            and mesh.vertices.shape[0] > 0)


# ===========================================================================
# MAIN ENTRY POINTS
# ===========================================================================

def scene_to_trimesh(root: Group) -> trimesh.Scene:
    """Bake every mesh of the scene tree into world space."""
    meshes: List[trimesh.Trimesh] = []
    _collect(root, np.eye(4), meshes)
    valid = [m for m in meshes if _is_valid_mesh(m)]
    return trimesh.Scene(valid)


def export_scene(scene: trimesh.Scene, output_path: str) -> str:
    """
    Write an already baked scene to disk.

    Args:
        scene: Scene from ``scene_to_trimesh``.
        output_path: Path to save the model; ``.glb``/``.gltf`` and ``.obj``
            are honoured, anything else gets ``.glb`` appended.

    Returns:
        Path to the generated file.
    """
    if not scene.geometry:
        raise ValueError("No valid geometry generated for 3D model.")

    logger.info(f"  Total valid meshes: {len(scene.geometry)}")

    output_path = str(output_path)
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)

    if output_path.endswith((".glb", ".gltf")):
        scene.export(output_path, file_type="glb")
    elif output_path.endswith(".obj"):
        scene.export(output_path, file_type="obj")
    else:
        output_path = output_path + ".glb"
        scene.export(output_path, file_type="glb")

    logger.info(f"3D model exported: {output_path}")
    return output_path


def generate_3d_model(root: Group, output_path: str) -> str:
    """Bake a scene graph and export it; see ``export_scene`` for paths."""
    logger.info(f"Generating 3D model: {root.name!r}, {root.node_count()} nodes")
    return export_scene(scene_to_trimesh(root), output_path)
