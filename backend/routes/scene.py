"""
3D Scene Generation API Route.

Endpoints:
  POST /api/scene/generate  Scene graph (JSON) for a floor plan or the demo house
  POST /api/scene/export    Same scene baked to a GLB file
  GET  /api/scene/idle      Idle transform for a given elapsed time
"""

import uuid
import logging
from fastapi import APIRouter, HTTPException, Query

from config import EXPORT_DIR
from schemas import ExportResponse, SceneRequest, SceneResponse, TransformOut
from services.model3d import export_scene, scene_to_trimesh
from services.scene_engine import (
    PlanValidationError,
    fallback_idle_transform,
    generate_scene,
    root_idle_transform,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/scene", tags=["scene"])


def _build(req: SceneRequest):
    """Convert the request to a scene; returns (mode, root)."""
    try:
        plan = req.floor_plan.to_plan() if req.floor_plan else None
    except PlanValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    mode = "floor_plan" if plan is not None else "fallback"
    return mode, generate_scene(plan, req.elapsed_time)


@router.post("/generate", response_model=SceneResponse)
async def scene_generate(req: SceneRequest):
    """
    Generate the 3D scene graph for a floor plan.

    Without a floor plan the fixed demonstration house is returned.
    The tree is rebuilt in full on every call.
    """
    mode, root = _build(req)
    return SceneResponse(mode=mode, node_count=root.node_count(), scene=root.to_dict())


@router.post("/export", response_model=ExportResponse)
async def scene_export(req: SceneRequest):
    """Bake the scene to a GLB file under /exports."""
    mode, root = _build(req)
    filename = f"scene_{uuid.uuid4().hex[:12]}.glb"
    try:
        scene = scene_to_trimesh(root)
        export_scene(scene, str(EXPORT_DIR / filename))
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.exception(f"GLB export failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    return ExportResponse(
        mode=mode,
        mesh_count=len(scene.geometry),
        file_url=f"/exports/{filename}",
    )


@router.get("/idle", response_model=TransformOut)
async def scene_idle(
    elapsed_time: float = Query(0.0, ge=0),
    fallback: bool = Query(False, description="Idle sway of the demo house instead of the plan bob"),
):
    """Root idle transform to apply for this frame."""
    transform = fallback_idle_transform(elapsed_time) if fallback else root_idle_transform(elapsed_time)
    return TransformOut(**transform.to_dict())
