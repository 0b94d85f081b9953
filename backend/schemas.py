"""Pydantic schemas for API request/response validation."""

from pydantic import BaseModel, Field
from typing import Optional

from services.scene_engine import Bounds, FloorPlan, Point2D, Room, Wall


# ---------- Floor Plan ----------
class PointIn(BaseModel):
    x: float
    y: float

    def to_point(self) -> Point2D:
        return Point2D(self.x, self.y)


class WallIn(BaseModel):
    id: str
    start: PointIn
    end: PointIn
    height: float = Field(..., gt=0)
    thickness: float = Field(..., gt=0)

    def to_wall(self) -> Wall:
        return Wall(
            id=self.id,
            start=self.start.to_point(),
            end=self.end.to_point(),
            height=self.height,
            thickness=self.thickness,
        )


class BoundsIn(BaseModel):
    x: float
    y: float
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)


class RoomIn(BaseModel):
    id: str
    bounds: BoundsIn
    room_type: str = Field(default="other", alias="type",
                           description="living, bedroom, kitchen, bathroom, hallway or other")
    name: str = ""

    class Config:
        populate_by_name = True

    def to_room(self) -> Room:
        b = self.bounds
        return Room(
            id=self.id,
            bounds=Bounds(b.x, b.y, b.width, b.height),
            room_type=self.room_type,
            name=self.name,
        )


class FloorPlanIn(BaseModel):
    name: str
    scale: float = Field(..., gt=0, description="Plan units per world unit")
    walls: list[WallIn] = []
    rooms: list[RoomIn] = []

    def to_plan(self) -> FloorPlan:
        return FloorPlan(
            name=self.name,
            scale=self.scale,
            walls=tuple(w.to_wall() for w in self.walls),
            rooms=tuple(r.to_room() for r in self.rooms),
        )


# ---------- Scene ----------
class SceneRequest(BaseModel):
    floor_plan: Optional[FloorPlanIn] = None
    elapsed_time: float = Field(default=0.0, ge=0, description="Seconds from the animation driver")


class SceneResponse(BaseModel):
    mode: str = Field(..., description="'floor_plan' or 'fallback'")
    node_count: int
    scene: dict


class ExportResponse(BaseModel):
    mode: str
    mesh_count: int
    file_url: str


class TransformOut(BaseModel):
    position: list[float]
    rotation: list[float]
