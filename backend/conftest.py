"""Shared test fixtures for the scene engine tests."""
import pytest
from services.scene_engine import Bounds, FloorPlan, Point2D, Room, Wall


def make_wall(wall_id, start, end, height=3.0, thickness=0.2):
    return Wall(wall_id, Point2D(*start), Point2D(*end), height, thickness)


def make_room(room_id, x, y, width, height, room_type="other", name=""):
    return Room(room_id, Bounds(x, y, width, height), room_type, name or room_id)


@pytest.fixture
def one_wall_plan():
    """Single 1-unit wall starting at the canvas origin."""
    return FloorPlan(
        name="One Wall",
        scale=50,
        walls=(make_wall("w1", (400, 300), (450, 300)),),
    )


@pytest.fixture
def kitchen_room():
    return make_room("k1", 400, 300, 100, 100, "kitchen", "Kitchen")


@pytest.fixture
def small_house():
    """Two rooms side by side inside a 4-wall shell, 50 plan units per meter."""
    walls = (
        make_wall("north", (200, 100), (600, 100)),
        make_wall("east", (600, 100), (600, 400)),
        make_wall("south", (600, 400), (200, 400)),
        make_wall("west", (200, 400), (200, 100)),
    )
    rooms = (
        make_room("living", 200, 100, 250, 300, "living", "Living Room"),
        make_room("hall", 450, 100, 150, 300, "hallway", "Hallway"),
    )
    return FloorPlan(name="Small House", scale=50, walls=walls, rooms=rooms)


@pytest.fixture
def plan_payload():
    """JSON body for the HTTP endpoints (rooms use the ``type`` key)."""
    return {
        "name": "Cottage",
        "scale": 50,
        "walls": [
            {"id": "w1", "start": {"x": 400, "y": 300}, "end": {"x": 450, "y": 300},
             "height": 3, "thickness": 0.2},
        ],
        "rooms": [
            {"id": "r1", "bounds": {"x": 400, "y": 300, "width": 100, "height": 100},
             "type": "kitchen", "name": "Kitchen"},
            {"id": "r2", "bounds": {"x": 300, "y": 300, "width": 100, "height": 150},
             "type": "office", "name": "Office"},
        ],
    }
