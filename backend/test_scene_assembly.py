"""Tests for scene assembly, the fallback house and idle transforms."""
import json
import math
import pytest
from services.scene_engine import (
    Group, Label, Mesh, build_fallback_scene, build_floor_plan_scene,
    fallback_idle_transform, generate_scene, root_idle_transform,
)
from services.scene_engine.fallback import FALLBACK_LABEL


# --- idle transforms ---

def test_idle_transforms_are_zero_at_start():
    assert root_idle_transform(0.0).position == (0.0, 0.0, 0.0)
    assert fallback_idle_transform(0.0).rotation == (0.0, 0.0, 0.0)


@pytest.mark.parametrize("t", [0.0, 0.016, 1.5, 12.25, 3600.0])
def test_idle_transforms_are_pure(t):
    assert root_idle_transform(t) == root_idle_transform(t)
    assert fallback_idle_transform(t) == fallback_idle_transform(t)


def test_root_idle_bob_formula():
    assert root_idle_transform(math.pi).position[1] == pytest.approx(0.05)
    assert root_idle_transform(2.0).position == (0.0, math.sin(1.0) * 0.05, 0.0)
    assert root_idle_transform(2.0).rotation == (0.0, 0.0, 0.0)


def test_fallback_sway_formula():
    assert fallback_idle_transform(5 * math.pi).rotation[1] == pytest.approx(0.1)
    assert fallback_idle_transform(2.0).rotation == (0.0, math.sin(0.2) * 0.1, 0.0)
    assert fallback_idle_transform(2.0).position == (0.0, 0.0, 0.0)


# --- floor plan scene ---

def test_scene_children_order(small_house):
    root = build_floor_plan_scene(small_house)
    kinds = [c.name.split(":")[0] for c in root.children]
    assert kinds == ["wall"] * 4 + ["room"] * 2 + ["label"]
    title = root.children[-1]
    assert isinstance(title, Label)
    assert title.text == "Small House"
    assert title.transform.position == (0.0, 5.0, 0.0)
    assert title.font_size == 0.5
    assert title.color == "#64748b"


def test_scene_node_count(small_house):
    root = build_floor_plan_scene(small_house)
    # 4 walls + 2 room groups x (floor, furniture group, label) + 5 living pieces + title
    assert root.node_count() == 4 + 2 + 6 + 5 + 1


def test_room_group_contents(small_house):
    root = build_floor_plan_scene(small_house)
    living = root.find("room:living")
    floor, furniture, label = living.children
    assert isinstance(floor, Mesh) and floor.name == "floor:living"
    assert isinstance(furniture, Group) and len(furniture.children) == 5
    assert isinstance(label, Label) and label.text == "Living Room"
    # living bounds (200,100,250,300) at scale 50 -> center (-1.5, -1.0)
    assert furniture.transform.position == pytest.approx((-1.5, 0.0, -1.0))
    assert floor.transform.position == pytest.approx((-1.5, -0.01, -1.0))


def test_hallway_has_empty_furniture(small_house):
    hall = build_floor_plan_scene(small_house).find("furniture:hall")
    assert hall.children == ()


def test_root_transform_tracks_elapsed_time(small_house):
    root = build_floor_plan_scene(small_house, elapsed_time=4.0)
    assert root.transform == root_idle_transform(4.0)


def test_elapsed_time_only_changes_root_transform(small_house):
    a = build_floor_plan_scene(small_house, elapsed_time=0.0)
    b = build_floor_plan_scene(small_house, elapsed_time=9.0)
    assert a.children == b.children
    assert a.transform != b.transform


def test_scene_is_rebuilt_identically(small_house):
    assert generate_scene(small_house, 1.0) == generate_scene(small_house, 1.0)


def test_empty_plan_has_only_title():
    from services.scene_engine import FloorPlan
    root = generate_scene(FloorPlan(name="Empty", scale=10))
    assert len(root.children) == 1
    assert root.children[0].text == "Empty"


# --- fallback ---

def test_missing_plan_yields_fallback_scene():
    assert generate_scene(None, 2.5) == build_fallback_scene(2.5)


def test_fallback_scene_shape():
    root = build_fallback_scene()
    assert root.node_count() == 7
    names = [c.name for c in root.children]
    assert names == ["ground", "wall:back", "wall:front", "wall:left", "wall:right",
                     "roof", "label:demo"]
    ground = root.find("ground")
    assert ground.geometry.args == (8, 0.2, 6)
    assert ground.transform.position == (0.0, -0.1, 0.0)
    roof = root.find("roof")
    assert roof.geometry.kind.value == "cone"
    assert roof.geometry.args == (5, 1.5, 4)
    assert roof.transform.position == (0.0, 3.5, 0.0)
    label = root.find("label:demo")
    assert label.text == FALLBACK_LABEL
    assert label.font_size == 0.4


def test_fallback_walls_form_rectangular_shell():
    root = build_fallback_scene()
    positions = {root.find(n).transform.position for n in
                 ("wall:back", "wall:front", "wall:left", "wall:right")}
    assert positions == {(0.0, 1.5, -3.0), (0.0, 1.5, 3.0), (-4.0, 1.5, 0.0), (4.0, 1.5, 0.0)}


def test_fallback_materials_use_default_finish():
    for mesh in build_fallback_scene().meshes():
        assert (mesh.material.roughness, mesh.material.metalness) == (1.0, 0.0)


def test_fallback_ignores_elapsed_time_except_sway():
    a, b = build_fallback_scene(0.0), build_fallback_scene(100.0)
    assert a.children == b.children
    assert b.transform == fallback_idle_transform(100.0)


# --- serialization ---

def test_scene_serializes_to_json(small_house):
    data = generate_scene(small_house, 1.0).to_dict()
    text = json.dumps(data)
    assert data["type"] == "group"
    assert data["name"] == "Small House"
    wall = data["children"][0]
    assert wall["type"] == "mesh"
    assert wall["geometry"]["kind"] == "box"
    assert set(wall["material"]) == {"color", "roughness", "metalness"}
    room = data["children"][4]
    assert room["children"][2]["type"] == "label"
    assert room["children"][2]["font"] == "/fonts/Inter-Bold.woff"
    assert "Living Room" in text


def test_fallback_label_dict_has_no_font():
    label = build_fallback_scene().find("label:demo").to_dict()
    assert "font" not in label
    assert label["anchor_x"] == "center"
    assert label["anchor_y"] == "middle"


def test_furniture_names_do_not_collide_across_rooms():
    from conftest import make_room
    from services.scene_engine import FloorPlan
    plan = FloorPlan(name="Wet", scale=50, rooms=(
        make_room("k1", 400, 300, 200, 150, "kitchen"),
        make_room("b1", 600, 300, 150, 150, "bathroom"),
    ))
    root = build_floor_plan_scene(plan)
    kitchen_sink = root.find("furniture:k1:sink")
    bath_sink = root.find("furniture:b1:sink")
    assert kitchen_sink is not None and bath_sink is not None
    assert kitchen_sink is not bath_sink
    names = [n.name for n in root.iter_nodes()]
    assert len(names) == len(set(names))
