import pytest

from megaengine.camera import Camera, main_camera, set_main_camera
from megaengine.game_object import GameObject
from megaengine.math2d import Vector2
from megaengine.transform import Transform


def make_camera(position):
    obj = GameObject()
    obj.get_component(Transform).position = position
    return obj.add_component(Camera)


@pytest.fixture
def clean_main_camera():
    set_main_camera(None)
    yield
    set_main_camera(None)


def test_camera_is_found_on_its_owner():
    cam = make_camera(Vector2(1.0, 2.0))
    assert cam.owner.get_component(Camera) is cam


def test_calculate_position_is_identity_before_update():
    cam = make_camera(Vector2(540.0, 240.0))
    assert cam.calculate_position(Vector2(3.0, 4.0)) == Vector2(3.0, 4.0)


def test_look_position_maps_to_screen_centre():
    cam = make_camera(Vector2(540.0, 240.0))
    cam.resolution = Vector2(1200.0, 980.0)
    cam.update()
    assert cam.calculate_position(Vector2(540.0, 240.0)) == cam.resolution / 2.0


def test_distance_invariant():
    cam = make_camera(Vector2(10.0, 20.0))
    cam.resolution = Vector2(100.0, 50.0)
    cam.update()
    assert cam.distance + cam.resolution / 2.0 == cam.look_position


def test_own_transform_wins_over_target():
    cam = make_camera(Vector2(7.0, 8.0))
    target = GameObject()
    target.get_component(Transform).position = Vector2(300.0, 400.0)
    cam.target = target
    cam.update()
    assert cam.look_position == Vector2(7.0, 8.0)


def test_main_camera_round_trip(clean_main_camera):
    assert main_camera() is None
    cam = make_camera(Vector2.ZERO)
    set_main_camera(cam)
    assert main_camera() is cam