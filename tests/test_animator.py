import pygame
import pytest

from megaengine.animator import Animator, Event
from megaengine.clock import main_clock
from megaengine.game_object import GameObject
from megaengine.math2d import Vector2
from megaengine.texture import Texture, TextureType
from megaengine.transform import Transform


@pytest.fixture
def frame_time():
    def set_delta(seconds):
        main_clock.initialize(0.0)
        main_clock.update(seconds)

    yield set_delta
    set_delta(0.0)


def make_animator(*names, frames=1):
    animator = GameObject().add_component(Animator)
    for name in names:
        animator.create_animation(
            name, None, Vector2.ZERO, Vector2(32.0, 32.0), Vector2.ZERO, frames, 0.1
        )
    return animator


def test_create_registers_named_animation():
    animator = make_animator("Seat")
    animation = animator.find_animation("Seat")
    assert animation.name == "Seat"
    assert animation.animator is animator
    assert animator.find_events("Seat") is not None


def test_create_with_existing_name_keeps_first():
    animator = make_animator("Seat")
    first = animator.find_animation("Seat")
    again = animator.create_animation(
        "Seat", None, Vector2.ZERO, Vector2(8.0, 8.0), Vector2.ZERO, 3, 0.5
    )
    assert again is first
    assert len(first.frames) == 1


def test_find_missing_animation():
    assert make_animator().find_animation("Nope") is None


def test_play_sets_active_and_resets():
    animator = make_animator("Seat")
    animator.play_animation("Seat", False)
    assert animator.active_animation is animator.find_animation("Seat")
    assert animator.active_animation.index == 0
    assert animator.loop is False


def test_play_unknown_name_is_ignored():
    animator = make_animator("Seat")
    animator.play_animation("Seat", True)
    animator.play_animation("Nope", False)
    assert animator.active_animation.name == "Seat"
    assert animator.loop is True


def test_start_and_end_events_fire_in_order():
    animator = make_animator("A", "B")
    calls = []
    animator.start_event("A").callback = lambda: calls.append("start A")
    animator.end_event("A").callback = lambda: calls.append("end A")
    animator.start_event("B").callback = lambda: calls.append("start B")
    animator.play_animation("A")
    animator.play_animation("B")
    assert calls == ["start A", "end A", "start B"]


def test_complete_event_and_looping(frame_time):
    animator = make_animator("Seat")
    calls = []
    animator.complete_event("Seat").callback = lambda: calls.append("done")
    animator.play_animation("Seat", True)
    frame_time(0.2)
    animator.update()
    assert calls == ["done"]
    assert animator.is_animation_complete() is False


def test_without_loop_animation_stays_complete(frame_time):
    animator = make_animator("GiveWater", frames=2)
    animator.play_animation("GiveWater", False)
    frame_time(0.2)
    animator.update()
    animator.update()
    assert animator.is_animation_complete() is True


def test_is_complete_without_active_animation_raises():
    with pytest.raises(RuntimeError):
        make_animator().is_animation_complete()


def test_event_accessor_for_unknown_name_raises():
    with pytest.raises(KeyError):
        make_animator().start_event("Nope")


def test_empty_event_call_does_nothing_and_set_event_calls():
    calls = []
    Event()()
    Event(lambda: calls.append(1))()
    assert calls == [1]


def test_render_draws_active_animation():
    sheet = pygame.Surface((4, 4))
    sheet.fill((255, 0, 0))
    texture = Texture()
    texture.image, texture.texture_type = sheet, TextureType.BMP
    texture.width, texture.height = sheet.get_size()
    obj = GameObject()
    obj.get_component(Transform).position = Vector2(10.0, 10.0)
    animator = obj.add_component(Animator)
    animator.create_animation("Idle", texture, Vector2.ZERO, Vector2(4.0, 4.0), Vector2.ZERO, 1, 0.1)
    animator.play_animation("Idle")
    target = pygame.Surface((20, 20))
    animator.render(target)
    assert target.get_at((10, 10))[:3] == (255, 0, 0)