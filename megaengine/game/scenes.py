"""The title scene and the main scene of the game."""

from __future__ import annotations

from typing import TypeVar

import pygame

from ..animator import Animator
from ..app import main_input
from ..camera import Camera, set_main_camera
from ..enums import LayerType
from ..game_object import GameObject
from ..input import Input, KeyCode
from ..math2d import Vector2
from ..resources import Resources, default_resources
from ..scene import Scene
from ..scene_manager import SceneManager, default_manager
from ..texture import Texture
from ..transform import Transform
from .actors import Cat, Player
from .cat_script import CatScript
from .player_script import PlayerScript

G = TypeVar("G", bound=GameObject)

TITLE_TEXT = "Title Scene"
SWITCH_KEY = KeyCode.K


class _GameScene(Scene):
    def __init__(self) -> None:
        super().__init__()
        self.input: Input = main_input
        self.manager: SceneManager = default_manager


class TitleScene(_GameScene):
    """Shows its title; K switches to the main scene."""

    def __init__(self) -> None:
        super().__init__()
        self._font: pygame.font.Font | None = None

    def late_update(self) -> None:
        super().late_update()
        if self.input.get_key_down(SWITCH_KEY):
            self.manager.load_scene("MainScene")

    def render(self, surface: pygame.Surface) -> None:
        super().render(surface)
        if not pygame.font.get_init():
            pygame.font.init()
        if self._font is None:
            self._font = pygame.font.Font(None, 24)
        surface.blit(self._font.render(TITLE_TEXT, True, (0, 0, 0)), (100, 100))


class MainScene(_GameScene):
    """The play field: a camera, the player and a cat; K switches to the title scene."""

    def __init__(self) -> None:
        super().__init__()
        self.resources: Resources = default_resources
        self.player: Player | None = None

    def _spawn(
        self, object_cls: type[G], layer_type: LayerType, position: Vector2 | None = None
    ) -> G:
        game_object = object_cls()
        self.add_game_object(game_object, layer_type)
        if position is not None:
            game_object.get_component(Transform).position = position
        return game_object

    def initialize(self) -> None:
        camera_object = self._spawn(GameObject, LayerType.NONE, Vector2(540.0, 240.0))
        set_main_camera(camera_object.add_component(Camera))

        player = self._spawn(Player, LayerType.PLAYER)
        player.add_component(PlayerScript)
        player_sheet = self.resources.find(Texture, "Player")
        player_animator = player.add_component(Animator)
        frame = Vector2(250.0, 250.0)
        player_animator.create_animation(
            "Idle", player_sheet, Vector2(2000.0, 250.0), frame, Vector2.ZERO, 1, 0.1
        )
        player_animator.create_animation(
            "GiveWater", player_sheet, Vector2(0.0, 2000.0), frame, Vector2.ZERO, 12, 0.1
        )
        player_animator.play_animation("Idle", True)
        player_transform = player.get_component(Transform)
        player_transform.position = Vector2(200.0, 200.0)
        player_transform.rotation = 0.0
        self.player = player

        cat = self._spawn(Cat, LayerType.ANIMAL)
        cat.add_component(CatScript)
        cat_sheet = self.resources.find(Texture, "Cat")
        cat_animator = cat.add_component(Animator)
        tile = Vector2(32.0, 32.0)
        for row, name in enumerate(("DownWalk", "RightWalk", "UpWalk", "LeftWalk", "Seat")):
            cat_animator.create_animation(
                name, cat_sheet, Vector2(0.0, 32.0 * row), tile, Vector2.ZERO, 4, 0.1
            )
        cat_animator.play_animation("Seat", True)
        cat_transform = cat.get_component(Transform)
        cat_transform.position = Vector2(100.0, 200.0)
        cat_transform.scale = Vector2(2.0, 2.0)
        cat_transform.rotation = 0.0

    def late_update(self) -> None:
        super().late_update()
        if self.input.get_key_down(SWITCH_KEY):
            self.manager.load_scene("TitleScene")