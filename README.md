# megaengine

A small 2D game engine built on pygame. A game is made of **scenes**. Each
scene holds a fixed set of **layers**. Each layer holds **game objects**. Each
game object carries **components** such as a `Transform`, a `Camera`, a
`SpriteRenderer`, an `Animator` or your own `Script` subclasses.

Every frame runs three passes over the active scene: `update`, `late_update`
and `render`. Each pass goes through the layers in order, and within each
object through its components in slot order.

## Building blocks

| Module | What it provides |
| --- | --- |
| `megaengine.math2d` | `Vector2`, an immutable vector with `+`, `-` and division by a number; `Vector2.ZERO`, `Vector2.ONE` |
| `megaengine.enums` | `LayerType`, `ComponentType`, `ResourceType` |
| `megaengine.named` | `Named`, the base for objects that carry a `name` |
| `megaengine.component` | `Component` base class and `Script` for game logic |
| `megaengine.transform` | `Transform`: `position`, `scale` and `rotation` |
| `megaengine.game_object` | `GameObject`, with one component slot per component type |
| `megaengine.clock` | `Clock`, the shared `main_clock` and `delta_time()` |
| `megaengine.input` | `Input`, `KeyCode`, `KeyState`, `Key`, and `poll()` to read pygame's key and button state |
| `megaengine.layer`, `megaengine.scene` | `Layer` and `Scene` |
| `megaengine.scene_manager` | `SceneManager` and the shared `default_manager` |
| `megaengine.objects` | `instantiate()`: create an object in a layer of the active scene |
| `megaengine.camera` | `Camera`, `set_main_camera()`, `main_camera()` |
| `megaengine.resources` | `Resources` registry, `Resource`, `ResourceLoadError`, the shared `default_resources` |
| `megaengine.texture` | `Texture` and `TextureType` for `.bmp` and `.png` images |
| `megaengine.animation`, `megaengine.animator` | sprite-sheet `Animation` and `Sprite`; the `Animator` component with start, complete and end events |
| `megaengine.sprite_renderer` | `SpriteRenderer`, which draws a whole texture |
| `megaengine.app` | `App`: one frame of input, timing, update, late update and render |
| `megaengine.game` | a sample game: `Cat`, `Player`, `CatScript`, `PlayerScript`, `TitleScene`, `MainScene`, `load_resources()` |

## Game objects and components

A game object always starts with a `Transform`. Other components are added by
class and looked up by class. A game object holds at most one component per
slot, so adding a second component of the same type replaces the first.

```python
from megaengine.game_object import GameObject
from megaengine.math2d import Vector2
from megaengine.transform import Transform

hero = GameObject()
transform = hero.get_component(Transform)
transform.position = Vector2(200.0, 200.0)
```

Behaviour goes into `Script` subclasses. A script can reach its owner and runs
every frame:

```python
from megaengine.component import Script


class Drift(Script):
    def update(self):
        transform = self.owner.get_component(Transform)
        transform.position = transform.position + Vector2(1.0, 0.0)


hero.add_component(Drift)
hero.update()
```

## Scenes

Scenes are registered by name with a `SceneManager`. Creating a scene makes it
the active scene, initializes it and registers it; a name that is already
registered keeps its first scene. `load_scene` calls `on_exit` on the current
scene and `on_enter` on the new one. Loading a name that was never created
raises `KeyError`.

```python
from megaengine.scene import Scene
from megaengine.scene_manager import SceneManager

manager = SceneManager()
manager.create_scene(Scene, "TitleScene")
manager.create_scene(Scene, "MainScene")
manager.load_scene("TitleScene")

manager.update()
manager.late_update()
```

`instantiate(object_cls, layer_type, position=None, manager=None)` creates a
game object in the given layer of the active scene, by default the scene of
`default_manager`. It raises `RuntimeError` when no scene is active.

## Input and timing

`Input.update(is_down, focused, mouse_position)` moves every key through the
states `DOWN`, `PRESSED`, `UP` and `NONE`. `is_down` is a function from a
`KeyCode` to a boolean. `poll((pygame.key.get_pressed(), pygame.mouse.get_pressed()))`
builds that function from pygame's state. When `focused` is false, held keys
are released instead. Use `get_key_down`, `get_key` (held) and `get_key_up` to
read the state of a key.

`Clock.update()` records the seconds since the previous call. The main clock's
value is available through `delta_time()`, which animations and the sample
scripts use.

## Resources and animation

`Resources.load(kind, key, path)` returns the resource already registered
under `key`, or creates one of class `kind`, loads it and registers it.
`Resources.find(kind, key)` returns `None` when the key is missing or holds
another kind of resource.

A `Texture` loads files ending in `png` or `bmp`. A file with any other
extension leaves the texture empty. When pygame cannot read the image,
`ResourceLoadError` is raised. An `Animation` cannot be loaded from a file:
its `load` raises `ResourceLoadError`.

`Animator.create_animation(name, sheet, left_top, size, offset, length, duration)`
cuts `length` frames laid out left to right on a sprite sheet.
`play_animation(name, loop=True)` switches animations. When it does, the end
event of the old animation and the start event of the new one fire. The
complete event fires each frame the active animation has finished. Set
callbacks through `start_event(name)`, `complete_event(name)` and
`end_event(name)`:

```python
animator.complete_event("GiveWater").callback = lambda: print("done")
```

`SpriteRenderer` places its texture relative to the main camera, when one is
set. `Animation` draws its frame centred on the owner's world position.

## Running the sample game

The package installs no command. A program drives `App` itself. It needs the
images `Cat.bmp`, `effect.png` and `Player.bmp` in a directory of your own,
`Resource/Img` by default; the package does not ship them.

```python
import pygame

from megaengine.app import App
from megaengine.game.assets import load_resources
from megaengine.game.scenes import MainScene, TitleScene
from megaengine.scene_manager import default_manager

pygame.init()
app = App()
app.initialize(1200, 980)
load_resources("Resource/Img")
default_manager.create_scene(TitleScene, "TitleScene")
default_manager.create_scene(MainScene, "MainScene")

running = True
while running:
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            running = False
    app.run()
pygame.quit()
```

Load the resources before creating `MainScene`, because the scene looks up its
sprite sheets when it is initialized. In the main scene the arrow keys walk the
player, the left mouse button plays the watering animation, and the cat sits and
walks in turn. `K` switches between the title scene and the main scene.

## What the package does not do

- It has no command-line program and no built-in main loop. `App.run()`
  processes exactly one frame. The caller pumps pygame's events, handles
  quitting and limits the frame rate.
- It plays no audio. `ResourceType` names audio clips and prefabs, but no
  resource class loads them.
- It has no editor, no saving or loading of scenes, and no collision handling.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.