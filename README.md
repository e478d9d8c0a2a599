# scrapyard

The core of a small 2D game engine built on an entity-component-system. It holds
the world state, the components and the systems that update them. It also has
the vector and camera maths and the input bookkeeping a game loop needs.

## Modules

- `scrapyard.generational_index`
  - `GenerationalIndexAllocator.allocate()` hands out `GenerationalIndex` handles.
    A slot freed with `deallocate()` is reused with its generation increased by one.
  - `GenerationalIndexArray` stores values in a packed list and keeps a sparse
    lookup table per entity. `get()` returns `None` for a handle that is absent
    or stale.
- `scrapyard.game_state`
  - `GameState` keeps one `GenerationalIndexArray` for each component type.
  - Register a type with `register_map(component_type)` before you attach
    components of that type. `get_map()` raises `KeyError` for a type that was
    never registered.
  - `create_entity()` returns an `EntityBuilder`. Chain `with_component(...)`
    calls on it, then call `build()` to get the entity handle.
  - `init_test_state(width, height)` does three things:
    - It registers every component type.
    - It spawns a textured 100×100 box at the origin.
    - It spawns an orthographic camera entity and returns the camera's handle.
- `scrapyard.components` holds the component dataclasses:
  - transform: `PositionComponent`, `VelocityComponent`, `RotationComponent`,
    `RotationUpdateComponent`, `ScaleComponent`
  - appearance: `ColorComponent`, `RenderComponent`, `Texture`,
    `TextureMixComponent`, `TextureUpdateComponent`
  - camera and picking: `OrthographicCameraComponent`, `BoxCollider2DComponent`,
    `SelectedComponent`, `LookAtPositionComponent`
  - the `Components` enum
- Systems, which are plain functions that take a `GameState`:
  - `scrapyard.position_update.update_positions` moves each entity by its
    velocity, moves its box collider with it, and damps the velocity by 20%.
  - `scrapyard.texture_update.update_textures` adds any pending opacity change
    to the entity's texture mix, then resets the pending change to zero.
  - `scrapyard.selection`:
    - `highlight_selected` paints the first selected entity in its selection colour.
    - `deselect_all` and `deselect_single` restore the original colour and remove
      the `SelectedComponent`.
    - `follow_mouse` moves the selected entities, and their colliders, to the
      cursor plus each entity's grab offset.
  - `scrapyard.look_at`:
    - `update_focus_point` sets the focus point of every look-at component.
    - `look_at_position` turns each selected entity, and its collider corners,
      to face its focus point.
  - `scrapyard.collision` does separating-axis picking:
    - `check_sat_collision(state, point)` clears the selection. It then selects
      the first box collider that contains the point, recording the cursor offset.
    - `get_normals`, `get_sat_projections`, `get_corner_projections`, `get_min`
      and `get_max` expose the steps of the test.
    - The steps return `SatShape` and `SatCollisions` values.
- `scrapyard.vector_utils`
  - Immutable `Vec2` and `Vec3` types.
  - Helpers for rotation angles, rotating points about a centre, box corners,
    directions and projections.
- `scrapyard.camera_utils`
  - Builds translation and orthographic matrices as numpy arrays.
  - `create_orthographic_camera` returns a camera component.
  - `ortho_screen_to_world_coordinates` turns a pixel position into world
    coordinates.
- `scrapyard.input`
  - The `KeyCode` and `MouseInput` enums.
  - Name-based mapping: `scancode_to_keycode("Space")` and
    `sdl_mouse_to_mouse("Left")`. An unknown name maps to `NA`.
  - `InputHandler` records the keys and buttons pressed each frame and counts
    how many frames each has been held:
    - `get_keycode` and `get_mouse_button` are true only on the first frame.
    - `get_keycode_down` and `get_mouse_down` are true while the key or button
      is held.
- `scrapyard.shapes`
  - `VertexInformation` vertex and index data for the built-in shapes:
    `create_quad`, `create_square`, `create_triangle_quad`,
    `create_two_triangles` and `create_two_triangles_single_array`.
  - `whitespace_buffer(length)`.
- `scrapyard.window`
  - `WindowProperties` and `WindowData` records.
  - `window_base()` returns the default 1280×720 "Scrapyard Engine" window
    settings.

## Installation

```
pip install .
```

## Example

```python
from scrapyard.game_state import GameState
from scrapyard.components import PositionComponent, VelocityComponent
from scrapyard.vector_utils import Vec3
from scrapyard.position_update import update_positions

state = GameState()
camera = state.init_test_state(1280, 720)

entity = (
    state.create_entity()
    .with_component(PositionComponent(Vec3(0.0, 0.0, 0.0)))
    .with_component(VelocityComponent(Vec3(5.0, 0.0, 0.0)))
    .build()
)

update_positions(state)
print(state.get(PositionComponent, entity).position)  # Vec3(x=5.0, y=0.0, z=0.0)
```

## What it does not do

This package has no graphics side:

- It opens no window and has no event loop.
- It loads no shaders or textures and draws nothing.
- `RenderComponent` and `Texture` only hold integer handles. `init_test_state`
  sets them to zero, because nothing is uploaded to a GPU.
- Input arrives as the names of pressed keys and buttons, passed to
  `InputHandler.update_input_state`. You must read those names from whatever
  windowing library you use.
- `WindowProperties` and `WindowData` only describe a window.

## Tests

```
pip install .[test]
pytest
```