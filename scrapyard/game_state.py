"""The world: entities, their component arrays and a builder for new entities."""

from __future__ import annotations

from typing import Any, Optional, TypeVar

from scrapyard.camera_utils import create_orthographic_camera
from scrapyard.components import (
    BoxCollider2DComponent,
    ColorComponent,
    LookAtPositionComponent,
    OrthographicCameraComponent,
    PositionComponent,
    RenderComponent,
    RotationComponent,
    RotationUpdateComponent,
    ScaleComponent,
    SelectedComponent,
    Texture,
    TextureMixComponent,
    TextureUpdateComponent,
    VelocityComponent,
)
from scrapyard.generational_index import (
    GenerationalIndex,
    GenerationalIndexAllocator,
    GenerationalIndexArray,
)
from scrapyard.vector_utils import Vec2, Vec3, get_box_corners

T = TypeVar("T")

_GL_TEXTURE0 = 0x84C0

_TEST_STATE_COMPONENTS = (
    RenderComponent,
    PositionComponent,
    ColorComponent,
    TextureMixComponent,
    TextureUpdateComponent,
    VelocityComponent,
    ScaleComponent,
    OrthographicCameraComponent,
    BoxCollider2DComponent,
    SelectedComponent,
    RotationComponent,
    RotationUpdateComponent,
    LookAtPositionComponent,
)


class GameState:
    """Stores every entity and one component array per registered component type."""

    def __init__(self) -> None:
        self.components: dict[type, GenerationalIndexArray[Any]] = {}
        self.allocator = GenerationalIndexAllocator()
        self.entities: list[GenerationalIndex] = []

    def register_component(self, component: Any, index: GenerationalIndex) -> None:
        """Attach ``component`` to the entity ``index``; its type must be registered."""
        array = self.get_map(type(component))
        self.sync_registry(self.entities, array)
        array.set(index, component)

    def add_component_to(self, component: Any, index: GenerationalIndex) -> None:
        self.register_component(component, index)

    def remove_component(self, component_type: type, index: GenerationalIndex) -> None:
        """Detach the component of ``component_type`` from the entity ``index``."""
        self.get_map(component_type).remove(index)

    def register_map(
        self, component_type: type, array: Optional[GenerationalIndexArray[Any]] = None
    ) -> None:
        """Register a component array for ``component_type`` (a fresh one if none given)."""
        self.components[component_type] = array if array is not None else GenerationalIndexArray()

    def create_entity(self) -> EntityBuilder:
        """Allocate a new entity and return a builder for attaching its components."""
        entity = self.allocator.allocate()
        if entity.index < len(self.entities):
            self.entities[entity.index] = entity
        else:
            self.entities.append(entity)
        return EntityBuilder(entity, self)

    def get_map(self, component_type: type[T]) -> GenerationalIndexArray[T]:
        """The component array for ``component_type``; KeyError if it is not registered."""
        try:
            return self.components[component_type]
        except KeyError:
            raise KeyError(
                f"component type {component_type.__name__} is not registered"
            ) from None

    def get(self, component_type: type[T], index: GenerationalIndex) -> Optional[T]:
        """The component of ``component_type`` owned by ``index``, or None."""
        return self.get_map(component_type).get(index)

    @staticmethod
    def sync_registry(
        entities: list[GenerationalIndex], array: GenerationalIndexArray[Any]
    ) -> None:
        """Grow the array's lookup table so every entity has a slot."""
        for _ in range(len(array.unpacked_entries), len(entities)):
            array.set_empty()

    def init_test_state(self, width: float, height: float) -> GenerationalIndex:
        """Register every component array, spawn a textured box and a camera; return the camera.

        Graphics handles are left at zero since nothing has been uploaded to a GPU.
        """
        for component_type in _TEST_STATE_COMPONENTS:
            self.register_map(component_type)

        position = Vec3(0.0, 0.0, 0.0)
        scale = Vec3(50.0, 50.0, 50.0)
        size = Vec2(scale.x * 2.0, scale.y * 2.0)
        corners = get_box_corners(Vec2(position.x, position.y), size)

        (
            self.create_entity()
            .with_component(RenderComponent(shader_program=0, vertex_array_object=0))
            .with_component(PositionComponent(position))
            .with_component(RotationComponent(Vec3(0.0, 0.0, 0.0)))
            .with_component(ScaleComponent(scale))
            .with_component(ColorComponent((1.0, 1.0, 1.0, 0.0)))
            .with_component(
                TextureMixComponent(
                    textures=[
                        Texture("Texture1", 0, 0, _GL_TEXTURE0),
                        Texture("Texture2", 0, 1, _GL_TEXTURE0 + 1),
                    ],
                    opacity=0.0,
                )
            )
            .with_component(TextureUpdateComponent(opacity_change=0.0))
            .with_component(VelocityComponent(Vec3(0.0, 0.0, 0.0)))
            .with_component(
                BoxCollider2DComponent(
                    size=size, position=Vec2(position.x, position.y), corners=corners
                )
            )
            .build()
        )

        cam_position = Vec3(0.0, 0.0, -1.0)
        return (
            self.create_entity()
            .with_component(PositionComponent(cam_position))
            .with_component(create_orthographic_camera(width, height, cam_position))
            .build()
        )


class EntityBuilder:
    """Fluent helper that attaches components to a freshly created entity."""

    def __init__(self, entity: GenerationalIndex, state: GameState) -> None:
        self._entity = entity
        self._state = state

    def with_component(self, component: Any) -> EntityBuilder:
        self._state.register_component(component, self._entity)
        return self

    def build(self) -> GenerationalIndex:
        return self._entity