"""Core of a 2D entity-component-system game engine: generational indices, components, systems, picking and input."""

__version__ = "0.1.0"