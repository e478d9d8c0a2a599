"""Window properties and the data a live window keeps about itself."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_TITLE = "Scrapyard Engine"
DEFAULT_WIDTH = 1280
DEFAULT_HEIGHT = 720


@dataclass(frozen=True)
class WindowProperties:
    """What a window is asked to be created with."""

    title: str
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("window dimensions must not be negative")


@dataclass
class WindowData:
    """Title, size and vsync state of an open window."""

    title: str
    width: int
    height: int
    vsync: bool = True

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("window dimensions must not be negative")


def window_base() -> WindowProperties:
    """Properties of the application's main window."""
    return WindowProperties(DEFAULT_TITLE, DEFAULT_WIDTH, DEFAULT_HEIGHT)