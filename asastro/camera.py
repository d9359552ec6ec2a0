"""An orthographic 2D camera with dragging and cursor-anchored zoom."""

from __future__ import annotations

from dataclasses import dataclass, field

from asastro.vector import Vec2

DEFAULT_SCALE = 0.001
ZOOM_FACTOR = 1.2
DEFAULT_VIEWPORT = (1280, 720)


@dataclass
class Camera:
    """Camera centred on ``position`` showing ``scale`` world units per pixel.

    Screen coordinates have their origin at the top-left corner with y
    growing downwards; world coordinates have y growing upwards.
    """

    position: Vec2 = field(default_factory=Vec2)
    scale: float = DEFAULT_SCALE
    width: int = DEFAULT_VIEWPORT[0]
    height: int = DEFAULT_VIEWPORT[1]

    def screen_to_world(self, screen: Vec2) -> Vec2:
        """World point shown at the given pixel."""
        return Vec2(
            self.position.x + (screen.x - self.width / 2) * self.scale,
            self.position.y - (screen.y - self.height / 2) * self.scale,
        )

    def world_to_screen(self, world: Vec2) -> Vec2:
        """Pixel at which the given world point is shown."""
        return Vec2(
            (world.x - self.position.x) / self.scale + self.width / 2,
            -(world.y - self.position.y) / self.scale + self.height / 2,
        )

    def reset(self) -> None:
        """Centre on the origin at the starting zoom."""
        self.position = Vec2()
        self.scale = DEFAULT_SCALE


@dataclass
class DragState:
    """Where the current drag with the drag button last saw the cursor."""

    drag_start: Vec2 | None = None

    def update(
        self,
        camera: Camera,
        cursor: Vec2 | None,
        just_pressed: bool,
        pressed: bool,
        just_released: bool,
    ) -> None:
        """Move ``camera`` so that the dragged world point follows the cursor."""
        if cursor is None:
            return
        if just_pressed:
            self.drag_start = cursor
        if just_released:
            self.drag_start = None
            return
        if not pressed:
            return
        if self.drag_start is None:
            self.drag_start = cursor
            return
        displacement = self.drag_start - cursor
        camera.position = camera.position + Vec2(
            displacement.x * camera.scale, displacement.y * -camera.scale
        )
        self.drag_start = cursor


def zoom_camera(camera: Camera, steps: float, cursor: Vec2 | None) -> None:
    """Zoom by ``steps`` scroll steps, keeping the world point under the cursor fixed."""
    if steps == 0.0 or cursor is None:
        return
    cursor_world = camera.screen_to_world(cursor)
    zoom = ZOOM_FACTOR**steps
    camera.scale /= zoom
    camera.position = cursor_world + (camera.position - cursor_world) / zoom