"""Choosing a body for the camera to follow and keeping it in view."""

from __future__ import annotations

from collections.abc import Collection, Iterable
from dataclasses import dataclass

from asastro.camera import Camera
from asastro.vector import Vec2
from asastro.world import Body

# Digit keys in bind order: key 1 selects bind 0, ..., key 0 selects bind 9.
FOLLOW_DIGITS: tuple[int, ...] = (1, 2, 3, 4, 5, 6, 7, 8, 9, 0)


@dataclass
class FollowInfo:
    """The followed body, where it was last frame and its name."""

    body: Body | None = None
    previous_position: Vec2 | None = None
    name: str | None = None

    def follow(self, body: Body) -> None:
        """Start following ``body`` from its current position."""
        self.body = body
        self.previous_position = body.position
        self.name = body.name

    def clear(self) -> None:
        """Stop following anything."""
        self.body = None
        self.previous_position = None
        self.name = None


def follow_entity(camera: Camera, info: FollowInfo) -> None:
    """Move the camera by as much as the followed body moved since last frame."""
    if info.body is None:
        return
    if info.previous_position is None:
        raise ValueError("followed body has no previous position")
    current = info.body.position
    camera.position = camera.position + (current - info.previous_position)
    info.previous_position = current


def select_followable(
    camera: Camera, bodies: Iterable[Body], info: FollowInfo, cursor: Vec2 | None
) -> None:
    """Follow the followable body under the cursor, or nothing if there is none."""
    if cursor is None:
        return
    cursor_world = camera.screen_to_world(cursor)
    for body in bodies:
        if not body.followable():
            continue
        if body.position.distance(cursor_world) > body.radius:
            continue
        info.follow(body)
        return
    info.clear()


def focus_selected(camera: Camera, info: FollowInfo) -> None:
    """Centre on the followed body at a zoom fitting its size, or reset the view."""
    if info.body is None:
        camera.reset()
        return
    camera.position = info.body.position
    camera.scale = info.body.radius / 100.0


def follow_binds(bodies: Iterable[Body], info: FollowInfo, digits: Collection[int]) -> None:
    """Follow the bodies bound to the digit keys pressed this frame."""
    followables = [body for body in bodies if body.followable()]
    for index, digit in enumerate(FOLLOW_DIGITS):
        if digit not in digits:
            continue
        for body in followables:
            if body.bind == index:
                info.follow(body)
                break