"""The interactive solar-system window: input handling, frame loop and drawing."""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass, field

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from asastro.camera import DEFAULT_VIEWPORT, Camera, DragState, zoom_camera  # noqa: E402
from asastro.follow import (  # noqa: E402
    FollowInfo,
    focus_selected,
    follow_binds,
    follow_entity,
    select_followable,
)
from asastro.hud import HELP_TEXT, diagnostic_text, help_visible  # noqa: E402
from asastro.physics import step  # noqa: E402
from asastro.settings import (  # noqa: E402
    KEY_BINDINGS,
    Action,
    SimulationSettings,
    control_simulation,
)
from asastro.vector import Vec2  # noqa: E402
from asastro.world import Body, normalize_planets, spawn_solar_system  # noqa: E402

FOCUS_KEY = "z"
SELECT_BUTTON = "left"
DRAG_BUTTON = "right"
MOUSE_BUTTONS = {1: "left", 2: "middle", 3: "right"}
FONT_SIZE = 20
TEXT_MARGIN = 5
BACKGROUND = (0, 0, 0)
TEXT_COLOR = (255, 255, 255)
SHADOW_COLOR = (0, 0, 0)
MAX_DRAW_RADIUS = 100_000.0

_KEY_ACTIONS: dict[str, Action] = {key: action for action, key in KEY_BINDINGS.items()}


@dataclass
class InputState:
    """Keys or buttons held down, and those pressed or released this frame."""

    held: set[str] = field(default_factory=set)
    just_pressed: set[str] = field(default_factory=set)
    just_released: set[str] = field(default_factory=set)

    def press(self, key: str) -> None:
        """Record that ``key`` went down."""
        key = key.lower()
        if key not in self.held:
            self.just_pressed.add(key)
        self.held.add(key)

    def release(self, key: str) -> None:
        """Record that ``key`` came up."""
        key = key.lower()
        self.held.discard(key)
        self.just_released.add(key)

    def end_frame(self) -> None:
        """Forget this frame's presses and releases; held keys stay held."""
        self.just_pressed.clear()
        self.just_released.clear()

    def held_actions(self) -> frozenset[Action]:
        """Actions whose keys are held down."""
        return frozenset(_KEY_ACTIONS[key] for key in self.held if key in _KEY_ACTIONS)

    def pressed_actions(self) -> frozenset[Action]:
        """Actions whose keys were pressed this frame."""
        return frozenset(
            _KEY_ACTIONS[key] for key in self.just_pressed if key in _KEY_ACTIONS
        )


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {text}")
    return value


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="asastro", description="Interactive simulation of the solar system."
    )
    parser.add_argument("--width", type=_positive_int, default=DEFAULT_VIEWPORT[0])
    parser.add_argument("--height", type=_positive_int, default=DEFAULT_VIEWPORT[1])
    parser.add_argument(
        "--max-fps", type=_positive_int, default=60, help="frame rate limit"
    )
    return parser.parse_args(argv)


def _pressed_digits(keys: InputState) -> set[int]:
    return {int(key) for key in keys.just_pressed if len(key) == 1 and key.isdigit()}


def _draw_body(screen: pygame.Surface, camera: Camera, body: Body) -> None:
    center = camera.world_to_screen(body.position)
    radius = max(1.0, body.radius / camera.scale)
    if radius > MAX_DRAW_RADIUS:
        return
    width, height = screen.get_size()
    if not (-radius <= center.x <= width + radius and -radius <= center.y <= height + radius):
        return
    pygame.draw.circle(screen, body.color, (center.x, center.y), radius)


def _blit_lines(
    screen: pygame.Surface, font: pygame.font.Font, lines: list[str], right_bottom: bool
) -> None:
    rendered = [
        (font.render(line, True, TEXT_COLOR), font.render(line, True, SHADOW_COLOR))
        for line in lines
    ]
    line_height = font.get_linesize()
    width, height = screen.get_size()
    top = height - TEXT_MARGIN - line_height * len(lines) if right_bottom else TEXT_MARGIN
    for row, (text, shadow) in enumerate(rendered):
        x = width - TEXT_MARGIN - text.get_width() if right_bottom else TEXT_MARGIN
        y = top + row * line_height
        screen.blit(shadow, (x + 1, y + 1))
        screen.blit(text, (x, y))


def main(argv: list[str] | None = None) -> None:
    """Open the simulation window and run until it is closed."""
    args = _parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((args.width, args.height), pygame.RESIZABLE)
        pygame.display.set_caption("asastro")
        font = pygame.font.Font(None, FONT_SIZE)
        clock = pygame.time.Clock()

        bodies = spawn_solar_system()
        rigid_bodies = [body.rigid_body for body in bodies]
        settings = SimulationSettings()
        camera = Camera(width=args.width, height=args.height)
        drag = DragState()
        follow_info = FollowInfo()
        keys = InputState()
        buttons = InputState()

        running = True
        while running:
            delta = clock.tick(args.max_fps) / 1000.0
            scroll = 0.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    keys.press(pygame.key.name(event.key))
                elif event.type == pygame.KEYUP:
                    keys.release(pygame.key.name(event.key))
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button in MOUSE_BUTTONS:
                    buttons.press(MOUSE_BUTTONS[event.button])
                elif event.type == pygame.MOUSEBUTTONUP and event.button in MOUSE_BUTTONS:
                    buttons.release(MOUSE_BUTTONS[event.button])
                elif event.type == pygame.MOUSEWHEEL:
                    scroll += event.y
            if not running:
                break

            camera.width, camera.height = screen.get_size()
            cursor = Vec2(*pygame.mouse.get_pos()) if pygame.mouse.get_focused() else None
            measured = clock.get_fps()
            fps = measured if measured > 0 else None

            control_simulation(settings, keys.held_actions(), keys.pressed_actions(), delta)
            settings.stabilize(fps)
            if Action.NORMALIZE in keys.pressed_actions():
                normalize_planets(bodies, settings)

            try:
                step(rigid_bodies, settings)
            except ValueError:
                pass  # coincident bodies have no direction between them

            drag.update(
                camera,
                cursor,
                DRAG_BUTTON in buttons.just_pressed,
                DRAG_BUTTON in buttons.held,
                DRAG_BUTTON in buttons.just_released,
            )
            zoom_camera(camera, scroll, cursor)
            follow_entity(camera, follow_info)
            if SELECT_BUTTON in buttons.just_pressed:
                select_followable(camera, bodies, follow_info, cursor)
            if FOCUS_KEY in keys.just_pressed:
                focus_selected(camera, follow_info)
            follow_binds(bodies, follow_info, _pressed_digits(keys))

            screen.fill(BACKGROUND)
            for body in bodies:
                _draw_body(screen, camera, body)
            _blit_lines(
                screen, font, diagnostic_text(settings, fps, follow_info).split("\n"), False
            )
            if help_visible(settings):
                _blit_lines(screen, font, HELP_TEXT.rstrip("\n").split("\n"), True)
            pygame.display.flip()

            keys.end_frame()
            buttons.end_frame()
    finally:
        pygame.quit()