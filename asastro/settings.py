"""Simulation speed and pause settings and the actions that change them."""

from __future__ import annotations

import enum
from collections.abc import Collection
from dataclasses import dataclass

SPEED_MULTIPLIER = 1.0
DEFAULT_SPS = 1.01 / 12.0  # a bit over a month of simulated time per second
NORMALIZED_SIZE = 0.05


class Action(enum.Enum):
    """User actions that control the simulation."""

    ACCELERATE = "accelerate"
    DECELERATE = "decelerate"
    PAUSE = "pause"
    REVERSE = "reverse"
    NORMALIZE = "normalize"


KEY_BINDINGS: dict[Action, str] = {
    Action.ACCELERATE: ".",
    Action.DECELERATE: ",",
    Action.PAUSE: "space",
    Action.REVERSE: ";",
    Action.NORMALIZE: "n",
}


@dataclass
class SimulationSettings:
    """Time step and display state of the running simulation.

    ``stabilized_sps`` is simulated years per real second; ``dt`` is the
    simulated years advanced per frame, derived from the measured FPS.
    """

    dt: float = 0.0
    stabilized_sps: float = DEFAULT_SPS
    pause: bool = True
    normalized: bool = False

    def accelerate(self, delta: float) -> None:
        """Speed the simulation up for a key held ``delta`` seconds."""
        self.stabilized_sps *= 1.0 + SPEED_MULTIPLIER * delta

    def decelerate(self, delta: float) -> None:
        """Slow the simulation down for a key held ``delta`` seconds."""
        self.stabilized_sps /= 1.0 + SPEED_MULTIPLIER * delta

    def toggle_pause(self) -> None:
        self.pause = not self.pause

    def reverse(self) -> None:
        """Make simulated time run the other way."""
        self.stabilized_sps = -self.stabilized_sps

    def stabilize(self, fps: float | None) -> None:
        """Set the per-frame step so that one real second covers ``stabilized_sps``.

        Nothing changes while no frame rate is known.
        """
        if not fps:
            return
        self.dt = self.stabilized_sps / fps


def control_simulation(
    settings: SimulationSettings,
    held: Collection[Action],
    just_pressed: Collection[Action],
    delta: float,
) -> None:
    """Apply this frame's held and newly pressed actions to ``settings``."""
    if Action.ACCELERATE in held:
        settings.accelerate(delta)
    if Action.DECELERATE in held:
        settings.decelerate(delta)
    if Action.PAUSE in just_pressed:
        settings.toggle_pause()
    if Action.REVERSE in just_pressed:
        settings.reverse()