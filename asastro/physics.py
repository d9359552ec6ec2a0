"""Newtonian gravity between rigid bodies in AU, years and solar masses."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from itertools import combinations

from asastro.settings import SimulationSettings
from asastro.vector import Vec2

# With distances in AU, time in years and mass in solar masses G = 4π².
G = 4.0 * math.pi * math.pi


@dataclass
class RigidBody:
    """A point mass with a position and a velocity."""

    mass: float = 1.0
    velocity: Vec2 = field(default_factory=Vec2)
    position: Vec2 = field(default_factory=Vec2)

    def apply_force(self, force: Vec2, period: float) -> None:
        """Change the velocity by a force acting for ``period``."""
        self.velocity = self.velocity + force / self.mass * period


def tick_gravity(bodies: Sequence[RigidBody], settings: SimulationSettings) -> None:
    """Accelerate every pair of bodies towards each other for one step."""
    if settings.pause:
        return
    for first, second in combinations(bodies, 2):
        distance_squared = first.position.distance_squared(second.position)
        direction = (second.position - first.position).normalize()
        force = G * first.mass * second.mass / distance_squared
        first.apply_force(direction * force, settings.dt)
        second.apply_force(-direction * force, settings.dt)


def tick_velocity(bodies: Iterable[RigidBody], settings: SimulationSettings) -> None:
    """Move every body along its velocity for one step."""
    if settings.pause:
        return
    for body in bodies:
        body.position = body.position + body.velocity * settings.dt


def step(bodies: Sequence[RigidBody], settings: SimulationSettings) -> None:
    """Advance the simulation by one frame: gravity first, then motion."""
    tick_gravity(bodies, settings)
    tick_velocity(bodies, settings)