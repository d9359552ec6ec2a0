"""The initial solar system and the size toggle for its bodies."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from asastro.physics import RigidBody
from asastro.settings import NORMALIZED_SIZE, SimulationSettings
from asastro.vector import Vec2

Color = tuple[int, int, int]


@dataclass(frozen=True)
class TemplateBody:
    """Initial data of a body: mass [MO], radius [AU], aphelion [AU], speed [AU/year]."""

    name: str
    mass: float
    radius: float
    aphelion_dist: float
    aphelion_speed: float
    color: Color


SOLAR_SYSTEM_TEMPLATE: tuple[TemplateBody, ...] = (
    TemplateBody("Sun", 1.0, 0.00465047, 0.0, 0.0, (255, 223, 0)),
    TemplateBody("Mercury", 0.000000166, 0.0000163, 0.468, 8.17, (169, 169, 169)),
    TemplateBody("Venus", 0.00000245, 0.0000405, 0.728, 7.38, (218, 165, 32)),
    TemplateBody("Earth", 0.00000300, 0.0000426, 1.017, 6.28, (0, 102, 204)),
    TemplateBody("Mars", 0.000000322, 0.0000227, 1.666, 4.51, (188, 39, 50)),
    TemplateBody("Jupiter", 0.000954, 0.000467, 5.458, 2.63, (218, 165, 32)),
    TemplateBody("Saturn", 0.000286, 0.000395, 10.123, 1.83, (210, 180, 140)),
    TemplateBody("Uranus", 0.0000437, 0.000176, 20.11, 1.45, (72, 209, 204)),
    TemplateBody("Neptune", 0.0000515, 0.000154, 30.33, 1.21, (0, 0, 139)),
    TemplateBody("Pluto", 0.00000000658, 0.00000794, 49.31, 0.67, (169, 169, 169)),
)

MOON_RADIUS = 0.0000115
MOON_MASS = 0.0000000363
MOON_POSITION = Vec2(1.017, 0.00257)
MOON_VELOCITY = Vec2(0.2151, 6.28)
MOON_COLOR: Color = (200, 200, 200)


@dataclass
class Body:
    """A simulated body with its display radius and, optionally, a name to follow it by.

    ``bind`` is the index of the digit key that selects the body; bodies with
    an ``original_radius`` can be drawn at a common normalized size.
    """

    rigid_body: RigidBody
    radius: float
    color: Color
    name: str | None = None
    bind: int | None = None
    original_radius: float | None = field(default=None)

    @property
    def position(self) -> Vec2:
        return self.rigid_body.position

    def followable(self) -> bool:
        """Whether the camera can follow this body."""
        return self.name is not None


def spawn_solar_system() -> list[Body]:
    """Create the Sun, the planets, Pluto and the Moon at their starting states."""
    bodies = [
        Body(
            rigid_body=RigidBody(
                mass=template.mass,
                velocity=Vec2(0.0, template.aphelion_speed),
                position=Vec2(template.aphelion_dist, 0.0),
            ),
            radius=template.radius,
            color=template.color,
            name=template.name,
            bind=index,
            original_radius=template.radius,
        )
        for index, template in enumerate(SOLAR_SYSTEM_TEMPLATE)
    ]
    bodies.append(
        Body(
            rigid_body=RigidBody(mass=MOON_MASS, velocity=MOON_VELOCITY, position=MOON_POSITION),
            radius=MOON_RADIUS,
            color=MOON_COLOR,
        )
    )
    return bodies


def normalize_planets(bodies: Iterable[Body], settings: SimulationSettings) -> None:
    """Switch between true and normalized sizes for every normalizable body."""
    settings.normalized = not settings.normalized
    for body in bodies:
        if body.original_radius is None:
            continue
        body.radius = NORMALIZED_SIZE if settings.normalized else body.original_radius