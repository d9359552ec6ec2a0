"""On-screen status text and help for the simulation."""

from __future__ import annotations

from asastro.follow import FollowInfo
from asastro.settings import SimulationSettings

SOLAR_YEAR_DAYS = 365.2422

HELP_TEXT = """========== CONTROLS ==========
move around - drag with RIGHT MB
zoom in/out - SCROLL
reset view - Z
toggle scale - N
toggle pause - SPACE
slow down simulation - ,
speed up simulation - .
reverse time - ;
setting frame of reference -
digit keys (1: Sun, ..., 9: Neptune) <<<
or click LEFT MB on a body <<<

speeding up too much messes up the orbits !!!
SPS is self-stabilising, so low FPS can also break !!!
"""


def time_to_string(years: float) -> str:
    """Render a span of years in the largest unit that keeps it above one."""
    if abs(years) > 1.0:
        return f"{years:.1f} years"
    days = years * SOLAR_YEAR_DAYS
    if abs(days) > SOLAR_YEAR_DAYS / 12.0:
        return f"{days / SOLAR_YEAR_DAYS * 12.0:.1f} months"
    if abs(days) > 1.0:
        return f"{days:.1f} days"
    minutes = days * 24.0 * 60.0
    if abs(minutes) > 60.0:
        return f"{minutes / 60.0:.1f} hours"
    if abs(minutes) > 1.0:
        return f"{minutes:.1f} minutes"
    return f"{minutes * 60.0:.1f} seconds"


def diagnostic_text(
    settings: SimulationSettings, fps: float | None, follow_info: FollowInfo
) -> str:
    """The status lines: simulated time per second, reference body and scale."""
    if fps is None:
        sps_text = "SPS: -"
    else:
        sps_text = f"SPS: {time_to_string(fps * settings.dt)}"
    if settings.pause:
        sps_text = f"{sps_text} [PAUSED]"
    following_text = (
        "Reference: -" if follow_info.name is None else f"Reference: {follow_info.name}"
    )
    normalized_text = "Scale: normalized" if settings.normalized else "Scale: true"
    return "\n".join((sps_text, following_text, normalized_text))


def help_visible(settings: SimulationSettings) -> bool:
    """The help text is shown while the simulation is paused."""
    return settings.pause