# asastro

asastro is an interactive simulation of the solar system in two dimensions. It
starts with the Sun, the eight planets, Pluto and the Moon. Each body begins at
its aphelion and moves under Newtonian gravity from every other body.

The simulation uses astronomical units for distance, years for time and solar
masses for mass. In these units the gravitational constant is 4π².

## Installation

```
pip install .
```

The window is drawn with pygame.

## Running

```
asastro
```

Options:

- `--width N`, `--height N`: initial window size in pixels (default 1280×720).
  The window can be resized.
- `--max-fps N`: frame rate limit (default 60).

The simulation starts paused. While it is paused, a list of the controls is shown.

## Controls

| Input                 | Effect                                                       |
|-----------------------|--------------------------------------------------------------|
| Right mouse drag      | Move the view                                                |
| Scroll wheel          | Zoom in or out around the cursor                             |
| `Z`                   | Centre the view on the followed body, or reset the view      |
| `N`                   | Switch between true scale and equal-size bodies              |
| `Space`               | Pause or resume                                              |
| `,`                   | Slow the simulation down                                     |
| `.`                   | Speed the simulation up                                      |
| `;`                   | Reverse the direction of time                                |
| `1`–`9`, `0`          | Follow a body (1: Sun, 2: Mercury, …, 9: Neptune, 0: Pluto)  |
| Left click on a body  | Follow that body; clicking empty space stops following       |

The Moon is simulated and drawn, but it cannot be followed and it keeps its true
size when the scale is switched.

## The status display

The top-left corner of the window shows three lines:

- **SPS**: simulated time per real second. It is marked `[PAUSED]` while the
  simulation is paused.
- **Reference**: the body the camera is following.
- **Scale**: `true` or `normalized`.

The simulation adjusts the time step on each frame to hold SPS steady. If SPS is
set too high, or the frame rate drops, the time steps get large and the orbits
become inaccurate.

## Using it as a library

The simulation can also run without a window. `spawn_solar_system` returns
`Body` objects; the physics works on their `rigid_body` members:

```python
from asastro.world import spawn_solar_system
from asastro.settings import SimulationSettings
from asastro.physics import step

bodies = spawn_solar_system()
rigid_bodies = [body.rigid_body for body in bodies]
settings = SimulationSettings(pause=False)
settings.stabilize(60.0)
for _ in range(600):
    step(rigid_bodies, settings)

earth = bodies[3]
print(earth.name, earth.position)
```

`step` raises `ValueError` if two bodies occupy the same point, since there is
no direction between them.

Other pieces:

- `asastro.camera`: `Camera` converts between screen pixels and world
  coordinates; `DragState` and `zoom_camera` move and zoom it.
- `asastro.follow`: `FollowInfo` and the functions that pick a body to follow
  and keep the camera on it.
- `asastro.hud`: `time_to_string` turns a span of time given in years into
  readable text, such as `"1.0 months"` or `"3.2 days"`; `diagnostic_text`
  builds the status lines.