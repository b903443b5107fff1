# airtraffic

A small air traffic controller game for the terminal, built on `curses`.
Planes appear at an exit of a grid map and fly across it along their
heading. A round ends when something goes wrong. For example, a plane may
run out of fuel or leave through the wrong exit. The game then shows what
happened in a status box below the map.

## Installing

```
pip install .
```

The terminal front end uses the standard `curses` module, so it needs a
POSIX system.

## Playing

```
airtraffic
airtraffic --log-file game.log
```

The game moves forward one step for each key you press. On each step of a
running round there is a 5% chance that a small plane appears at exit 4.
After that, every plane advances by one tick. Jets move every tick. Small
planes move every second tick. A small plane runs out of fuel after 50
ticks and a jet after 120.

The map is drawn with these symbols:

- `. ` is empty airspace.
- `+ ` is a route.
- `b0` is a beacon.
- `>0` is an airport. The arrow shows the direction in which planes land.
- Digits in the border are exits.
- A plane is shown as a letter followed by its height. Small planes use a
  lower-case letter and jets use an upper-case one.

Keys:

- `Enter` accepts the result screen and ends the game.
- `Esc` or `Ctrl-C` quits at any time.

The game writes a log to `/tmp/atc.log`. Use `--log-file` to write it
somewhere else. The file is truncated when the game starts.

## Using the library

```python
import random

from airtraffic.level import Level
from airtraffic.geometry import DirectionGrid, DirectionCardinal, PlaneKind
from airtraffic.world import World, WorldTile, Ongoing

level = Level.builtin(random.Random(1))
print(level.render())
state = level.tick()          # a State such as Ongoing, PlaneNoFuel, WrongExit

world = World(10, 10)
world.place_route_in_line((0, 0), (9, 9))
world.place_tile(WorldTile.beacon(0), (4, 4))
world.place_exit(DirectionGrid.UP, DirectionCardinal.SOUTH, 3, 0)
plane = world.spawn_plane_at_exit(0, PlaneKind.JET)
print(world)
print(isinstance(world.tick_planes(), Ongoing))
```

The modules are:

- `airtraffic.geometry`: `Pos`, `PlaneKind`, `DirectionGrid` and
  `DirectionCardinal`.
- `airtraffic.plane`: `Plane` and its destinations, `ExitDestination` and
  `AirportDestination`.
- `airtraffic.world`: `World`, `WorldTile`, `Exit` and the tick outcomes
  (`Ongoing`, `PlaneNoFuel`, `WrongExit`, `WrongAirport`, `PlaneCrash`,
  `PlaneCollision`, `PlaneTouchesWall`). Printing any outcome other than
  `Ongoing` gives a message that describes it.
- `airtraffic.level`: `Level`, including the built-in 20×20 map from
  `Level.builtin()`.
- `airtraffic.app`: the terminal front end (`App`, `main`).

Errors raised by the world, such as a position outside the grid or an
unknown exit id, are subclasses of `airtraffic.errors.AtcError`. Spawning a
plane at an exit whose outward direction is diagonal raises `ValueError`.

## What the game does not do

- There are no commands for steering planes. Planes keep the heading they
  were spawned with and never change height.
- Every spawned plane is bound for exit 1.
- `World.tick_planes` never reports `PlaneCollision` or `PlaneTouchesWall`,
  because collisions between planes and planes touching walls are not
  checked.

## Running the tests

```
pip install .[test]
pytest
```