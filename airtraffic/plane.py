"""Planes flying over the map."""

from __future__ import annotations

import contextlib
from dataclasses import dataclass
from typing import Union

from .errors import PlaneNextPosBad, PlaneOutOfFuel
from .geometry import DirectionCardinal, PlaneKind, Pos

START_HEIGHT = 7
EXIT_HEIGHT = 9

FUEL_LIMIT = {PlaneKind.JET: 120, PlaneKind.SMALL: 50}
MOVE_INTERVAL = {PlaneKind.JET: 1, PlaneKind.SMALL: 2}

_STEPS = {
    DirectionCardinal.NORTH: (0, -1),
    DirectionCardinal.NORTH_EAST: (1, -1),
    DirectionCardinal.NORTH_WEST: (-1, -1),
    DirectionCardinal.SOUTH: (0, 1),
    DirectionCardinal.SOUTH_EAST: (1, 1),
    DirectionCardinal.SOUTH_WEST: (-1, 1),
    DirectionCardinal.WEST: (-1, 0),
    DirectionCardinal.EAST: (1, 0),
}


@dataclass(frozen=True)
class ExitDestination:
    exit_id: int


@dataclass(frozen=True)
class AirportDestination:
    airport_id: int


Destination = Union[ExitDestination, AirportDestination]


@dataclass(init=False)
class Plane:
    """A plane with its position, heading, fuel clock and destination."""

    pos: Pos
    height: int
    direction: DirectionCardinal
    kind: PlaneKind
    id: str
    ticks: int
    destination: Destination
    just_spawned: bool

    def __init__(
        self,
        pos: Pos,
        direction: DirectionCardinal,
        kind: PlaneKind,
        id: str,
        destination: Destination,
    ) -> None:
        self.pos = pos
        self.height = START_HEIGHT
        self.direction = direction
        self.kind = kind
        self.id = id.upper() if kind is PlaneKind.SMALL else id.lower()
        self.ticks = 0
        self.destination = destination
        self.just_spawned = True

    def tick(self) -> None:
        """Advance one tick; raises PlaneOutOfFuel when the fuel is used up."""
        self.ticks += 1

        if self.ticks >= FUEL_LIMIT[self.kind]:
            raise PlaneOutOfFuel(self)

        if self.ticks % MOVE_INTERVAL[self.kind] == 0:
            # A plane pushed against the edge of the coordinate space stays there.
            with contextlib.suppress(PlaneNextPosBad):
                self._next_pos()

        if self.ticks == 2:
            self.just_spawned = False

    def _next_pos(self) -> None:
        dx, dy = _STEPS[self.direction]
        y = self.pos.y + dy
        if y < 0:
            raise PlaneNextPosBad(self.id)
        self.pos = Pos(self.pos.x, y)
        x = self.pos.x + dx
        if x < 0:
            raise PlaneNextPosBad(self.id)
        self.pos = Pos(x, y)

    def __str__(self) -> str:
        shown = self.id.lower() if self.kind is PlaneKind.SMALL else self.id.upper()
        return f"{shown}{self.height}"