"""Positions, directions and plane kinds on the map grid."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import PosFromSigned


@dataclass(frozen=True)
class Pos:
    """A non-negative grid coordinate."""

    x: int
    y: int

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise PosFromSigned(self.x, self.y)

    def __iter__(self):
        yield self.x
        yield self.y


def pos_from_signed(x: int, y: int) -> Pos:
    """Build a position from possibly negative coordinates, raising if any is negative."""
    return Pos(int(x), int(y))


class PlaneKind(Enum):
    SMALL = "small"
    JET = "jet"


class DirectionCardinal(Enum):
    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"
    NORTH_EAST = "north_east"
    NORTH_WEST = "north_west"
    SOUTH_EAST = "south_east"
    SOUTH_WEST = "south_west"

    def opposite(self) -> DirectionCardinal:
        """The direction pointing the other way."""
        return _OPPOSITES[self]


_OPPOSITES = {
    DirectionCardinal.NORTH: DirectionCardinal.SOUTH,
    DirectionCardinal.EAST: DirectionCardinal.WEST,
    DirectionCardinal.SOUTH: DirectionCardinal.NORTH,
    DirectionCardinal.WEST: DirectionCardinal.EAST,
    DirectionCardinal.NORTH_EAST: DirectionCardinal.SOUTH_WEST,
    DirectionCardinal.NORTH_WEST: DirectionCardinal.SOUTH_EAST,
    DirectionCardinal.SOUTH_EAST: DirectionCardinal.NORTH_WEST,
    DirectionCardinal.SOUTH_WEST: DirectionCardinal.NORTH_EAST,
}


class DirectionGrid(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    def to_cardinal(self) -> DirectionCardinal:
        """The compass direction matching this grid direction."""
        return _GRID_TO_CARDINAL[self]

    def __str__(self) -> str:
        return _GRID_SYMBOLS[self]


_GRID_TO_CARDINAL = {
    DirectionGrid.UP: DirectionCardinal.NORTH,
    DirectionGrid.DOWN: DirectionCardinal.SOUTH,
    DirectionGrid.LEFT: DirectionCardinal.WEST,
    DirectionGrid.RIGHT: DirectionCardinal.EAST,
}

_GRID_SYMBOLS = {
    DirectionGrid.UP: "^",
    DirectionGrid.LEFT: "<",
    DirectionGrid.DOWN: "v",
    DirectionGrid.RIGHT: ">",
}