"""Exceptions raised by the simulation."""

from __future__ import annotations

from typing import Any


class AtcError(Exception):
    """Base class for every error raised by the simulation."""


class PlaneNextPosBad(AtcError):
    """A plane tried to move past the edge of the coordinate space."""

    def __init__(self, plane_id: str) -> None:
        self.plane_id = plane_id
        super().__init__(f"Plane {plane_id} tried to go to a bad position")


class ExitPosOutOfBounds(AtcError):
    """An exit was placed outside the wall it belongs to."""

    def __init__(self, pos: int, bound: int) -> None:
        self.pos = pos
        self.bound = bound
        super().__init__(f"Exit position is out of bounds: not {pos} < {bound}")


class PosOutOfBounds(AtcError):
    """A position lies outside the world."""

    def __init__(self, pos: int, bound: int) -> None:
        self.pos = pos
        self.bound = bound
        super().__init__(f"Position is out of bounds: not {pos} < {bound}")


class NoExitForID(AtcError):
    """No exit is registered under the requested identifier."""

    def __init__(self, exit_id: int) -> None:
        self.exit_id = exit_id
        super().__init__(f"No Exit exists for ID {exit_id}")


class PosFromSigned(AtcError):
    """A position was built from negative coordinates."""

    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y
        super().__init__(f"Negative Positions are not allowed: ({x}, {y})")


class PlaneOutOfFuel(AtcError):
    """A plane has used up all of its fuel."""

    def __init__(self, plane: Any) -> None:
        self.plane = plane
        super().__init__(f"Plane {plane.id} is out of fuel")