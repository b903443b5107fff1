"""The map: tiles, exits, planes and the rules applied on every tick."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Union

from .errors import AtcError, ExitPosOutOfBounds, NoExitForID, PlaneOutOfFuel, PosOutOfBounds
from .geometry import DirectionCardinal, DirectionGrid, PlaneKind, Pos, pos_from_signed
from .plane import AirportDestination, ExitDestination, Plane

log = logging.getLogger(__name__)

PLANE_ID_ORDER = "abcdefghijklmnpqrstuvwxyz"

PosLike = Union[Pos, Iterable[int]]


class State:
    """Outcome of a simulation tick."""


@dataclass
class Ongoing(State):
    def __str__(self) -> str:
        return "The game is ongoing"


@dataclass
class PlaneCollision(State):
    plane_a: Plane
    plane_b: Plane

    def __str__(self) -> str:
        return f"Plane {self.plane_a.id} collided with Plane {self.plane_b.id}"


@dataclass
class WrongExit(State):
    plane: Plane
    exit_id: int

    def __str__(self) -> str:
        return f"Plane {self.plane.id} exited at the wrong exit: {self.exit_id}"


@dataclass
class WrongAirport(State):
    plane: Plane
    airport_id: int

    def __str__(self) -> str:
        return f"Plane {self.plane.id} landed at the wrong airport: {self.airport_id}"


@dataclass
class PlaneTouchesWall(State):
    plane: Plane
    wall: DirectionGrid
    wall_pos: int

    def __str__(self) -> str:
        return f"Plane {self.plane.id} did not leave through an exit"


@dataclass
class PlaneCrash(State):
    plane: Plane

    def __str__(self) -> str:
        return f"Plane {self.plane.id} crashed on the ground (height 0)"


@dataclass
class PlaneNoFuel(State):
    plane: Plane

    def __str__(self) -> str:
        return f"Plane {self.plane.id} is out of fuel"


@dataclass(frozen=True)
class Exit:
    wall_direction: DirectionGrid
    plane_out_direction: DirectionCardinal
    wall_pos: int


class TileKind(Enum):
    EMPTY = "empty"
    ROUTE = "route"
    AIRPORT = "airport"
    BEACON = "beacon"


@dataclass(frozen=True)
class WorldTile:
    """One cell of the map."""

    kind: TileKind
    direction: Optional[DirectionGrid] = None
    index: Optional[int] = None

    @classmethod
    def empty(cls) -> WorldTile:
        return cls(TileKind.EMPTY)

    @classmethod
    def route(cls) -> WorldTile:
        return cls(TileKind.ROUTE)

    @classmethod
    def airport(cls, direction: DirectionGrid, index: int) -> WorldTile:
        return cls(TileKind.AIRPORT, direction, index)

    @classmethod
    def beacon(cls, index: int) -> WorldTile:
        return cls(TileKind.BEACON, None, index)

    def __str__(self) -> str:
        if self.kind is TileKind.EMPTY:
            return ". "
        if self.kind is TileKind.ROUTE:
            return "+ "
        if self.kind is TileKind.BEACON:
            return f"b{self.index}"
        return f"{self.direction}{self.index}"


def _to_pos(pos: PosLike) -> Pos:
    if isinstance(pos, Pos):
        return pos
    x, y = pos
    return Pos(x, y)


class World:
    """A rectangular map with tiles, exits on its walls and planes in flight."""

    def __init__(self, x: int, y: int) -> None:
        self.width = x
        self.height = y
        self.tiles: list[list[WorldTile]] = [[WorldTile.empty() for _ in range(x)] for _ in range(y)]
        self.planes: dict[str, Plane] = {}
        self.exits: dict[int, Exit] = {}
        self._plane_counter = 0

    def place_exit(
        self,
        where_on_wall: DirectionGrid,
        plane_out_direction: DirectionCardinal,
        wall_pos: int,
        idx: int,
    ) -> World:
        """Register an exit on a wall under the identifier ``idx``."""
        if where_on_wall in (DirectionGrid.UP, DirectionGrid.DOWN):
            bound = self.height
        else:
            bound = self.width
        if not wall_pos < bound:
            raise ExitPosOutOfBounds(wall_pos, bound)
        self.exits[idx] = Exit(where_on_wall, plane_out_direction, wall_pos)
        return self

    def place_tile(self, tile: WorldTile, pos: PosLike) -> World:
        """Put ``tile`` at ``pos``."""
        pos = _to_pos(pos)
        self._check_pos_bounds(pos)
        self.tiles[pos.y][pos.x] = tile
        return self

    def _check_pos_bounds(self, pos: Pos) -> None:
        if pos.x + 1 > self.width:
            raise PosOutOfBounds(pos.x, self.width)
        if pos.y + 1 > self.height:
            raise PosOutOfBounds(pos.y, self.height)

    def place_route_in_line(self, a: PosLike, b: PosLike) -> World:
        """Lay route tiles on the straight line from ``a`` to ``b`` (Bresenham)."""
        a = _to_pos(a)
        b = _to_pos(b)
        self._check_pos_bounds(a)
        self._check_pos_bounds(b)

        dx = b.x - a.x
        dy = b.y - a.y
        sx = 1 if dx > 0 else -1
        sy = 1 if dy > 0 else -1
        dx, dy = abs(dx), abs(dy)

        if dx > dy:
            xx, xy, yx, yy = sx, 0, 0, sy
        else:
            dx, dy = dy, dx
            xx, xy, yx, yy = 0, sy, sx, 0

        d = 2 * dy - dx
        y = 0
        for step in range(dx + 1):
            pos = pos_from_signed(a.x + step * xx + y * yx, a.y + step * xy + y * yy)
            self.place_tile(WorldTile.route(), pos)
            if d >= 0:
                y += 1
                d -= 2 * dx
            d += 2 * dy
        return self

    def _wall(self, pos: int, direction: DirectionGrid) -> str:
        exit_idx = None
        for idx, exit_ in self.exits.items():
            if exit_.wall_pos == pos and exit_.wall_direction == direction:
                exit_idx = idx

        vertical = direction in (DirectionGrid.UP, DirectionGrid.DOWN)
        if exit_idx is not None:
            return f"{exit_idx}─" if vertical else f"{exit_idx} "
        return "──" if vertical else "│ "

    def _next_plane_id(self) -> str:
        out = PLANE_ID_ORDER[self._plane_counter % len(PLANE_ID_ORDER)]
        self._plane_counter += 1
        return out

    def spawn_plane_at_exit(self, exit_id: int, kind: PlaneKind) -> Plane:
        """Create a plane at the given exit, heading into the map."""
        exit_ = self.exits.get(exit_id)
        if exit_ is None:
            raise NoExitForID(exit_id)

        out = exit_.plane_out_direction
        if out is DirectionCardinal.NORTH:
            pos = Pos(exit_.wall_pos, 0)
        elif out is DirectionCardinal.SOUTH:
            pos = Pos(exit_.wall_pos, self.height - 1)
        elif out is DirectionCardinal.WEST:
            pos = Pos(0, exit_.wall_pos)
        elif out is DirectionCardinal.EAST:
            pos = Pos(self.width - 1, exit_.wall_pos)
        else:
            raise ValueError(f"planes cannot spawn at an exit facing {out.name}")

        plane = Plane(pos, out.opposite(), kind, self._next_plane_id(), ExitDestination(1))
        self.planes[plane.id] = plane
        return plane

    def _exit_check(self, plane: Plane, wall: DirectionGrid, plane_pos: int) -> Optional[tuple[Plane, int]]:
        for exit_id, exit_ in list(self.exits.items()):
            if exit_.wall_direction != wall or exit_.wall_pos != plane_pos:
                continue
            if plane.destination == ExitDestination(exit_id):
                self.planes.pop(plane.id, None)
            else:
                return plane, exit_id
        return None

    def _planes_take_exits(self) -> Optional[tuple[Plane, int]]:
        """Remove planes leaving through their exit; report a plane using a wrong one."""
        for pid, plane in list(self.planes.items()):
            if plane.just_spawned:
                log.debug("Plane %s is too new, skipping for exit check", pid)
                continue
            checks = (
                (plane.pos.y == 0, DirectionGrid.UP, plane.pos.x),
                (plane.pos.y == self.height, DirectionGrid.DOWN, plane.pos.x),
                (plane.pos.x == 0, DirectionGrid.LEFT, plane.pos.y),
                (plane.pos.x == self.width, DirectionGrid.RIGHT, plane.pos.y),
            )
            for applies, wall, wall_pos in checks:
                if applies:
                    wrong = self._exit_check(plane, wall, wall_pos)
                    if wrong is not None:
                        return wrong
        return None

    def _planes_land(self) -> Optional[tuple[Plane, Optional[int]]]:
        """Remove planes landing at their airport; report one landing at another."""
        for y, row in enumerate(self.tiles):
            for x, tile in enumerate(row):
                if tile.kind is not TileKind.AIRPORT:
                    continue
                for plane in list(self.planes.values()):
                    if plane.height != 0 or plane.pos != Pos(x, y):
                        continue
                    if not isinstance(plane.destination, AirportDestination):
                        raise AtcError(f"Plane {plane.id} landed at an airport but should have used an exit")
                    if tile.direction.to_cardinal() != plane.direction:
                        raise AtcError(f"Plane {plane.id} landed in the wrong direction")
                    if plane.destination.airport_id == tile.index:
                        self.planes.pop(plane.id, None)
                    else:
                        return plane, tile.index
        return None

    def tick_planes(self) -> State:
        """Advance every plane by one tick and apply the rules of the map."""
        for plane in list(self.planes.values()):
            try:
                plane.tick()
            except PlaneOutOfFuel:
                return PlaneNoFuel(plane)

        wrong_exit = self._planes_take_exits()
        if wrong_exit is not None:
            return WrongExit(*wrong_exit)

        landing = self._planes_land()
        if landing is not None:
            plane, airport_id = landing
            if airport_id is None:
                return PlaneCrash(plane)
            return WrongAirport(plane, airport_id)

        return Ongoing()

    def __str__(self) -> str:
        occupied = {plane.pos: plane for plane in self.planes.values()}
        lines = ["┌─" + "".join(self._wall(x, DirectionGrid.UP) for x in range(self.width)) + "┐"]
        for y, row in enumerate(self.tiles):
            cells = "".join(
                str(occupied.get(Pos(x, y), tile)) for x, tile in enumerate(row)
            )
            lines.append(self._wall(y, DirectionGrid.LEFT) + cells + self._wall(y, DirectionGrid.RIGHT))
        lines.append("└─" + "".join(self._wall(x, DirectionGrid.DOWN) for x in range(self.width)) + "┘")
        return "\n".join(lines)