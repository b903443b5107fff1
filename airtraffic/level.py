"""Levels: a named world together with the random source driving it."""

from __future__ import annotations

import random
from typing import Optional

from .geometry import DirectionCardinal, DirectionGrid, PlaneKind
from .world import State, World, WorldTile

BUILTIN_X = 20
BUILTIN_Y = 20
SPAWN_CHANCE = 0.05
SPAWN_EXIT = 4


class Level:
    """A playable world with a name and a seed."""

    def __init__(
        self,
        name: str,
        world: World,
        seed: int,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.name = name
        self.world = world
        self.seed = seed
        self._rng = rng if rng is not None else random.Random()

    @classmethod
    def builtin(cls, rng: Optional[random.Random] = None) -> Level:
        """The default level shipped with the game."""
        rng = rng if rng is not None else random.Random()
        world = World(BUILTIN_X, BUILTIN_Y)

        world.place_route_in_line([19, 10], [0, 10])
        world.place_route_in_line([5, 0], [5, 19])
        world.place_route_in_line([12, 0], [12, 19])
        world.place_route_in_line([12, 10], [19, 3])

        world.place_tile(WorldTile.beacon(0), [12, 10])
        world.place_tile(WorldTile.airport(DirectionGrid.RIGHT, 0), [5, 10])

        world.place_exit(DirectionGrid.UP, DirectionCardinal.SOUTH, 12, 0)
        world.place_exit(DirectionGrid.RIGHT, DirectionCardinal.SOUTH_WEST, 2, 1)
        world.place_exit(DirectionGrid.RIGHT, DirectionCardinal.WEST, 10, 2)
        world.place_exit(DirectionGrid.LEFT, DirectionCardinal.EAST, 10, 3)
        world.place_exit(DirectionGrid.DOWN, DirectionCardinal.NORTH, 12, 4)

        return cls("default", world, rng.getrandbits(64), rng)

    def tick(self) -> State:
        """Maybe spawn a plane, then advance the world by one tick."""
        if self._rng.random() < SPAWN_CHANCE:
            self.world.spawn_plane_at_exit(SPAWN_EXIT, PlaneKind.SMALL)
        return self.world.tick_planes()

    def render(self) -> str:
        return str(self.world)

    def __str__(self) -> str:
        return self.render()