import random

from airtraffic.geometry import DirectionCardinal, Pos
from airtraffic.level import Level
from airtraffic.world import Ongoing, TileKind, WorldTile


class _AlwaysSpawn(random.Random):
    def random(self):
        return 0.0


class _NeverSpawn(random.Random):
    def random(self):
        return 0.99


def test_level_render_default():
    level = Level.builtin()
    rendered = level.render()
    assert "+ " in rendered
    assert ". " in rendered
    assert "b0" in rendered
    assert ">0" in rendered
    assert "0─" in rendered
    assert "1 " in rendered


def test_builtin_layout():
    level = Level.builtin(random.Random(3))
    world = level.world
    assert level.name == "default"
    assert (world.width, world.height) == (20, 20)
    assert world.tiles[10][12] == WorldTile.beacon(0)
    assert world.tiles[3][19].kind is TileKind.ROUTE
    assert sorted(world.exits) == [0, 1, 2, 3, 4]
    assert world.exits[1].plane_out_direction is DirectionCardinal.SOUTH_WEST


def test_seed_fits_64_bits():
    level = Level.builtin(random.Random(7))
    assert 0 <= level.seed < 2**64


def test_str_matches_render():
    level = Level.builtin(random.Random(0))
    assert str(level) == level.render()


def test_tick_without_spawn():
    level = Level.builtin(_NeverSpawn())
    assert level.tick() == Ongoing()
    assert level.world.planes == {}


def test_tick_with_spawn():
    level = Level.builtin(_AlwaysSpawn())
    assert level.tick() == Ongoing()
    assert list(level.world.planes) == ["A"]
    plane = level.world.planes["A"]
    assert plane.pos == Pos(12, 0)
    assert "a7" in level.render()