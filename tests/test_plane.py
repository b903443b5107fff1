import pytest

from airtraffic.errors import PlaneOutOfFuel
from airtraffic.geometry import DirectionCardinal, PlaneKind, Pos
from airtraffic.plane import (
    FUEL_LIMIT,
    START_HEIGHT,
    AirportDestination,
    ExitDestination,
    Plane,
)


def _plane(pos=Pos(30, 30), direction=DirectionCardinal.SOUTH, kind=PlaneKind.JET, pid="a"):
    return Plane(pos, direction, kind, pid, ExitDestination(1))


def test_new_plane_defaults():
    plane = _plane()
    assert plane.height == START_HEIGHT
    assert plane.ticks == 0
    assert plane.just_spawned is True
    assert plane.destination == ExitDestination(1)


def test_id_case_depends_on_kind():
    assert _plane(kind=PlaneKind.SMALL, pid="a").id == "A"
    assert _plane(kind=PlaneKind.JET, pid="A").id == "a"


def test_str_shows_id_and_height():
    small = _plane(kind=PlaneKind.SMALL, pid="b")
    jet = _plane(kind=PlaneKind.JET, pid="b")
    assert str(small) == f"b{START_HEIGHT}"
    assert str(jet) == f"B{START_HEIGHT}"


@pytest.mark.parametrize(
    "direction, delta",
    [
        (DirectionCardinal.NORTH, (0, -1)),
        (DirectionCardinal.SOUTH, (0, 1)),
        (DirectionCardinal.EAST, (1, 0)),
        (DirectionCardinal.WEST, (-1, 0)),
        (DirectionCardinal.NORTH_EAST, (1, -1)),
        (DirectionCardinal.NORTH_WEST, (-1, -1)),
        (DirectionCardinal.SOUTH_EAST, (1, 1)),
        (DirectionCardinal.SOUTH_WEST, (-1, 1)),
    ],
)
def test_jet_moves_every_tick(direction, delta):
    plane = _plane(direction=direction)
    plane.tick()
    assert plane.pos == Pos(30 + delta[0], 30 + delta[1])
    assert plane.ticks == 1


def test_small_plane_moves_on_even_ticks_only():
    plane = _plane(kind=PlaneKind.SMALL, direction=DirectionCardinal.EAST)
    plane.tick()
    assert plane.pos == Pos(30, 30)
    plane.tick()
    assert plane.pos == Pos(31, 30)
    plane.tick()
    assert plane.pos == Pos(31, 30)


def test_just_spawned_cleared_after_two_ticks():
    plane = _plane()
    plane.tick()
    assert plane.just_spawned is True
    plane.tick()
    assert plane.just_spawned is False


def test_plane_at_edge_stays_put():
    plane = _plane(pos=Pos(4, 0), direction=DirectionCardinal.NORTH)
    plane.tick()
    assert plane.pos == Pos(4, 0)


def test_partial_move_keeps_vertical_step():
    plane = _plane(pos=Pos(0, 5), direction=DirectionCardinal.NORTH_WEST)
    plane.tick()
    assert plane.pos == Pos(0, 4)


@pytest.mark.parametrize("kind", list(PlaneKind))
def test_runs_out_of_fuel_at_limit(kind):
    plane = Plane(Pos(0, 0), DirectionCardinal.SOUTH, kind, "c", AirportDestination(0))
    for _ in range(FUEL_LIMIT[kind] - 1):
        plane.tick()
    assert plane.ticks == FUEL_LIMIT[kind] - 1
    with pytest.raises(PlaneOutOfFuel) as info:
        plane.tick()
    assert info.value.plane is plane
    assert plane.ticks == FUEL_LIMIT[kind]


def test_destinations_compare_by_value():
    assert ExitDestination(2) == ExitDestination(2)
    assert AirportDestination(2) != ExitDestination(2)