# tests/test_runtime_collisions.py
from coinmaze.engine.collisions import (
    DIRECTIONS, HAZARD_ADVERSARY, HAZARD_TRAP,
    hazard_at, is_passable, on_enter_player, step
)
from coinmaze.grid import Grid

def test_direction_offsets():
    assert DIRECTIONS == {"up": (-1, 0), "down": (1, 0), "left": (0, -1), "right": (0, 1)}
    assert step((3, 3), "up") == (2, 3)
    assert step((3, 3), "right") == (3, 4)
    assert step((3, 3), "sideways") is None

def test_passable_only_in_bounds_paths():
    g = Grid.from_rows([
        [1, 0],
        [0, 1],
    ])
    assert is_passable(g, (0, 1)) and is_passable(g, (1, 0))
    assert not is_passable(g, (0, 0))
    assert not is_passable(g, (-1, 0)) and not is_passable(g, (0, 2)) and not is_passable(g, (2, 0))

def test_trap_reported_before_adversary():
    assert hazard_at((1, 1), {(1, 1)}, [(1, 1)]) == HAZARD_TRAP
    assert hazard_at((1, 1), set(), [(0, 0), (1, 1)]) == HAZARD_ADVERSARY
    assert hazard_at((1, 1), {(2, 2)}, [(0, 0)]) is None

def test_coin_pickup_consumes():
    coins = {(1, 1), (2, 2)}
    ev = on_enter_player((1, 1), coins)
    assert ev["coin_collected"]
    assert coins == {(2, 2)}
    assert on_enter_player((1, 1), coins)["coin_collected"] is False
