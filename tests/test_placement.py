# tests/test_placement.py
from coinmaze.config import PRESETS, START, TRAP_RATE, GameOptions
from coinmaze.grid import Grid
from coinmaze.mapgen.generator import generate_level
from coinmaze.mapgen.placement import place_adversaries, place_coins, place_traps
from coinmaze.rng import PMRandom
from coinmaze.tiles import PATH, WALL

def grid_from_text(*lines):
    return Grid.from_rows([[WALL if ch == "#" else PATH for ch in ln] for ln in lines])

CORRIDOR = (
    "#######",
    "#.....#",
    "#######",
)

def test_coin_rate_extremes():
    g = grid_from_text(*CORRIDOR)
    start, finish = (1, 1), (1, 5)
    assert place_coins(g, 0.0, start, finish, PMRandom(1)) == set()
    assert place_coins(g, 1.0, start, finish, PMRandom(1)) == {(1, 2), (1, 3), (1, 4)}

def test_traps_skip_coins_start_and_finish():
    g = grid_from_text(*CORRIDOR)
    start, finish = (1, 1), (1, 5)
    traps = place_traps(g, start, finish, {(1, 3)}, PMRandom(1), rate=1.0)
    assert traps == {(1, 2), (1, 4)}
    assert TRAP_RATE == 0.05

def test_adversaries_capped_by_candidates():
    g = grid_from_text(
        "#####",
        "#...#",
        "#####",
    )
    advs = place_adversaries(g, 3, (1, 1), (1, 3), PMRandom(1))
    assert advs == [(1, 2)]
    assert place_adversaries(g, 0, (1, 1), (1, 3), PMRandom(1)) == []

def test_adversaries_distinct_and_may_sit_on_coins():
    g = grid_from_text(*CORRIDOR)
    start, finish = (1, 1), (1, 5)
    coins = place_coins(g, 1.0, start, finish, PMRandom(3))
    advs = place_adversaries(g, 2, start, finish, PMRandom(3))
    assert len(advs) == 2 and len(set(advs)) == 2
    assert set(advs) <= coins

def test_generated_levels_respect_exclusions():
    opts = GameOptions(traps_enabled=True, adversaries_enabled=True)
    for profile in PRESETS.values():
        for seed in (2, 11, 808):
            lv = generate_level(profile, opts, PMRandom(seed))
            assert lv.start == START
            assert lv.grid.get(*lv.finish) == PATH
            for group in (lv.coins, lv.traps):
                assert lv.start not in group and lv.finish not in group
                assert all(lv.grid.get(*c) == PATH for c in group)
            assert not (lv.coins & lv.traps)
            assert len(lv.adversaries) == profile.adversary_count
            assert lv.start not in lv.adversaries and lv.finish not in lv.adversaries

def test_disabled_toggles_place_nothing():
    lv = generate_level(PRESETS["extreme"], GameOptions(), PMRandom(9))
    assert lv.traps == set()
    assert lv.adversaries == []

def test_same_seed_same_level():
    opts = GameOptions(traps_enabled=True, adversaries_enabled=True)
    a = generate_level(PRESETS["hard"], opts, PMRandom(31337))
    b = generate_level(PRESETS["hard"], opts, PMRandom(31337))
    assert a.grid.buf == b.grid.buf
    assert (a.finish, a.coins, a.traps, a.adversaries) == (b.finish, b.coins, b.traps, b.adversaries)
