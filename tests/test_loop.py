# tests/test_loop.py
import pytest

from coinmaze.config import START, GameOptions, Settings
from coinmaze.engine.loop import (
    AdversaryTick, ChangeDifficulty, GameLoop, Move, OpenMenu,
    Regenerate, SetAdversaries, SetTraps, StartGame
)
from coinmaze.engine.state import GameState, TickEvents
from coinmaze.engine.timing import TimingModel
from coinmaze.grid import Grid
from coinmaze.mapgen.generator import Level
from coinmaze.render.layers import compose_view
from coinmaze.rng import PMRandom
from coinmaze.tiles import PATH, T_ADVERSARY, T_TRAP, WALL

FAST = TimingModel(frame_rate=60, adversary_period_ticks=3)

def grid_from_text(*lines):
    return Grid.from_rows([[WALL if ch == "#" else PATH for ch in ln] for ln in lines])

def make_loop(difficulty="medium", adversaries=True, traps=False, seed=5):
    opts = GameOptions(traps_enabled=traps, adversaries_enabled=adversaries)
    return GameLoop(difficulty, opts, rng=PMRandom(seed), timing=FAST)

def tick_outcomes(outcomes):
    return [o for o in outcomes if isinstance(o, TickEvents)]

def test_starts_in_menu_and_ignores_moves():
    loop = make_loop()
    assert loop.in_menu and loop.state is None
    loop.post(Move("right"))
    assert loop.pump() == [None]
    assert not loop.scheduler.active
    assert tick_outcomes(loop.advance_frame(10)) == []

def test_start_game_arms_scheduler_and_ticks_once_per_period():
    loop = make_loop()
    loop.post(StartGame())
    loop.pump()
    assert not loop.in_menu and loop.state is not None
    assert loop.scheduler.active

    before = loop.state.adversaries
    assert tick_outcomes(loop.advance_frame()) == []
    assert tick_outcomes(loop.advance_frame()) == []
    ticks = tick_outcomes(loop.advance_frame())
    assert len(ticks) == 1 and ticks[0].fired
    # in a perfect maze every cell has a neighbour, so the adversary moved
    assert loop.state.adversaries != before

def test_no_scheduler_without_adversaries():
    loop = make_loop(adversaries=False)
    loop.post(StartGame())
    loop.pump()
    assert not loop.scheduler.active

def test_terminal_state_cancels_scheduler():
    loop = make_loop()
    loop.post(StartGame())
    loop.pump()
    assert loop.scheduler.active

    lv = Level(
        grid=grid_from_text("#####", "#...#", "#####"),
        start=(1, 1),
        finish=(1, 3),
        traps={(1, 2)},
    )
    loop.state = GameState.from_level(lv, rng=PMRandom(1))
    loop.post(Move("right"))
    (ev,) = loop.pump()
    assert ev.lost
    assert not loop.scheduler.active
    assert tick_outcomes(loop.advance_frame(30)) == []

def test_regenerate_rearms_and_drops_stale_ticks():
    loop = make_loop()
    loop.post(StartGame())
    loop.pump()
    old_gen = loop.state.generation
    loop.advance_frame(2)

    loop.post(Regenerate())
    loop.post(AdversaryTick(old_gen))   # queued behind the regeneration
    out = loop.pump()
    assert out == [None]
    assert loop.state.generation == old_gen + 1
    assert loop.scheduler.ticks_until_fire == FAST.adversary_period_ticks

    # a stale tick that arrives later is ignored as well
    before = loop.state.adversaries
    loop.post(AdversaryTick(old_gen))
    assert loop.pump() == [None]
    assert loop.state.adversaries == before

def test_regenerate_resets_player():
    loop = make_loop(adversaries=False)
    loop.post(StartGame())
    loop.pump()
    st = loop.state
    for d in ("right", "down", "right", "down"):
        loop.post(Move(d))
    loop.post(Regenerate())
    loop.pump()
    assert loop.state is st            # same owner object, fresh contents
    assert st.player_pos == START and st.coin_count == 0 and not st.is_over

def test_change_difficulty():
    loop = make_loop(adversaries=False)
    loop.post(ChangeDifficulty("hard"))
    loop.pump()
    assert loop.profile.name == "hard" and loop.state is None   # menu: nothing generated yet

    loop.post(StartGame())
    loop.post(ChangeDifficulty("extreme"))
    loop.pump()
    assert (loop.state.grid.rows, loop.state.grid.cols) == (31, 31)

    loop.post(ChangeDifficulty("nightmare"))
    with pytest.raises(ValueError):
        loop.pump()

def test_adversary_toggle_and_menu_control_scheduler():
    loop = make_loop()
    loop.post(StartGame())
    loop.pump()
    loop.post(SetAdversaries(False))
    loop.pump()
    assert not loop.scheduler.active

    loop.post(SetAdversaries(True))
    loop.pump()
    assert loop.scheduler.active

    loop.post(OpenMenu())
    loop.pump()
    assert loop.in_menu and not loop.scheduler.active
    pos = loop.state.player_pos
    loop.post(Move("down"))
    loop.pump()
    assert loop.state.player_pos == pos

def test_trap_toggle_applies_on_next_regeneration():
    loop = make_loop(difficulty="extreme", adversaries=False)
    loop.post(StartGame())
    loop.pump()
    assert loop.state.traps == frozenset()
    loop.post(SetTraps(True))
    loop.pump()
    assert loop.state.traps == frozenset()
    loop.post(Regenerate())
    loop.pump()
    assert loop.state.options.traps_enabled
    assert len(loop.state.traps) > 0   # 31x31 has hundreds of candidates at 5%

def test_seeded_settings_are_reproducible():
    s = Settings(difficulty="hard", options=GameOptions(traps_enabled=True), seed=1234)
    a, b = GameLoop.from_settings(s), GameLoop.from_settings(s)
    for loop in (a, b):
        loop.post(StartGame())
        loop.pump()
    assert a.state.grid.buf == b.state.grid.buf
    assert a.state.finish == b.state.finish and a.state.traps == b.state.traps

def test_unknown_event_rejected():
    loop = make_loop()
    loop.post("jump")
    with pytest.raises(TypeError):
        loop.pump()

def test_bad_difficulty_leaves_running_session_alone():
    loop = make_loop()
    loop.post(StartGame())
    loop.pump()
    gen = loop.state.generation

    loop.post(ChangeDifficulty("nightmare"))
    with pytest.raises(ValueError):
        loop.pump()
    assert loop.profile.name == "medium"
    assert loop.state.generation == gen and not loop.state.is_over
    assert loop.scheduler.active
    ticks = tick_outcomes(loop.advance_frame(FAST.adversary_period_ticks))
    assert len(ticks) == 1 and ticks[0].fired

def test_toggling_off_mid_game_keeps_live_hazards_visible():
    loop = make_loop(traps=True, adversaries=True)
    loop.post(StartGame())
    loop.pump()
    lv = Level(
        grid=grid_from_text("#######", "#.....#", "#######"),
        start=(1, 1),
        finish=(1, 5),
        traps={(1, 2)},
        adversaries=[(1, 4)],
    )
    loop.state = GameState.from_level(lv, options=loop.options, rng=PMRandom(1))

    loop.post(SetTraps(False))
    loop.post(SetAdversaries(False))
    loop.pump()
    row = compose_view(loop.state)[1]
    assert row[2] == T_TRAP and row[4] == T_ADVERSARY

    loop.post(Move("right"))
    (ev,) = loop.pump()
    assert ev.lost and ev.hazard == "trap"
