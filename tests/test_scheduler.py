# tests/test_scheduler.py
import pytest

from coinmaze.engine.scheduler import AdversaryScheduler
from coinmaze.engine.timing import DEFAULT_TIMING, TimingModel

def test_default_period_is_one_second():
    assert DEFAULT_TIMING.frame_rate == 60
    assert DEFAULT_TIMING.adversary_period_ticks == 60
    assert DEFAULT_TIMING.adversary_period_seconds == 1.0
    assert TimingModel(frame_rate=30).seconds_to_ticks(2) == 60

def test_fires_once_per_period():
    s = AdversaryScheduler(period_ticks=60)
    s.start()
    assert s.advance(59) == 0
    assert s.ticks_until_fire == 1
    assert s.advance(1) == 1
    assert s.advance(120) == 2
    assert s.ticks_until_fire == 60

def test_cancel_stops_firing_and_restart_rearms():
    s = AdversaryScheduler(period_ticks=3)
    assert s.advance(10) == 0   # never started
    s.start()
    s.advance(2)
    s.cancel()
    assert not s.active and s.ticks_until_fire == 0
    assert s.advance(100) == 0
    s.start()
    assert s.ticks_until_fire == 3
    assert s.advance(3) == 1

def test_bad_period_rejected():
    with pytest.raises(ValueError):
        AdversaryScheduler(period_ticks=0)
