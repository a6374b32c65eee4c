from __future__ import annotations

import pytest

from gridsnake.clock import ElapsedTimer, Ticker, format_mmss


def test_ticker_fires_once_per_period() -> None:
    t = Ticker(100)
    t.reset(1_000)

    assert t.due(1_099) is False
    assert t.due(1_100) is True
    assert t.due(1_150) is False
    assert t.due(1_200) is True


def test_ticker_drops_ticks_missed_during_a_stall() -> None:
    t = Ticker(100)
    t.reset(0)

    assert t.due(950) is True
    # phase kept: next tick at 1_000, not 1_050
    assert t.due(999) is False
    assert t.due(1_000) is True


def test_ticker_is_silent_until_armed_and_after_stop() -> None:
    t = Ticker(50)
    assert t.due(10_000) is False

    t.reset(0)
    t.stop()
    assert t.due(10_000) is False


def test_ticker_ignores_clock_going_backwards() -> None:
    t = Ticker(50)
    t.reset(500)
    assert t.due(100) is False


def test_ticker_rejects_non_positive_period() -> None:
    with pytest.raises(ValueError):
        Ticker(0)


def test_elapsed_timer_counts_whole_seconds() -> None:
    timer = ElapsedTimer()
    timer.start(250)

    assert timer.update(1_249) == 0
    assert timer.update(1_250) == 1
    assert timer.update(3_900) == 3


def test_elapsed_timer_freezes_on_stop_and_clears_on_reset() -> None:
    timer = ElapsedTimer()
    timer.start(0)
    timer.update(2_000)
    timer.stop()

    assert timer.update(60_000) == 2
    assert not timer.running

    timer.reset()
    assert timer.seconds == 0


def test_elapsed_timer_start_is_idempotent() -> None:
    timer = ElapsedTimer()
    timer.start(0)
    timer.start(900)
    assert timer.update(1_000) == 1


@pytest.mark.parametrize("seconds, text", [(0, "00:00"), (59, "00:59"), (61, "01:01"), (3600, "60:00")])
def test_format_mmss(seconds: int, text: str) -> None:
    assert format_mmss(seconds) == text
