import pytest

from chipeight.timer import Timer


def test_tick_decrements_by_one():
    timer = Timer(60)
    timer.tick()
    assert timer.current_time == 59


def test_tick_stops_at_zero():
    timer = Timer(3)
    for _ in range(10):
        timer.tick()
    assert timer.current_time == 0


def test_counts_down_to_zero_in_start_ticks():
    start = 60
    timer = Timer(start)
    seen = []
    for _ in range(start):
        timer.tick()
        seen.append(timer.current_time)
    assert seen == list(range(start - 1, -1, -1))


def test_zero_timer_stays_zero():
    timer = Timer(0)
    timer.tick()
    assert timer.current_time == 0


def test_default_is_zero():
    assert Timer().current_time == 0


@pytest.mark.parametrize("start", [-1, 256])
def test_out_of_range_start_rejected(start):
    with pytest.raises(ValueError):
        Timer(start)