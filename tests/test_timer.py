from timeutils.duration import Duration
from timeutils.timer import Timer


def test_new_timer_state():
    d = Duration(2, 0)
    timer = Timer(d)
    assert timer.duration() == d
    assert timer.remaining() == d
    assert timer.elapsed() == Duration()
    assert timer.is_ready() is False


def test_zero_timer_is_ready():
    timer = Timer(Duration(), True)
    assert timer.is_ready() is True
    assert timer.update(Duration(1, 0)) == Duration()


def test_update_counts_down():
    d = Duration(2, 0)
    step = Duration(0, 500_000_000)
    timer = Timer(d, True)
    remaining = timer.update(step)
    assert remaining == d - step
    assert timer.remaining() == remaining
    assert timer.elapsed() == step


def test_elapsed_plus_remaining_is_duration():
    d = Duration(3, 250_000_000)
    timer = Timer(d, True)
    for _ in range(4):
        timer.update(Duration(0, 400_000_000))
        assert timer.elapsed() + timer.remaining() == d


def test_overshoot_makes_ready_and_freezes():
    d = Duration(1, 0)
    timer = Timer(d, True)
    overshoot = timer.update(Duration(1, 500_000_000))
    assert overshoot < Duration()
    assert timer.is_ready() is True
    assert timer.update(Duration(1, 0)) == overshoot


def test_restart_resets_remaining():
    d = Duration(1, 0)
    timer = Timer(d, True)
    timer.update(Duration(2, 0))
    assert timer.is_ready()
    timer.restart()
    assert timer.remaining() == d
    assert timer.is_ready() is False


def test_start_with_new_duration():
    timer = Timer(Duration(1, 0))
    new = Duration(5, 5)
    timer.start(new)
    assert timer.duration() == new
    assert timer.remaining() == new


def test_start_without_argument_keeps_remaining():
    d = Duration(4, 0)
    timer = Timer(d)
    timer.update(Duration(1, 0))
    left = timer.remaining()
    timer.stop()
    timer.start()
    assert timer.remaining() == left
    assert timer.duration() == d