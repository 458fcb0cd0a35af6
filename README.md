# timeutils

Small helpers for measuring time and waiting on the monotonic clock.

- `timeutils.duration.Duration` holds whole seconds and nanoseconds. It is
  immutable and hashable. It can be compared, added and subtracted, and it
  converts to `float` seconds.
- `now()`, `sleep(duration)` and `sleep_until(timestamp)` read the monotonic
  clock and wait on it.
- `timeutils.timer.Timer` is a countdown that you advance yourself, for
  example once per frame in a game loop.

The package needs nothing outside the standard library.

## Installation

```
pip install .
```

## Durations

```python
from timeutils.duration import Duration, now, sleep_until

half_second = Duration.from_seconds(0.5)
start = now()
sleep_until(start + half_second)
print(float(now() - start))   # roughly 0.5

d = Duration(1, 750_000_000) + Duration(0, 500_000_000)
assert d == Duration(2, 250_000_000)
```

- `Duration(sec, nsec)` builds a value from its two parts. Both default to 0.
- `Duration.from_seconds(seconds)` splits a float into whole seconds and
  nanoseconds. Both parts are truncated toward zero.
- `Duration.now()` and `now()` return the current monotonic timestamp.
- Addition carries nanoseconds that overflow into seconds. Subtraction
  borrows from seconds, so `nsec` stays between 0 and 999 999 999.
- `sleep(duration)`, and the method `duration.sleep()`, wait for that length
  of time and return `True`. For a negative duration they return `False` and do
  not wait.
- `sleep_until(timestamp)` waits until the monotonic clock reaches
  `timestamp`. It returns at once if that time has already passed.
- `monotonic_difference(start, end)` gives `end - start`, or a zero
  `Duration` when `end` is earlier than `start`.

`time_period_init()` and `time_period_deinit()` are meant to be called in
pairs at the start and end of a program. They only count outstanding
requests. They do not change how precisely the sleep functions wait.

## Timers

```python
from timeutils.duration import Duration
from timeutils.timer import Timer

timer = Timer(Duration.from_seconds(2.0), start=True)
frame = Duration.from_seconds(1 / 60)

while not timer.is_ready():
    timer.update(frame)
    frame.sleep()

print(float(timer.elapsed()))
```

- `update(dt)` subtracts `dt` from the remaining time and returns what is
  left.
- `is_ready()` is true once the remaining time is zero or less. After that,
  `update()` leaves the timer unchanged.
- `start()` sets the timer counting. `start(new_duration)` also sets a new
  length and resets the remaining time to it.
- `restart()` resets the timer to its full duration and starts it.
- `stop()` clears the counting flag.
- `duration()`, `remaining()` and `elapsed()` report the timer's state.

`update()` does not check the counting flag. The timer counts down whenever
you call it.

## Running the tests

```
pip install .[test]
pytest
```