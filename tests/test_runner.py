"""Tests for the timed runner."""

import pytest

from hashbench.bench.runner import TimedRunner


class CountingOperation:
    """Advances the fake clock by a fixed cost per call."""

    def __init__(self, clock, cost_ms):
        self.clock = clock
        self.cost_ms = cost_ms
        self.calls = 0

    def __call__(self):
        self.calls += 1
        self.clock.advance_ms(self.cost_ms)


def test_warmup_plus_timed_iterations(fake_clock):
    """Test that the operation runs warmup + iterations times."""
    operation = CountingOperation(fake_clock, 1.0)
    runner = TimedRunner(clock=fake_clock)

    sample = runner.run(operation, iterations=100)

    assert operation.calls == 110
    assert sample.op_count == 100


def test_warmup_capped_at_iterations(fake_clock):
    """Test that warmup never exceeds the iteration count."""
    operation = CountingOperation(fake_clock, 1.0)

    TimedRunner(clock=fake_clock).run(operation, iterations=3)

    assert operation.calls == 6


def test_warmup_excluded_from_timing(fake_clock):
    """Test that only the timed loop contributes to total_time_ms."""
    operation = CountingOperation(fake_clock, 2.0)

    sample = TimedRunner(clock=fake_clock).run(operation, iterations=50)

    assert sample.total_time_ms == pytest.approx(100.0)


def test_custom_warmup(fake_clock):
    """Test a runner configured without warmup."""
    operation = CountingOperation(fake_clock, 1.0)

    TimedRunner(warmup_iterations=0, clock=fake_clock).run(operation, iterations=5)

    assert operation.calls == 5


def test_runs_sequentially_in_order():
    """Test that calls happen one at a time on the calling thread."""
    seen = []

    def operation():
        seen.append(len(seen))

    TimedRunner(warmup_iterations=2).run(operation, iterations=20)

    assert seen == list(range(22))


def test_real_clock_measures_elapsed_time():
    """Test that the default clock yields a non-negative duration."""
    sample = TimedRunner().run(lambda: sum(range(100)), iterations=10)
    assert sample.total_time_ms >= 0


@pytest.mark.parametrize("iterations", [0, -1])
def test_non_positive_iterations_rejected(iterations):
    """Test that callers must supply a positive count."""
    with pytest.raises(ValueError):
        TimedRunner().run(lambda: None, iterations=iterations)


def test_negative_warmup_rejected():
    """Test that a negative warmup is rejected."""
    with pytest.raises(ValueError):
        TimedRunner(warmup_iterations=-1)
