"""Tests for ranking results against the fastest."""

import pytest

from hashbench.bench.aggregate import aggregate
from hashbench.bench.compare import compare, find_fastest


def test_two_implementations():
    """Test the 1ms vs 2ms per op ranking."""
    a = aggregate("A", 10000.0, 10000)
    b = aggregate("B", 20000.0, 10000)

    table = compare([a, b], title="Small (11 bytes)")

    assert table.title == "Small (11 bytes)"
    assert table.fastest == "A"
    entry_a, entry_b = table.entries
    assert entry_a.is_fastest and not entry_b.is_fastest
    assert entry_a.relative_percent == pytest.approx(100.0)
    assert entry_a.speedup_factor == pytest.approx(1.0)
    assert entry_b.relative_percent == pytest.approx(50.0)
    assert entry_b.speedup_factor == pytest.approx(2.0)


def test_entries_keep_input_order():
    """Test that entries aren't re-sorted by speed."""
    results = [
        aggregate("slow", 300.0, 100),
        aggregate("fast", 100.0, 100),
        aggregate("mid", 200.0, 100),
    ]

    table = compare(results)

    assert table.names == ["slow", "fast", "mid"]
    assert table.fastest_entry.result.name == "fast"
    assert [e.is_fastest for e in table.entries] == [False, True, False]


def test_every_entry_bounded_by_fastest():
    """Test relative <= 100% and speedup >= 1 for all entries."""
    results = [aggregate(f"impl{i}", 10.0 * (i + 1), 50) for i in range(5)]

    for entry in compare(results).entries:
        assert 0 < entry.relative_percent <= 100
        assert entry.speedup_factor >= 1


def test_ties_first_wins():
    """Test that equal throughputs keep the earliest result as fastest."""
    results = [aggregate("first", 50.0, 100), aggregate("second", 50.0, 100)]

    table = compare(results)

    assert table.fastest == "first"
    assert sum(entry.is_fastest for entry in table.entries) == 1
    assert table.entries[1].relative_percent == pytest.approx(100.0)


def test_single_result():
    """Test that a lone result is fastest at 100%."""
    table = compare([aggregate("only", 5.0, 10)])

    assert table.fastest == "only"
    assert table.entries[0].relative_percent == pytest.approx(100.0)
    assert table.entries[0].speedup_factor == pytest.approx(1.0)


def test_empty_results():
    """Test that nothing to compare yields no table."""
    assert compare([]) is None
    with pytest.raises(ValueError):
        find_fastest([])


def test_unmeasurable_results():
    """Test that zero throughput gives N/A ratios instead of infinities."""
    zero = aggregate("zero", 0.0, 100)
    ok = aggregate("ok", 10.0, 100)

    table = compare([zero, ok])

    assert table.fastest == "ok"
    assert table.entries[0].relative_percent is None
    assert table.entries[0].speedup_factor is None
    assert table.entries[1].relative_percent == pytest.approx(100.0)

    all_zero = compare([zero, aggregate("also zero", 0.0, 10)])
    assert all_zero.fastest == "zero"
    assert all(entry.speedup_factor is None for entry in all_zero.entries)
