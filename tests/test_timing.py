import random
from unittest import mock

import pytest

from algokit.timing import RANDOM_MAX, Stopwatch, format_elapsed, random_int_list


def test_format_elapsed():
    assert format_elapsed(0.5) == "Execution time: 0.50000000 seconds."


def test_format_elapsed_prefix_and_suffix():
    line = format_elapsed(1.234567891)
    assert line.startswith("Execution time: ")
    assert line.endswith(" seconds.")


def test_stop_without_start_raises():
    with pytest.raises(RuntimeError):
        Stopwatch().stop()


def test_stopwatch_measures_difference():
    with mock.patch("time.perf_counter", side_effect=[1.0, 3.5]):
        watch = Stopwatch()
        watch.start()
        assert watch.stop() == 2.5
    assert watch.elapsed == 2.5


def test_context_manager_records_elapsed():
    with Stopwatch() as watch:
        pass
    assert watch.elapsed >= 0


def test_report_is_formatted():
    watch = Stopwatch().start()
    line = watch.report()
    assert line == format_elapsed(watch.elapsed)


def test_random_list_length_and_bounds():
    values = random_int_list(500, random.Random(7))
    assert len(values) == 500
    assert all(1 <= value <= RANDOM_MAX for value in values)


def test_random_list_is_reproducible_with_seed():
    first = random_int_list(50, random.Random(3))
    second = random_int_list(50, random.Random(3))
    assert len(first) == 50
    assert first == second


def test_random_list_non_positive_quantity():
    assert random_int_list(0) == []
    assert random_int_list(-4) == []