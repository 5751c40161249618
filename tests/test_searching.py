import io
import random

import pytest

from algokit.searching import (
    PAIR_SAMPLES,
    binary_search,
    binary_search_recursive,
    find_odd_pair_binary,
    find_odd_pair_linear,
    linear_search,
    main,
)


def test_linear_search_returns_first_occurrence():
    values = [5, 3, 5, 9]
    assert linear_search(values, 5) == values.index(5)
    assert linear_search(values, 9) == values.index(9)


def test_linear_search_missing():
    assert linear_search([1, 2, 3], 7) == -1
    assert linear_search([], 7) == -1


def test_binary_searches_find_every_element():
    rng = random.Random(11)
    values = sorted(rng.sample(range(1, 100000), 300))
    for value in values:
        assert values[binary_search(values, value)] == value
        assert values[binary_search_recursive(values, value)] == value
        assert binary_search(values, value) == linear_search(values, value)


def test_binary_searches_missing():
    values = [2, 4, 6, 8]
    for target in (1, 3, 5, 9):
        assert binary_search(values, target) == -1
        assert binary_search_recursive(values, target, 0, len(values) - 1) == -1
    assert binary_search([], 1) == -1
    assert binary_search_recursive([], 1) == -1


def test_binary_search_on_strings():
    words = sorted(["pear", "apple", "fig", "kiwi"])
    assert words[binary_search(words, "kiwi")] == "kiwi"


@pytest.mark.parametrize("text", PAIR_SAMPLES)
def test_linear_pair_search_invariants(text):
    result = find_odd_pair_linear(text)
    assert result.index % 2 == 0
    assert result.comparisons == result.index // 2 + 1
    assert text[result.index + 1 : result.index + 2] != text[result.index]
    for start in range(0, result.index, 2):
        assert text[start] == text[start + 1]


@pytest.mark.parametrize("text", PAIR_SAMPLES)
def test_binary_pair_search_agrees_when_found(text):
    found = find_odd_pair_binary(text)
    if found is None:
        assert text == "XXYYZZAAC"
    else:
        assert found.index == find_odd_pair_linear(text).index


def test_pinned_pair_results():
    assert find_odd_pair_linear("AACCZZTTVXX") == (8, 5)
    assert find_odd_pair_binary("CCAAXWWTT") == (4, 1)
    assert find_odd_pair_binary("XXYYZZAAC") is None


def test_linear_pair_search_all_paired_raises():
    with pytest.raises(ValueError):
        find_odd_pair_linear("AABB")


def test_main_pairs(capsys):
    assert main(["pairs"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == len(PAIR_SAMPLES)
    first = lines[0].split()
    assert first[0] == first[2] == "V"
    assert len(lines[-1].split()) == 2


def test_main_search_terminates_on_zero(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    assert main(["search", "--size", "50", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "Index using linear search: -1" in out
    assert "Index using binary search (While): -1" in out
    assert "Execution time:" in out