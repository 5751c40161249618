import pytest

from algokit.recursion import (
    BACTERIA_GROWTH,
    INVESTMENT_GROWTH,
    bacteria_iterative,
    bacteria_recursive,
    fibonacci_iterative,
    fibonacci_recursive,
    investment_iterative,
    investment_recursive,
    main,
    pow_iterative,
    pow_recursive,
    sum_formula,
    sum_iterative,
    sum_odd_iterative,
    sum_odd_recursive,
    sum_recursive,
)


@pytest.mark.parametrize("n", range(0, 30))
def test_sums_agree(n):
    assert sum_iterative(n) == sum_recursive(n) == sum_formula(n)


def test_sum_step_relation():
    for n in range(1, 20):
        assert sum_iterative(n) - sum_iterative(n - 1) == n


def test_sum_of_negative_is_zero_for_loops():
    assert sum_iterative(-5) == sum_recursive(-5) == sum_iterative(0)


@pytest.mark.parametrize("n", range(2, 20))
def test_fibonacci_agree(n):
    assert fibonacci_iterative(n) == fibonacci_recursive(n)


def test_fibonacci_recurrence():
    for n in range(3, 20):
        assert fibonacci_recursive(n) == fibonacci_recursive(n - 1) + fibonacci_recursive(n - 2)


def test_fibonacci_iterative_small_inputs():
    assert fibonacci_iterative(1) == 0
    assert fibonacci_recursive(1) == 1


@pytest.mark.parametrize("n", range(0, 15))
def test_bacteria_agree(n):
    assert bacteria_iterative(n) == pytest.approx(bacteria_recursive(n))


def test_bacteria_growth_step():
    assert bacteria_iterative(0) == 1
    for n in range(10):
        assert bacteria_iterative(n + 1) == pytest.approx(bacteria_iterative(n) * BACTERIA_GROWTH)


@pytest.mark.parametrize("n", range(0, 10))
def test_investment_agree(n):
    assert investment_iterative(n, 100) == pytest.approx(investment_recursive(n, 100))


def test_investment_zero_periods_keeps_amount():
    assert investment_iterative(0, 250.0) == 250.0
    assert investment_recursive(0, 250.0) == 250.0
    assert investment_iterative(1, 250.0) == pytest.approx(250.0 * INVESTMENT_GROWTH)


@pytest.mark.parametrize("base,exponent", [(4, 3), (2, 10), (7, 0), (-3, 5), (10, 6)])
def test_pow_matches_builtin(base, exponent):
    assert pow_iterative(base, exponent) == base**exponent
    assert pow_recursive(base, exponent) == base**exponent


def test_sum_odd_agree():
    values = [1, 2, 3, 4, 5, 6, 7, 8, 9]
    assert sum_odd_iterative(values) == sum_odd_recursive(values, len(values) - 1)
    assert sum_odd_recursive(values) == sum_odd_iterative(values)


def test_sum_odd_ignores_negative_and_even():
    assert sum_odd_iterative([-3, 5, 4]) == 5
    assert sum_odd_recursive([-3, 5, 4]) == 5
    assert sum_odd_iterative([]) == sum_odd_recursive([])


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    values = dict(line.split(":", 1) for line in lines)
    assert values["sumIterative(4)"] == values["sumRecursive(4)"] == values["sumFormula(4)"]
    assert "fibonacciRecursive(10): 55" in lines
    assert values["bacteriasIterative(10)"] == values["bacteriasRecursive(10)"]
    assert values["Iterative method (O(n))"] == values["Recursive method (O(n))"]