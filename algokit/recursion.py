"""Classic sums, sequences and growth computations, each done two ways."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

BACTERIA_GROWTH = 1.44
INVESTMENT_GROWTH = 1.1875


def sum_iterative(n: int) -> int:
    """Sum of 1..n computed with a loop; 0 for n < 1."""
    total = 0
    for value in range(1, n + 1):
        total += value
    return total


def sum_recursive(n: int) -> int:
    """Sum of 1..n computed recursively; 0 for n < 1."""
    if n > 0:
        return n + sum_recursive(n - 1)
    return 0


def sum_formula(n: int) -> int:
    """Sum of 1..n by the closed formula n(n+1)/2."""
    return n * (n + 1) // 2


def fibonacci_iterative(n: int) -> int:
    """Fibonacci number computed with a loop.

    Values of n below 2 give 0, as the loop body never runs.
    """
    total, a, b = 0, 0, 1
    for _ in range(1, n):
        total = a + b
        a, b = b, total
    return total


def fibonacci_recursive(n: int) -> int:
    """Fibonacci number computed by plain double recursion."""
    if n <= 1:
        return n
    return fibonacci_recursive(n - 1) + fibonacci_recursive(n - 2)


def bacteria_iterative(n: int) -> float:
    """Population after n periods of 44% growth, starting from 1."""
    population = 1.0
    for _ in range(n):
        population *= BACTERIA_GROWTH
    return population


def bacteria_recursive(n: int) -> float:
    """Population after n periods of 44% growth, computed recursively."""
    if n > 0:
        return BACTERIA_GROWTH * bacteria_recursive(n - 1)
    return 1.0


def investment_iterative(n: int, amount: float) -> float:
    """Value of ``amount`` after n periods at 18.75% growth."""
    for _ in range(n):
        amount *= INVESTMENT_GROWTH
    return amount


def investment_recursive(n: int, amount: float) -> float:
    """Value of ``amount`` after n periods at 18.75% growth, recursively."""
    if n <= 0:
        return amount
    return investment_recursive(n - 1, amount * INVESTMENT_GROWTH)


def pow_iterative(base: int, exponent: int) -> int:
    """``base`` raised to ``exponent`` by repeated multiplication."""
    result = 1
    for _ in range(exponent):
        result *= base
    return result


def pow_recursive(base: int, exponent: int) -> int:
    """``base`` raised to ``exponent`` by recursion."""
    if exponent <= 0:
        return 1
    return base * pow_recursive(base, exponent - 1)


def _is_odd(value: int) -> bool:
    # Only positive odd numbers leave a remainder of exactly one.
    return value > 0 and value % 2 == 1


def sum_odd_iterative(values: Sequence[int]) -> int:
    """Sum of the positive odd numbers in ``values``."""
    return sum(value for value in values if _is_odd(value))


def sum_odd_recursive(values: Sequence[int], n: int | None = None) -> int:
    """Sum of the positive odd numbers in ``values[0..n]``, recursively."""
    if n is None:
        n = len(values) - 1
    if n < 0:
        return 0
    head = values[n] if _is_odd(values[n]) else 0
    return head + sum_odd_recursive(values, n - 1)


def main(argv: Sequence[str] | None = None) -> int:
    """Print a demonstration of every computation."""
    argparse.ArgumentParser(description="Recursion versus iteration demo.").parse_args(argv)

    print(f"sumIterative(4): {sum_iterative(4)}")
    print(f"sumRecursive(4): {sum_recursive(4)}")
    print(f"sumFormula(4): {sum_formula(4)}")

    print(f"fibonacciIterative(10): {fibonacci_iterative(10)}")
    print(f"fibonacciRecursive(10): {fibonacci_recursive(10)}")

    print(f"bacteriasIterative(10): {bacteria_iterative(10):g}")
    print(f"bacteriasRecursive(10): {bacteria_recursive(10):g}")

    print(f"InvestmentIterative(3,100): {investment_iterative(3, 100):g}")
    print(f"InvestmentRecursive(3,100): {investment_recursive(3, 100):g}")

    print(f"powIterative(4, 3):{pow_iterative(4, 3)}")
    print(f"powRecursive(4, 3):{pow_recursive(4, 3)}")

    numbers = list(range(1, 10))
    print("List: " + " ".join(str(number) for number in numbers))
    print(f"Iterative method (O(n)): {sum_odd_iterative(numbers)}")
    print(f"Recursive method (O(n)): {sum_odd_recursive(numbers)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())