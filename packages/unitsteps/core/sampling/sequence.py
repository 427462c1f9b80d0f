"""Sequence sampler.

Evaluates a function at evenly spaced parameter values in [0, 1] and
collects the results in a list, in ascending parameter order.

A step count below the pattern's minimum is not an error: the result is
simply an empty list. Exceptions raised by the evaluator propagate
unchanged.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from unitsteps.core.sampling.patterns import PATTERNS, PatternSpec, SamplePattern

A = TypeVar("A")


def _collect(spec: PatternSpec, n: int, function: Callable[[float], A]) -> list[A]:
    parameter = spec.parameter
    return [function(parameter(i, n)) for i in range(spec.count(n))]


def steps(n: int, function: Callable[[float], A]) -> list[A]:
    """Sample at every subdivision point including both endpoints.

    Args:
        n: Number of subdivisions of [0, 1].
        function: Evaluator called once per parameter value.

    Returns:
        n+1 results for t = 0, 1/n, ..., 1, or [] if n < 1.

    Example:
        >>> steps(4, lambda t: 10 + 10 * t)
        [10.0, 12.5, 15.0, 17.5, 20.0]
    """
    return _collect(PATTERNS[SamplePattern.STEPS], n, function)


def leading(n: int, function: Callable[[float], A]) -> list[A]:
    """Sample at every subdivision point except 1.

    Returns n results for t = 0, 1/n, ..., (n-1)/n, or [] if n < 1.

    Example:
        >>> leading(4, lambda t: 10 + 10 * t)
        [10.0, 12.5, 15.0, 17.5]
    """
    return _collect(PATTERNS[SamplePattern.LEADING], n, function)


def trailing(n: int, function: Callable[[float], A]) -> list[A]:
    """Sample at every subdivision point except 0.

    Returns n results for t = 1/n, ..., 1, or [] if n < 1.

    Example:
        >>> trailing(4, lambda t: 10 + 10 * t)
        [12.5, 15.0, 17.5, 20.0]
    """
    return _collect(PATTERNS[SamplePattern.TRAILING], n, function)


def in_between(n: int, function: Callable[[float], A]) -> list[A]:
    """Sample at the interior subdivision points only.

    Returns n-1 results for t = 1/n, ..., (n-1)/n, or [] if n < 2.

    Example:
        >>> in_between(4, lambda t: 10 + 10 * t)
        [12.5, 15.0, 17.5]
    """
    return _collect(PATTERNS[SamplePattern.IN_BETWEEN], n, function)


def midpoints(n: int, function: Callable[[float], A]) -> list[A]:
    """Sample at the centre of each subdivision.

    Returns n results for t = (2i+1)/(2n), or [] if n < 1.

    Example:
        >>> midpoints(4, lambda t: 10 + 10 * t)
        [11.25, 13.75, 16.25, 18.75]
    """
    return _collect(PATTERNS[SamplePattern.MIDPOINTS], n, function)
