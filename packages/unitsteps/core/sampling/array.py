"""Fixed-array sampler.

Same patterns and results as :mod:`unitsteps.core.sampling.sequence`, but
the output is a numpy array allocated once at its final length and filled
by index. No intermediate list is built, which matters in tight numerical
loops that want an ndarray anyway.

``dtype`` defaults to ``object`` so any evaluator result type can be
stored; pass ``float`` (or any numpy dtype) for numeric evaluators.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import numpy as np
from numpy.typing import DTypeLike

from unitsteps.core.sampling.patterns import PATTERNS, PatternSpec, SamplePattern


def _fill(
    spec: PatternSpec,
    n: int,
    function: Callable[[float], Any],
    dtype: DTypeLike,
) -> np.ndarray:
    count = spec.count(n)
    result = np.empty(count, dtype=dtype)
    parameter = spec.parameter
    for i in range(count):
        result[i] = function(parameter(i, n))
    return result


def steps(n: int, function: Callable[[float], Any], dtype: DTypeLike = object) -> np.ndarray:
    """Sample at t = 0, 1/n, ..., 1 into an array of length n+1.

    Args:
        n: Number of subdivisions of [0, 1].
        function: Evaluator called once per parameter value.
        dtype: Element type of the returned array.

    Returns:
        Array of results in ascending parameter order; empty if n < 1.
    """
    return _fill(PATTERNS[SamplePattern.STEPS], n, function, dtype)


def leading(n: int, function: Callable[[float], Any], dtype: DTypeLike = object) -> np.ndarray:
    """Sample at t = 0, ..., (n-1)/n into an array of length n; empty if n < 1."""
    return _fill(PATTERNS[SamplePattern.LEADING], n, function, dtype)


def trailing(n: int, function: Callable[[float], Any], dtype: DTypeLike = object) -> np.ndarray:
    """Sample at t = 1/n, ..., 1 into an array of length n; empty if n < 1."""
    return _fill(PATTERNS[SamplePattern.TRAILING], n, function, dtype)


def in_between(n: int, function: Callable[[float], Any], dtype: DTypeLike = object) -> np.ndarray:
    """Sample at t = 1/n, ..., (n-1)/n into an array of length n-1; empty if n < 2."""
    return _fill(PATTERNS[SamplePattern.IN_BETWEEN], n, function, dtype)


def midpoints(n: int, function: Callable[[float], Any], dtype: DTypeLike = object) -> np.ndarray:
    """Sample at t = (2i+1)/(2n) into an array of length n; empty if n < 1.

    Example:
        >>> midpoints(2, lambda t: t, dtype=float)
        array([0.25, 0.75])
    """
    return _fill(PATTERNS[SamplePattern.MIDPOINTS], n, function, dtype)
