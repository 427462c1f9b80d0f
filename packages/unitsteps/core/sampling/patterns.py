"""Sampling pattern table.

Each pattern is described once here: the smallest step count that yields
any samples, how many samples a step count produces, and the closed-form
parameter value for a sample index. Both the sequence and the fixed-array
samplers read from this table so the formulas cannot drift apart.

Parameter values are always a single division of an integer numerator by
an integer divisor, never an accumulated step, so 0.0 and 1.0 come out
exactly at the ends of ``steps``.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum


class SamplePattern(str, Enum):
    """Which subdivision points of [0, 1] are sampled."""

    STEPS = "steps"  # 0, 1/n, ..., 1
    LEADING = "leading"  # 0, 1/n, ..., (n-1)/n
    TRAILING = "trailing"  # 1/n, ..., 1
    IN_BETWEEN = "in_between"  # 1/n, ..., (n-1)/n
    MIDPOINTS = "midpoints"  # 1/2n, 3/2n, ..., (2n-1)/2n


class UnknownPatternError(KeyError):
    """Raised when a pattern name does not match any known pattern."""

    pass


@dataclass(frozen=True)
class PatternSpec:
    """Arithmetic contract for one sampling pattern.

    Attributes:
        pattern: Pattern described by this entry.
        min_n: Smallest step count producing a non-empty result.
        count_offset: Added to n to get the number of samples.
        parameter: Maps (index, n) to the parameter value in [0, 1].
    """

    pattern: SamplePattern
    min_n: int
    count_offset: int
    parameter: Callable[[int, int], float]

    def count(self, n: int) -> int:
        """Number of samples produced for step count n (0 below the guard)."""
        if n < self.min_n:
            return 0
        return n + self.count_offset


def index_over_n(i: int, n: int) -> float:
    """Parameter value i/n."""
    return i / n


def next_index_over_n(i: int, n: int) -> float:
    """Parameter value (i+1)/n."""
    return (i + 1) / n


def midpoint_over_n(i: int, n: int) -> float:
    """Parameter value (2i+1)/(2n), the centre of the i-th subdivision."""
    return (2 * i + 1) / (2 * n)


PATTERNS: dict[SamplePattern, PatternSpec] = {
    SamplePattern.STEPS: PatternSpec(SamplePattern.STEPS, 1, 1, index_over_n),
    SamplePattern.LEADING: PatternSpec(SamplePattern.LEADING, 1, 0, index_over_n),
    SamplePattern.TRAILING: PatternSpec(SamplePattern.TRAILING, 1, 0, next_index_over_n),
    SamplePattern.IN_BETWEEN: PatternSpec(SamplePattern.IN_BETWEEN, 2, -1, next_index_over_n),
    SamplePattern.MIDPOINTS: PatternSpec(SamplePattern.MIDPOINTS, 1, 0, midpoint_over_n),
}


def normalize_key(s: str) -> str:
    """Normalize a user-provided pattern name to a stable lookup key.

    camelCase boundaries, hyphens and spaces all become underscores, so
    ``inBetween``, ``in-between`` and ``IN_BETWEEN`` share one key.

    Args:
        s: Name to normalize.

    Returns:
        Lowercase key with words separated by single underscores.
    """
    chars: list[str] = []
    for idx, ch in enumerate(s):
        if ch.isupper() and idx > 0 and s[idx - 1].islower():
            chars.append("_")
        chars.append(ch.lower() if ch.isalnum() else "_")
    return "_".join(part for part in "".join(chars).split("_") if part)


def resolve_pattern(pattern: SamplePattern | str) -> SamplePattern:
    """Resolve a pattern enum or name to a SamplePattern.

    Args:
        pattern: SamplePattern member or a name such as "inBetween".

    Returns:
        Matching SamplePattern.

    Raises:
        UnknownPatternError: If the name matches no pattern.

    Example:
        >>> resolve_pattern("inBetween")
        <SamplePattern.IN_BETWEEN: 'in_between'>
    """
    if isinstance(pattern, SamplePattern):
        return pattern
    key = normalize_key(str(pattern))
    try:
        return SamplePattern(key)
    except ValueError:
        valid = ", ".join(p.value for p in SamplePattern)
        raise UnknownPatternError(
            f"Unknown sample pattern: {pattern!r} (expected one of {valid})"
        ) from None


def get_pattern(pattern: SamplePattern | str) -> PatternSpec:
    """Look up the PatternSpec for a pattern enum or name."""
    return PATTERNS[resolve_pattern(pattern)]


def sample_count(pattern: SamplePattern | str, n: int) -> int:
    """Number of results a pattern produces for step count n.

    Example:
        >>> sample_count("steps", 4), sample_count("in_between", 1)
        (5, 0)
    """
    return get_pattern(pattern).count(n)


def parameter_values(pattern: SamplePattern | str, n: int) -> list[float]:
    """Parameter values a pattern samples for step count n, in ascending order.

    Example:
        >>> parameter_values("midpoints", 2)
        [0.25, 0.75]
    """
    spec = get_pattern(pattern)
    return [spec.parameter(i, n) for i in range(spec.count(n))]
