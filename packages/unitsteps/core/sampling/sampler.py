"""Configured sampler facade.

Binds a pattern and an output container so callers (and config files) can
pick a sampling strategy by name instead of importing a specific function.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
import logging
from typing import TYPE_CHECKING, Any

import numpy as np
from numpy.typing import DTypeLike

from unitsteps.core.sampling import array, sequence
from unitsteps.core.sampling.patterns import SamplePattern, get_pattern, resolve_pattern

if TYPE_CHECKING:
    from unitsteps.core.config.models import SamplerConfig

logger = logging.getLogger(__name__)


class OutputContainer(str, Enum):
    """Shape of the sampler's result."""

    SEQUENCE = "sequence"  # list, built incrementally
    ARRAY = "array"  # numpy.ndarray, allocated once and filled by index


_SEQUENCE_SAMPLERS: dict[SamplePattern, Callable[..., list[Any]]] = {
    SamplePattern.STEPS: sequence.steps,
    SamplePattern.LEADING: sequence.leading,
    SamplePattern.TRAILING: sequence.trailing,
    SamplePattern.IN_BETWEEN: sequence.in_between,
    SamplePattern.MIDPOINTS: sequence.midpoints,
}

_ARRAY_SAMPLERS: dict[SamplePattern, Callable[..., np.ndarray]] = {
    SamplePattern.STEPS: array.steps,
    SamplePattern.LEADING: array.leading,
    SamplePattern.TRAILING: array.trailing,
    SamplePattern.IN_BETWEEN: array.in_between,
    SamplePattern.MIDPOINTS: array.midpoints,
}


def resolve_container(container: OutputContainer | str) -> OutputContainer:
    """Resolve an OutputContainer member or name (case-insensitive).

    Raises:
        ValueError: If the name is not a known container.
    """
    if isinstance(container, OutputContainer):
        return container
    try:
        return OutputContainer(str(container).strip().lower())
    except ValueError:
        valid = ", ".join(c.value for c in OutputContainer)
        raise ValueError(
            f"Unknown output container: {container!r} (expected one of {valid})"
        ) from None


def sample(pattern: SamplePattern | str, n: int, function: Callable[[float], Any]) -> list[Any]:
    """Sample a pattern by name into a list.

    Example:
        >>> sample("inBetween", 4, lambda t: t)
        [0.25, 0.5, 0.75]
    """
    return _SEQUENCE_SAMPLERS[resolve_pattern(pattern)](n, function)


def sample_array(
    pattern: SamplePattern | str,
    n: int,
    function: Callable[[float], Any],
    dtype: DTypeLike = object,
) -> np.ndarray:
    """Sample a pattern by name into a fixed-size numpy array."""
    return _ARRAY_SAMPLERS[resolve_pattern(pattern)](n, function, dtype=dtype)


class Sampler:
    """A pattern and output container bound together.

    Instances are immutable and hold no per-call state, so a single sampler
    can be reused freely.

    Example:
        >>> sampler = Sampler("midpoints", container="array", dtype="float64")
        >>> sampler(4, lambda t: 10 + 10 * t)
        array([11.25, 13.75, 16.25, 18.75])
    """

    __slots__ = ("_pattern", "_container", "_dtype")

    def __init__(
        self,
        pattern: SamplePattern | str = SamplePattern.STEPS,
        container: OutputContainer | str = OutputContainer.SEQUENCE,
        dtype: DTypeLike | None = None,
    ) -> None:
        self._pattern = resolve_pattern(pattern)
        self._container = resolve_container(container)
        self._dtype = np.dtype(object if dtype is None else dtype)

    @classmethod
    def from_config(cls, config: SamplerConfig) -> Sampler:
        """Build a sampler from a validated SamplerConfig."""
        return cls(pattern=config.pattern, container=config.container, dtype=config.dtype)

    @property
    def pattern(self) -> SamplePattern:
        return self._pattern

    @property
    def container(self) -> OutputContainer:
        return self._container

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    def count(self, n: int) -> int:
        """Number of results this sampler produces for step count n."""
        return get_pattern(self._pattern).count(n)

    def parameter_values(self, n: int) -> list[float] | np.ndarray:
        """Parameter values sampled for step count n, in this sampler's container."""
        if self._container is OutputContainer.ARRAY:
            return _ARRAY_SAMPLERS[self._pattern](n, float, dtype=np.float64)
        return _SEQUENCE_SAMPLERS[self._pattern](n, float)

    def sample(self, n: int, function: Callable[[float], Any]) -> list[Any] | np.ndarray:
        """Evaluate function at this sampler's parameter values for step count n.

        Args:
            n: Number of subdivisions of [0, 1]. Values below the pattern's
                minimum produce an empty result.
            function: Evaluator called once per parameter value, in
                ascending order. Its exceptions propagate unchanged.

        Returns:
            A list for the sequence container, an ndarray for the array container.
        """
        logger.debug(
            "Sampling %s (n=%d, container=%s, count=%d)",
            self._pattern.value,
            n,
            self._container.value,
            self.count(n),
        )
        if self._container is OutputContainer.ARRAY:
            return _ARRAY_SAMPLERS[self._pattern](n, function, dtype=self._dtype)
        return _SEQUENCE_SAMPLERS[self._pattern](n, function)

    __call__ = sample

    def __repr__(self) -> str:
        return (
            f"Sampler(pattern={self._pattern.value!r}, container={self._container.value!r}, "
            f"dtype={self._dtype.name!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sampler):
            return NotImplemented
        return (self._pattern, self._container, self._dtype) == (
            other._pattern,
            other._container,
            other._dtype,
        )

    def __hash__(self) -> int:
        return hash((self._pattern, self._container, self._dtype))
