"""Unit-interval sampling.

``sequence`` and ``array`` expose the same five patterns (steps, leading,
trailing, in_between, midpoints) returning a list or a numpy array.
"""

from unitsteps.core.sampling import array, sequence
from unitsteps.core.sampling.patterns import (
    PATTERNS,
    PatternSpec,
    SamplePattern,
    UnknownPatternError,
    get_pattern,
    parameter_values,
    resolve_pattern,
    sample_count,
)
from unitsteps.core.sampling.sampler import (
    OutputContainer,
    Sampler,
    resolve_container,
    sample,
    sample_array,
)
from unitsteps.core.sampling.sequence import in_between, leading, midpoints, steps, trailing

__all__ = [
    # Variants
    "array",
    "sequence",
    # Sequence entry points
    "steps",
    "leading",
    "trailing",
    "in_between",
    "midpoints",
    # Pattern table
    "PATTERNS",
    "PatternSpec",
    "SamplePattern",
    "UnknownPatternError",
    "get_pattern",
    "parameter_values",
    "resolve_pattern",
    "sample_count",
    # Facade
    "OutputContainer",
    "Sampler",
    "resolve_container",
    "sample",
    "sample_array",
]
