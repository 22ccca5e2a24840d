"""Apply flat-sample primitives across a grouped sample.

A grouped sample is any mapping from a group key (scalar or tuple) to a
sequence of numbers. These combinators read it without mutation and return
freshly built dictionaries, so each statistic is written once for a flat
sample and reused for every grouping shape.
"""

from __future__ import annotations

from itertools import combinations
from typing import Any, Callable, Dict, Hashable, Mapping, Sequence, Tuple, TypeVar

from statcore.errors import InsufficientSampleError

R = TypeVar("R")

GroupedSample = Mapping[Hashable, Sequence[float]]


def map_groups(
    grouped: GroupedSample, fn: Callable[[Sequence[float]], R]
) -> Dict[Hashable, R]:
    """Return ``{key: fn(sample)}`` in the input key order."""
    return {key: fn(sample) for key, sample in grouped.items()}


def pairwise_comparisons(
    grouped: GroupedSample,
    test_fn: Callable[[Sequence[float], Sequence[float]], R],
) -> Dict[Tuple[Any, Any], R]:
    """Apply ``test_fn`` to every unordered pair of groups.

    Keys are ``(key_a, key_b)`` with ``key_a`` appearing before ``key_b`` in
    the input order. Each comparison is independent of the others.

    Raises:
        InsufficientSampleError: If fewer than two groups are supplied.
    """
    keys = list(grouped.keys())
    if len(keys) < 2:
        raise InsufficientSampleError(
            f"Pairwise comparisons need at least 2 groups, got {len(keys)}."
        )
    return {
        (ka, kb): test_fn(grouped[ka], grouped[kb]) for ka, kb in combinations(keys, 2)
    }
