"""Computation of the achievable distance buckets of an option subset."""

import logging
from typing import List, Sequence

from ..config import NumericOption, VariabilityModel
from .configuration import round_distance
from .metrics import DistanceMetric, Option

logger = logging.getLogger(__name__)


def local_value_set(
    option: Option, metric: DistanceMetric, model: VariabilityModel
) -> List[float]:
    """Distances a single option can contribute.

    Args:
        option: The option
        metric: Metric computing the per-value distances
        model: Model the option belongs to, used to count its children

    Returns:
        The option's distinct contributions in domain order
    """
    if isinstance(option, NumericOption):
        distances: List[float] = []
        for value in option.all_values():
            distance = metric.distance_of_numeric_value(
                value, option.min_value, option.max_value
            )
            if distance not in distances:
                distances.append(distance)
        return distances

    # A mandatory option with children can never be deselected
    if model.is_mandatory_with_children(option):
        return [metric.distance_of_binary_value(1)]

    return [metric.distance_of_binary_value(0), metric.distance_of_binary_value(1)]


def cartesian_sum(value_sets: Sequence[Sequence[float]]) -> List[float]:
    """Distinct sums of one value picked from every set.

    Sets are combined pairwise from the last to the first; each rounded sum is
    kept only once, which bounds the growth when many options contribute the
    same distances. The number of distinct sums is still exponential in the
    number of multi-valued sets in the worst case.

    Args:
        value_sets: One sequence of distances per option

    Returns:
        Distinct rounded sums, unordered; ``[0.0]`` for no sets
    """
    if not value_sets:
        return [0.0]

    accumulated = [round_distance(v) for v in value_sets[-1]]
    for own_values in reversed(value_sets[:-1]):
        seen = set()
        combined = []
        for value in accumulated:
            for own_value in own_values:
                new_sum = round_distance(value + own_value)
                if new_sum not in seen:
                    seen.add(new_sum)
                    combined.append(new_sum)
        accumulated = combined

    return accumulated


def compute_buckets(
    options: Sequence[Option], metric: DistanceMetric, model: VariabilityModel
) -> List[float]:
    """All achievable configuration distances, sorted ascending.

    Args:
        options: The option subset under consideration
        metric: Metric used for the distances
        model: Model the options belong to

    Returns:
        Sorted, duplicate-free list of bucket distances
    """
    value_sets = [local_value_set(option, metric, model) for option in options]
    buckets = sorted(set(cartesian_sum(value_sets)))
    logger.debug(
        f"Computed {len(buckets)} bucket(s) from {len(value_sets)} option(s)"
    )
    return buckets
