"""Partitioning of the configuration population into distance buckets."""

import bisect
import logging
from typing import Dict, Iterable, List, Mapping, Sequence

from .configuration import Configuration, round_distance
from .metrics import DistanceMetric, Option

logger = logging.getLogger(__name__)


def partition_population(
    configurations: Iterable[Configuration],
    buckets: List[float],
    metric: DistanceMetric,
    options: Sequence[Option],
) -> Dict[float, List[Configuration]]:
    """Assign every configuration to the bucket of its distance.

    Buckets that end up empty are removed from the result and from
    ``buckets`` itself, which is modified in place. A configuration whose
    distance is not among ``buckets`` gets a new bucket inserted in sorted
    position.

    Args:
        configurations: The whole valid population
        buckets: Sorted bucket distances; pruned in place
        metric: Metric used for the distances
        options: The option subset under consideration

    Returns:
        Mapping from each non-empty bucket to its configurations, ordered
        like ``buckets``
    """
    population: Dict[float, List[Configuration]] = {b: [] for b in buckets}

    total = 0
    for configuration in configurations:
        distance = round_distance(
            metric.distance_of_configuration(configuration, options)
        )
        if distance not in population:
            logger.warning(
                f"Distance {distance} of {configuration!r} is not among the "
                f"computed buckets; adding it"
            )
            bisect.insort(buckets, distance)
            population[distance] = []
        population[distance].append(configuration)
        total += 1

    empty = [b for b in buckets if not population[b]]
    for bucket in empty:
        buckets.remove(bucket)
        del population[bucket]

    logger.info(
        f"Partitioned {total} configuration(s) into {len(buckets)} bucket(s), "
        f"{len(empty)} empty bucket(s) removed"
    )
    return {b: population[b] for b in buckets}


def has_samples(population: Mapping[float, List[Configuration]]) -> bool:
    """True if any bucket still holds a configuration."""
    return any(population[b] for b in population)
