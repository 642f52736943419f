"""Weighted sampling without replacement from distance buckets."""

import logging
from typing import Dict, List, Mapping, Optional, Sequence

import numpy as np

from .configuration import Configuration
from .partition import has_samples

logger = logging.getLogger(__name__)


class ShortfallWarning(UserWarning):
    """Fewer configurations were sampled than requested.

    Not raised by the sampler; an instance is attached to the sampling result
    so callers can decide whether the partial sample is acceptable.
    """

    def __init__(self, requested: int, sampled: int) -> None:
        self.requested = requested
        self.sampled = sampled
        super().__init__(
            f"Sampled only {sampled} configurations as there are no more "
            f"configurations (requested {requested})."
        )


def select_bucket(
    u: float, ordered_buckets: Sequence[float], target_table: Mapping[float, float]
) -> float:
    """Pick the bucket for the uniform draw ``u`` by inverse CDF.

    Bucket ``i`` owns the interval ``[p_0 + ... + p_(i-1), p_0 + ... + p_i)``,
    so a bucket without mass is never picked. When rounding leaves the total
    mass slightly below ``u``, the last bucket with mass is returned.

    Args:
        u: Uniform draw in [0, 1)
        ordered_buckets: Non-empty, ascending bucket list
        target_table: Probability of every bucket

    Returns:
        The selected bucket
    """
    cumulative = 0.0
    fallback = ordered_buckets[-1]
    for bucket in ordered_buckets:
        mass = target_table.get(bucket, 0.0)
        if mass <= 0:
            continue
        cumulative += mass
        fallback = bucket
        if u < cumulative:
            return bucket
    return fallback


def has_reachable_samples(
    population: Mapping[float, List[Configuration]],
    target_table: Mapping[float, float],
) -> bool:
    """True if a bucket with mass still holds a configuration."""
    return any(
        configs and target_table.get(bucket, 0.0) > 0
        for bucket, configs in population.items()
    )


class WeightedSampler:
    """Draws configurations bucket by bucket according to a target table.

    The bucket of each draw is chosen from the fixed target table; the
    configuration inside the bucket is chosen uniformly. Drawn configurations
    are removed from their bucket. A draw that hits an exhausted bucket is
    discarded and repeated; the table is never renormalized. Sampling stops
    early when only buckets without mass still hold configurations.
    """

    def __init__(self, random_seed: int = 0) -> None:
        """Initialize the sampler.

        Args:
            random_seed: Seed of the generator owned by this sampler
        """
        self.random_seed = random_seed
        self.rng = np.random.default_rng(random_seed)
        self.draws = 0
        self.discarded_draws = 0
        self.shortfall: Optional[ShortfallWarning] = None

    def sample(
        self,
        population: Dict[float, List[Configuration]],
        ordered_buckets: Sequence[float],
        target_table: Mapping[float, float],
        count: int,
        selected: Optional[List[Configuration]] = None,
    ) -> List[Configuration]:
        """Select up to ``count`` configurations.

        Args:
            population: Remaining configurations per bucket; drawn
                configurations are removed from it
            ordered_buckets: Ascending buckets, the keys of ``population``
            target_table: Probability of every bucket
            count: Number of configurations wanted
            selected: List to append the selection to, a new one if None

        Returns:
            The selection list
        """
        if selected is None:
            selected = []

        while len(selected) < count and has_samples(population):
            if not has_reachable_samples(population, target_table):
                logger.warning(
                    "Remaining configurations lie in buckets without target mass"
                )
                break

            self.draws += 1
            u = self.rng.random()
            bucket = select_bucket(u, ordered_buckets, target_table)

            remaining = population[bucket]
            if not remaining:
                self.discarded_draws += 1
                continue

            index = int(self.rng.integers(0, len(remaining)))
            selected.append(remaining.pop(index))

        logger.debug(
            f"{self.draws} draw(s), {self.discarded_draws} hit an exhausted bucket"
        )

        if len(selected) < count:
            self.shortfall = ShortfallWarning(requested=count, sampled=len(selected))
            logger.info(
                f"Sampled only {len(selected)} configurations as there are no "
                f"more configurations."
            )

        return selected
