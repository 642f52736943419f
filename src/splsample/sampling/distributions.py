"""Target distributions shaping the probability mass over distance buckets."""

from abc import ABC, abstractmethod
from typing import Dict, List, Mapping, Sequence

import numpy as np
from scipy import stats

from .configuration import Configuration

PopulationByBucket = Mapping[float, List[Configuration]]


class TargetDistribution(ABC):
    """Abstract base class for target distributions."""

    @abstractmethod
    def name(self) -> str:
        """Name used to select the distribution."""
        pass

    @abstractmethod
    def build_target_table(
        self,
        population_by_bucket: PopulationByBucket,
        ordered_buckets: Sequence[float],
    ) -> Dict[float, float]:
        """Assign a probability to every bucket.

        Args:
            population_by_bucket: Configurations of every non-empty bucket
            ordered_buckets: The buckets in ascending order

        Returns:
            Mapping from bucket to probability, in the order of
            ``ordered_buckets``; the probabilities sum to 1
        """
        pass


class UniformDistribution(TargetDistribution):
    """Every bucket receives the same probability mass."""

    def name(self) -> str:
        return "uniform"

    def build_target_table(
        self,
        population_by_bucket: PopulationByBucket,
        ordered_buckets: Sequence[float],
    ) -> Dict[float, float]:
        if not ordered_buckets:
            return {}
        probability = 1.0 / len(ordered_buckets)
        return {bucket: probability for bucket in ordered_buckets}


class PopulationDistribution(TargetDistribution):
    """Each bucket receives mass proportional to its population.

    Sampling with this table preserves the distance distribution of the
    whole population.
    """

    def name(self) -> str:
        return "population"

    def build_target_table(
        self,
        population_by_bucket: PopulationByBucket,
        ordered_buckets: Sequence[float],
    ) -> Dict[float, float]:
        total = sum(len(population_by_bucket[b]) for b in ordered_buckets)
        if total == 0:
            return {}
        return {b: len(population_by_bucket[b]) / total for b in ordered_buckets}


class NormalDistribution(TargetDistribution):
    """Bell-shaped mass centred on the middle of the distance range.

    The density of a normal distribution with mean at the midpoint of the
    smallest and largest bucket and a standard deviation of one sixth of the
    range is evaluated at every bucket and normalized. A single bucket, or
    buckets without spread, fall back to uniform mass.
    """

    def name(self) -> str:
        return "normal"

    def build_target_table(
        self,
        population_by_bucket: PopulationByBucket,
        ordered_buckets: Sequence[float],
    ) -> Dict[float, float]:
        if not ordered_buckets:
            return {}

        distances = np.asarray(ordered_buckets, dtype=float)
        spread = distances.max() - distances.min()
        if spread == 0:
            return UniformDistribution().build_target_table(
                population_by_bucket, ordered_buckets
            )

        centre = distances.min() + spread / 2
        density = stats.norm.pdf(distances, loc=centre, scale=spread / 6)
        weights = density / density.sum()
        return {b: float(w) for b, w in zip(ordered_buckets, weights)}
