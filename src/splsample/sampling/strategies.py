"""Distribution-aware and distribution-preserving sampling strategies."""

from typing import Dict, List

from .base import DistributionSensitiveSampling
from .configuration import Configuration
from .distributions import PopulationDistribution


class DistributionAwareSampling(DistributionSensitiveSampling):
    """Distances of the sample follow the configured target distribution.

    With the default uniform distribution every non-empty bucket is equally
    likely to be drawn from, regardless of how many configurations it holds.
    """

    def create_target_table(
        self, population: Dict[float, List[Configuration]], buckets: List[float]
    ) -> Dict[float, float]:
        return self.distribution.build_target_table(population, buckets)


class DistributionPreservingSampling(DistributionSensitiveSampling):
    """Distances of the sample follow the distances of the whole population.

    The ``distribution`` parameter is still validated but does not shape the
    target table.
    """

    def create_target_table(
        self, population: Dict[float, List[Configuration]], buckets: List[float]
    ) -> Dict[float, float]:
        return PopulationDistribution().build_target_table(population, buckets)
