"""Distribution-sensitive sampling of configurations."""

from .base import ConfigurationError, DistributionSensitiveSampling, SamplingResult
from .buckets import cartesian_sum, compute_buckets, local_value_set
from .configuration import ROUND_FACTOR, Configuration, round_distance
from .distributions import (
    NormalDistribution,
    PopulationDistribution,
    TargetDistribution,
    UniformDistribution,
)
from .enumeration import ConfigurationEnumerator, ExhaustiveEnumerator, TWiseCountOracle
from .factory import create_sampling_strategy
from .metrics import DistanceMetric, ManhattanDistance
from .partition import has_samples, partition_population
from .registry import NamedRegistry, default_distributions, default_metrics
from .strategies import DistributionAwareSampling, DistributionPreservingSampling
from .weighted import (
    ShortfallWarning,
    WeightedSampler,
    has_reachable_samples,
    select_bucket,
)

__all__ = [
    # Strategies
    "DistributionSensitiveSampling",
    "DistributionAwareSampling",
    "DistributionPreservingSampling",
    "SamplingResult",
    "create_sampling_strategy",
    # Errors
    "ConfigurationError",
    "ShortfallWarning",
    # Configurations and distances
    "Configuration",
    "ROUND_FACTOR",
    "round_distance",
    "DistanceMetric",
    "ManhattanDistance",
    "TargetDistribution",
    "UniformDistribution",
    "NormalDistribution",
    "PopulationDistribution",
    "NamedRegistry",
    "default_metrics",
    "default_distributions",
    # Engine steps
    "local_value_set",
    "cartesian_sum",
    "compute_buckets",
    "partition_population",
    "has_reachable_samples",
    "has_samples",
    "select_bucket",
    "WeightedSampler",
    # Collaborators
    "ConfigurationEnumerator",
    "TWiseCountOracle",
    "ExhaustiveEnumerator",
]
