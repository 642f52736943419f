"""Base class for distribution-sensitive sampling strategies."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..config import (
    AS_TW,
    ONLY_BINARY,
    ONLY_NUMERIC,
    StrategyParameters,
    VariabilityModel,
)
from .buckets import compute_buckets
from .configuration import Configuration
from .distributions import TargetDistribution
from .enumeration import ConfigurationEnumerator, TWiseCountOracle
from .metrics import DistanceMetric, Option
from .partition import partition_population
from .registry import NamedRegistry, default_distributions, default_metrics
from .weighted import ShortfallWarning, WeightedSampler

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """Strategy parameters that cannot be used for a sampling run."""


class SamplingResult(BaseModel):
    """Result of a sampling run."""

    model_config = ConfigDict(arbitrary_types_allowed=True)
    configurations: List[Configuration]
    requested: int
    buckets: List[float] = Field(default_factory=list)
    target_table: Dict[float, float] = Field(default_factory=dict)
    shortfall: Optional[ShortfallWarning] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @property
    def is_complete(self) -> bool:
        """True if the requested number of configurations was sampled."""
        return self.shortfall is None


class DistributionSensitiveSampling(ABC):
    """Samples configurations so their distances follow a target distribution.

    A run computes the achievable distance buckets, sorts the whole valid
    population into them, builds a target probability per bucket and then
    draws configurations bucket by bucket. Subclasses decide how the target
    table is shaped.
    """

    def __init__(
        self,
        model: VariabilityModel,
        enumerator: ConfigurationEnumerator,
        parameters: Optional[StrategyParameters] = None,
        t_wise_oracle: Optional[TWiseCountOracle] = None,
        metrics: Optional[NamedRegistry[DistanceMetric]] = None,
        distributions: Optional[NamedRegistry[TargetDistribution]] = None,
    ) -> None:
        """Initialize the strategy.

        Args:
            model: Variability model to sample from
            enumerator: Provider of the full valid population
            parameters: Strategy parameters, defaults if None
            t_wise_oracle: Sizes t-wise samples, needed for ``asTW<t>`` counts
            metrics: Available distance metrics, the built-in ones if None
            distributions: Available target distributions, the built-in ones
                if None
        """
        self.model = model
        self.enumerator = enumerator
        self.parameters = StrategyParameters() if parameters is None else parameters
        self.t_wise_oracle = t_wise_oracle
        self.metrics = default_metrics() if metrics is None else metrics
        self.distributions = (
            default_distributions() if distributions is None else distributions
        )

        self.metric: Optional[DistanceMetric] = None
        self.distribution: Optional[TargetDistribution] = None
        self.options_to_consider: Optional[List[Option]] = None
        self.target_table: Dict[float, float] = {}
        self.random_seed = 0
        self.selected_configurations: List[Configuration] = []

    def set_sampling_parameters(self, parameters: Mapping[str, Any]) -> None:
        """Override some parameters using their wire keys.

        Raises:
            ConfigurationError: If a key is not recognized
        """
        merged = self.parameters.to_mapping()
        merged.update(parameters)
        self.parameters = StrategyParameters.from_mapping(merged)

    def check_configuration(self) -> None:
        """Resolve the metric, distribution, option subset and seed.

        Raises:
            ConfigurationError: If any parameter is unusable
        """
        params = self.parameters

        self.metric = self.metrics.get(params.distance_metric)
        if self.metric is None:
            raise ConfigurationError(
                f"The metric {params.distance_metric} is not supported. "
                f"Suggestion: Use one of {self.metrics.names()}."
            )

        self.distribution = self.distributions.get(params.distribution)
        if self.distribution is None:
            raise ConfigurationError(
                f"The distribution {params.distribution} is not supported. "
                f"Suggestion: Use one of {self.distributions.names()}."
            )

        only_numeric = params.only_numeric.strip().lower() == "true"
        only_binary = params.only_binary.strip().lower() == "true"
        if only_numeric and only_binary:
            raise ConfigurationError(
                f"The options {ONLY_BINARY} and {ONLY_NUMERIC} can not be "
                f"active at the same time."
            )

        if only_numeric:
            self.options_to_consider = list(self.model.numeric_options)
        elif only_binary:
            self.options_to_consider = list(self.model.binary_options)
        else:
            self.options_to_consider = [
                *self.model.binary_options,
                *self.model.numeric_options,
            ]

        try:
            self.random_seed = int(params.seed.strip())
        except ValueError:
            raise ConfigurationError(
                f"The seed '{params.seed}' is not an integer. "
                f"Suggestion: Use a whole number like 0 or 42."
            ) from None
        if self.random_seed < 0:
            raise ConfigurationError(
                f"The seed {self.random_seed} is negative. "
                f"Suggestion: Use a non-negative whole number like 0 or 42."
            )

    def resolve_sample_count(self) -> int:
        """Number of configurations to sample.

        Returns:
            The literal ``numConfigs`` value, or the size of a t-wise sample
            for ``asTW<t>``

        Raises:
            ConfigurationError: If ``numConfigs`` has an unsupported form or
                no t-wise oracle is available
        """
        value = self.parameters.num_configs.strip()

        try:
            count = int(value)
        except ValueError:
            pass
        else:
            if count < 0:
                raise ConfigurationError(
                    f"The number of configurations must not be negative, "
                    f"got {count}."
                )
            return count

        if not value.startswith(AS_TW):
            raise ConfigurationError(
                f"Unsupported number of configurations '{value}'. Only "
                f"{AS_TW}<t> is currently supported besides literal integers."
            )

        strength = value[len(AS_TW):].strip()
        if not strength.isdigit() or int(strength) < 1:
            raise ConfigurationError(
                f"'{value}' does not name a valid t-wise strength. "
                f"Suggestion: Use a positive integer such as {AS_TW}2."
            )
        if self.t_wise_oracle is None:
            raise ConfigurationError(
                f"'{value}' needs a t-wise oracle. Suggestion: Pass "
                f"t_wise_oracle or use a literal number of configurations."
            )

        count = self.t_wise_oracle.t_wise_covering_array_size(
            self.model, int(strength)
        )
        logger.info(f"Resolved {value} to {count} configuration(s)")
        return count

    def compute_buckets(self) -> List[float]:
        """Sorted distances achievable with the considered options."""
        return compute_buckets(self.options_to_consider, self.metric, self.model)

    def compute_distribution(
        self, buckets: List[float]
    ) -> Dict[float, List[Configuration]]:
        """Sort the whole valid population into ``buckets``.

        Empty buckets are removed from the result and from ``buckets``.
        """
        population = self.enumerator.generate_all_valid_configurations(
            self.model, self.options_to_consider
        )
        return partition_population(
            population, buckets, self.metric, self.options_to_consider
        )

    @abstractmethod
    def create_target_table(
        self, population: Dict[float, List[Configuration]], buckets: List[float]
    ) -> Dict[float, float]:
        """Probability of every non-empty bucket."""
        pass

    def sample_from_distribution(
        self,
        population: Dict[float, List[Configuration]],
        buckets: List[float],
        count: int,
    ) -> WeightedSampler:
        """Draw up to ``count`` configurations into the selection.

        Returns:
            The sampler used for the draw, holding draw statistics and the
            shortfall, if any
        """
        target_table = self.create_target_table(population, buckets)
        sampler = WeightedSampler(self.random_seed)
        sampler.sample(
            population, buckets, target_table, count, self.selected_configurations
        )
        self.target_table = target_table
        return sampler

    def compute_sampling_strategy(self) -> SamplingResult:
        """Run the whole sampling process.

        Returns:
            SamplingResult with the selected configurations

        Raises:
            ConfigurationError: If the parameters are unusable; nothing is
                sampled in that case
        """
        self.check_configuration()
        count = self.resolve_sample_count()

        buckets = self.compute_buckets()
        population = self.compute_distribution(buckets)
        population_size = sum(len(configs) for configs in population.values())

        self.selected_configurations = []
        sampler = self.sample_from_distribution(population, buckets, count)

        metadata = {
            "strategy": type(self).__name__,
            "distance_metric": self.metric.name(),
            "distribution": self.distribution.name(),
            "random_seed": self.random_seed,
            "n_options": len(self.options_to_consider),
            "n_buckets": len(buckets),
            "population_size": population_size,
            "draws": sampler.draws,
            "discarded_draws": sampler.discarded_draws,
        }
        logger.info(
            f"Sampled {len(self.selected_configurations)} of {count} requested "
            f"configuration(s) from {len(buckets)} bucket(s)"
        )

        return SamplingResult(
            configurations=self.selected_configurations,
            requested=count,
            buckets=buckets,
            target_table=self.target_table,
            shortfall=sampler.shortfall,
            metadata=metadata,
        )
