"""Factory functions for creating sampling strategies."""

from typing import Any, Mapping, Optional, Union

from ..config import StrategyParameters, VariabilityModel
from .base import DistributionSensitiveSampling
from .enumeration import ConfigurationEnumerator, TWiseCountOracle
from .strategies import DistributionAwareSampling, DistributionPreservingSampling

STRATEGIES = {
    "distribution-aware": DistributionAwareSampling,
    "distribution-preserving": DistributionPreservingSampling,
}


def create_sampling_strategy(
    model: VariabilityModel,
    enumerator: ConfigurationEnumerator,
    parameters: Optional[Union[StrategyParameters, Mapping[str, Any]]] = None,
    method: str = "distribution-aware",
    t_wise_oracle: Optional[TWiseCountOracle] = None,
    random_seed: Optional[int] = None,
) -> DistributionSensitiveSampling:
    """Create a sampling strategy based on configuration.

    Args:
        model: Variability model to sample from
        enumerator: Provider of the full valid population
        parameters: Strategy parameters or a mapping keyed by the wire names;
            defaults if None
        method: ``distribution-aware`` or ``distribution-preserving``
        t_wise_oracle: Sizes t-wise samples, needed for ``asTW<t>`` counts
        random_seed: Overrides the ``seed`` parameter if given

    Returns:
        Configured strategy instance

    Raises:
        ValueError: If the method is unknown
        ConfigurationError: If the parameter mapping has unrecognized keys
    """
    if parameters is None:
        parameters = StrategyParameters()
    elif not isinstance(parameters, StrategyParameters):
        parameters = StrategyParameters.from_mapping(parameters)

    if random_seed is not None:
        parameters = parameters.with_overrides(seed=random_seed)

    strategy_class = STRATEGIES.get(method.strip().lower())
    if strategy_class is None:
        raise ValueError(
            f"Unsupported sampling method: {method}. "
            f"Suggestion: Use one of {list(STRATEGIES)}."
        )

    return strategy_class(
        model=model,
        enumerator=enumerator,
        parameters=parameters,
        t_wise_oracle=t_wise_oracle,
    )
