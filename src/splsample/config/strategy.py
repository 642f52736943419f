"""Strategy parameter models for distribution-sensitive sampling."""

from typing import Any, Dict, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

DISTANCE_METRIC = "distance-metric"
DISTRIBUTION = "distribution"
NUM_CONFIGS = "numConfigs"
ONLY_NUMERIC = "onlyNumeric"
ONLY_BINARY = "onlyBinary"
SEED = "seed"
AS_TW = "asTW"

RECOGNIZED_KEYS = (
    DISTANCE_METRIC,
    DISTRIBUTION,
    NUM_CONFIGS,
    ONLY_NUMERIC,
    ONLY_BINARY,
    SEED,
)


class StrategyParameters(BaseModel):
    """String-valued parameters of a sampling run.

    Field names are Python identifiers; the aliases are the keys used when the
    parameters are given as a plain mapping (``{"distance-metric": "manhattan"}``).
    Values stay strings here, their interpretation happens when a strategy
    checks its configuration.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    distance_metric: str = Field(
        default="manhattan",
        alias=DISTANCE_METRIC,
        description="Name of the distance metric, matched case-insensitively",
    )
    distribution: str = Field(
        default="uniform",
        alias=DISTRIBUTION,
        description="Name of the target distribution, matched case-insensitively",
    )
    num_configs: str = Field(
        default="asTW2",
        alias=NUM_CONFIGS,
        description="Literal sample size or asTW<t> for the size of a t-wise sample",
    )
    only_numeric: str = Field(
        default="false",
        alias=ONLY_NUMERIC,
        description="Restrict the considered options to numeric options",
    )
    only_binary: str = Field(
        default="false",
        alias=ONLY_BINARY,
        description="Restrict the considered options to binary options",
    )
    seed: str = Field(default="0", alias=SEED, description="Random seed")

    @field_validator("*", mode="before")
    @classmethod
    def coerce_to_string(cls, v: Any) -> Any:
        # YAML and keyword callers hand over bools and ints
        if isinstance(v, bool):
            return "true" if v else "false"
        if isinstance(v, (int, float)):
            return str(v)
        return v

    @classmethod
    def from_mapping(cls, parameters: Mapping[str, Any]) -> "StrategyParameters":
        """Build parameters from a ``{key: value}`` mapping using the wire keys.

        Raises:
            ConfigurationError: If the mapping contains an unrecognized key
        """
        from ..sampling.base import ConfigurationError

        unknown = [k for k in parameters if k not in RECOGNIZED_KEYS]
        if unknown:
            raise ConfigurationError(
                f"Unrecognized strategy parameter(s): {sorted(unknown)}. "
                f"Suggestion: Use one of {list(RECOGNIZED_KEYS)}."
            )
        return cls.model_validate(dict(parameters))

    def to_mapping(self) -> Dict[str, str]:
        """Return the parameters keyed by their wire names."""
        return self.model_dump(by_alias=True)

    def with_overrides(self, **overrides: Any) -> "StrategyParameters":
        """Copy of these parameters with some values replaced.

        Overrides may be given by field name (``only_binary=True``).
        """
        merged = self.model_dump()
        merged.update(overrides)
        return type(self).model_validate(merged)
