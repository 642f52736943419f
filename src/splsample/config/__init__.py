"""Configuration management for splsample."""

from .loader import load_strategy_parameters
from .model import VariabilityModel
from .options import BinaryOption, ConfigurationOption, NumericOption, OptionConfigType
from .strategy import (
    AS_TW,
    DISTANCE_METRIC,
    DISTRIBUTION,
    NUM_CONFIGS,
    ONLY_BINARY,
    ONLY_NUMERIC,
    RECOGNIZED_KEYS,
    SEED,
    StrategyParameters,
)

__all__ = [
    # Options
    "ConfigurationOption",
    "BinaryOption",
    "NumericOption",
    "OptionConfigType",
    # Model
    "VariabilityModel",
    # Strategy parameters
    "StrategyParameters",
    "RECOGNIZED_KEYS",
    "DISTANCE_METRIC",
    "DISTRIBUTION",
    "NUM_CONFIGS",
    "ONLY_NUMERIC",
    "ONLY_BINARY",
    "SEED",
    "AS_TW",
    # Loaders
    "load_strategy_parameters",
]
