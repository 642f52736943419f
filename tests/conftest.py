"""Shared pytest fixtures and configuration."""

from pytest import fixture

from splsample.config import StrategyParameters
from splsample.sampling import ExhaustiveEnumerator, ManhattanDistance

from tests.fixtures.model_builders import FixedTWiseOracle, ModelBuilder


@fixture
def model_builder():
    """Provide a ModelBuilder instance for model creation."""
    return ModelBuilder()


@fixture
def metric():
    """Provide the Manhattan distance metric."""
    return ManhattanDistance()


@fixture
def enumerator():
    """Provide an unconstrained exhaustive enumerator."""
    return ExhaustiveEnumerator()


@fixture
def small_model():
    """Mandatory root with two optional features and one numeric option.

    Manhattan distances range from 1 (root only, level 0) to 4 (everything
    selected, level 2) in steps of 0.5.
    """
    return (
        ModelBuilder("small")
        .root("root")
        .binary("a", parent="root")
        .binary("b", parent="root")
        .numeric("level", 0, 2, parent="root")
        .build()
    )


@fixture
def binary_model():
    """Mandatory root with four optional features, 16 configurations."""
    builder = ModelBuilder("binary").root("root")
    for name in ("f1", "f2", "f3", "f4"):
        builder.binary(name, parent="root")
    return builder.build()


@fixture
def literal_parameters():
    """Parameters with a literal sample size of 5."""
    return StrategyParameters.from_mapping({"numConfigs": "5", "seed": "1"})


@fixture
def t_wise_oracle():
    """Oracle claiming that a t-wise sample has 6 configurations."""
    return FixedTWiseOracle(6)
