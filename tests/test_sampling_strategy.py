"""Tests for the distribution-sensitive sampling strategies."""

import pytest

from splsample.config import StrategyParameters
from splsample.sampling import (
    ConfigurationError,
    DistributionAwareSampling,
    DistributionPreservingSampling,
    ExhaustiveEnumerator,
    ManhattanDistance,
    NamedRegistry,
    SamplingResult,
    ShortfallWarning,
    default_metrics,
)

from tests.fixtures.model_builders import (
    CountingEnumerator,
    FixedTWiseOracle,
    ModelBuilder,
)


def aware(model, enumerator=None, oracle=None, **params):
    return DistributionAwareSampling(
        model=model,
        enumerator=enumerator or ExhaustiveEnumerator(),
        parameters=StrategyParameters.from_mapping(params),
        t_wise_oracle=oracle,
    )


class TestCheckConfiguration:
    """Test validation before any sampling work."""

    def test_defaults_resolve(self, small_model):
        strategy = aware(small_model)
        strategy.check_configuration()

        assert isinstance(strategy.metric, ManhattanDistance)
        assert strategy.distribution.name() == "uniform"
        assert strategy.random_seed == 0
        assert [o.name for o in strategy.options_to_consider] == [
            "root",
            "a",
            "b",
            "level",
        ]

    def test_names_are_case_insensitive(self, small_model):
        strategy = aware(small_model, **{"distance-metric": "MANHATTAN", "distribution": "Uniform"})
        strategy.check_configuration()

        assert strategy.metric.name() == "manhattan"

    def test_unknown_metric(self, small_model):
        strategy = aware(small_model, **{"distance-metric": "euclidean"})

        with pytest.raises(ConfigurationError) as exc_info:
            strategy.check_configuration()
        assert "euclidean" in str(exc_info.value)

    def test_unknown_distribution(self, small_model):
        strategy = aware(small_model, distribution="zipf")

        with pytest.raises(ConfigurationError) as exc_info:
            strategy.check_configuration()
        assert "zipf" in str(exc_info.value)

    def test_only_numeric(self, small_model):
        strategy = aware(small_model, onlyNumeric="TRUE")
        strategy.check_configuration()

        assert [o.name for o in strategy.options_to_consider] == ["level"]

    def test_only_binary(self, small_model):
        strategy = aware(small_model, onlyBinary="true")
        strategy.check_configuration()

        assert [o.name for o in strategy.options_to_consider] == ["root", "a", "b"]

    def test_non_true_values_are_false(self, small_model):
        strategy = aware(small_model, onlyBinary="yes", onlyNumeric="1")
        strategy.check_configuration()

        assert len(strategy.options_to_consider) == 4

    def test_only_numeric_and_only_binary_conflict(self, small_model):
        strategy = aware(small_model, onlyNumeric="true", onlyBinary="true")

        with pytest.raises(ConfigurationError) as exc_info:
            strategy.check_configuration()
        assert "can not be active at the same time" in str(exc_info.value)

    def test_seed_must_be_integer(self, small_model):
        strategy = aware(small_model, seed="abc")

        with pytest.raises(ConfigurationError):
            strategy.check_configuration()

    def test_negative_seed_rejected_before_enumeration(self, small_model):
        enumerator = CountingEnumerator(ExhaustiveEnumerator())
        strategy = aware(small_model, enumerator=enumerator, numConfigs="3", seed="-1")

        with pytest.raises(ConfigurationError) as exc_info:
            strategy.compute_sampling_strategy()
        assert "negative" in str(exc_info.value)
        assert enumerator.calls == 0

    def test_explicit_empty_registry_is_kept(self, small_model):
        strategy = DistributionAwareSampling(
            model=small_model,
            enumerator=ExhaustiveEnumerator(),
            metrics=NamedRegistry([]),
        )

        assert len(strategy.metrics) == 0
        with pytest.raises(ConfigurationError) as exc_info:
            strategy.check_configuration()
        assert "manhattan" in str(exc_info.value)

    def test_explicit_metric_registry(self, small_model):
        class Doubled(ManhattanDistance):
            def name(self):
                return "doubled"

        strategy = DistributionAwareSampling(
            model=small_model,
            enumerator=ExhaustiveEnumerator(),
            parameters=StrategyParameters.from_mapping({"distance-metric": "doubled"}),
            metrics=default_metrics().extended(Doubled()),
        )
        strategy.check_configuration()

        assert isinstance(strategy.metric, Doubled)


class TestResolveSampleCount:
    """Test literal and t-wise sample sizes."""

    def test_literal(self, small_model):
        assert aware(small_model, numConfigs=" 17 ").resolve_sample_count() == 17

    def test_t_wise(self, small_model):
        oracle = FixedTWiseOracle(9)
        strategy = aware(small_model, oracle=oracle, numConfigs="asTW3")

        assert strategy.resolve_sample_count() == 9
        assert oracle.calls == [3]

    def test_default_is_pairwise(self, small_model, t_wise_oracle):
        strategy = aware(small_model, oracle=t_wise_oracle)

        assert strategy.resolve_sample_count() == 6
        assert t_wise_oracle.calls == [2]

    @pytest.mark.parametrize("value", ["asOW", "many", "asTW", "asTWx", "asTW0", "-3", "2.5"])
    def test_unsupported_forms(self, small_model, t_wise_oracle, value):
        strategy = aware(small_model, oracle=t_wise_oracle, numConfigs=value)

        with pytest.raises(ConfigurationError):
            strategy.resolve_sample_count()
        assert t_wise_oracle.calls == []

    def test_t_wise_without_oracle(self, small_model):
        with pytest.raises(ConfigurationError) as exc_info:
            aware(small_model, numConfigs="asTW2").resolve_sample_count()
        assert "oracle" in str(exc_info.value)


class TestComputeSamplingStrategy:
    """Test complete sampling runs."""

    def test_literal_count(self, small_model):
        result = aware(small_model, numConfigs="5", seed="4").compute_sampling_strategy()

        assert isinstance(result, SamplingResult)
        assert len(result.configurations) == 5
        assert result.requested == 5
        assert result.is_complete
        assert result.shortfall is None
        assert result.buckets == [1.0, 1.5, 2.0, 2.5, 3.0, 3.5, 4.0]
        assert sum(result.target_table.values()) == pytest.approx(1.0, abs=1e-6)

    def test_t_wise_count(self, small_model, t_wise_oracle):
        result = aware(small_model, oracle=t_wise_oracle).compute_sampling_strategy()
        assert len(result.configurations) == 6

    def test_no_duplicates(self, binary_model):
        result = aware(binary_model, numConfigs="12", seed="8").compute_sampling_strategy()

        assert len({id(c) for c in result.configurations}) == 12
        assert len(set(result.configurations)) == 12

    def test_selection_exposed_on_strategy(self, small_model):
        strategy = aware(small_model, numConfigs="4")
        result = strategy.compute_sampling_strategy()

        assert strategy.selected_configurations == result.configurations

    def test_same_parameters_same_sample(self, small_model):
        first = aware(small_model, numConfigs="7", seed="21").compute_sampling_strategy()
        second = aware(small_model, numConfigs="7", seed="21").compute_sampling_strategy()

        assert first.configurations == second.configurations

    def test_different_seed_different_sample(self, binary_model):
        first = aware(binary_model, numConfigs="8", seed="1").compute_sampling_strategy()
        second = aware(binary_model, numConfigs="8", seed="2").compute_sampling_strategy()

        assert first.configurations != second.configurations

    def test_count_larger_than_population(self, small_model):
        result = aware(small_model, numConfigs="50").compute_sampling_strategy()

        assert len(result.configurations) == 12
        assert not result.is_complete
        assert isinstance(result.shortfall, ShortfallWarning)
        assert result.shortfall.requested == 50
        assert result.shortfall.sampled == 12
        assert result.metadata["population_size"] == 12

    def test_sampled_distances_are_known_buckets(self, binary_model, metric):
        result = aware(binary_model, numConfigs="5", seed="3").compute_sampling_strategy()

        distances = sorted(
            metric.distance_of_configuration(c, binary_model.options)
            for c in result.configurations
        )
        assert len(result.buckets) == 5
        assert set(distances) <= set(result.buckets)

    def test_only_numeric_run(self, small_model):
        result = aware(small_model, numConfigs="3", onlyNumeric="true").compute_sampling_strategy()

        assert result.buckets == [0.0, 0.5, 1.0]
        assert all(not c.selected_options for c in result.configurations)
        assert sorted(c.value_of("level") for c in result.configurations) == [0, 1, 2]

    def test_configuration_error_before_enumeration(self, small_model, monkeypatch):
        enumerator = CountingEnumerator(ExhaustiveEnumerator())

        def fail(*args, **kwargs):
            raise AssertionError("buckets must not be computed")

        monkeypatch.setattr("splsample.sampling.base.compute_buckets", fail)
        strategy = aware(
            small_model, enumerator=enumerator, onlyNumeric="true", onlyBinary="true"
        )

        with pytest.raises(ConfigurationError):
            strategy.compute_sampling_strategy()
        assert enumerator.calls == 0
        assert strategy.selected_configurations == []

    def test_metadata(self, small_model):
        result = aware(small_model, numConfigs="3", seed="5").compute_sampling_strategy()

        assert result.metadata["strategy"] == "DistributionAwareSampling"
        assert result.metadata["distance_metric"] == "manhattan"
        assert result.metadata["distribution"] == "uniform"
        assert result.metadata["random_seed"] == 5
        assert result.metadata["n_buckets"] == 7
        assert result.metadata["draws"] >= 3

    def test_set_sampling_parameters(self, small_model):
        strategy = aware(small_model)
        strategy.set_sampling_parameters({"numConfigs": "2", "seed": "6"})

        assert strategy.parameters.num_configs == "2"
        assert strategy.parameters.distribution == "uniform"
        assert len(strategy.compute_sampling_strategy().configurations) == 2

    def test_set_sampling_parameters_rejects_unknown_key(self, small_model):
        with pytest.raises(ConfigurationError):
            aware(small_model).set_sampling_parameters({"samples": "2"})

    def test_rerun_starts_from_empty_selection(self, small_model):
        strategy = aware(small_model, numConfigs="4")
        strategy.compute_sampling_strategy()
        result = strategy.compute_sampling_strategy()

        assert len(result.configurations) == 4


class TestDistributionPreservingSampling:
    """Test sampling that mirrors the population's distances."""

    def test_target_table_follows_population(self, binary_model):
        strategy = DistributionPreservingSampling(
            model=binary_model,
            enumerator=ExhaustiveEnumerator(),
            parameters=StrategyParameters.from_mapping({"numConfigs": "4"}),
        )
        result = strategy.compute_sampling_strategy()

        assert result.target_table == {
            1.0: 1 / 16,
            2.0: 4 / 16,
            3.0: 6 / 16,
            4.0: 4 / 16,
            5.0: 1 / 16,
        }
        assert len(result.configurations) == 4

    def test_distribution_still_validated(self, binary_model):
        strategy = DistributionPreservingSampling(
            model=binary_model,
            enumerator=ExhaustiveEnumerator(),
            parameters=StrategyParameters.from_mapping(
                {"numConfigs": "4", "distribution": "bogus"}
            ),
        )

        with pytest.raises(ConfigurationError):
            strategy.compute_sampling_strategy()

    def test_count_larger_than_population(self, binary_model):
        strategy = DistributionPreservingSampling(
            model=binary_model,
            enumerator=ExhaustiveEnumerator(),
            parameters=StrategyParameters.from_mapping({"numConfigs": "40"}),
        )
        result = strategy.compute_sampling_strategy()

        assert len(result.configurations) == 16
        assert len(set(result.configurations)) == 16
        assert result.shortfall.requested == 40
        assert result.shortfall.sampled == 16

    def test_full_population_request(self, binary_model):
        strategy = DistributionPreservingSampling(
            model=binary_model,
            enumerator=ExhaustiveEnumerator(),
            parameters=StrategyParameters.from_mapping({"numConfigs": "16", "seed": "3"}),
        )
        result = strategy.compute_sampling_strategy()

        assert len(set(result.configurations)) == 16
        assert result.is_complete


class TestNormalDistributionRuns:
    """Test complete runs with bell-shaped target tables."""

    def test_count_larger_than_population(self, binary_model):
        result = aware(
            binary_model, numConfigs="40", distribution="normal", seed="2"
        ).compute_sampling_strategy()

        assert len(set(result.configurations)) == 16
        assert isinstance(result.shortfall, ShortfallWarning)
        assert result.shortfall.sampled == 16
        assert result.target_table[1.0] < result.target_table[3.0]

    def test_sample_favours_middle_buckets(self, metric):
        builder = ModelBuilder("wide")
        for i in range(8):
            builder.binary(f"f{i}")
        model = builder.build()

        result = aware(
            model, numConfigs="60", distribution="normal", seed="4"
        ).compute_sampling_strategy()

        distances = [
            metric.distance_of_configuration(c, model.options)
            for c in result.configurations
        ]
        assert len(distances) == 60
        middle = sum(1 for d in distances if 3.0 <= d <= 5.0)
        edges = sum(1 for d in distances if d <= 1.0 or d >= 7.0)
        assert middle > edges
