"""Demo script showing distribution-aware and distribution-preserving sampling."""

import logging
from collections import Counter

from splsample.config import BinaryOption, NumericOption, VariabilityModel
from splsample.sampling import (
    ExhaustiveEnumerator,
    ManhattanDistance,
    create_sampling_strategy,
)


def build_model() -> VariabilityModel:
    """A compressor with optional features and a numeric compression level."""
    return VariabilityModel(
        name="compressor",
        options=[
            BinaryOption(name="root", optional=False),
            BinaryOption(name="encryption", parent="root"),
            BinaryOption(name="checksum", parent="root"),
            BinaryOption(name="dictionary", parent="root"),
            BinaryOption(name="streaming", parent="root"),
            NumericOption(name="level", parent="root", min_value=1, max_value=9),
            NumericOption(
                name="threads",
                parent="root",
                min_value=1,
                max_value=8,
                values=[1, 2, 4, 8],
            ),
        ],
    )


def show_histogram(title, model, configurations):
    metric = ManhattanDistance()
    histogram = Counter(
        metric.distance_of_configuration(c, model.options) for c in configurations
    )
    print(title)
    for distance in sorted(histogram):
        print(f"  {distance:7.4f} {'#' * histogram[distance]}")
    print()


def no_streaming_dictionary(configuration) -> bool:
    return not (
        configuration.is_selected("streaming")
        and configuration.is_selected("dictionary")
    )


def demo_method(method: str):
    model = build_model()
    # No cross-tree constraint in the model itself, so add one here
    enumerator = ExhaustiveEnumerator(constraints=[no_streaming_dictionary])
    strategy = create_sampling_strategy(
        model,
        enumerator,
        parameters={"numConfigs": "40", "seed": "7"},
        method=method,
    )
    result = strategy.compute_sampling_strategy()
    metadata = result.metadata

    print(
        f"{method}: {len(result.configurations)} of {result.requested} configurations"
    )
    print(
        f"Buckets: {metadata['n_buckets']}, population: {metadata['population_size']}"
    )
    print(f"Draws: {metadata['draws']} ({metadata['discarded_draws']} discarded)")
    show_histogram("Sampled distances:", model, result.configurations)


def main():
    logging.basicConfig(
        level=logging.INFO, format="%(levelname)s %(name)s: %(message)s"
    )
    demo_method("distribution-aware")
    demo_method("distribution-preserving")


if __name__ == "__main__":
    main()
