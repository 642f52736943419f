"""Distance metrics measuring how far a configuration is from the origin."""

from abc import ABC, abstractmethod
from typing import Sequence, Union

from ..config import BinaryOption, NumericOption
from .configuration import Configuration, round_distance

Option = Union[BinaryOption, NumericOption]


class DistanceMetric(ABC):
    """Abstract base class for distance metrics.

    A metric assigns a distance contribution to every single option value and
    aggregates those contributions into the distance of a whole configuration.
    All returned distances are rounded with ``round_distance``.
    """

    @abstractmethod
    def name(self) -> str:
        """Name used to select the metric."""
        pass

    @abstractmethod
    def distance_of_numeric_value(
        self, value: float, min_value: float, max_value: float
    ) -> float:
        """Distance contribution of a numeric option set to ``value``."""
        pass

    @abstractmethod
    def distance_of_binary_value(self, selected: int) -> float:
        """Distance contribution of a binary option (1 selected, 0 deselected)."""
        pass

    @abstractmethod
    def distance_of_configuration(
        self, configuration: Configuration, options: Sequence[Option]
    ) -> float:
        """Distance of a configuration, considering only ``options``.

        Args:
            configuration: The configuration to measure
            options: The option subset under consideration

        Returns:
            Rounded distance of the configuration
        """
        pass

    def contribution(self, configuration: Configuration, option: Option) -> float:
        """Distance contribution of one option within a configuration."""
        if isinstance(option, NumericOption):
            value = configuration.value_of(option.name)
            if value is None:
                value = option.min_value
            return self.distance_of_numeric_value(
                value, option.min_value, option.max_value
            )
        return self.distance_of_binary_value(
            1 if configuration.is_selected(option.name) else 0
        )


class ManhattanDistance(DistanceMetric):
    """City-block distance: the sum of absolute normalized contributions.

    Numeric values are normalized to ``[0, 1]`` over the option's range, a
    selected binary option contributes 1 and a deselected one 0.
    """

    def name(self) -> str:
        return "manhattan"

    def distance_of_numeric_value(
        self, value: float, min_value: float, max_value: float
    ) -> float:
        if max_value == min_value:
            return 0.0
        return round_distance(abs(value - min_value) / (max_value - min_value))

    def distance_of_binary_value(self, selected: int) -> float:
        return round_distance(abs(selected))

    def distance_of_configuration(
        self, configuration: Configuration, options: Sequence[Option]
    ) -> float:
        total = 0.0
        for option in options:
            total = round_distance(total + self.contribution(configuration, option))
        return total
