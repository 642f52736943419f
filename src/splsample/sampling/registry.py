"""Name-keyed registries of distance metrics and target distributions."""

import logging
from functools import lru_cache
from typing import Generic, Iterable, List, Mapping, Optional, TypeVar

from .distributions import NormalDistribution, TargetDistribution, UniformDistribution
from .metrics import DistanceMetric, ManhattanDistance

logger = logging.getLogger(__name__)

T = TypeVar("T", DistanceMetric, TargetDistribution)


class NamedRegistry(Generic[T]):
    """Read-only collection of named implementations.

    Lookups are case-insensitive. The registry is filled once at construction
    and cannot be changed afterwards; build a new registry to add an entry.
    """

    def __init__(self, entries: Iterable[T]) -> None:
        """Initialize the registry.

        Args:
            entries: Implementations to register, each exposing ``name()``

        Raises:
            ValueError: If two entries share a name (ignoring case)
        """
        items = {}
        for entry in entries:
            key = entry.name().lower()
            if key in items:
                raise ValueError(
                    f"Duplicate registry entry '{entry.name()}'. "
                    f"Suggestion: Give every implementation a unique name."
                )
            items[key] = entry
        self._entries: Mapping[str, T] = items

    def get(self, name: str) -> Optional[T]:
        """Get an implementation by name.

        Args:
            name: Name to look up, matched case-insensitively

        Returns:
            The implementation or None if not found
        """
        return self._entries.get(name.strip().lower())

    def names(self) -> List[str]:
        """List registered names in registration order."""
        return [entry.name() for entry in self._entries.values()]

    def extended(self, *entries: T) -> "NamedRegistry[T]":
        """New registry holding these entries plus ``entries``."""
        return NamedRegistry([*self._entries.values(), *entries])

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None

    def __len__(self) -> int:
        return len(self._entries)


@lru_cache(maxsize=None)
def default_metrics() -> NamedRegistry[DistanceMetric]:
    """Process-wide registry of the built-in distance metrics."""
    registry = NamedRegistry[DistanceMetric]([ManhattanDistance()])
    logger.debug(f"Built-in distance metrics: {registry.names()}")
    return registry


@lru_cache(maxsize=None)
def default_distributions() -> NamedRegistry[TargetDistribution]:
    """Process-wide registry of the built-in target distributions."""
    registry = NamedRegistry[TargetDistribution](
        [UniformDistribution(), NormalDistribution()]
    )
    logger.debug(f"Built-in target distributions: {registry.names()}")
    return registry
