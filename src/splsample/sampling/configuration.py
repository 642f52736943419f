"""Configuration values and distance rounding."""

from typing import Dict, FrozenSet, Iterable, Mapping, Optional

# Bucket identity is exact equality of the rounded distance, so every distance
# that is computed or compared goes through round_distance.
ROUND_FACTOR = 4


def round_distance(value: float) -> float:
    """Round a distance to the fixed bucket precision."""
    return round(float(value), ROUND_FACTOR)


class Configuration:
    """A valid assignment of values to options.

    Binary options are represented by the set of selected option names,
    numeric options by a name to value mapping. Instances are treated as
    immutable; two configurations compare equal when they assign the same
    values, while the sampler tracks them by identity.
    """

    __slots__ = ("_binary", "_numeric")

    def __init__(
        self,
        selected: Iterable[str] = (),
        numeric: Optional[Mapping[str, float]] = None,
    ) -> None:
        self._binary: FrozenSet[str] = frozenset(selected)
        self._numeric: Dict[str, float] = dict(numeric or {})

    @property
    def selected_options(self) -> FrozenSet[str]:
        return self._binary

    @property
    def numeric_values(self) -> Dict[str, float]:
        return dict(self._numeric)

    def is_selected(self, name: str) -> bool:
        return name in self._binary

    def value_of(self, name: str) -> Optional[float]:
        """Value of a numeric option, None if the option is not assigned."""
        return self._numeric.get(name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Configuration):
            return NotImplemented
        return self._binary == other._binary and self._numeric == other._numeric

    def __hash__(self) -> int:
        return hash((self._binary, frozenset(self._numeric.items())))

    def __repr__(self) -> str:
        parts = sorted(self._binary)
        parts.extend(f"{k}={v:g}" for k, v in sorted(self._numeric.items()))
        return f"Configuration({', '.join(parts)})"
