"""Collaborators that enumerate configurations or size other samples.

Constraint solving lives outside this package. The sampling strategies only
rely on the two protocols below:

- ``ConfigurationEnumerator`` lists every valid configuration of a model
- ``TWiseCountOracle`` tells how many configurations a t-wise sample has

``ExhaustiveEnumerator`` is a brute-force enumerator for small models.
"""

import itertools
import logging
from typing import Callable, Dict, List, Protocol, Sequence, runtime_checkable

from ..config import BinaryOption, NumericOption, VariabilityModel
from .configuration import Configuration
from .metrics import Option

logger = logging.getLogger(__name__)

Constraint = Callable[[Configuration], bool]


@runtime_checkable
class ConfigurationEnumerator(Protocol):
    """Protocol for full enumeration of the valid configurations."""

    def generate_all_valid_configurations(
        self, model: VariabilityModel, options: Sequence[Option]
    ) -> Sequence[Configuration]:
        """Return every valid configuration restricted to ``options``.

        The order of the result must be deterministic for a given model and
        option subset, otherwise seeded sampling is not reproducible.
        """
        ...


@runtime_checkable
class TWiseCountOracle(Protocol):
    """Protocol for sizing a t-wise covering array."""

    def t_wise_covering_array_size(self, model: VariabilityModel, t: int) -> int:
        """Number of configurations a t-wise sample of ``model`` contains."""
        ...


class ExhaustiveEnumerator:
    """Enumerates valid configurations by trying every assignment.

    Binary assignments honour the option tree: a selected option requires a
    selected parent, and a mandatory option is selected whenever its parent is
    (always, for a root). Parents outside the considered subset count as
    selected. Cross-tree constraints are given as predicates over
    configurations. The cost is exponential in the number of options.
    """

    def __init__(self, constraints: Sequence[Constraint] = ()) -> None:
        self.constraints = list(constraints)

    def generate_all_valid_configurations(
        self, model: VariabilityModel, options: Sequence[Option]
    ) -> List[Configuration]:
        binary = [o for o in options if isinstance(o, BinaryOption)]
        numeric = [o for o in options if isinstance(o, NumericOption)]

        selections = [
            frozenset(o.name for o, chosen in zip(binary, pattern) if chosen)
            for pattern in itertools.product((False, True), repeat=len(binary))
        ]
        selections = [s for s in selections if self._is_tree_valid(s, binary)]

        domains = [o.all_values() for o in numeric]
        configurations = []
        for selected in selections:
            for values in itertools.product(*domains):
                numeric_values: Dict[str, float] = {
                    o.name: v for o, v in zip(numeric, values)
                }
                configuration = Configuration(selected, numeric_values)
                if all(check(configuration) for check in self.constraints):
                    configurations.append(configuration)

        logger.info(
            f"Enumerated {len(configurations)} valid configuration(s) over "
            f"{len(binary)} binary and {len(numeric)} numeric option(s)"
        )
        return configurations

    @staticmethod
    def _is_tree_valid(selected: frozenset, binary: Sequence[BinaryOption]) -> bool:
        considered = {o.name for o in binary}

        def parent_selected(option: BinaryOption) -> bool:
            if option.parent is None or option.parent not in considered:
                return True
            return option.parent in selected

        for option in binary:
            if option.name in selected and not parent_selected(option):
                return False
            if option.mandatory and option.name not in selected:
                if parent_selected(option):
                    return False
        return True
