"""Variability model: the option tree that spans the configuration space."""

from typing import List, Optional, Union

from pydantic import BaseModel, Field, model_validator

from .options import BinaryOption, NumericOption, OptionConfigType


class VariabilityModel(BaseModel):
    """A tree of binary and numeric configuration options.

    Cross-tree constraints are owned by whatever enumerates the valid
    configurations; the model only carries the options and their parent
    relation.

    Attributes:
        name: Name of the modelled system.
        options: All options in declaration order.

    Example:
        VariabilityModel(
            name="compressor",
            options=[
                BinaryOption(name="root", optional=False),
                BinaryOption(name="encryption", parent="root"),
                NumericOption(name="level", parent="root", min_value=1, max_value=9),
            ],
        )
    """

    name: str = "model"
    options: List[OptionConfigType] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_tree(self) -> "VariabilityModel":
        names = [o.name for o in self.options]
        if len(set(names)) != len(names):
            duplicates = sorted({n for n in names if names.count(n) > 1})
            raise ValueError(
                f"Option names must be unique. Found duplicates: {duplicates}. "
                f"Suggestion: Rename the duplicated options."
            )

        known = set(names)
        for option in self.options:
            if option.parent is None:
                continue
            if option.parent not in known:
                raise ValueError(
                    f"Option '{option.name}' refers to unknown parent "
                    f"'{option.parent}'. Suggestion: Declare '{option.parent}' "
                    f"or remove the parent reference."
                )
            if option.parent == option.name:
                raise ValueError(f"Option '{option.name}' cannot be its own parent.")
        return self

    @property
    def binary_options(self) -> List[BinaryOption]:
        return [o for o in self.options if isinstance(o, BinaryOption)]

    @property
    def numeric_options(self) -> List[NumericOption]:
        return [o for o in self.options if isinstance(o, NumericOption)]

    def get_option(self, name: str) -> Optional[Union[BinaryOption, NumericOption]]:
        """Look up an option by its exact name."""
        for option in self.options:
            if option.name == name:
                return option
        return None

    def count_children(self, option: Union[BinaryOption, NumericOption]) -> int:
        """Number of options, of either kind, whose parent is ``option``."""
        return sum(
            1 for o in self.options if o is not option and o.parent == option.name
        )

    def is_mandatory_with_children(
        self, option: Union[BinaryOption, NumericOption]
    ) -> bool:
        """True for a mandatory binary option that has at least one child.

        Such an option can never be deselected in a valid configuration.
        """
        return (
            isinstance(option, BinaryOption)
            and option.mandatory
            and self.count_children(option) > 0
        )
