"""Configuration option models for variability models."""

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator

# Numeric domain values are rounded to this many decimals when generated from a
# step size, so that repeated addition does not drift away from max_value.
DOMAIN_PRECISION = 4


class ConfigurationOption(BaseModel):
    """Fields shared by every configuration option."""

    name: str = Field(..., min_length=1, description="Unique option name")
    parent: Optional[str] = Field(
        default=None, description="Name of the parent option, None for a root"
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if v.strip() != v:
            raise ValueError(
                f"Option name '{v}' has leading or trailing whitespace. "
                f"Suggestion: Use '{v.strip()}'."
            )
        return v


class BinaryOption(ConfigurationOption):
    """An option that is either selected or deselected."""

    type: Literal["binary"] = "binary"
    optional: bool = Field(
        default=True,
        description="False if the option must be selected whenever its parent is",
    )

    @property
    def mandatory(self) -> bool:
        return not self.optional


class NumericOption(ConfigurationOption):
    """An option taking one value of an ordered, finite domain.

    The domain is either given explicitly through ``values`` or generated from
    ``min_value`` to ``max_value`` in increments of ``step_size``.
    """

    type: Literal["numeric"] = "numeric"
    min_value: float = Field(..., description="Smallest value of the domain")
    max_value: float = Field(..., description="Largest value of the domain")
    step_size: float = Field(
        default=1.0, gt=0, description="Increment used to generate the domain"
    )
    values: Optional[List[float]] = Field(
        default=None, description="Explicit domain, overrides step_size"
    )

    @model_validator(mode="after")
    def validate_domain(self) -> "NumericOption":
        if self.min_value > self.max_value:
            raise ValueError(
                f"Numeric option '{self.name}': min_value ({self.min_value}) "
                f"must not exceed max_value ({self.max_value}). Suggestion: "
                f"Swap the bounds."
            )
        if self.values is not None:
            if not self.values:
                raise ValueError(
                    f"Numeric option '{self.name}' has an empty value list. "
                    f"Suggestion: Omit 'values' to derive the domain from "
                    f"step_size."
                )
            outside = [
                v for v in self.values if v < self.min_value or v > self.max_value
            ]
            if outside:
                raise ValueError(
                    f"Numeric option '{self.name}' lists values outside "
                    f"[{self.min_value}, {self.max_value}]: {outside}."
                )
        return self

    def all_values(self) -> List[float]:
        """Return the domain of the option in ascending order."""
        if self.values is not None:
            return sorted(set(self.values))

        domain = []
        current = self.min_value
        while current <= self.max_value:
            domain.append(current)
            current = round(current + self.step_size, DOMAIN_PRECISION)
        return domain


OptionConfigType = Annotated[
    Union[BinaryOption, NumericOption], Field(discriminator="type")
]

