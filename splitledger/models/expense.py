"""
Expense line items.

An Expense binds a participant to a Weight: their relative share of a
transaction's amount. A transaction of 90 split as (Alice, 1), (Bob, 2)
makes Alice responsible for 30 and Bob for 60.
"""

from fractions import Fraction

from pydantic import BaseModel, ConfigDict, field_validator

from splitledger.models.name import Name
from splitledger.models.numeric import (
    WEIGHT_CONSTRAINTS,
    coerce_fraction,
    fraction_to_text,
    is_valid_weight,
    parse_fraction,
)


class Weight(BaseModel):
    """
    A participant's relative share of a transaction.

    Text input follows the weight grammar, so it is never negative.
    Weights built from an existing Fraction (e.g. when shares are merged)
    skip the grammar and may take any sign.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: Fraction

    @field_validator("value", mode="before")
    @classmethod
    def parse_value(cls, v):
        if isinstance(v, str):
            if not is_valid_weight(v):
                raise ValueError(WEIGHT_CONSTRAINTS)
            try:
                return parse_fraction(v)
            except ZeroDivisionError:
                raise ValueError("Weight denominator must not be zero")
        try:
            return coerce_fraction(v)
        except TypeError as e:
            raise ValueError(str(e)) from e

    def __str__(self) -> str:
        return fraction_to_text(self.value)


class Expense(BaseModel):
    """One participant's weighted share of a transaction."""

    model_config = ConfigDict(frozen=True)

    person_name: Name
    weight: Weight
