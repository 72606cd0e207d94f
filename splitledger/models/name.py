"""
Participant names.

A Name is the key every expense and balance is tracked under.
Two of them are reserved: SELF (the owner of the ledger) and OTHERS
(a catch-all bucket for people who have been removed or are unknown).

DESIGN DECISION: The sentinels are pre-built instances, and user-supplied
names that collide with them are rejected. A real person called "self"
can never be mistaken for the ledger owner.
"""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator


NAME_PATTERN = re.compile(r"[^\W_](?:[^\W_]| )*")

SELF_NAME = "Self"
OTHERS_NAME = "Others"
_RESERVED_KEYS = {SELF_NAME.casefold(), OTHERS_NAME.casefold()}


class Name(BaseModel):
    """A participant's name. Compared by value."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    full_name: str = Field(
        ...,
        min_length=1,
        description="Alphanumeric name, spaces allowed after the first character",
    )

    @field_validator("full_name")
    @classmethod
    def validate_full_name(cls, v: str) -> str:
        if NAME_PATTERN.fullmatch(v) is None:
            raise ValueError(
                "Names should only contain alphanumeric characters and spaces, "
                "and it should not be blank"
            )
        if v.casefold() in _RESERVED_KEYS:
            raise ValueError(f"'{v}' is a reserved name")
        return v

    @property
    def is_reserved(self) -> bool:
        return self in RESERVED_NAMES

    def __str__(self) -> str:
        return self.full_name


# Built without validation: these are the only legitimate holders of the
# reserved spellings.
SELF = Name.model_construct(full_name=SELF_NAME)
OTHERS = Name.model_construct(full_name=OTHERS_NAME)

RESERVED_NAMES: frozenset[Name] = frozenset({SELF, OTHERS})


def is_valid_name(text: str) -> bool:
    """Return True if text would be accepted as a (non-reserved) Name."""
    if text is None:
        raise TypeError("name text must not be None")
    stripped = text.strip()
    return (
        NAME_PATTERN.fullmatch(stripped) is not None
        and stripped.casefold() not in _RESERVED_KEYS
    )
