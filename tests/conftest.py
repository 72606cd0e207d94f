"""Shared fixtures for splitledger tests."""

from datetime import datetime, timezone

import pytest

from splitledger.models import (
    SELF,
    Amount,
    Description,
    Expense,
    Name,
    Timestamp,
    Transaction,
    Weight,
)


ALICE = Name(full_name="Alice")
BOB = Name(full_name="Bob")
CAROL = Name(full_name="Carol")


def at(day: int) -> Timestamp:
    """Timestamp on the given day of January 2024 (UTC)."""
    return Timestamp(value=datetime(2024, 1, day, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def make_transaction():
    """
    Build a Transaction from plain values.

    Weights may be given as text or as Fraction.
    """
    def _make(
        amount="100",
        payee=SELF,
        expenses=((ALICE, "1"), (BOB, "1")),
        description="Dinner",
        timestamp=None,
    ) -> Transaction:
        fields = dict(
            amount=Amount(value=amount),
            description=Description(value=description),
            payee_name=payee,
            expenses={
                Expense(person_name=name, weight=Weight(value=weight))
                for name, weight in expenses
            },
        )
        if timestamp is not None:
            fields["timestamp"] = timestamp
        return Transaction(**fields)

    return _make
