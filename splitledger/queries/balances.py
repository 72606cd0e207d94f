"""
Balance Queries

Balances are DERIVED, never stored. A person's balance with SELF is the
sum of get_portion_owed() over every valid transaction; invalid ones are
skipped and counted, never guessed at.

All sums are exact. Rounding happens only when a report renders a
balance for display.
"""

from collections.abc import Iterable
from fractions import Fraction
from typing import Optional

from splitledger.audit import AuditLogger
from splitledger.config import LedgerSettings, get_settings
from splitledger.models.name import Name
from splitledger.models.numeric import format_fraction
from splitledger.models.transaction import (
    BalanceEntry,
    BalanceReport,
    Transaction,
)
from splitledger.services.directory import NameDirectoryInterface
from splitledger.validation import TransactionValidator


class BalanceQueryExecutor:
    """
    Answers balance questions over a collection of transactions.

    GUARANTEES:
    - Only valid transactions contribute to any balance
    - Never mutates a transaction; removal returns replacements
    - Exact arithmetic throughout
    """

    def __init__(
        self,
        directory: NameDirectoryInterface,
        validator: Optional[TransactionValidator] = None,
        audit_logger: Optional[AuditLogger] = None,
        settings: Optional[LedgerSettings] = None,
    ):
        self._directory = directory
        self._validator = validator or TransactionValidator(directory, audit_logger)
        self._audit = audit_logger
        self._settings = settings or get_settings()

    def _split_valid(
        self,
        transactions: Iterable[Transaction],
    ) -> tuple[list[Transaction], int]:
        valid = []
        skipped = 0
        for transaction in transactions:
            if self._validator.validate(transaction).is_valid:
                valid.append(transaction)
            else:
                skipped += 1
        return valid, skipped

    def balance_of(
        self,
        person_name: Name,
        transactions: Iterable[Transaction],
    ) -> Fraction:
        """
        Net amount person_name owes SELF across valid transactions.

        Positive: they owe you. Negative: you owe them.
        """
        valid, _ = self._split_valid(transactions)
        return sum(
            (t.get_portion_owed(person_name) for t in valid),
            Fraction(0),
        )

    def all_balances(
        self,
        transactions: Iterable[Transaction],
    ) -> dict[Name, Fraction]:
        """Balance for every name in the directory (zero if uninvolved)."""
        valid, _ = self._split_valid(transactions)
        return self._balances(valid, self._directory.snapshot())

    def _balances(
        self,
        valid: list[Transaction],
        names: frozenset[Name],
    ) -> dict[Name, Fraction]:
        balances = {name: Fraction(0) for name in names}
        for transaction in valid:
            for name in names:
                balances[name] += transaction.get_portion_owed(name)
        return balances

    def balance_report(self, transactions: Iterable[Transaction]) -> BalanceReport:
        """Build a report of every known person's balance, sorted by name."""
        transactions = list(transactions)
        valid, skipped = self._split_valid(transactions)
        balances = self._balances(valid, self._directory.snapshot())
        places = self._settings.display_decimal_places

        entries = [
            BalanceEntry(
                person_name=name,
                balance=balance,
                display=format_fraction(balance, places),
            )
            for name, balance in sorted(balances.items(), key=lambda item: item[0].full_name)
        ]
        total = sum(balances.values(), Fraction(0))

        if self._audit:
            self._audit.log_balances_computed(
                person_count=len(entries),
                transaction_count=len(transactions),
                skipped_count=skipped,
            )

        return BalanceReport(
            entries=entries,
            total=total,
            total_display=format_fraction(total, places),
            transaction_count=len(transactions),
            skipped_count=skipped,
        )

    def transactions_involving(
        self,
        person_name: Name,
        transactions: Iterable[Transaction],
    ) -> list[Transaction]:
        """Transactions person_name takes part in, most recent first."""
        return sorted(t for t in transactions if t.is_person_involved(person_name))

    def remove_person(
        self,
        person_name: Name,
        transactions: Iterable[Transaction],
    ) -> list[Transaction]:
        """
        Fold person_name into OTHERS across a ledger.

        Transactions that involve the person are replaced by
        transaction.remove_person(); the rest are returned unchanged,
        in their original order.
        """
        result = []
        replaced = 0
        for transaction in transactions:
            if transaction.is_person_involved(person_name):
                result.append(transaction.remove_person(person_name))
                replaced += 1
            else:
                result.append(transaction)

        if self._audit:
            self._audit.log_person_removed(str(person_name), replaced)

        return result
