"""
Transaction Validation

A Transaction that constructs successfully is well-formed, not necessarily
usable. Before it counts towards any balance it must be:
- relevant: involves SELF and at least one real person
- positive: amount and every weight strictly above zero
- known: everyone involved is in the directory (or reserved)
- free of duplicates: one expense per person

The predicates live on Transaction. This validator runs them against one
directory snapshot and turns each failure into a ValidationIssue a person
can act on.

IMPORTANT: Validation NEVER fixes a transaction. It only reports.
"""

from collections import Counter
from collections.abc import Iterable
from typing import Optional

from splitledger.audit import AuditLogger
from splitledger.models.name import RESERVED_NAMES, SELF, Name
from splitledger.models.transaction import (
    Transaction,
    ValidationIssue,
    ValidationResult,
)
from splitledger.services.directory import NameDirectoryInterface


class TransactionValidator:
    """Validates transactions against the current name directory."""

    def __init__(
        self,
        directory: NameDirectoryInterface,
        audit_logger: Optional[AuditLogger] = None,
    ):
        """
        Initialize validator.

        Args:
            directory: Source of known participant names.
            audit_logger: Receives rejected/validated events.
                         If None, nothing is audited.
        """
        self._directory = directory
        self._audit = audit_logger

    def _check_relevance(self, transaction: Transaction) -> list[ValidationIssue]:
        if transaction.is_relevant():
            return []
        if not transaction.is_person_involved(SELF):
            message = "You are not involved in this transaction"
        else:
            message = "Transaction does not involve anyone other than reserved names"
        return [ValidationIssue(
            field="participants",
            issue_type="not_relevant",
            message=message,
            severity="error",
            suggested_fix="Add yourself and at least one other person",
        )]

    def _check_positive(self, transaction: Transaction) -> list[ValidationIssue]:
        issues = []
        if transaction.amount.value <= 0:
            issues.append(ValidationIssue(
                field="amount",
                issue_type="non_positive",
                message=f"Amount must be greater than zero (got {transaction.amount})",
                severity="error",
            ))
        for expense in sorted(transaction.expenses, key=lambda e: e.person_name.full_name):
            if expense.weight.value <= 0:
                issues.append(ValidationIssue(
                    field="expenses",
                    issue_type="non_positive",
                    message=(
                        f"Weight for {expense.person_name} must be greater "
                        f"than zero (got {expense.weight})"
                    ),
                    severity="error",
                ))
        return issues

    def _check_known(
        self,
        transaction: Transaction,
        valid_names: frozenset[Name],
    ) -> list[ValidationIssue]:
        issues = []
        payee = transaction.payee_name
        if not (payee == SELF or payee in valid_names):
            issues.append(ValidationIssue(
                field="payee_name",
                issue_type="unknown_person",
                message=f"Payee {payee} is not in the directory",
                severity="error",
                suggested_fix=f"Add {payee} to the directory first",
            ))
        unknown = sorted(
            {
                expense.person_name.full_name
                for expense in transaction.expenses
                if expense.person_name not in valid_names
                and expense.person_name not in RESERVED_NAMES
            }
        )
        for name in unknown:
            issues.append(ValidationIssue(
                field="expenses",
                issue_type="unknown_person",
                message=f"{name} is not in the directory",
                severity="error",
                suggested_fix=f"Add {name} to the directory first",
            ))
        return issues

    def _check_duplicates(self, transaction: Transaction) -> list[ValidationIssue]:
        counts = Counter(expense.person_name for expense in transaction.expenses)
        return [
            ValidationIssue(
                field="expenses",
                issue_type="duplicate_person",
                message=f"{name} has {count} expenses in one transaction",
                severity="error",
                suggested_fix="Combine them into a single expense",
            )
            for name, count in sorted(counts.items(), key=lambda item: item[0].full_name)
            if count > 1
        ]

    def validate(self, transaction: Transaction) -> ValidationResult:
        """
        Validate a transaction against a single directory snapshot.

        Returns:
            ValidationResult whose is_valid matches transaction.is_valid()
        """
        valid_names = self._directory.snapshot()

        issues = []
        issues.extend(self._check_relevance(transaction))
        issues.extend(self._check_positive(transaction))
        issues.extend(self._check_known(transaction, valid_names))
        issues.extend(self._check_duplicates(transaction))

        result = ValidationResult(
            is_valid=transaction.is_valid(valid_names),
            issues=issues,
        )

        if self._audit:
            ref = str(transaction.timestamp)
            if result.is_valid:
                self._audit.log_transaction_validated(ref)
            else:
                self._audit.log_transaction_rejected(
                    ref,
                    [issue.model_dump() for issue in result.issues],
                )

        return result

    def filter_valid(self, transactions: Iterable[Transaction]) -> list[Transaction]:
        """Keep only the transactions that pass validation."""
        return [t for t in transactions if self.validate(t).is_valid]

    def get_user_friendly_summary(self, result: ValidationResult) -> str:
        """Generate a short summary of validation results."""
        if result.is_valid:
            return "✅ Transaction is valid."

        lines = ["❌ This transaction cannot be counted:"]
        for issue in result.issues:
            lines.append(f"   • {issue.message}")
            if issue.suggested_fix:
                lines.append(f"     💡 {issue.suggested_fix}")
        return "\n".join(lines)
