"""
Data Models Package

This package contains all Pydantic models used in splitledger.
All amounts and weights flowing through the system are exact fractions.
"""

from splitledger.models.name import (
    OTHERS,
    RESERVED_NAMES,
    SELF,
    Name,
    is_valid_name,
)
from splitledger.models.expense import Expense, Weight
from splitledger.models.transaction import (
    Amount,
    BalanceEntry,
    BalanceReport,
    Description,
    Timestamp,
    Transaction,
    ValidationIssue,
    ValidationResult,
)
from splitledger.models.numeric import (
    fraction_to_text,
    format_fraction,
    is_valid_amount,
    is_valid_weight,
    parse_fraction,
)
from splitledger.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Names
    "Name",
    "OTHERS",
    "RESERVED_NAMES",
    "SELF",
    "is_valid_name",
    # Transaction models
    "Amount",
    "BalanceEntry",
    "BalanceReport",
    "Description",
    "Expense",
    "Timestamp",
    "Transaction",
    "ValidationIssue",
    "ValidationResult",
    "Weight",
    # Numeric helpers
    "fraction_to_text",
    "format_fraction",
    "is_valid_amount",
    "is_valid_weight",
    "parse_fraction",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
