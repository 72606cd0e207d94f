"""
Audit Models for splitledger

Significant ledger operations (rejecting a transaction, folding a removed
person into OTHERS, computing balances) produce an AuditEvent. Events are
append-only: they are never modified after creation.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Validation
    TRANSACTION_VALIDATED = "transaction_validated"
    TRANSACTION_REJECTED = "transaction_rejected"

    # Transformations
    PERSON_REMOVED = "person_removed"

    # Queries
    BALANCES_COMPUTED = "balances_computed"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class AuditEvent(BaseModel):
    """
    A single audit event.

    Every significant ledger operation creates one of these.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Context - what is this about?
    entity_type: Optional[str] = Field(
        default=None,
        description="Type of entity (e.g., 'transaction', 'person', 'ledger')"
    )
    entity_ref: Optional[str] = Field(
        default=None,
        description="Reference to the entity (timestamp of a transaction, a name)"
    )

    # Event details
    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "entity_type": self.entity_type,
            "entity_ref": self.entity_ref,
            "description": self.description,
            "details": self.details,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.transaction_rejected(ref, issues)
        event = AuditEventBuilder.person_removed("Alice", replaced_count=3)
    """

    @staticmethod
    def transaction_validated(transaction_ref: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRANSACTION_VALIDATED,
            severity=AuditSeverity.DEBUG,
            entity_type="transaction",
            entity_ref=transaction_ref,
            description="Transaction passed validation",
        )

    @staticmethod
    def transaction_rejected(
        transaction_ref: str,
        issues: list[dict],
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRANSACTION_REJECTED,
            severity=AuditSeverity.WARNING,
            entity_type="transaction",
            entity_ref=transaction_ref,
            description=f"Transaction rejected with {len(issues)} issues",
            details={
                "issues": issues,
            },
        )

    @staticmethod
    def person_removed(
        person_name: str,
        replaced_count: int,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.PERSON_REMOVED,
            entity_type="person",
            entity_ref=person_name,
            description=f"{person_name} folded into Others in {replaced_count} transactions",
            details={
                "replaced_count": replaced_count,
            },
        )

    @staticmethod
    def balances_computed(
        person_count: int,
        transaction_count: int,
        skipped_count: int,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.BALANCES_COMPUTED,
            entity_type="ledger",
            description=(
                f"Balances computed for {person_count} people "
                f"from {transaction_count} transactions"
            ),
            details={
                "person_count": person_count,
                "transaction_count": transaction_count,
                "skipped_count": skipped_count,
            },
        )
