"""
Audit Logger

Every significant ledger operation is logged. This provides:
1. Traceability of why a transaction was left out of a balance
2. Debugging capability
3. A record of people folded into Others

The audit logger:
- Always logs locally through structlog
- Appends to an audit storage backend when one is configured
- Gracefully handles storage failures (a broken audit sink never
  breaks a balance computation)
"""

import logging
from typing import Optional

import structlog

from splitledger.config import LedgerSettings, get_settings
from splitledger.models.audit import AuditEvent, AuditEventBuilder, AuditSeverity
from splitledger.services.storage import AuditStorageInterface


def configure_logging(settings: Optional[LedgerSettings] = None) -> None:
    """Configure structlog on top of the standard library logger."""
    settings = settings or get_settings()
    logging.basicConfig(format="%(message)s", level=settings.log_level)
    logging.getLogger("splitledger").setLevel(settings.log_level)

    renderer = (
        structlog.dev.ConsoleRenderer()
        if settings.log_format == "console"
        else structlog.processors.JSONRenderer()
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


configure_logging()


class AuditLogger:
    """
    Central audit logging service.

    Logs events both to:
    1. Structured local log (for debugging)
    2. Audit storage (if configured)
    """

    def __init__(
        self,
        storage: Optional[AuditStorageInterface] = None,
        settings: Optional[LedgerSettings] = None,
    ):
        """
        Initialize audit logger.

        Args:
            storage: Storage backend for persistence.
                    If None, only logs locally.
            settings: Overrides the cached ledger settings.
        """
        self._storage = storage
        self._enabled = (settings or get_settings()).audit_enabled
        self._logger = structlog.get_logger("splitledger.audit")

    def log(self, event: AuditEvent) -> bool:
        """
        Log an audit event.

        Always logs locally. Persists to storage if available.

        Returns True if storage write succeeded (or no storage configured).
        """
        if not self._enabled:
            return True

        log_dict = event.to_log_dict()

        if event.severity == AuditSeverity.ERROR:
            self._logger.error("audit_event", **log_dict)
        elif event.severity == AuditSeverity.WARNING:
            self._logger.warning("audit_event", **log_dict)
        elif event.severity == AuditSeverity.DEBUG:
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

        if self._storage:
            try:
                return self._storage.append_event(event)
            except Exception as e:
                # Log failure but don't raise
                self._logger.error(
                    "audit_storage_failed",
                    error=str(e),
                    event_id=str(event.event_id),
                )
                return False

        return True

    def log_transaction_validated(self, transaction_ref: str) -> None:
        """Log a transaction that passed validation."""
        self.log(AuditEventBuilder.transaction_validated(transaction_ref))

    def log_transaction_rejected(
        self,
        transaction_ref: str,
        issues: list[dict],
    ) -> None:
        """Log a transaction that failed validation."""
        self.log(AuditEventBuilder.transaction_rejected(transaction_ref, issues))

    def log_person_removed(
        self,
        person_name: str,
        replaced_count: int,
    ) -> None:
        """Log a person being folded into Others."""
        self.log(AuditEventBuilder.person_removed(person_name, replaced_count))

    def log_balances_computed(
        self,
        person_count: int,
        transaction_count: int,
        skipped_count: int,
    ) -> None:
        """Log a balance computation."""
        self.log(
            AuditEventBuilder.balances_computed(
                person_count=person_count,
                transaction_count=transaction_count,
                skipped_count=skipped_count,
            )
        )
