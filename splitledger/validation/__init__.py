"""Transaction validation package."""

from splitledger.validation.validator import TransactionValidator

__all__ = ["TransactionValidator"]
