"""Balance query package."""

from splitledger.queries.balances import BalanceQueryExecutor

__all__ = ["BalanceQueryExecutor"]
