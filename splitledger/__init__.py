"""
splitledger - Source Package

A shared-expense ledger: records who paid for what, splits each payment
among participants by weight, and works out exactly who owes you and
whom you owe.

DESIGN PRINCIPLES:
1. Money is exact (fractions, never floats)
2. Everything is immutable; edits build new transactions
3. Validity is asked for explicitly, never assumed
4. Every rejection is auditable
"""

__version__ = "1.0.0"
__author__ = "splitledger Team"
