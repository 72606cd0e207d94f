"""
Core Transaction Models for splitledger

A Transaction records one payment made by a payee on behalf of a group,
split among participants by weight. Everything here is immutable:
"editing" a transaction (e.g. removing a person) builds a new one.

These models are designed to:
1. Keep all money exact (fractions.Fraction, never float)
2. Reject malformed input at construction with clear messages
3. Leave business validity to explicit predicates, so callers decide
   what to do with a transaction that parses but makes no sense

DESIGN DECISION: Construction checks shape (fields present, at least one
expense). Whether a transaction is usable for balances (relevant to SELF,
positive, everyone known, no duplicate participants) is answered by
is_valid(), and callers must ask before relying on the numbers.
"""

from datetime import datetime, timezone
from fractions import Fraction
from typing import Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)

from splitledger.models.expense import Expense, Weight
from splitledger.models.name import OTHERS, RESERVED_NAMES, SELF, Name
from splitledger.models.numeric import (
    AMOUNT_CONSTRAINTS,
    coerce_fraction,
    fraction_to_text,
    is_valid_amount,
    parse_fraction,
)


# =============================================================================
# VALUE OBJECTS
# =============================================================================

class Amount(BaseModel):
    """
    Total money moved by a transaction.

    May be negative or zero as a value; is_positive() on the transaction
    decides whether it can be split.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: Fraction

    @field_validator("value", mode="before")
    @classmethod
    def parse_value(cls, v):
        if isinstance(v, str):
            if not is_valid_amount(v):
                raise ValueError(AMOUNT_CONSTRAINTS)
            try:
                return parse_fraction(v)
            except ZeroDivisionError:
                raise ValueError("Amount denominator must not be zero")
        try:
            return coerce_fraction(v)
        except TypeError as e:
            raise ValueError(str(e)) from e

    def __str__(self) -> str:
        return fraction_to_text(self.value)


class Description(BaseModel):
    """Free text describing what the money was spent on."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    value: str = Field(
        ...,
        min_length=1,
        max_length=200,
        description="What the transaction was for",
    )

    def __str__(self) -> str:
        return self.value


class Timestamp(BaseModel):
    """
    Instant a transaction was recorded.

    Only used to tell transactions apart and to order them;
    it plays no part in any balance.
    """

    model_config = ConfigDict(frozen=True)

    value: datetime

    @field_validator("value")
    @classmethod
    def assume_utc_when_naive(cls, v: datetime) -> datetime:
        """Treat naive datetimes as UTC so every timestamp is comparable."""
        if v.tzinfo is None or v.utcoffset() is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    @classmethod
    def now(cls) -> "Timestamp":
        return cls(value=datetime.now(timezone.utc))

    def __lt__(self, other: "Timestamp") -> bool:
        return self.value < other.value

    def __str__(self) -> str:
        return self.value.isoformat()


# =============================================================================
# TRANSACTION
# =============================================================================

class Transaction(BaseModel):
    """
    A single payment, split among participants by weight.

    Guarantees: all fields present, at least one expense, immutable.
    Natural ordering is most recent first.
    """

    model_config = ConfigDict(frozen=True)

    amount: Amount
    description: Description
    payee_name: Name
    expenses: frozenset[Expense] = Field(
        ...,
        min_length=1,
        description="Weighted shares; must not be empty",
    )
    timestamp: Timestamp = Field(
        default_factory=Timestamp.now,
        description="Internal timestamp used to uniquely identify transactions",
    )

    def get_expenses(self) -> frozenset[Expense]:
        return self.expenses

    # -------------------------------------------------------------------------
    # Validity predicates
    # -------------------------------------------------------------------------

    def is_relevant(self) -> bool:
        """Return True if the transaction involves SELF and at least one real person."""
        participants = self.get_all_involved_person_names()
        if SELF not in participants:
            return False
        if participants <= RESERVED_NAMES:
            return False
        return True

    def is_positive(self) -> bool:
        """Return True if the amount and every weight are strictly positive."""
        if self.amount.value <= 0:
            return False
        return all(expense.weight.value > 0 for expense in self.expenses)

    def is_known(self, valid_names: frozenset[Name]) -> bool:
        """Return True if everyone involved is SELF, reserved or in valid_names."""
        if not (self.payee_name == SELF or self.payee_name in valid_names):
            return False
        for expense in self.expenses:
            name = expense.person_name
            if not (name in valid_names or name in RESERVED_NAMES):
                return False
        return True

    def has_no_duplicates(self) -> bool:
        """Return True if no two expenses belong to the same person."""
        names = {expense.person_name for expense in self.expenses}
        return len(names) == len(self.expenses)

    def is_valid(self, valid_names: frozenset[Name]) -> bool:
        return (
            self.is_relevant()
            and self.is_positive()
            and self.is_known(valid_names)
            and self.has_no_duplicates()
        )

    # -------------------------------------------------------------------------
    # Transformations
    # -------------------------------------------------------------------------

    def remove_person(self, person_name: Name) -> "Transaction":
        """
        Return a new Transaction with person_name folded into OTHERS.

        The payee becomes OTHERS if it was person_name. The person's expense
        and any existing OTHERS expense are merged into one OTHERS expense
        carrying their combined weight, so the total weight is unchanged.
        A merged weight that is zero or negative is dropped instead.
        """
        new_payee = OTHERS if self.payee_name == person_name else self.payee_name
        new_expenses = set()
        merged = Fraction(0)
        for expense in self.expenses:
            if expense.person_name in (person_name, OTHERS):
                merged += expense.weight.value
            else:
                new_expenses.add(expense)
        if merged > 0:
            new_expenses.add(Expense(person_name=OTHERS, weight=Weight(value=merged)))

        return Transaction(
            amount=self.amount,
            description=self.description,
            payee_name=new_payee,
            expenses=frozenset(new_expenses),
            timestamp=self.timestamp,
        )

    # -------------------------------------------------------------------------
    # Portions
    # -------------------------------------------------------------------------

    def total_weight(self) -> Fraction:
        return sum((expense.weight.value for expense in self.expenses), Fraction(0))

    def _share_of(self, expense: Expense, total_weight: Fraction) -> Fraction:
        return expense.weight.value * self.amount.value / total_weight

    def get_portion(self, person_name: Name) -> Fraction:
        """
        Return the part of the amount person_name has to pay the payee.

        Raises:
            ZeroDivisionError: If the weights sum to zero.
        """
        total_weight = self.total_weight()
        return sum(
            (
                self._share_of(expense, total_weight)
                for expense in self.expenses
                if expense.person_name == person_name
            ),
            Fraction(0),
        )

    def get_all_portions(self) -> dict[Name, Fraction]:
        """Return each participant's portion. Assumes has_no_duplicates()."""
        total_weight = self.total_weight()
        return {
            expense.person_name: self._share_of(expense, total_weight)
            for expense in self.expenses
        }

    def get_portion_owed(self, person_name: Name) -> Fraction:
        """
        Return what person_name owes SELF because of this transaction.

        Positive: person_name owes SELF.
        Negative: SELF owes person_name.
        Zero: no net balance between them from this transaction.
        """
        # person is not relevant to SELF in this transaction
        if self.payee_name != person_name and self.payee_name != SELF:
            return Fraction(0)

        # SELF cannot owe itself
        if self.payee_name == SELF and person_name == SELF:
            return Fraction(0)

        # SELF owes the payee
        if self.payee_name == person_name:
            return -self.get_portion(SELF)

        # person owes SELF
        return self.get_portion(person_name)

    # -------------------------------------------------------------------------
    # Involvement
    # -------------------------------------------------------------------------

    def get_all_involved_person_names(self) -> frozenset[Name]:
        names = {expense.person_name for expense in self.expenses}
        names.add(self.payee_name)
        return frozenset(names)

    def is_person_involved(self, person_name: Name) -> bool:
        return person_name in self.get_all_involved_person_names()

    # -------------------------------------------------------------------------
    # Identity and ordering
    # -------------------------------------------------------------------------

    def is_same_transaction(self, other: Optional["Transaction"]) -> bool:
        """Field-by-field comparison, timestamp included."""
        if other is self:
            return True
        return (
            other is not None
            and other.amount == self.amount
            and other.description == self.description
            and other.payee_name == self.payee_name
            and other.expenses == self.expenses
            and other.timestamp == self.timestamp
        )

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Transaction):
            return False
        return (
            self.amount == other.amount
            and self.payee_name == other.payee_name
            and self.description == other.description
            and self.expenses == other.expenses
            and self.timestamp == other.timestamp
        )

    def __hash__(self) -> int:
        # Timestamp left out: equal transactions still hash equal.
        return hash((self.amount, self.description, self.payee_name, self.expenses))

    def __lt__(self, other: "Transaction") -> bool:
        # Most recent first.
        return other.timestamp < self.timestamp


# =============================================================================
# VALIDATION MODELS
# =============================================================================

class ValidationIssue(BaseModel):
    """A single reason a transaction cannot be used for balances."""

    field: str = Field(
        ...,
        description="Part of the transaction with the issue"
    )
    issue_type: str = Field(
        ...,
        description="Type of issue (e.g., 'not_relevant', 'unknown_person')"
    )
    message: str = Field(
        ...,
        description="Human-readable description of the issue"
    )
    severity: str = Field(
        ...,
        pattern="^(error|warning|info)$",
        description="Issue severity"
    )
    suggested_fix: Optional[str] = Field(
        default=None,
        description="Suggested fix if available"
    )


class ValidationResult(BaseModel):
    """Outcome of validating one transaction against a directory snapshot."""

    validated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
    is_valid: bool = Field(
        ...,
        description="Overall validation result"
    )
    issues: list[ValidationIssue] = Field(
        default_factory=list,
        description="All validation issues found"
    )

    @property
    def has_errors(self) -> bool:
        """Check if there are any error-level issues."""
        return any(issue.severity == "error" for issue in self.issues)

    @property
    def error_count(self) -> int:
        """Count error-level issues."""
        return sum(1 for issue in self.issues if issue.severity == "error")


# =============================================================================
# QUERY MODELS
# =============================================================================

class BalanceEntry(BaseModel):
    """Net balance between SELF and one person."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    person_name: Name
    balance: Fraction = Field(
        ...,
        description="Exact balance; positive means the person owes you"
    )
    display: str = Field(
        ...,
        description="Balance rounded for display"
    )

    @property
    def owes_self(self) -> bool:
        return self.balance > 0


class BalanceReport(BaseModel):
    """
    Balances across a set of transactions.

    Only valid transactions contribute; the rest are counted in
    skipped_count so a report never silently hides missing data.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    generated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
    entries: list[BalanceEntry] = Field(default_factory=list)
    total: Fraction = Field(
        ...,
        description="Sum of all balances; positive means you are owed overall"
    )
    total_display: str
    transaction_count: int = Field(ge=0)
    skipped_count: int = Field(ge=0)
