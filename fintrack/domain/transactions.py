"""Pure functions for transaction records and summaries.

This module contains the functional core for transaction operations:
- No I/O operations (no files, no console)
- No side effects beyond mutating the records passed in
- Pure data transformations
- Easy to test

Amounts are native floats; rounding to two decimals is display-only.
"""

import math
import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, TypedDict

from fintrack.domain.models import EXPENSE, INCOME, Amount, Category, Description, TransactionId
from fintrack.errors import InvalidInputError

# ASCII only; int() and float() also accept underscores and non-ASCII digits
AMOUNT_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")
ID_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass
class Transaction:
    """A single income or expense entry.

    The id is fixed once the record is created; category, amount and
    description are edited in place by the store.
    """

    id: TransactionId
    category: Category
    amount: Amount
    description: Description

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "id" and "id" in self.__dict__:
            raise AttributeError("Transaction id cannot be changed")
        super().__setattr__(name, value)


@dataclass(frozen=True)
class Summary:
    """Immutable income/expense totals."""

    income_total: float
    expense_total: float
    net_flow: float


def next_id(transactions: Sequence[Transaction]) -> TransactionId:
    """Calculate the id for the next new transaction.

    The id is derived from the last record in insertion order, not from the
    highest id. Once the tail record has been deleted, or a lower id sits at
    the tail, the returned id can equal one that is still in use.

    Args:
        transactions: Records in insertion order.

    Returns:
        1 for an empty collection, otherwise the last record's id plus one.
    """
    if not transactions:
        return TransactionId(1)
    return TransactionId(transactions[-1].id + 1)


def matches_category(category: str, expected: str) -> bool:
    """Check if a category label matches, ignoring case."""
    return category.casefold() == expected.casefold()


def summarize(transactions: Sequence[Transaction]) -> Summary:
    """Calculate income, expense and net flow totals.

    Records whose category is neither "Income" nor "Expense" (in any case)
    are left out of both totals.

    Args:
        transactions: Records to total.

    Returns:
        Summary with unrounded totals.
    """
    income_total = 0.0
    expense_total = 0.0

    for txn in transactions:
        if matches_category(txn.category, INCOME):
            income_total += txn.amount
        elif matches_category(txn.category, EXPENSE):
            expense_total += txn.amount

    return Summary(
        income_total=income_total,
        expense_total=expense_total,
        net_flow=income_total - expense_total,
    )


def parse_amount(raw: str) -> Amount:
    """Parse user-supplied amount text.

    Args:
        raw: Amount as typed (e.g. "12.50", "-3").

    Returns:
        Parsed amount.

    Raises:
        InvalidInputError: If the text is empty, not a plain decimal number,
            or too large to be finite.
    """
    text = raw.strip()
    if not text:
        raise InvalidInputError("Amount is required")

    if not AMOUNT_PATTERN.fullmatch(text):
        raise InvalidInputError(f"Invalid amount: {raw!r}")

    value = float(text)

    if not math.isfinite(value):
        raise InvalidInputError(f"Amount must be a finite number: {raw!r}")

    return Amount(value)


def parse_transaction_id(raw: str) -> TransactionId:
    """Parse user-supplied transaction id text.

    Raises:
        InvalidInputError: If the text is not an ASCII base-10 integer.
    """
    text = raw.strip()
    if not ID_PATTERN.fullmatch(text):
        raise InvalidInputError(f"Invalid transaction ID: {raw!r}")
    return TransactionId(int(text, 10))


def format_amount(amount: float) -> str:
    """Format amount for display with two decimal places."""
    return f"{amount:,.2f}"


class CsvMapping(TypedDict):
    """CSV column mapping for imports."""

    type_column: str
    amount_column: str
    description_column: str


@dataclass(frozen=True)
class ParsedRow:
    """Immutable transaction fields parsed from one CSV row."""

    category: Category
    amount: Amount
    description: Description


def analyze_csv_columns(headers: Sequence[str]) -> CsvMapping:
    """Find the type, amount and description columns, ignoring case.

    Args:
        headers: CSV header names.

    Returns:
        Mapping of each field to its header, or "" when not found.
    """
    by_name = {header.strip().casefold(): header for header in headers}
    return CsvMapping(
        type_column=by_name.get("type", by_name.get("category", "")),
        amount_column=by_name.get("amount", ""),
        description_column=by_name.get("description", ""),
    )


def parse_csv_rows(rows: Sequence[dict[str, str]], mapping: CsvMapping) -> list[ParsedRow]:
    """Parse CSV rows into transaction fields.

    Every row is parsed before anything is returned, so a single bad row
    rejects the whole file.

    Args:
        rows: Rows keyed by header.
        mapping: Column mapping from analyze_csv_columns.

    Returns:
        Parsed rows in file order.

    Raises:
        InvalidInputError: If a column is missing or an amount is invalid.
    """
    missing = [field for field, column in mapping.items() if not column]
    if missing:
        raise InvalidInputError(f"CSV is missing columns: {', '.join(missing)}")

    parsed = []
    for row_num, row in enumerate(rows, start=2):  # row 1 is the header
        try:
            amount = parse_amount(str(row[mapping["amount_column"]]))
        except InvalidInputError as e:
            raise InvalidInputError(f"Row {row_num}: {e}") from None

        parsed.append(
            ParsedRow(
                category=Category(str(row[mapping["type_column"]]).strip()),
                amount=amount,
                description=Description(str(row[mapping["description_column"]])),
            )
        )

    return parsed
