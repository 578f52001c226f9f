"""Serialization of the transaction collection to the data file format.

The data file is a JSON array with one object per transaction:

    [
      {"id": 1, "type": "Income", "amount": 100.0, "description": "Salary"}
    ]

The whole collection is encoded and decoded at once; there is no header or
version tag.
"""

import json
from collections.abc import Sequence
from typing import Any

from fintrack.domain.models import Amount, Category, Description, TransactionId
from fintrack.domain.transactions import Transaction
from fintrack.errors import CodecError

FIELDS = ("id", "type", "amount", "description")


def transaction_to_dict(txn: Transaction) -> dict[str, Any]:
    """Convert a transaction to its on-disk mapping."""
    return {
        "id": txn.id,
        "type": txn.category,
        "amount": txn.amount,
        "description": txn.description,
    }


def transaction_from_dict(data: Any, index: int = 0) -> Transaction:
    """Build a transaction from its on-disk mapping.

    Args:
        data: Decoded JSON value for one record.
        index: Position in the file, used in error messages.

    Returns:
        Transaction built from the mapping.

    Raises:
        CodecError: If the value is not a well-formed record.
    """
    if not isinstance(data, dict):
        raise CodecError(f"Record {index} is not an object")

    missing = [field for field in FIELDS if field not in data]
    if missing:
        raise CodecError(f"Record {index} is missing {', '.join(missing)}")

    txn_id = data["id"]
    category = data["type"]
    amount = data["amount"]
    description = data["description"]

    # bool is a subclass of int, but never a valid id or amount
    if isinstance(txn_id, bool) or not isinstance(txn_id, int):
        raise CodecError(f"Record {index} has a non-integer id")
    if isinstance(amount, bool) or not isinstance(amount, (int, float)):
        raise CodecError(f"Record {index} has a non-numeric amount")
    if not isinstance(category, str) or not isinstance(description, str):
        raise CodecError(f"Record {index} has non-text type or description")

    return Transaction(
        id=TransactionId(txn_id),
        category=Category(category),
        amount=Amount(float(amount)),
        description=Description(description),
    )


def encode(transactions: Sequence[Transaction]) -> str:
    """Encode the full collection as data file text."""
    return json.dumps([transaction_to_dict(txn) for txn in transactions], indent=2)


def decode(text: str) -> list[Transaction]:
    """Decode data file text into transactions, preserving order.

    Raises:
        CodecError: If the text is not a JSON array of well-formed records.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise CodecError(f"Malformed data file: {e}") from e

    if not isinstance(data, list):
        raise CodecError("Data file does not contain a list of transactions")

    return [transaction_from_dict(item, i) for i, item in enumerate(data)]
