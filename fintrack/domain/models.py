"""Domain type definitions for fintrack.

These NewTypes provide semantic clarity and help with type checking:
- Amount: Signed monetary amount (native float, no currency unit)
- Category: Transaction type label ("Income", "Expense", ...)
- Description: Transaction description text
- TransactionId: Identifier assigned from the store's next id
"""

from typing import NewType

# Amounts are kept as plain floats; rounding only happens for display
Amount = NewType("Amount", float)

# Category label, matched case-insensitively by the summary only
Category = NewType("Category", str)

# Transaction description text
Description = NewType("Description", str)

TransactionId = NewType("TransactionId", int)

INCOME = Category("Income")
EXPENSE = Category("Expense")
