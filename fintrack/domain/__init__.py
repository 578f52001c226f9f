"""Domain models and types for fintrack.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Business logic separated from persistence and the CLI
"""

from fintrack.domain.models import EXPENSE, INCOME, Amount, Category, Description, TransactionId

__all__ = ["Amount", "Category", "Description", "TransactionId", "INCOME", "EXPENSE"]
