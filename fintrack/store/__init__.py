"""Store layer - provides persistence for the application.

This module re-exports the public store types for easy importing.
"""

from fintrack.store.codec import decode, encode
from fintrack.store.ledger import LoadResult, LoadStatus, MutationResult, TransactionStore

__all__ = [
    # Codec
    "decode",
    "encode",
    # Store
    "LoadResult",
    "LoadStatus",
    "MutationResult",
    "TransactionStore",
]
