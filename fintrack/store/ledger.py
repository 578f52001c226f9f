"""Transaction store: the in-memory collection and its data file.

The store owns the ordered list of transactions for the process. Every
mutation rewrites the whole data file; the file is read once when the store
is opened and again on an explicit ``load()``.

Persistence problems never escape the store as exceptions. Load outcomes are
returned as a ``LoadResult`` and write outcomes as a ``MutationResult``, so
the caller decides what to show the user.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from fintrack.domain.models import Amount, Category, Description, TransactionId
from fintrack.domain.transactions import Summary, Transaction, next_id, summarize
from fintrack.errors import CodecError
from fintrack.logging_setup import get_logger
from fintrack.store.codec import decode, encode

logger = get_logger(__name__)


class LoadStatus(Enum):
    """Outcome of reading the data file."""

    LOADED = "loaded"
    NO_PRIOR_DATA = "no_prior_data"
    LOAD_FAILED = "load_failed"


@dataclass(frozen=True)
class LoadResult:
    """Immutable load outcome."""

    status: LoadStatus
    count: int = 0
    error: str | None = None


@dataclass(frozen=True)
class MutationResult:
    """Immutable outcome of add, edit or delete.

    ``matched`` is the number of records affected; zero means the call was a
    no-op and nothing was written.
    """

    matched: int
    saved: bool
    error: str | None = None


class TransactionStore:
    """Ordered transaction collection persisted to a single file."""

    def __init__(self, data_path: Path) -> None:
        self.data_path = data_path
        self._transactions: list[Transaction] = []
        self.load_result = self.load()

    def load(self) -> LoadResult:
        """Replace the in-memory collection with the data file contents.

        A missing file is a normal first run and yields NO_PRIOR_DATA. An
        unreadable or undecodable file yields LOAD_FAILED; in both cases the
        collection is left empty.
        """
        self._transactions = []

        if not self.data_path.exists():
            logger.info("No data file at %s, starting fresh", self.data_path)
            return LoadResult(LoadStatus.NO_PRIOR_DATA)

        try:
            text = self.data_path.read_text(encoding="utf-8")
            transactions = decode(text) if text.strip() else []
        except (OSError, UnicodeDecodeError, CodecError) as e:
            logger.warning("Could not load %s: %s", self.data_path, e)
            return LoadResult(LoadStatus.LOAD_FAILED, error=str(e))

        self._transactions = transactions
        logger.debug("Loaded %d transactions from %s", len(transactions), self.data_path)
        return LoadResult(LoadStatus.LOADED, count=len(transactions))

    def _save(self, matched: int) -> MutationResult:
        try:
            self.data_path.parent.mkdir(parents=True, exist_ok=True)
            self.data_path.write_text(encode(self._transactions), encoding="utf-8")
        except OSError as e:
            logger.warning("Could not save %s: %s", self.data_path, e)
            return MutationResult(matched=matched, saved=False, error=str(e))

        logger.debug("Saved %d transactions to %s", len(self._transactions), self.data_path)
        return MutationResult(matched=matched, saved=True)

    def add(self, transaction: Transaction) -> MutationResult:
        """Append a transaction and persist.

        The id is not checked against existing records.
        """
        self._transactions.append(transaction)
        return self._save(matched=1)

    def add_new(
        self, category: Category, amount: Amount, description: Description
    ) -> tuple[Transaction, MutationResult]:
        """Create a transaction with the next id, append it and persist.

        Returns:
            Tuple of (transaction, save result).
        """
        transaction = Transaction(
            id=self.next_id(),
            category=category,
            amount=amount,
            description=description,
        )
        return transaction, self.add(transaction)

    def edit(
        self,
        transaction_id: TransactionId,
        category: Category,
        amount: Amount,
        description: Description,
    ) -> MutationResult:
        """Overwrite the fields of every transaction with this id.

        The file is rewritten after each matching record; the first failed
        write is the one reported. An unknown id is a silent no-op.
        """
        matched = 0
        error: str | None = None

        for txn in self._transactions:
            if txn.id == transaction_id:
                txn.category = category
                txn.amount = amount
                txn.description = description
                matched += 1
                result = self._save(matched)
                error = error or result.error

        return MutationResult(matched=matched, saved=bool(matched) and error is None, error=error)

    def delete(self, transaction_id: TransactionId) -> MutationResult:
        """Remove every transaction with this id and persist.

        An unknown id is a silent no-op.
        """
        kept = [txn for txn in self._transactions if txn.id != transaction_id]
        matched = len(self._transactions) - len(kept)
        if not matched:
            return MutationResult(matched=0, saved=False)

        self._transactions[:] = kept
        return self._save(matched)

    def next_id(self) -> TransactionId:
        """Id for the next new transaction (last record's id plus one)."""
        return next_id(self._transactions)

    def list_transactions(self) -> list[Transaction]:
        """Return the live collection in insertion order.

        The list is not a copy; re-fetch after mutations made elsewhere.
        """
        return self._transactions

    def summarize(self) -> Summary:
        """Calculate income, expense and net flow totals."""
        return summarize(self._transactions)
