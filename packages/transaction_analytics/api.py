"""Public entry point: :class:`TransactionAnalytics`.

The class loads the transactions document once at construction and answers
the fixed catalogue of queries implemented in
:mod:`transaction_analytics.queries`. The dataset is held as a tuple of
frozen records, so one instance can be shared freely between readers.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from os import PathLike

from . import queries
from .config import resolve_transactions_path
from .loader import load_transactions
from .models import Transaction


class TransactionAnalytics:
    """Read-only summary queries over a finite set of transactions.

    Parameters
    ----------
    path:
        Location of the JSON document. When ``None`` the path comes from
        ``TA_TRANSACTIONS_PATH`` or defaults to ``./transactions.json``.

    Raises
    ------
    LoadError
        The document cannot be read or is not an array of transactions.
    """

    def __init__(self, path: str | PathLike[str] | None = None) -> None:
        self._transactions: tuple[Transaction, ...] = load_transactions(
            resolve_transactions_path(path)
        )

    @classmethod
    def from_transactions(cls, transactions: Iterable[Transaction]) -> TransactionAnalytics:
        """Build an instance over records already in memory, bypassing the loader."""
        instance = cls.__new__(cls)
        instance._transactions = tuple(transactions)
        return instance

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        return self._transactions

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self._transactions)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(num_transactions={len(self._transactions)})"

    # ---- Queries -----------------------------------------------------------

    def get_total_transaction_amount(self) -> float:
        """Sum of the amounts of all transactions."""
        return queries.total_transaction_amount(self._transactions)

    def get_total_transaction_amount_sent_by(self, sender_full_name: str) -> float:
        """Sum of the amounts of all transactions sent by ``sender_full_name``."""
        return queries.total_transaction_amount_sent_by(self._transactions, sender_full_name)

    def get_max_transaction_amount(self) -> float:
        """Highest transaction amount, ``-inf`` for an empty dataset."""
        return queries.max_transaction_amount(self._transactions)

    def count_unique_clients(self) -> int:
        """Number of distinct clients that sent or received a transaction."""
        return queries.count_unique_clients(self._transactions)

    def has_open_compliance_issues(self, client_full_name: str) -> bool:
        """Whether the client is beneficiary of a transaction with an unsolved issue."""
        return queries.has_open_compliance_issues(self._transactions, client_full_name)

    def get_transactions_by_beneficiary_name(self) -> dict[str, list[Transaction]]:
        """All transactions grouped by beneficiary name."""
        return queries.transactions_by_beneficiary_name(self._transactions)

    def get_unsolved_issue_ids(self) -> set[int]:
        """Identifiers of all open compliance issues."""
        return queries.unsolved_issue_ids(self._transactions)

    def get_all_solved_issue_messages(self) -> list[str]:
        """Messages of all solved issues, in dataset order."""
        return queries.solved_issue_messages(self._transactions)

    def get_top3_transactions_by_amount(self) -> list[Transaction]:
        """The three transactions with the highest amount, largest first."""
        return queries.top_transactions_by_amount(self._transactions, limit=3)

    def get_top_sender(self) -> str | None:
        """Sender with the largest total sent amount, if any."""
        return queries.top_sender(self._transactions)


__all__ = ["TransactionAnalytics"]
