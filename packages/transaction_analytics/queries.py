"""Aggregation queries over a loaded dataset.

Every function here is pure: it reads the given sequence of
:class:`~transaction_analytics.models.Transaction` once and returns a fresh
value, never mutating its input. Each query is total over a well-formed
dataset, so nothing is caught here; unexpected errors surface to the caller
unchanged.

Name matching is exact and case-sensitive throughout.
"""

from __future__ import annotations

from .models import Transaction, Transactions

TOP_TRANSACTIONS_DEFAULT_LIMIT = 3


# ---------------------------------------------------------------------------
# Amount aggregates
# ---------------------------------------------------------------------------


def total_transaction_amount(transactions: Transactions) -> float:
    """Sum of ``amount`` over all transactions (``0.0`` when empty)."""
    return float(sum(tx.amount for tx in transactions))


def total_transaction_amount_sent_by(transactions: Transactions, sender_full_name: str) -> float:
    """Sum of ``amount`` over transactions whose sender is ``sender_full_name``.

    Returns ``0.0`` when the sender does not appear. Summed over every sender
    this equals :func:`total_transaction_amount` exactly only when the amounts
    are exactly representable; otherwise the two agree up to float rounding.
    """
    return float(sum(tx.amount for tx in transactions if tx.sender_full_name == sender_full_name))


def max_transaction_amount(transactions: Transactions) -> float:
    """Largest ``amount`` in the dataset.

    An empty dataset yields ``float("-inf")``, the identity for ``max``.
    """
    return max((tx.amount for tx in transactions), default=float("-inf"))


def sent_amount_by_sender(transactions: Transactions) -> dict[str, float]:
    """Per-sender totals, keyed in the order senders first appear."""

    totals: dict[str, float] = {}
    for tx in transactions:
        totals[tx.sender_full_name] = totals.get(tx.sender_full_name, 0.0) + tx.amount
    return totals


def top_sender(transactions: Transactions) -> str | None:
    """Sender with the greatest total sent amount.

    Only a strictly positive total qualifies, so an empty dataset (or one
    where every total is zero) yields ``None``. On equal totals the sender
    seen first wins.
    """

    best: str | None = None
    best_total = 0.0
    for sender, total in sent_amount_by_sender(transactions).items():
        if total > best_total:
            best, best_total = sender, total
    return best


def top_transactions_by_amount(
    transactions: Transactions, limit: int = TOP_TRANSACTIONS_DEFAULT_LIMIT
) -> list[Transaction]:
    """Up to ``limit`` transactions with the largest amounts, largest first.

    The sort is stable: equal amounts keep their dataset order.
    """

    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")
    ranked = sorted(transactions, key=lambda tx: tx.amount, reverse=True)
    return ranked[:limit]


# ---------------------------------------------------------------------------
# Clients and grouping
# ---------------------------------------------------------------------------


def count_unique_clients(transactions: Transactions) -> int:
    """Number of distinct names appearing as sender or beneficiary."""

    clients: set[str] = set()
    for tx in transactions:
        clients.add(tx.sender_full_name)
        clients.add(tx.beneficiary_full_name)
    return len(clients)


def transactions_by_beneficiary_name(transactions: Transactions) -> dict[str, list[Transaction]]:
    """Group transactions by beneficiary name.

    Keys appear in first-seen order and each list keeps dataset order.
    """

    grouped: dict[str, list[Transaction]] = {}
    for tx in transactions:
        grouped.setdefault(tx.beneficiary_full_name, []).append(tx)
    return grouped


# ---------------------------------------------------------------------------
# Compliance issues
# ---------------------------------------------------------------------------


def has_open_compliance_issues(transactions: Transactions, client_full_name: str) -> bool:
    """Whether ``client_full_name`` is the beneficiary of a transaction with an open issue.

    Only the beneficiary side is consulted; a client who merely sends a
    transaction with an open issue is not reported.
    """
    return any(
        tx.has_open_issue and tx.beneficiary_full_name == client_full_name for tx in transactions
    )


def unsolved_issue_ids(transactions: Transactions) -> set[int]:
    """Distinct ``issue_id`` values of transactions whose issue is open."""
    return {tx.issue_id for tx in transactions if tx.has_open_issue and tx.issue_id is not None}


def solved_issue_messages(transactions: Transactions) -> list[str]:
    """Messages of solved issues in dataset order.

    Transactions without a message (typically those with no issue at all)
    contribute nothing.
    """
    return [
        tx.issue_message
        for tx in transactions
        if tx.issue_solved and tx.issue_message is not None
    ]


__all__ = [
    "TOP_TRANSACTIONS_DEFAULT_LIMIT",
    "count_unique_clients",
    "has_open_compliance_issues",
    "max_transaction_amount",
    "sent_amount_by_sender",
    "solved_issue_messages",
    "top_sender",
    "top_transactions_by_amount",
    "total_transaction_amount",
    "total_transaction_amount_sent_by",
    "transactions_by_beneficiary_name",
    "unsolved_issue_ids",
]
