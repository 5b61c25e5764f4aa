"""Public interface for the ``transaction_analytics`` package.

This module exposes the helper class, the loader and the record model as the
stable import surface. There is no runtime logic here, only re-exports.
"""

from .api import TransactionAnalytics
from .loader import LoadError, load_transactions, parse_transactions
from .models import Transaction, Transactions

__all__ = [
    # API
    "TransactionAnalytics",
    # Loading
    "LoadError",
    "load_transactions",
    "parse_transactions",
    # Models / types
    "Transaction",
    "Transactions",
]
