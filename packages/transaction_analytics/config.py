"""Configuration for locating the transactions document.

Default: ``./transactions.json`` under the current working directory.
Override: ``TA_TRANSACTIONS_PATH`` environment variable (absolute or relative),
or an explicit path passed by the caller, which always wins.
"""

from __future__ import annotations

import os
from os import PathLike
from pathlib import Path

DEFAULT_TRANSACTIONS_FILE = "transactions.json"
TRANSACTIONS_PATH_ENV_VAR = "TA_TRANSACTIONS_PATH"


def resolve_transactions_path(path: str | PathLike[str] | None = None) -> Path:
    """Return the absolute path of the transactions document to load."""

    if path is not None:
        candidate = Path(path)
    else:
        env_val = os.getenv(TRANSACTIONS_PATH_ENV_VAR)
        if env_val and env_val.strip():
            candidate = Path(env_val.strip())
        else:
            candidate = Path(DEFAULT_TRANSACTIONS_FILE)
    candidate = candidate.expanduser()
    if not candidate.is_absolute():
        candidate = Path.cwd() / candidate
    return candidate


__all__ = [
    "DEFAULT_TRANSACTIONS_FILE",
    "TRANSACTIONS_PATH_ENV_VAR",
    "resolve_transactions_path",
]
