"""Load the transactions document into an immutable dataset.

The document is a JSON array of transaction objects (see
:class:`~transaction_analytics.models.Transaction`). Loading is purely
structural: record order is preserved, nothing is deduplicated or normalized,
and unknown keys are dropped. Any failure to read or parse the document is
reported as :class:`LoadError` with the original exception chained.
"""

from __future__ import annotations

from os import PathLike
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from .logging_setup import get_logger
from .models import Transaction

_logger = get_logger("transaction_analytics.loader")

_DOCUMENT_ADAPTER: TypeAdapter[list[Transaction]] = TypeAdapter(list[Transaction])


class LoadError(Exception):
    """The transactions document could not be read or is not a transaction array."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"failed to load transactions from {path}: {reason}")
        self.path = path
        self.reason = reason


def parse_transactions(
    document: str | bytes, *, source: str = "<memory>"
) -> tuple[Transaction, ...]:
    """Validate an in-memory JSON document and return its records in order.

    ``source`` only labels error messages and log lines.
    """

    try:
        records = _DOCUMENT_ADAPTER.validate_json(document)
    except ValidationError as e:
        _logger.warning(
            "load_transactions:invalid_document source=%s errors=%d",
            source,
            e.error_count(),
        )
        raise LoadError(source, _summarize(e)) from e
    return tuple(records)


def load_transactions(path: str | PathLike[str]) -> tuple[Transaction, ...]:
    """Read ``path`` and return the dataset as a tuple of :class:`Transaction`.

    The file handle is closed before this function returns.
    """

    p = Path(path)
    try:
        raw = p.read_bytes()
    except OSError as e:
        _logger.warning("load_transactions:read_failed path=%s error=%s", p, e)
        raise LoadError(str(p), e.strerror or str(e)) from e

    dataset = parse_transactions(raw, source=str(p))
    _logger.info("load_transactions:loaded path=%s num_transactions=%d", p, len(dataset))
    return dataset


def _summarize(error: ValidationError) -> str:
    first = error.errors(include_url=False)[0]
    loc = ".".join(str(part) for part in first["loc"]) or "<document>"
    return f"{first['msg']} at {loc} ({error.error_count()} error(s))"


__all__ = ["LoadError", "load_transactions", "parse_transactions"]
