"""Data model for ``transaction_analytics``.

A :class:`Transaction` is one element of the top-level JSON array in the
transactions document. JSON keys are camelCase (``senderFullName``,
``issueSolved`` ...); the Python attributes are the snake_case equivalents and
either spelling is accepted on input.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeAlias

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# ---------------------------------------------------------------------------
# Core record
# ---------------------------------------------------------------------------


class Transaction(BaseModel):
    """A transfer from a sender to a beneficiary, optionally with a compliance issue.

    Attributes
    ----------
    mtn:
        Transaction identifier. Not guaranteed unique across a document.
    amount:
        Transferred amount; units are not specified by the source document.
    sender_full_name, beneficiary_full_name:
        Free-form full names. Compared with exact, case-sensitive equality.
    sender_age, beneficiary_age:
        Carried through from the document but not used by any query.
    issue_id, issue_message:
        Present when a compliance issue is attached to the transaction.
        Several transactions may share an ``issue_id``; they refer to the same
        logical issue.
    issue_solved:
        ``False`` marks an open issue. Defaults to ``True`` when the document
        omits it, which is the convention for transactions without an issue.
    """

    model_config = ConfigDict(
        strict=True,
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    mtn: int
    amount: float
    sender_full_name: str
    sender_age: int | None = None
    beneficiary_full_name: str
    beneficiary_age: int | None = None
    issue_id: int | None = None
    issue_solved: bool = True
    issue_message: str | None = None

    @property
    def has_issue(self) -> bool:
        """Whether a compliance issue is attached (solved or not)."""
        return self.issue_id is not None or self.issue_message is not None

    @property
    def has_open_issue(self) -> bool:
        """Whether an attached issue is still unsolved (``issue_solved`` is false)."""
        return not self.issue_solved


# Read-only ordered dataset as produced by the loader.
Transactions: TypeAlias = Sequence[Transaction]


__all__ = ["Transaction", "Transactions"]
