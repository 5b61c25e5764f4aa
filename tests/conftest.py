"""Shared fixtures: the reference dataset and per-test isolation.

``packages/`` is put on ``sys.path`` so the package imports without an
editable install. Logging configuration is global to the process; it is reset
around each test so CLI runs don't leak handlers into later tests.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import pytest

_ROOT = Path(__file__).resolve().parents[1]
_PKG_DIR = _ROOT / "packages"
if str(_PKG_DIR) not in sys.path:
    sys.path.insert(0, str(_PKG_DIR))

from transaction_analytics import Transaction  # noqa: E402
from transaction_analytics.logging_setup import reset_logging  # noqa: E402

SAMPLE_RECORDS: list[dict[str, Any]] = [
    {
        "mtn": 1,
        "amount": 100,
        "senderFullName": "Alice",
        "senderAge": 30,
        "beneficiaryFullName": "Bob",
        "beneficiaryAge": 41,
        "issueId": None,
        "issueSolved": True,
        "issueMessage": None,
    },
    {
        "mtn": 2,
        "amount": 250,
        "senderFullName": "Alice",
        "senderAge": 30,
        "beneficiaryFullName": "Carol",
        "beneficiaryAge": 25,
        "issueId": 10,
        "issueSolved": False,
        "issueMessage": "AML hold",
    },
    {
        "mtn": 3,
        "amount": 250,
        "senderFullName": "Dan",
        "senderAge": 52,
        "beneficiaryFullName": "Bob",
        "beneficiaryAge": 41,
        "issueId": 11,
        "issueSolved": True,
        "issueMessage": "Resolved KYC",
    },
    {
        "mtn": 4,
        "amount": 50,
        "senderFullName": "Dan",
        "senderAge": 52,
        "beneficiaryFullName": "Carol",
        "beneficiaryAge": 25,
        "issueId": 10,
        "issueSolved": False,
        "issueMessage": "AML hold",
    },
    {
        "mtn": 5,
        "amount": 400,
        "senderFullName": "Eve",
        "senderAge": 28,
        "beneficiaryFullName": "Alice",
        "beneficiaryAge": 30,
        "issueId": None,
        "issueSolved": True,
        "issueMessage": None,
    },
]


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch):
    """Clear package env vars and undo any logging configuration after the test."""

    monkeypatch.delenv("TA_TRANSACTIONS_PATH", raising=False)
    monkeypatch.delenv("TRANSACTION_ANALYTICS_LOG_LEVEL", raising=False)
    yield
    reset_logging()


@pytest.fixture
def sample_records() -> list[dict[str, Any]]:
    return [dict(r) for r in SAMPLE_RECORDS]


@pytest.fixture
def sample_transactions() -> tuple[Transaction, ...]:
    return tuple(Transaction.model_validate(r) for r in SAMPLE_RECORDS)


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    path = tmp_path / "transactions.json"
    path.write_text(json.dumps(SAMPLE_RECORDS), encoding="utf-8")
    return path


@pytest.fixture
def in_tmp_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test with ``tmp_path`` as the working directory."""

    monkeypatch.chdir(tmp_path)
    return tmp_path
