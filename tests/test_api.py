import json
import math
from pathlib import Path

import pytest

from transaction_analytics import LoadError, TransactionAnalytics


@pytest.fixture
def analytics(sample_file: Path) -> TransactionAnalytics:
    return TransactionAnalytics(sample_file)


def test_reference_scenarios(analytics: TransactionAnalytics):
    assert len(analytics) == 5
    assert analytics.get_total_transaction_amount() == 1050
    assert analytics.get_total_transaction_amount_sent_by("Alice") == 350
    assert analytics.get_total_transaction_amount_sent_by("Zoe") == 0
    assert analytics.get_max_transaction_amount() == 400
    assert analytics.count_unique_clients() == 5
    assert analytics.has_open_compliance_issues("Carol") is True
    assert analytics.has_open_compliance_issues("Bob") is False
    assert analytics.has_open_compliance_issues("Alice") is False
    assert {
        name: [tx.mtn for tx in txs]
        for name, txs in analytics.get_transactions_by_beneficiary_name().items()
    } == {"Bob": [1, 3], "Carol": [2, 4], "Alice": [5]}
    assert analytics.get_unsolved_issue_ids() == {10}
    assert analytics.get_all_solved_issue_messages() == ["Resolved KYC"]
    assert [tx.mtn for tx in analytics.get_top3_transactions_by_amount()] == [5, 2, 3]
    assert analytics.get_top_sender() == "Eve"


def test_top3_returns_the_records_directly(analytics: TransactionAnalytics):
    top = analytics.get_top3_transactions_by_amount()

    assert len(top) == 3
    assert top[0] is analytics.transactions[4]


def test_queries_are_idempotent(analytics: TransactionAnalytics):
    for name in (
        "get_total_transaction_amount",
        "get_max_transaction_amount",
        "count_unique_clients",
        "get_transactions_by_beneficiary_name",
        "get_unsolved_issue_ids",
        "get_all_solved_issue_messages",
        "get_top3_transactions_by_amount",
        "get_top_sender",
    ):
        method = getattr(analytics, name)
        assert method() == method(), name


def test_dataset_is_read_only(analytics: TransactionAnalytics):
    assert isinstance(analytics.transactions, tuple)
    assert [tx.mtn for tx in analytics] == [1, 2, 3, 4, 5]
    with pytest.raises(AttributeError):
        analytics.transactions = ()  # type: ignore[misc]


def test_default_path_is_transactions_json_in_cwd(in_tmp_cwd: Path, sample_records):
    (in_tmp_cwd / "transactions.json").write_text(json.dumps(sample_records), encoding="utf-8")

    assert TransactionAnalytics().get_total_transaction_amount() == 1050


def test_env_var_overrides_default_path(in_tmp_cwd: Path, monkeypatch: pytest.MonkeyPatch):
    other = in_tmp_cwd / "other.json"
    other.write_text("[]", encoding="utf-8")
    monkeypatch.setenv("TA_TRANSACTIONS_PATH", "other.json")

    assert len(TransactionAnalytics()) == 0


def test_missing_document_fails_construction(in_tmp_cwd: Path):
    with pytest.raises(LoadError):
        TransactionAnalytics()


def test_empty_dataset(in_tmp_cwd: Path):
    path = in_tmp_cwd / "empty.json"
    path.write_text("[]", encoding="utf-8")
    analytics = TransactionAnalytics(path)

    assert analytics.get_total_transaction_amount() == 0
    assert analytics.get_max_transaction_amount() == -math.inf
    assert analytics.count_unique_clients() == 0
    assert analytics.get_transactions_by_beneficiary_name() == {}
    assert analytics.get_unsolved_issue_ids() == set()
    assert analytics.get_all_solved_issue_messages() == []
    assert analytics.get_top3_transactions_by_amount() == []
    assert analytics.get_top_sender() is None


def test_from_transactions_skips_the_loader(sample_transactions):
    analytics = TransactionAnalytics.from_transactions(iter(sample_transactions))

    assert analytics.transactions == sample_transactions
    assert analytics.get_top_sender() == "Eve"
    assert repr(analytics) == "TransactionAnalytics(num_transactions=5)"
