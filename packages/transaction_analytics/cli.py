"""Typer-based console interface for ``transaction_analytics``.

A thin, read-only wrapper over :class:`~transaction_analytics.api.TransactionAnalytics`.
The root callback loads ``.env`` from the working directory (without
overriding variables already set), configures logging, and stores the
``--path`` option; each command loads the document and prints one query
result. Load failures are reported on stderr with exit code 1.
"""

from __future__ import annotations

from pathlib import Path

import typer
from dotenv import load_dotenv
from typer.models import OptionInfo

from .api import TransactionAnalytics
from .loader import LoadError
from .logging_setup import configure_logging
from .queries import sent_amount_by_sender, top_transactions_by_amount

app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help="Summary queries over a JSON document of transactions.",
)

# Module-level option objects keep calls out of parameter defaults (ruff B008).
PATH_OPTION: OptionInfo = typer.Option(
    None,
    "--path",
    "-p",
    help="Transactions JSON file (defaults to TA_TRANSACTIONS_PATH or ./transactions.json).",
    dir_okay=False,
    file_okay=True,
    exists=False,  # missing files are reported by the loader
)
LIMIT_OPTION: OptionInfo = typer.Option(3, "--limit", "-n", min=0, help="Number of rows to show.")


def _format_amount(value: float) -> str:
    return f"{value:.2f}"


def _open(ctx: typer.Context) -> TransactionAnalytics:
    path: Path | None = ctx.obj.get("path") if ctx.obj else None
    try:
        return TransactionAnalytics(path)
    except LoadError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e


@app.callback()
def _root(ctx: typer.Context, path: Path | None = PATH_OPTION) -> None:
    """Load ``.env``, configure logging and remember the document path."""

    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)
    configure_logging()
    ctx.obj = {"path": path}


@app.command("summary")
def summary_cmd(ctx: typer.Context) -> None:
    """Print the headline figures of the dataset."""

    analytics = _open(ctx)
    top = analytics.get_top_sender()
    unsolved = sorted(analytics.get_unsolved_issue_ids())

    typer.echo(f"transactions\t{len(analytics)}")
    typer.echo(f"total_amount\t{_format_amount(analytics.get_total_transaction_amount())}")
    if len(analytics):
        typer.echo(f"max_amount\t{_format_amount(analytics.get_max_transaction_amount())}")
    else:
        typer.echo("max_amount\t-")
    typer.echo(f"unique_clients\t{analytics.count_unique_clients()}")
    typer.echo(f"unsolved_issue_ids\t{','.join(str(i) for i in unsolved) or '-'}")
    if top is None:
        typer.echo("top_sender\t-")
    else:
        total = sent_amount_by_sender(analytics.transactions)[top]
        typer.echo(f"top_sender\t{top}\t{_format_amount(total)}")


@app.command("sent-by")
def sent_by_cmd(ctx: typer.Context, sender_full_name: str) -> None:
    """Print the total amount sent by SENDER_FULL_NAME."""

    analytics = _open(ctx)
    amount = analytics.get_total_transaction_amount_sent_by(sender_full_name)
    typer.echo(_format_amount(amount))


@app.command("open-issues")
def open_issues_cmd(ctx: typer.Context, client_full_name: str) -> None:
    """Print whether CLIENT_FULL_NAME has an unsolved compliance issue."""

    analytics = _open(ctx)
    typer.echo("yes" if analytics.has_open_compliance_issues(client_full_name) else "no")


@app.command("by-beneficiary")
def by_beneficiary_cmd(ctx: typer.Context) -> None:
    """Print each beneficiary with the ids of the transactions they received."""

    analytics = _open(ctx)
    for name, txs in analytics.get_transactions_by_beneficiary_name().items():
        typer.echo(f"{name}\t{','.join(str(tx.mtn) for tx in txs)}")


@app.command("solved-messages")
def solved_messages_cmd(ctx: typer.Context) -> None:
    """Print the messages of solved compliance issues, one per line."""

    analytics = _open(ctx)
    for message in analytics.get_all_solved_issue_messages():
        typer.echo(message)


@app.command("top")
def top_cmd(ctx: typer.Context, limit: int = LIMIT_OPTION) -> None:
    """Print the largest transactions by amount."""

    analytics = _open(ctx)
    for tx in top_transactions_by_amount(analytics.transactions, limit=limit):
        typer.echo(
            f"{tx.mtn}\t{_format_amount(tx.amount)}\t"
            f"{tx.sender_full_name} -> {tx.beneficiary_full_name}"
        )


if __name__ == "__main__":  # pragma: no cover
    app()
