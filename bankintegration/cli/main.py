"""bankintegration command line interface"""

import asyncio
from typing import Optional

import typer
from pydantic import ValidationError
from pydantic_settings import SettingsError
from rich.console import Console

from bankintegration.cli.ui_components import build_accounts_table, print_error, print_report
from bankintegration.config import Settings
from bankintegration.domain.exceptions import DomainException
from bankintegration.infrastructure.clients.report import ReportClient
from bankintegration.infrastructure.export.excel import export_entries_to_excel
from bankintegration.infrastructure.observability.logging import setup_logging
from bankintegration.infrastructure.observability.metrics import write_metrics_textfile
from bankintegration.services.entries import route_response
from bankintegration.services.report import fetch_account_report

app = typer.Typer(no_args_is_help=True, help="Signed account reports from bankintegration.dk.")

_console = Console()


def _load_settings() -> Settings:
    """Settings from env and .env; an unparseable value exits with a red message"""
    try:
        return Settings()
    except (ValidationError, SettingsError) as e:
        print_error(_console, f"Invalid configuration: {e}")
        raise typer.Exit(code=1)


@app.command()
def fetch(
    account: str = typer.Argument(..., help="Bank account number."),
    integration_code: str = typer.Argument(..., help="Integration code for the account."),
    from_date: Optional[str] = typer.Argument(None, metavar="[FROM]", help="First day, yyyy-MM-dd."),
    to_date: Optional[str] = typer.Argument(None, metavar="[TO]", help="Last day, yyyy-MM-dd."),
    export: bool = typer.Option(True, "--export/--no-export", help="Write entries to an .xlsx file."),
) -> None:
    """Fetch account entries; defaults to the current month."""

    settings = _load_settings()
    setup_logging(settings.log_level)

    try:
        credentials = settings.credentials()
        client = ReportClient(report_url=settings.report_api_url, timeout=settings.http_timeout_seconds)
        body = asyncio.run(
            fetch_account_report(credentials, account, integration_code, from_date, to_date, client=client)
        )
    except DomainException as e:
        print_error(_console, str(e))
        raise typer.Exit(code=1)
    finally:
        if settings.metrics_textfile:
            write_metrics_textfile(settings.metrics_textfile)

    print_report(_console, body)

    if export:
        path = route_response(body, lambda entries, name: export_entries_to_excel(entries, name, settings.export_dir))
        if path:
            _console.print(f"Excel file saved to {path}", style="green", markup=False)


@app.command()
def accounts() -> None:
    """List the accounts configured in BANK_ACCOUNTS."""

    settings = _load_settings()

    try:
        bank_accounts = settings.accounts()
    except DomainException as e:
        print_error(_console, str(e))
        raise typer.Exit(code=1)

    if not bank_accounts:
        _console.print("No accounts configured.", style="yellow")
        _console.print("Set BANK_ACCOUNTS to a JSON list to add accounts.", style="yellow")
        return

    _console.print(build_accounts_table(bank_accounts))
    _console.print(f"Total accounts found: {len(bank_accounts)}", style="green")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
