"""Rich UI components for the CLI"""

from typing import List

from rich.console import Console
from rich.table import Table

from bankintegration.config import BankAccount


def build_accounts_table(accounts: List[BankAccount]) -> Table:
    table = Table(title="Available Accounts", title_style="bold green")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Inst. code", style="white")
    table.add_column("BBAN", style="white")
    table.add_column("Integration key", style="magenta")
    for account in accounts:
        table.add_row(account.name, account.institution_code, account.bban, account.integration_key)
    return table


def print_report(console: Console, body: str) -> None:
    """Print the raw report body; markup is disabled because JSON contains brackets"""
    console.print("Result from bankintegration.dk:", style="bold cyan")
    console.print()
    console.print(body, markup=False, highlight=False, soft_wrap=True)
    console.print()


def print_error(console: Console, message: str) -> None:
    console.print(f"Error: {message}", style="bold red", markup=False)
