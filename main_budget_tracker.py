"""Mini README: Entry point CLI for the budget tracker.

This script exposes a Typer CLI with two front ends over the same ledger
code: ``run`` serves the FastAPI dashboard through uvicorn, and ``session``
drives a ``BudgetScreen`` from the terminal. Both read defaults from
``BUDGET_*`` environment variables. Balances live only as long as the
process.
"""

from __future__ import annotations

from typing import Optional

import typer
import uvicorn

from budgettracker.configuration import get_settings
from budgettracker.ledger import Ledger
from budgettracker.logging_utils import configure_root_logger
from budgettracker.presentation import BudgetScreen

cli = typer.Typer(help="Track income and expenses in Riels and Dollars.")

SESSION_MENU = "[+] income  [-] expense  [c] currency  [h] history  [q] quit"


@cli.command()
def run(
    host: Optional[str] = typer.Option(None, help="Host interface to bind."),
    port: Optional[int] = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the web dashboard using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    # Browsers cannot open the 0.0.0.0 / :: wildcard, so point at loopback instead.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting budget tracker on {effective_host}:{effective_port}.\n"
        f"Open your browser at http://{browser_host}:{effective_port}"
    )
    uvicorn.run(
        "budgettracker.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


def _echo_balances(screen: BudgetScreen) -> None:
    typer.echo("Current Balance")
    for line in screen.balance_lines():
        typer.echo(f"  {line}")


def _echo_history(screen: BudgetScreen) -> None:
    rows = screen.history_rows()
    if not rows:
        typer.echo("No transactions yet.")
        return
    for row in rows:
        suffix = f" - {row.description}" if row.description else ""
        typer.echo(f"  {row.amount} [{row.kind}]{suffix}")


@cli.command()
def session() -> None:
    """Record transactions interactively until ``q`` is entered."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    screen = BudgetScreen(Ledger(), default_currency=settings.default_currency)
    _echo_balances(screen)

    while True:
        choice = typer.prompt(f"{SESSION_MENU} ({screen.currency.code})").strip().lower()
        if choice == "q":
            break
        if choice in {"+", "-"}:
            screen.amount_text = typer.prompt("Amount", default="", show_default=False)
            screen.description = typer.prompt("Description", default="", show_default=False)
            transaction = screen.submit_income() if choice == "+" else screen.submit_expense()
            if transaction is None:
                typer.echo("Amount must be a number; nothing recorded.")
                continue
            _echo_balances(screen)
        elif choice == "c":
            code = typer.prompt("Currency (KHR/USD)")
            try:
                screen.select_currency(code)
            except ValueError as error:
                typer.echo(str(error))
        elif choice == "h":
            if screen.toggle_history():
                _echo_history(screen)
            else:
                typer.echo("History hidden.")
        else:
            typer.echo(f"Unknown command {choice!r}.")

    screen.close()


if __name__ == "__main__":
    cli()
