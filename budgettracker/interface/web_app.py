"""Mini README: FastAPI-powered budget dashboard.

Structure:
    * create_application - application factory wiring routes, templates and
      one in-memory ledger for the life of the process.
    * TransactionRequest - JSON body accepted by the API endpoint.

The HTML routes drive a ``BudgetScreen`` exactly as a user would: typed
fields are copied in and one of the two submit actions is triggered. The
JSON routes talk to the ledger directly. State is lost on restart.
"""

from __future__ import annotations

from collections import deque
from pathlib import Path
from typing import Deque, Optional

from fastapi import FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel

from ..configuration import get_settings
from ..ledger import Currency, Ledger, Transaction, TransactionKind
from ..logging_utils import get_logger
from ..presentation import BudgetScreen, format_amount, parse_amount

LOGGER = get_logger(__name__)

RECENT_MESSAGE_LIMIT = 5


class TransactionRequest(BaseModel):
    """Payload for ``POST /api/transactions``; the amount stays text until parsed."""

    amount: str
    currency: str
    kind: str
    description: str = ""


def create_application(ledger: Optional[Ledger] = None) -> FastAPI:
    """Create the FastAPI application with routes and an in-memory ledger."""

    app = FastAPI(title="Budget Tracker", version="0.1.0")
    templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
    static_directory = Path(__file__).parent / "static"
    app.mount("/static", StaticFiles(directory=str(static_directory)), name="static")

    settings = get_settings()
    ledger = ledger if ledger is not None else Ledger()
    screen = BudgetScreen(ledger, default_currency=settings.default_currency)
    recent_messages: Deque[str] = deque(maxlen=RECENT_MESSAGE_LIMIT)

    def _remember(_: Ledger, transaction: Transaction) -> None:
        recent_messages.appendleft(
            f"{transaction.kind.value}: {format_amount(transaction.amount, transaction.currency)}"
            + (f" ({transaction.description})" if transaction.description else "")
        )

    ledger.subscribe(_remember)
    app.state.ledger = ledger
    app.state.screen = screen

    def _render_dashboard(request: Request, error: Optional[str] = None) -> HTMLResponse:
        return templates.TemplateResponse(
            request,
            "dashboard.html",
            {
                "balances": screen.balance_lines(),
                "amount_text": screen.amount_text,
                "description": screen.description,
                "selected_currency": screen.currency,
                "currencies": list(Currency),
                "messages": list(recent_messages),
                "error": error,
            },
        )

    @app.get("/", response_class=HTMLResponse)
    async def dashboard(request: Request) -> HTMLResponse:
        """Render balances and the entry form."""

        return _render_dashboard(request)

    @app.post("/transactions", response_class=HTMLResponse)
    async def submit_transaction(
        request: Request,
        kind: str = Form(...),
        currency: str = Form(...),
        amount: str = Form(""),
        description: str = Form(""),
    ):
        """Submit the entry form as income or expense."""

        try:
            transaction_kind = TransactionKind.from_str(kind)
            screen.select_currency(currency)
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        screen.amount_text = amount
        screen.description = description
        transaction = screen.submit(transaction_kind)
        if transaction is None:
            return _render_dashboard(request, error="Enter a numeric amount.")
        return RedirectResponse("/", status_code=303)

    @app.get("/history", response_class=HTMLResponse)
    async def history(request: Request) -> HTMLResponse:
        """Render the transaction history, most recent first."""

        rows = screen.history_rows()
        LOGGER.debug("Rendering history with %s rows", len(rows))
        return templates.TemplateResponse(request, "history.html", {"rows": rows})

    @app.get("/api/balances")
    async def api_balances() -> JSONResponse:
        """Return raw and formatted balances per currency."""

        balances = ledger.balances()
        return JSONResponse(
            {
                "balances": {currency.code: str(value) for currency, value in balances.items()},
                "formatted": {
                    currency.code: format_amount(value, currency) for currency, value in balances.items()
                },
            }
        )

    @app.get("/api/transactions")
    async def api_transactions() -> JSONResponse:
        """Return the history as dictionaries, most recent first."""

        return JSONResponse({"transactions": ledger.export_snapshot()["transactions"]})

    @app.post("/api/transactions")
    async def api_record(payload: TransactionRequest) -> JSONResponse:
        """Record a transaction from JSON; unparseable amounts record nothing."""

        try:
            currency = Currency.from_str(payload.currency)
            kind = TransactionKind.from_str(payload.kind)
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        amount = parse_amount(payload.amount)
        if amount is None:
            raise HTTPException(status_code=422, detail=f"Amount {payload.amount!r} is not a number")
        transaction = ledger.record(amount, currency, kind, payload.description)
        return JSONResponse(transaction.as_dict(), status_code=201)

    return app
