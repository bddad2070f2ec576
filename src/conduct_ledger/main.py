"""FastAPI application entrypoint for the conduct ledger."""

from typing import Optional

from fastapi import FastAPI

from .api.v1.router import api_router
from .services.ledger_service import Ledger, build_ledger


def create_app(ledger: Optional[Ledger] = None) -> FastAPI:
    """Instantiate the FastAPI application around a ledger store."""
    app = FastAPI(title="Conduct Ledger API", version="0.1.0")
    app.state.ledger = ledger if ledger is not None else build_ledger()
    app.include_router(api_router, prefix="/api/v1")
    return app


app = create_app()
