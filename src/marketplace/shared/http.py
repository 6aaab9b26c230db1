"""HTTP mapping of domain exceptions.

Protean's FastAPI integration covers validation errors (400) and missing
records (404). Stock shortages and order status conflicts answer 409, and
a write that lost its record answers 500.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from marketplace.shared.exceptions import InsufficientStock, InvalidOrderState, PersistenceFailure
from marketplace.utils.logging import get_logger

logger = get_logger(__name__)


async def conflict_handler(request: Request, exc: InsufficientStock | InvalidOrderState) -> JSONResponse:
    logger.info("Request conflicts with current state", path=request.url.path, error=str(exc))
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"error": exc.messages})


async def persistence_failure_handler(request: Request, exc: PersistenceFailure) -> JSONResponse:
    logger.error("Persistence failure", method=request.method, path=request.url.path, error=str(exc))
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": exc.messages})


def register_marketplace_exception_handlers(app: FastAPI) -> None:
    """Register Protean's handlers plus the marketplace-specific ones."""
    register_exception_handlers(app)
    app.add_exception_handler(InsufficientStock, conflict_handler)
    app.add_exception_handler(InvalidOrderState, conflict_handler)
    app.add_exception_handler(PersistenceFailure, persistence_failure_handler)
