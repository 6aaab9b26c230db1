"""Marketplace FastAPI application.

Processes commands synchronously over HTTP. Every request runs inside the
marketplace domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the config overlay from domain.toml.
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from marketplace.domain import marketplace, register_elements
from marketplace.utils.logging import add_context, clear_context

register_elements()
marketplace.init()

# Paths served without a domain context
_PASSTHROUGH_PATHS = ("/health", "/docs", "/redoc", "/openapi.json")


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Marketplace API",
    description="Multi-vendor marketplace: users, products, inventory, orders, notifications and ratings",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the marketplace domain context for each request."""
    if request.url.path.startswith(_PASSTHROUGH_PATHS):
        return await call_next(request)

    add_context(method=request.method, path=request.url.path)
    try:
        with marketplace.domain_context():
            response = await call_next(request)
    finally:
        clear_context()
    return response


# ---------------------------------------------------------------------------
# Routers and error mapping
# ---------------------------------------------------------------------------
from marketplace.catalogue.api import product_router  # noqa: E402
from marketplace.identity.api import router as identity_router  # noqa: E402
from marketplace.inventory.api import router as inventory_router  # noqa: E402
from marketplace.notifications.api import router as notifications_router  # noqa: E402
from marketplace.ordering.api import order_router  # noqa: E402
from marketplace.ratings.api import router as ratings_router  # noqa: E402
from marketplace.shared.http import register_marketplace_exception_handlers  # noqa: E402

app.include_router(identity_router)
app.include_router(product_router)
app.include_router(inventory_router)
app.include_router(order_router)
app.include_router(notifications_router)
app.include_router(ratings_router)

register_marketplace_exception_handlers(app)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": marketplace.name})


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app:app", host="0.0.0.0", port=8000, reload=True)
