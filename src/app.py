"""Review service FastAPI application.

Accepts reviews, serves approved reviews and submitter status, answers the
compliance rule engine's abuse queries, and receives pushed
ReviewSubmitted events. Every request runs inside the reviews domain context.

Usage:
    uvicorn src.app:app --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# PROTEAN_ENV controls which config overlay is applied:
#   - default      → event_processing = "sync"  (validation runs in the UoW)
#   - "production" → event_processing = "async" (validation runs via Engine)
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers
from reviews.domain import reviews  # noqa: E402
from reviews.utils.logging import add_context, clear_context  # noqa: E402

reviews.init()

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Review Service API",
    description="Business reviews with asynchronous compliance validation",
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
    """Push the reviews domain context for each request."""
    clear_context()
    add_context(method=request.method, path=request.url.path)
    with reviews.domain_context():
        response = await call_next(request)
    return response


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from reviews.api import event_router, internal_router, review_router  # noqa: E402
from reviews.api.errors import register_review_error_handlers  # noqa: E402

app.include_router(review_router)
app.include_router(internal_router)
app.include_router(event_router)

register_exception_handlers(app)
register_review_error_handlers(app)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": reviews.name})
