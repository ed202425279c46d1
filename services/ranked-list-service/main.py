"""Ranked List Schema Service - ItemList JSON-LD for listicle pages."""

import sys
from pathlib import Path

_root = Path(__file__).resolve().parents[2]
_svc = Path(__file__).resolve().parent
sys.path.insert(0, str(_root))
sys.path.insert(0, str(_svc))

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from packages.shared.errors import RankedListException
from packages.shared.errors.middleware import (
    generic_exception_handler,
    ranked_list_exception_handler,
    request_id_middleware,
    request_validation_handler,
)
from packages.shared.json_ld import item_list_ld
from packages.shared.monitoring import (
    CheckResult,
    CheckStatus,
    HealthChecker,
    configure_logging,
    health_router,
)
from packages.shared.ranked_list import RenderContext

from config import settings
from api.schema import router as schema_router

SERVICE_NAME = "ranked-list-service"
VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(
        service_name=SERVICE_NAME,
        level=settings.log_level,
        json_format=settings.is_production,
    )
    yield


app = FastAPI(
    title="Ranked List Schema Service",
    description="schema.org ItemList JSON-LD for ranked list (listicle) content",
    version=VERSION,
    lifespan=lifespan,
)

app.middleware("http")(request_id_middleware)
origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins if origins else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(RankedListException, ranked_list_exception_handler)
app.add_exception_handler(RequestValidationError, request_validation_handler)
app.add_exception_handler(Exception, generic_exception_handler)

app.include_router(schema_router)

health_checker = HealthChecker(SERVICE_NAME, VERSION)

_SELF_CHECK_RECORDS = [
    {"title": "First", "schemaType": "Product", "price": "1.00"},
    {"title": "Second", "schemaType": "Book", "author": "A. Writer"},
]


async def check_projector() -> CheckResult:
    """Project a fixed two-item list and verify its shape."""
    document = item_list_ld(_SELF_CHECK_RECORDS, RenderContext(is_singular=True))
    ok = bool(document) and document["numberOfItems"] == len(_SELF_CHECK_RECORDS)
    return CheckResult(
        name="projector",
        status=CheckStatus.HEALTHY if ok else CheckStatus.UNHEALTHY,
        message="ItemList projection ok" if ok else "ItemList projection failed",
    )


async def check_config() -> CheckResult:
    if settings.min_items < 1:
        return CheckResult(
            name="config",
            status=CheckStatus.DEGRADED,
            message="RANKED_LIST_MIN_ITEMS below 1; every singular page emits an ItemList",
        )
    return CheckResult(name="config", status=CheckStatus.HEALTHY, message="Loaded")


health_checker.add_check("projector", check_projector)
health_checker.add_check("config", check_config)
app.include_router(health_router(health_checker))


@app.get("/")
async def root():
    """Service info."""
    return {
        "service": SERVICE_NAME,
        "version": VERSION,
        "endpoints": {
            "item_list": "POST /api/v1/item-list",
            "item_list_records": "POST /api/v1/item-list/records",
            "item": "POST /api/v1/item",
            "health": "GET /health",
            "ready": "GET /ready",
        },
    }
