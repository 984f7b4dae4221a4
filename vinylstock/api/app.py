"""FastAPI app, CORS, error mapping, and route registration."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from vinylstock.config import LOG_LEVEL, ensure_data_dir

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(levelname)s: %(name)s: %(message)s",
)

from vinylstock.api.state import AppState, get_state
from vinylstock.core.errors import (
    InvalidAdjustment,
    NotFound,
    StoreUnavailable,
    ValidationError,
)

# Import routes after state to avoid circular imports
from vinylstock.api.routes import records

__all__ = ["app", "AppState", "get_state"]

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    ensure_data_dir()
    logger.info("Record store ready with %d records", get_state().store.count())
    yield


app = FastAPI(
    title="Vinylstock API",
    description="Local REST API for the record shop inventory",
    lifespan=lifespan,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ValidationError)
async def _validation_error(request: Request, exc: ValidationError):
    return JSONResponse(status_code=422, content={"detail": str(exc), "field": exc.field})


@app.exception_handler(NotFound)
async def _not_found(request: Request, exc: NotFound):
    return JSONResponse(status_code=404, content={"detail": "Record not found"})


@app.exception_handler(InvalidAdjustment)
async def _invalid_adjustment(request: Request, exc: InvalidAdjustment):
    detail = "Sold out" if exc.quantity == 0 else str(exc)
    return JSONResponse(
        status_code=409,
        content={"detail": detail, "quantity": exc.quantity},
    )


@app.exception_handler(StoreUnavailable)
async def _store_unavailable(request: Request, exc: StoreUnavailable):
    logger.error("Store unavailable: %s", exc)
    return JSONResponse(status_code=503, content={"detail": "Record store unavailable"})


app.include_router(records.router, prefix="/api/records", tags=["records"])
