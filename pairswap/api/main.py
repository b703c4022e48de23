"""FastAPI application serving an in-memory pairswap exchange.

Note: the exchange lives in process memory. Running more than one worker
gives each worker its own independent exchange.
"""

import logging
import os

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from pairswap.api.endpoints import router
from pairswap.errors import (
    PairAlreadyExists,
    PairswapError,
    UnknownAsset,
    UnknownPool,
)
from pairswap.models.api import ErrorResponse

# Configuration from environment variables with sensible defaults
HOST = os.environ.get("PAIRSWAP_HOST", "127.0.0.1")
PORT = int(os.environ.get("PAIRSWAP_PORT", "8000"))
DEBUG = os.environ.get("PAIRSWAP_DEBUG", "false").lower() in ("true", "1", "yes")

logger = structlog.get_logger()

app = FastAPI(
    title="pairswap",
    description="Constant product liquidity pools with a deterministic pair registry",
    version="0.1.0",
)


def error_status(exc: PairswapError) -> int:
    """HTTP status for a domain error."""
    if isinstance(exc, (UnknownPool, UnknownAsset)):
        return 404
    if isinstance(exc, PairAlreadyExists):
        return 409
    return 422


@app.exception_handler(PairswapError)
async def handle_pairswap_error(request: Request, exc: PairswapError) -> JSONResponse:
    """Turn domain errors into JSON bodies carrying their code and message."""
    status = error_status(exc)
    logger.info(
        "request_rejected",
        path=request.url.path,
        code=exc.code,
        status=status,
    )
    body = ErrorResponse(code=exc.code, detail=exc.message)
    return JSONResponse(status_code=status, content=body.model_dump())


@app.exception_handler(Exception)
async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected failures; the server middleware re-raises them afterwards."""
    logger.exception("request_failed", path=request.url.path, error=type(exc).__name__)
    body = ErrorResponse(code="internal_error", detail="Internal server error")
    return JSONResponse(status_code=500, content=body.model_dump())


app.include_router(router)


@app.get("/health")
async def health() -> dict[str, object]:
    """Health check endpoint."""
    return {"status": "ok"}


def configure_logging(debug: bool = DEBUG) -> None:
    """Console structlog output, DEBUG level when debug is set."""
    log_level = logging.DEBUG if debug else logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
    )


def run() -> None:
    """Run the exchange API server.

    Configuration via environment variables:
    - PAIRSWAP_HOST: Host to bind to (default: 127.0.0.1)
    - PAIRSWAP_PORT: Port to bind to (default: 8000)
    - PAIRSWAP_DEBUG: Enable debug logging and reload mode (default: false)
    - PAIRSWAP_REGISTRY_ADDRESS: Registry identity used for pool addresses
    """
    configure_logging(DEBUG)
    uvicorn.run(
        "pairswap.api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )


if __name__ == "__main__":
    run()
