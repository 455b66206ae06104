"""FastAPI application for the pricer.

Every endpoint is a pure computation over the request body; the server holds
no reserves or balances between requests.
"""

import os

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from pricer import __version__
from pricer.amm import DEFAULT_FEE
from pricer.api.endpoints import router
from pricer.errors import PricingError
from pricer.models import ErrorResponse

logger = structlog.get_logger()

# Configuration from environment variables with sensible defaults
HOST = os.environ.get("PRICER_HOST", "0.0.0.0")
PORT = int(os.environ.get("PRICER_PORT", "8000"))
DEBUG = os.environ.get("PRICER_DEBUG", "false").lower() in ("true", "1", "yes")

# Maximum request body size (1 MB)
MAX_REQUEST_SIZE = 1024 * 1024

app = FastAPI(
    title="Constant-Product Pricer",
    description="Exact integer swap quotes for constant-product AMM pools",
    version=__version__,
)


@app.middleware("http")
async def limit_request_size(request: Request, call_next):  # type: ignore[no-untyped-def]
    """Reject requests with body larger than MAX_REQUEST_SIZE."""
    content_length = request.headers.get("content-length")
    if content_length and int(content_length) > MAX_REQUEST_SIZE:
        return JSONResponse(status_code=413, content={"detail": "Request too large"})
    return await call_next(request)


@app.exception_handler(PricingError)
async def pricing_error_handler(request: Request, exc: PricingError) -> JSONResponse:
    """Report pricing failures as 400 with the error name."""
    logger.info("pricing_failed", path=request.url.path, error=exc.code, detail=str(exc))
    body = ErrorResponse(error=exc.code, detail=str(exc))
    return JSONResponse(status_code=400, content=body.model_dump())


app.include_router(router)


@app.get("/health")
async def health() -> dict[str, object]:
    """Health check endpoint."""
    return {"status": "ok", "feeBps": DEFAULT_FEE.fee_bps}


def run() -> None:
    """Run the pricer API server.

    Configuration via environment variables:
    - PRICER_HOST: Host to bind to (default: 0.0.0.0)
    - PRICER_PORT: Port to bind to (default: 8000)
    - PRICER_DEBUG: Enable debug/reload mode (default: false)
    """
    uvicorn.run(
        "pricer.api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )


if __name__ == "__main__":
    run()
