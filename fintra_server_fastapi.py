"""
FastAPI server for the Fintra market-data gateway (Alpha Vantage proxy)
"""
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from fintra.config import catalog
from fintra.config.settings import get_settings, validate_settings
from fintra.gateway.routes import register as _register_gateway_routes
from fintra.gateway.schema import ErrorEnvelope, HealthStatus
from fintra.gateway.upstream import AlphaVantageClient
from fintra.utils.helpers import utc_now_iso
from fintra.utils.logger import get_logger, setup_logging

# Initialize settings and logging
settings = get_settings()
setup_logging(settings)
logger = get_logger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Alpha Vantage market-data gateway",
)


# Added before CORSMiddleware, so it sits inside it and fault responses carry CORS headers.
@app.middleware("http")
async def internal_fault_envelope(request: Request, call_next):
    try:
        return await call_next(request)
    except Exception as exc:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        payload = ErrorEnvelope(error="Internal server error", message=str(exc))
        return JSONResponse(status_code=500, content=payload.to_body())


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Origin", "X-Requested-With", "Content-Type", "Accept", "Authorization"],
)

_register_gateway_routes(app)


def _log_banner() -> None:
    base = f"http://localhost:{settings.APP_PORT}"
    logger.info("=" * 60)
    logger.info("%s v%s running on %s:%s", settings.APP_NAME, settings.APP_VERSION, settings.APP_HOST, settings.APP_PORT)
    logger.info("Upstream: %s (timeout %.1fs)", settings.ALPHAVANTAGE_BASE_URL, settings.UPSTREAM_TIMEOUT_SECONDS)
    logger.info("Available endpoints:")
    for route, description in catalog.ENDPOINT_DESCRIPTIONS.items():
        logger.info("   GET  %s - %s", route, description)
    logger.info("Example usage:")
    for path in catalog.EXAMPLE_PATHS.values():
        logger.info("   %s%s", base, path)
    logger.info("=" * 60)


@app.on_event("startup")
async def startup_event():
    validate_settings(settings)
    if getattr(app.state, "upstream_client", None) is None:
        app.state.upstream_client = AlphaVantageClient(
            settings.ALPHAVANTAGE_BASE_URL,
            timeout=settings.UPSTREAM_TIMEOUT_SECONDS,
        )
    _log_banner()


@app.on_event("shutdown")
async def shutdown_event():
    client = getattr(app.state, "upstream_client", None)
    app.state.upstream_client = None
    if client is not None:
        await client.aclose()
        logger.info("Upstream client closed")


@app.api_route("/health", methods=["GET", "HEAD"])
def health():
    """Health check endpoint."""
    return HealthStatus(message=f"{settings.APP_NAME} is running", timestamp=utc_now_iso()).model_dump()


@app.api_route("/", methods=["GET", "HEAD"])
def root():
    """API documentation."""
    return catalog.api_documentation(settings.APP_NAME, settings.APP_VERSION)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Unknown path or unsupported method on a known path: both are "no such route".
    if exc.status_code in (404, 405):
        payload = ErrorEnvelope(error="Route not found", availableRoutes=list(catalog.AVAILABLE_ROUTES))
        return JSONResponse(status_code=404, content=payload.to_body())
    detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return JSONResponse(status_code=exc.status_code, content=ErrorEnvelope(error=detail).to_body())


def main() -> None:
    import uvicorn

    uvicorn.run(app, host=settings.APP_HOST, port=settings.APP_PORT, log_config=None)


if __name__ == "__main__":
    main()
