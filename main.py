"""FastAPI application entrypoint for the FastDelivery calculator."""
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
import time
import uuid

from app.api.routes import router
from app.core.logging import get_logger, setup_logging
from app.core.config import settings

# Initialize structured logging
log_format = settings.environment == "production"
setup_logging(level=settings.log_level, json_format=log_format)
logger = get_logger(__name__)

# Application metadata
APP_VERSION = "1.0.0"
APP_NAME = "FastDelivery Calculator"

app = FastAPI(
    title=APP_NAME,
    description="Delivery cost calculation by cargo packages",
    version=APP_VERSION,
    docs_url="/docs" if settings.environment != "production" else None,  # Disable in prod
    redoc_url="/redoc" if settings.environment != "production" else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log each request with its status code and duration, tagged with a request id."""
    request_id = str(uuid.uuid4())
    request.state.request_id = request_id
    context = {"request_id": request_id, "method": request.method, "path": request.url.path}
    start_time = time.perf_counter()

    try:
        response = await call_next(request)
    except Exception as e:
        logger.error(
            f"Request failed: {request.method} {request.url.path}",
            extra={**context, "duration_ms": _elapsed_ms(start_time), "error": str(e)},
            exc_info=True
        )
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error", "request_id": request_id}
        )

    logger.info(
        f"{request.method} {request.url.path} -> {response.status_code}",
        extra={**context, "status_code": response.status_code, "duration_ms": _elapsed_ms(start_time)}
    )
    response.headers["X-Request-ID"] = request_id
    return response


def _elapsed_ms(start_time: float) -> float:
    return round((time.perf_counter() - start_time) * 1000, 2)


app.include_router(router)


@app.get("/")
def root():
    """Root endpoint with basic service info."""
    return {
        "service": APP_NAME,
        "version": APP_VERSION,
        "status": "running",
        "environment": settings.environment
    }


@app.get("/health")
def health_check():
    """Liveness probe. Returns 200 while the process serves requests."""
    return {"status": "healthy", "version": APP_VERSION}


@app.get("/ready")
def readiness_check():
    """Readiness probe: reports whether the configuration is consistent."""
    try:
        settings.validate_required_settings()
        checks = {"config": "ok"}
    except ValueError as exc:
        checks = {"config": "error", "detail": str(exc)}

    return {
        "status": "ready" if checks["config"] == "ok" else "degraded",
        "checks": checks,
        "currencies": settings.available_currencies,
    }
