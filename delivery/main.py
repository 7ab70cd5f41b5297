from fastapi import FastAPI, Request
from contextlib import asynccontextmanager
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.responses import Response
from starlette.middleware.base import BaseHTTPMiddleware
from delivery.api import cities, quotes
from delivery.core.config import settings
from delivery.core.dataset import init_dataset, close_dataset, get_dataset
from delivery.core.metrics import request_count, request_duration, calculation_errors, get_metrics_text
from delivery.schemas.quote import ApiInfoResponse
import time
import logging

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


class MetricsMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start_time = time.time()

        try:
            response = await call_next(request)
            duration = time.time() - start_time

            request_count.labels(
                method=request.method,
                endpoint=request.url.path,
                status=response.status_code
            ).inc()

            request_duration.labels(
                method=request.method,
                endpoint=request.url.path
            ).observe(duration)

            return response
        except Exception:
            duration = time.time() - start_time
            request_count.labels(
                method=request.method,
                endpoint=request.url.path,
                status=500
            ).inc()
            request_duration.labels(
                method=request.method,
                endpoint=request.url.path
            ).observe(duration)
            raise


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application starting...")

    logger.info("Loading reference dataset...")
    init_dataset()

    yield

    logger.info("Application shutting down...")
    close_dataset()
    logger.info("Shutdown complete")


app = FastAPI(
    title=settings.API_TITLE,
    description=settings.API_DESCRIPTION,
    version=settings.API_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan
)

app.add_middleware(MetricsMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(quotes.router)
app.include_router(cities.router)


@app.exception_handler(Exception)
async def unhandled_exception(request: Request, exc: Exception):
    calculation_errors.labels(kind=type(exc).__name__).inc()
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


@app.options("/{path:path}", include_in_schema=False)
async def preflight(path: str):
    return Response(status_code=204)


@app.get("/metrics", tags=["monitoring"])
async def metrics():
    return Response(
        content=get_metrics_text(),
        media_type="text/plain; version=0.0.4; charset=utf-8"
    )


@app.get("/health", tags=["monitoring"])
async def health_check():
    try:
        loaded = get_dataset()
    except RuntimeError:
        loaded = None

    return {
        "status": "healthy",
        "service": settings.API_TITLE,
        "version": settings.API_VERSION,
        "dependencies": {
            "dataset": "loaded" if loaded is not None else "missing",
        },
        "cities": len(loaded.cities) if loaded is not None else 0,
    }


@app.get("/readiness", tags=["monitoring"])
async def readiness_check():
    try:
        get_dataset()
    except RuntimeError:
        return JSONResponse(
            status_code=503,
            content={"ready": False, "reason": "Reference dataset not loaded"}
        )

    return {
        "ready": True,
        "service": settings.API_TITLE
    }


@app.get("/", tags=["root"], response_model=ApiInfoResponse)
async def root():
    data = get_dataset()
    origin = data.origin
    return ApiInfoResponse(
        title=settings.API_TITLE,
        description=settings.API_DESCRIPTION,
        version=settings.API_VERSION,
        from_city=origin.name if origin else None,
        from_address=origin.address if origin else None,
        markup=settings.MARKUP_PERCENTAGE,
        method="Zone-based calculation without calling the carrier API",
        total_cities=len(data.cities),
        available_endpoints=[
            "GET /regions - statistics for all zones and districts",
            "GET /district?name=Москва и область - cities of a district",
            "GET /city-search?name=Санкт-Петербург - city lookup with suggestions",
            "GET /test - calculator self-test",
            "POST / - delivery quote (toCity, weight, dimensions)",
            "GET /health, GET /readiness, GET /metrics - monitoring",
        ],
        zones={
            zone_id.value: f"{zone.description} (x{zone.coefficient:g})"
            for zone_id, zone in data.zones.items()
        },
        tariffs=list(data.tariffs),
    )
