"""FastAPI application factory for the rent scheduler"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from rent_scheduler.api.middleware import RequestIDMiddleware, MetricsMiddleware
from rent_scheduler.api.v1 import schedule
from rent_scheduler.infrastructure.observability.logging import setup_logging
from rent_scheduler.config import settings

setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Build the app: tracing and latency middleware, probes, v1 routes"""
    app = FastAPI(title="Rent Scheduler", description="Rent payment schedule calculation service")

    # RequestIDMiddleware runs first so latency covers the whole request
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(schedule.router, prefix="/v1", tags=["schedules"])
    return app


app = create_app()
