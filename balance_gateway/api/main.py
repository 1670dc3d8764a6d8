"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from balance_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from balance_gateway.api.v1 import balance, savings_goals
from balance_gateway.infrastructure.observability.logging import setup_logging
from balance_gateway.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Balance History Gateway",
        description="Balance history and savings goal simulation service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(balance.router, prefix="/api/v1", tags=["balance"])
    app.include_router(savings_goals.router, prefix="/api/v1", tags=["savings goals"])

    return app


app = create_app()
