"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from ledger_insights.api.middleware import RequestIDMiddleware, MetricsMiddleware
from ledger_insights.api.v1 import card_bills, installments, outliers, period, recurring
from ledger_insights.infrastructure.observability.logging import setup_logging
from ledger_insights.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Ledger Insights",
        description="Installment, recurring charge and outlier views over ledger transactions",
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
    app.include_router(period.router, prefix="/v1", tags=["periods"])
    app.include_router(installments.router, prefix="/v1", tags=["installments"])
    app.include_router(recurring.router, prefix="/v1", tags=["recurring"])
    app.include_router(outliers.router, prefix="/v1", tags=["outliers"])
    app.include_router(card_bills.router, prefix="/v1", tags=["card-bills"])

    return app


app = create_app()
