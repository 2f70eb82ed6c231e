"""FastAPI application for the inventory management API."""

import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from ims.infrastructure import bootstrap
from ims.infrastructure.api import order_routes, product_routes, supplier_routes
from ims.infrastructure.api.errors import register_error_handlers
from ims.infrastructure.config import Settings
from ims.infrastructure.logging_config import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # The unique indexes back the SKU and supplier-email checks; a store
    # that cannot be reached fails startup here rather than on first write.
    bootstrap.init_database()
    logger.info("Indexes ensured")
    yield


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or bootstrap.settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Inventory Management API", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    @app.middleware("http")
    async def access_log(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s %d %.1fms",
            request.method, request.url.path, response.status_code, elapsed_ms,
        )
        return response

    prefix = settings.api_prefix
    app.include_router(product_routes.router, prefix=prefix)
    app.include_router(supplier_routes.router, prefix=prefix)
    app.include_router(order_routes.router, prefix=prefix)

    @app.get(f"{prefix}/health")
    def health_check():
        """Liveness only; does not touch the database."""
        return {
            "status": "OK",
            "message": "Inventory Management API is running",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    return app
