"""FastAPI application factory.

``create_app`` either takes a ready ``ProductService`` (tests, embedding)
or builds one from settings when the app starts, seeding the store if
configured to. Serve it with::

    stockroom serve
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from stockroom.application.product_service import ProductService
from stockroom.application.result import Err
from stockroom.application.seed import seed_products
from stockroom.infrastructure.bootstrap import product_service
from stockroom.infrastructure.config import Settings
from stockroom.infrastructure.logging_config import setup_logging
from stockroom.infrastructure.web import products
from stockroom.infrastructure.web.schemas import HealthResponse


def create_app(
    service: Optional[ProductService] = None, settings: Optional[Settings] = None
) -> FastAPI:
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if service is not None:
            yield
            return
        with product_service(settings) as svc:
            if settings.seed_on_startup:
                result = seed_products(svc, settings.seed_count)
                if isinstance(result, Err):
                    raise RuntimeError(f"Seeding failed: {result.error}")
            app.state.product_service = svc
            yield

    app = FastAPI(title="Stockroom", version="0.1.0", lifespan=lifespan)
    if service is not None:
        app.state.product_service = service

    @app.get("/health", response_model=HealthResponse)
    def health() -> HealthResponse:
        return HealthResponse(status="ok", service="stockroom")

    app.include_router(products.router, prefix="/products", tags=["products"])
    return app
