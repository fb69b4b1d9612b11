"""
Главное приложение FastAPI
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from catalog_gateway.api.v1.router import api_router
from catalog_gateway.client.exceptions import BackendError
from catalog_gateway.config import Settings, get_settings
from catalog_gateway.logging_config import setup_logging
from catalog_gateway.middleware.logging_middleware import LoggingMiddleware
from catalog_gateway.monitoring.metrics import setup_metrics
from catalog_gateway.runtime import GatewayRuntime

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Создание приложения; кэш и клиент бэкенда создаются в lifespan."""
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL, use_json=settings.LOG_JSON)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Lifespan события приложения"""
        logger.info("Starting %s...", settings.PROJECT_NAME)
        runtime = GatewayRuntime.from_settings(settings)
        app.state.runtime = runtime
        await runtime.start()
        logger.info("Cache initialized (capacity=%d)", settings.CACHE_CAPACITY)

        yield

        logger.info("Shutting down %s...", settings.PROJECT_NAME)
        await runtime.stop()
        logger.info("Cache discarded, backend client closed")

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="Шлюз к REST API каталога видео с кэшированием ответов",
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=1000)
    app.add_middleware(LoggingMiddleware)

    if settings.ENABLE_METRICS:
        setup_metrics(app)

    @app.exception_handler(BackendError)
    async def backend_exception_handler(request: Request, exc: BackendError):
        """Ошибки бэкенда прозрачно передаются клиенту"""
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "success": False,
                "error": {"code": exc.code, "message": exc.message},
            },
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Глобальный обработчик исключений"""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "Internal server error" if not settings.DEBUG else str(exc),
                },
            },
        )

    @app.get("/health")
    async def health_check(request: Request):
        """Проверка здоровья приложения"""
        store = request.app.state.runtime.store
        return {
            "status": "healthy",
            "service": settings.PROJECT_NAME,
            "version": settings.VERSION,
            "cache_size": len(store),
        }

    app.include_router(api_router, prefix=settings.API_V1_PREFIX)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "catalog_gateway.main:app",
        host="0.0.0.0",
        port=8000,
        reload=get_settings().DEBUG,
    )
