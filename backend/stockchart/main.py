"""
Stock Chart Data Service - FastAPI Application
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from stockchart.config import settings
from stockchart.logger import logger
from stockchart.api.errors import register_exception_handlers
from stockchart.api.routes import chart, stock_data
from stockchart.managers import get_data_manager


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan events for startup and shutdown
    """
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    logger.info(f"Upstream: {settings.UPSTREAM.base_url} (suffix {settings.UPSTREAM.market_suffix})")
    logger.info(f"Cache capacity: {settings.CACHE.capacity}")
    logger.success("Application startup complete")

    yield

    cache = get_data_manager().cache
    logger.info(
        f"Shutting down (cache entries={len(cache)}, hits={cache.hits}, "
        f"misses={cache.misses}, evictions={cache.evictions})"
    )


def create_app() -> FastAPI:
    """Build the FastAPI application"""
    application = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Daily OHLCV proxy with weekly/monthly candle aggregation",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json"
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.API.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)

    application.include_router(stock_data.router, prefix="/api", tags=["stock-data"])
    application.include_router(chart.router, prefix="/api", tags=["chart"])

    @application.get("/")
    async def root():
        """Root endpoint"""
        return {
            "app": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "status": "running",
            "docs": "/docs",
            "redoc": "/redoc",
        }

    @application.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "app": settings.APP_NAME,
            "version": settings.APP_VERSION
        }

    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting server at {settings.API.host}:{settings.API.port}")

    uvicorn.run(
        "stockchart.main:app",
        host=settings.API.host,
        port=settings.API.port,
        reload=settings.DEBUG,
        log_level="debug" if settings.DEBUG else "info"
    )
