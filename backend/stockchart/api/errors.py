"""
Exception handlers translating service errors into JSON responses
"""
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from stockchart.core.exceptions import (
    AggregationError,
    DataProxyError,
    MethodNotAllowedError,
    UpstreamError,
)
from stockchart.logger import logger


async def data_proxy_error_handler(request: Request, exc: DataProxyError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.error or exc.details}")
    else:
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.details}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


async def aggregation_error_handler(request: Request, exc: AggregationError) -> JSONResponse:
    logger.info(f"{request.method} {request.url.path} -> 400: {exc}")
    return JSONResponse(status_code=400, content={"details": str(exc)})


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Framework-level HTTP errors (unknown method, unknown route) in the service body shape"""
    if exc.status_code == 405:
        details = MethodNotAllowedError.default_details
    else:
        details = exc.detail
    logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {details}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"details": details},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"{request.method} {request.url.path} raised {type(exc).__name__}: {exc}")
    error = UpstreamError(error=str(exc) or type(exc).__name__)
    return JSONResponse(status_code=error.status_code, content=error.to_body())


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the service exception handlers to ``app``"""
    app.add_exception_handler(DataProxyError, data_proxy_error_handler)
    app.add_exception_handler(AggregationError, aggregation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
