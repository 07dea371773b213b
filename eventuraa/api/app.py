from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from sqlalchemy.exc import OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlmodel import SQLModel
from .error import ClientError, ServerError
import logging

logger = logging.getLogger(__name__)


def _error_body(code: str, message: str) -> dict:
    return {
        "success": False,
        "message": message,
        "error": {"code": code, "message": message},
    }


async def handle_client_error(request: Request, exc: ClientError):
    error = exc.base_error
    logger.warning(f"Client error: {error.code} on {request.method} {request.url.path}")
    content = _error_body(error.code, error.message)
    if error.details:
        content["errors"] = [
            detail.model_dump() if isinstance(detail, BaseModel) else detail
            for detail in error.details
        ]
    return JSONResponse(status_code=exc.status_code, content=content)


async def handle_server_error(request: Request, exc: ServerError):
    logger.error(f"Server error: {exc.base_error.code}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(exc.base_error.code, "Internal server error"),
    )


def _location_to_param(loc) -> str:
    """Turn a pydantic error location into a client param, e.g. tickets[0].price"""
    parts = [part for part in loc if part not in ("body", "query", "path", "header")]
    param = ""
    for part in parts:
        if isinstance(part, int):
            param += f"[{part}]"
        else:
            param += f".{part}" if param else str(part)
    return param or (str(loc[0]) if loc else "body")


async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    errors = [
        {"param": _location_to_param(err.get("loc", ())), "msg": err.get("msg", "Invalid value")}
        for err in exc.errors()
    ]
    logger.warning(f"Request validation failed on {request.method} {request.url.path}")
    content = _error_body("VALIDATION_FAILED", "Validation failed")
    content["errors"] = errors
    return JSONResponse(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content=content)


async def handle_store_unavailable(request: Request, exc: Exception):
    logger.error(f"Store unavailable: {type(exc).__name__}")
    content = _error_body(
        "STORE_UNAVAILABLE", "Service temporarily unavailable, please retry"
    )
    content["retryable"] = True
    return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=content)


def _check_secrets(ApplicationConfig) -> None:
    from config import INSECURE_ADMIN_SIGNUP_SECRET, INSECURE_JWT_SECRET

    insecure = []
    if ApplicationConfig.JWT_SECRET == INSECURE_JWT_SECRET:
        insecure.append("JWT_SECRET")
    if ApplicationConfig.ADMIN_SIGNUP_SECRET == INSECURE_ADMIN_SIGNUP_SECRET:
        insecure.append("ADMIN_SIGNUP_SECRET")
    if not insecure:
        return
    if ApplicationConfig.ENVIRONMENT == "production":
        raise RuntimeError(
            f"Refusing to start in production with development defaults for: {', '.join(insecure)}"
        )
    logger.warning(
        f"Using insecure development defaults for {', '.join(insecure)}; "
        "set them before deploying"
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    from eventuraa.depends import engine

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield
    await engine.dispose()


def create_app(ApplicationConfig) -> FastAPI:
    logging.basicConfig(
        level=ApplicationConfig.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    _check_secrets(ApplicationConfig)

    app = FastAPI(title="Eventuraa API", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from eventuraa.api.routes import admin, auth, events, health_check

    prefix = ApplicationConfig.API_PREFIX
    app.include_router(health_check.router, tags=["Health"])
    app.include_router(auth.router, prefix=prefix, tags=["Authentication"])
    app.include_router(events.router, prefix=prefix, tags=["Events"])
    app.include_router(admin.router, prefix=prefix, tags=["Admin"])

    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        content = _error_body("INTERNAL_ERROR", "Internal server error")
        if ApplicationConfig.ENVIRONMENT == "development":
            content["detail"] = str(exc)
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content)

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(OperationalError, handle_store_unavailable)
    app.add_exception_handler(TimeoutError, handle_store_unavailable)
    app.add_exception_handler(PoolTimeoutError, handle_store_unavailable)
    app.add_exception_handler(Exception, handle_unexpected_error)

    return app
