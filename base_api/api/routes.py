"""
HTTP route table.

Each route is declared once here and registered with add_api_route, so the
full surface of the service can be read in one place.
"""
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple, Type

from fastapi import APIRouter, FastAPI, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel
import structlog

from ..core.exceptions import InternalError, ServiceError
from ..schemas.auth_schemas import (
    AuthResponse,
    LoginRequest,
    MessageResponse,
    PasswordChangeRequest,
    PasswordResetConfirmRequest,
    PasswordResetRequest,
    RegistrationRequest,
)
from ..schemas.base import HealthResponse
from ..schemas.queue_schemas import AddMessageRequest, AddMessageResponse, JobStatusResponse, QueueStatsResponse
from ..schemas.user_schemas import ChangeEmailRequest, UpdateProfileRequest, UserResponse
from . import auth, health, queue, users

logger = structlog.get_logger()


@dataclass(frozen=True)
class Route:
    method: str
    path: str
    endpoint: Callable[..., Any]
    status_code: int = status.HTTP_200_OK
    response_model: Optional[type] = None
    request_model: Optional[Type[BaseModel]] = None
    tags: Tuple[str, ...] = ()


ROUTES = (
    Route("GET", "/health", health.health_check, response_model=HealthResponse, tags=("health",)),
    Route(
        "POST",
        "/auth/register",
        auth.register,
        status.HTTP_201_CREATED,
        response_model=AuthResponse,
        request_model=RegistrationRequest,
        tags=("authentication",),
    ),
    Route(
        "POST",
        "/auth/login",
        auth.login,
        response_model=AuthResponse,
        request_model=LoginRequest,
        tags=("authentication",),
    ),
    Route(
        "POST",
        "/auth/change-password",
        auth.change_password,
        response_model=MessageResponse,
        request_model=PasswordChangeRequest,
        tags=("authentication",),
    ),
    Route(
        "POST",
        "/auth/password-reset/request",
        auth.request_password_reset,
        response_model=MessageResponse,
        request_model=PasswordResetRequest,
        tags=("authentication",),
    ),
    Route(
        "POST",
        "/auth/password-reset/confirm",
        auth.confirm_password_reset,
        response_model=MessageResponse,
        request_model=PasswordResetConfirmRequest,
        tags=("authentication",),
    ),
    Route("GET", "/users/profile", users.get_profile, response_model=UserResponse, tags=("users",)),
    Route(
        "PATCH",
        "/users/profile",
        users.update_profile,
        response_model=UserResponse,
        request_model=UpdateProfileRequest,
        tags=("users",),
    ),
    Route(
        "PATCH",
        "/users/email",
        users.change_email,
        response_model=UserResponse,
        request_model=ChangeEmailRequest,
        tags=("users",),
    ),
    Route(
        "POST",
        "/test-queue/add",
        queue.add_message,
        status.HTTP_201_CREATED,
        response_model=AddMessageResponse,
        request_model=AddMessageRequest,
        tags=("queue",),
    ),
    Route("GET", "/test-queue/job/{job_id}", queue.get_job_status, response_model=JobStatusResponse, tags=("queue",)),
    Route("GET", "/test-queue/stats", queue.get_queue_stats, response_model=QueueStatsResponse, tags=("queue",)),
)


def request_body_openapi(model: Optional[Type[BaseModel]]) -> Optional[Dict[str, Any]]:
    """OpenAPI requestBody for handlers that validate the raw body themselves."""
    if model is None:
        return None
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": model.model_json_schema(by_alias=True)}},
        }
    }


def build_router() -> APIRouter:
    router = APIRouter()
    for route in ROUTES:
        router.add_api_route(
            route.path,
            route.endpoint,
            methods=[route.method],
            status_code=route.status_code,
            response_model=route.response_model,
            tags=list(route.tags),
            openapi_extra=request_body_openapi(route.request_model),
        )
    return router


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    """Render service errors as {statusCode, error, message}."""
    if isinstance(exc, InternalError):
        logger.error("Request failed", path=request.url.path, error=exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=InternalError().to_dict(),
    )


def register_routes(app: FastAPI) -> None:
    """Attach the route table and error handlers to the application."""
    app.include_router(build_router())
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
