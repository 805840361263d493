"""Prompt Gallery — FastAPI Application.

This module is the single entry point for the web application.  It defines
the ``create_app()`` factory, the default ``app`` instance, all REST API
routes, and the ``main()`` CLI function that launches the uvicorn server.

Architecture
------------
The application follows a stateless REST pattern:

- **Configuration** comes from a :class:`~promptgallery.core.config.GalleryConfig`
  passed to ``create_app()``; nothing below the factory reads the global
  ``config`` instance.
- **Persistence** is a single SQLite file managed by
  :class:`~promptgallery.core.prompts_db.PromptsDB`.
- **Business rules** live in :class:`~promptgallery.services.PromptService`
  and :class:`~promptgallery.services.AuthService`.  Route handlers only
  parse input, call a service, and serialise the result.
- **Errors** raised by the services are translated to HTTP status codes by
  the exception handlers registered in ``create_app()``.
- **Admin routes** require a bearer token issued by ``POST /api/admin/login``.

Endpoints
---------
========  ============================  ====================================
Method    Path                          Purpose
========  ============================  ====================================
GET       ``/api/health``               Liveness probe
GET       ``/api/prompts``              Public listing, optional category
GET       ``/api/prompts/count``        Total number of prompts
GET       ``/api/categories``           "All" plus distinct categories
POST      ``/api/admin/login``          Exchange credentials for a token
GET       ``/api/admin/prompts``        Admin listing (token required)
POST      ``/api/admin/prompts``        Create a prompt (token required)
PUT       ``/api/admin/prompts/{id}``   Replace a prompt (token required)
DELETE    ``/api/admin/prompts/{id}``   Delete a prompt (token required)
========  ============================  ====================================

Usage
-----
CLI (installed entry point)::

    promptgallery

Direct invocation::

    python -m promptgallery.api.main
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from promptgallery import __version__
from promptgallery.api.deps import (
    AuthServiceDep,
    CurrentAdmin,
    GalleryContext,
    PromptServiceDep,
)
from promptgallery.api.models import (
    CountResponse,
    ErrorResponse,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    PromptRequest,
    PromptResponse,
)
from promptgallery.core.config import GalleryConfig, config
from promptgallery.core.errors import (
    InvalidCredentials,
    InvalidToken,
    NotFound,
    StoreError,
    Unauthenticated,
    ValidationError,
)
from promptgallery.core.prompts_db import PromptsDB
from promptgallery.services import ALL_CATEGORY, AuthService, PromptService

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Application context.
# ---------------------------------------------------------------------------


def build_context(cfg: GalleryConfig) -> GalleryContext:
    """Open the database, build the services, and seed initial data.

    Creates the seed admin if it is missing and, when
    ``cfg.seed_sample_prompts`` is set, fills an empty gallery with the
    sample prompts.

    Args:
        cfg: Configuration to build the context from.

    Returns:
        A ready-to-use :class:`GalleryContext`.
    """
    db = PromptsDB(cfg.database_path)
    context = GalleryContext(
        config=cfg,
        db=db,
        prompts=PromptService(db),
        auth=AuthService(db, cfg),
    )
    context.auth.ensure_seed_admin()
    if cfg.seed_sample_prompts:
        context.prompts.seed_samples()
    return context


# ---------------------------------------------------------------------------
# Error translation.
# ---------------------------------------------------------------------------


def _error_response(
    status_code: int,
    detail: str,
    errors: list[dict] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    body = ErrorResponse(detail=detail, errors=errors).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=body, headers=headers)


async def _handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        str(exc),
        errors=[{"field": e.field, "message": e.message} for e in exc.errors],
    )


async def _handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # Malformed bodies and path parameters get the same 400 shape as
    # field-level validation failures.
    errors = []
    for err in exc.errors():
        location = [str(part) for part in err.get("loc", ()) if part != "body"]
        errors.append({"field": ".".join(location) or "body", "message": err.get("msg", "")})
    return _error_response(status.HTTP_400_BAD_REQUEST, "Invalid request", errors=errors)


async def _handle_unauthenticated(request: Request, exc: Unauthenticated) -> JSONResponse:
    return _error_response(
        status.HTTP_401_UNAUTHORIZED,
        str(exc),
        headers={"WWW-Authenticate": "Bearer"},
    )


async def _handle_invalid_credentials(request: Request, exc: InvalidCredentials) -> JSONResponse:
    return _error_response(status.HTTP_401_UNAUTHORIZED, str(exc))


async def _handle_invalid_token(request: Request, exc: InvalidToken) -> JSONResponse:
    return _error_response(status.HTTP_403_FORBIDDEN, str(exc))


async def _handle_not_found(request: Request, exc: NotFound) -> JSONResponse:
    return _error_response(status.HTTP_404_NOT_FOUND, str(exc))


async def _handle_store_error(request: Request, exc: StoreError) -> JSONResponse:
    logger.error(f"Store failure on {request.method} {request.url.path}: {exc}")
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Database error")


# ---------------------------------------------------------------------------
# Routes.
# ---------------------------------------------------------------------------

public_router = APIRouter(prefix="/api", tags=["public"])
admin_router = APIRouter(prefix="/api/admin", tags=["admin"])


@public_router.get("/health")
def health_check() -> dict:
    """Report that the server is up."""
    return {"status": "ok"}


@public_router.get("/prompts", response_model=list[PromptResponse])
def list_prompts(prompts: PromptServiceDep, category: str | None = None) -> list:
    """Return every prompt, newest first.

    Args:
        category: Optional exact-match category filter.  ``"All"`` or an
            empty value means no filter.

    Returns:
        List of prompts (possibly empty for an unknown category).
    """
    if not category or category == ALL_CATEGORY:
        category = None
    return prompts.list(category)


@public_router.get("/prompts/count", response_model=CountResponse)
def count_prompts(prompts: PromptServiceDep) -> dict:
    """Return the total number of prompts."""
    return {"count": prompts.count()}


@public_router.get("/categories", response_model=list[str])
def list_categories(prompts: PromptServiceDep) -> list[str]:
    """Return ``"All"`` followed by the distinct categories in use."""
    return prompts.distinct_categories()


@admin_router.post("/login", response_model=LoginResponse)
def login(req: LoginRequest, auth: AuthServiceDep) -> dict:
    """Exchange admin credentials for a 24-hour bearer token.

    Raises:
        ValidationError: 400 if username or password is empty.
        InvalidCredentials: 401 for an unknown user or wrong password.
    """
    token = auth.login(req.username, req.password)
    return {"token": token.token, "username": token.username}


@admin_router.get("/prompts", response_model=list[PromptResponse])
def admin_list_prompts(admin: CurrentAdmin, prompts: PromptServiceDep) -> list:
    """Return every prompt for the admin table, newest first."""
    return prompts.list()


@admin_router.post(
    "/prompts",
    response_model=PromptResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_prompt(req: PromptRequest, admin: CurrentAdmin, prompts: PromptServiceDep):
    """Create a prompt and return the persisted row.

    Raises:
        ValidationError: 400 listing every invalid field.
    """
    return prompts.create(req.category, req.image_url, req.prompt_text)


@admin_router.put("/prompts/{prompt_id}", response_model=PromptResponse)
def update_prompt(
    prompt_id: int,
    req: PromptRequest,
    admin: CurrentAdmin,
    prompts: PromptServiceDep,
):
    """Replace category, image URL, and text of an existing prompt.

    Raises:
        ValidationError: 400 listing every invalid field.
        NotFound: 404 if the prompt does not exist.
    """
    return prompts.update(prompt_id, req.category, req.image_url, req.prompt_text)


@admin_router.delete("/prompts/{prompt_id}", response_model=MessageResponse)
def delete_prompt(prompt_id: int, admin: CurrentAdmin, prompts: PromptServiceDep) -> dict:
    """Permanently delete a prompt.

    Raises:
        NotFound: 404 if the prompt does not exist.
    """
    prompts.delete(prompt_id)
    return {"message": "Prompt deleted successfully"}


# ---------------------------------------------------------------------------
# Application factory.
# ---------------------------------------------------------------------------


def create_app(cfg: GalleryConfig) -> FastAPI:
    """Build the FastAPI application for ``cfg``.

    The database and services are created by the lifespan handler, so the
    returned app must be run (or wrapped in ``TestClient`` as a context
    manager) before it can serve requests.

    Args:
        cfg: Configuration the application is bound to.

    Returns:
        The configured FastAPI application.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # --- Startup -------------------------------------------------------
        app.state.context = build_context(cfg)
        logger.info(f"Prompt Gallery ready (database: {cfg.database_path})")

        yield  # Application runs here.

        # --- Shutdown ------------------------------------------------------
        logger.info("Prompt Gallery shutting down.")

    app = FastAPI(
        title="Prompt Gallery",
        description="Public prompt gallery with an authenticated admin API.",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ValidationError, _handle_validation_error)
    app.add_exception_handler(RequestValidationError, _handle_request_validation_error)
    app.add_exception_handler(Unauthenticated, _handle_unauthenticated)
    app.add_exception_handler(InvalidCredentials, _handle_invalid_credentials)
    app.add_exception_handler(InvalidToken, _handle_invalid_token)
    app.add_exception_handler(NotFound, _handle_not_found)
    app.add_exception_handler(StoreError, _handle_store_error)

    app.include_router(public_router)
    app.include_router(admin_router)
    return app


app = create_app(config)


# ---------------------------------------------------------------------------
# CLI entry point.
# ---------------------------------------------------------------------------


def main() -> None:
    """Launch the uvicorn ASGI server.

    Reads host and port from :data:`~promptgallery.core.config.config` (which
    loads from ``PROMPTGALLERY_SERVER_HOST`` and ``PROMPTGALLERY_SERVER_PORT``
    environment variables).  Defaults to ``0.0.0.0:3000``.

    This function is registered as the ``promptgallery`` console script in
    ``pyproject.toml``.
    """
    import uvicorn

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info(f"Default admin user: {config.admin_username}")

    uvicorn.run(
        "promptgallery.api.main:app",
        host=config.server_host,
        port=config.server_port,
        reload=False,
    )


if __name__ == "__main__":
    main()
