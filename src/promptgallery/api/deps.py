"""FastAPI dependencies shared by the route handlers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from promptgallery.core.config import GalleryConfig
from promptgallery.core.models import AdminIdentity
from promptgallery.core.prompts_db import PromptsDB
from promptgallery.services import AuthService, PromptService

# auto_error=False so a missing header reaches AuthService.verify and is
# reported as Unauthenticated (401) rather than FastAPI's stock 403.  A
# header with a scheme other than Bearer counts as missing.
bearer_scheme = HTTPBearer(auto_error=False)


@dataclass
class GalleryContext:
    """Everything a request handler needs, built once at startup."""

    config: GalleryConfig
    db: PromptsDB
    prompts: PromptService
    auth: AuthService


def get_context(request: Request) -> GalleryContext:
    return request.app.state.context


def get_prompt_service(
    context: Annotated[GalleryContext, Depends(get_context)],
) -> PromptService:
    return context.prompts


def get_auth_service(
    context: Annotated[GalleryContext, Depends(get_context)],
) -> AuthService:
    return context.auth


def require_admin(
    auth: Annotated[AuthService, Depends(get_auth_service)],
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> AdminIdentity:
    """Verify the bearer token on an admin route.

    Raises:
        Unauthenticated: If no bearer token was sent
        InvalidToken: If the token fails verification
    """
    token = credentials.credentials if credentials else None
    return auth.verify(token)


PromptServiceDep = Annotated[PromptService, Depends(get_prompt_service)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
CurrentAdmin = Annotated[AdminIdentity, Depends(require_admin)]
