"""Pydantic request and response models for the Prompt Gallery API.

These models define the JSON schema for every API endpoint.  FastAPI uses
them for request parsing, response serialisation, and OpenAPI documentation.
Field *shape* is enforced here; the content rules (URL format, minimum text
length) live in :mod:`promptgallery.core.validation` so that they apply to
every caller of the services, not only HTTP clients.

Models
------
LoginRequest
    Payload for ``POST /api/admin/login``.
LoginResponse
    Token and username returned after a successful login.
PromptRequest
    Payload for ``POST /api/admin/prompts`` and ``PUT /api/admin/prompts/{id}``.
PromptResponse
    A single prompt as returned by every prompt-listing endpoint.
CountResponse
    Payload of ``GET /api/prompts/count``.
MessageResponse
    Generic confirmation message.
ErrorResponse
    Body of every error response.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    """Request body for the ``POST /api/admin/login`` endpoint.

    Attributes:
        username: Admin username.
        password: Admin password in clear text (sent over TLS in deployment).
    """

    username: str = Field(..., description="Admin username.")
    password: str = Field(..., description="Admin password.")


class LoginResponse(BaseModel):
    """Response body of a successful login."""

    token: str = Field(..., description="Signed bearer token, valid for 24 hours.")
    username: str = Field(..., description="Username the token was issued to.")


class PromptRequest(BaseModel):
    """Request body for creating or replacing a prompt.

    Attributes:
        category: Free-form category tag (non-empty).
        image_url: Absolute http(s) URL of the gallery image.
        prompt_text: Descriptive text, at least 10 characters.
    """

    category: str = Field(..., description="Category tag, e.g. 'Men' or 'Kids'.")
    image_url: str = Field(..., description="Absolute http(s) URL of the image.")
    prompt_text: str = Field(..., description="Prompt text (at least 10 characters).")


class PromptResponse(BaseModel):
    """A gallery prompt as serialised by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    category: str
    image_url: str
    prompt_text: str
    created_at: str


class CountResponse(BaseModel):
    count: int


class MessageResponse(BaseModel):
    message: str


class FieldErrorResponse(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    """Body of every error response.

    ``errors`` is only populated for validation failures.
    """

    detail: str
    errors: list[FieldErrorResponse] | None = None
