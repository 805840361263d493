"""Exception hierarchy for the Prompt Gallery.

Services raise these; the API layer maps each one onto an HTTP status code
and a JSON error body (see ``promptgallery.api.main``).
"""

from dataclasses import dataclass


class GalleryError(Exception):
    """Base class for every error raised by the gallery services."""

    pass


@dataclass(frozen=True)
class FieldError:
    """A single violated field constraint."""

    field: str
    message: str


class ValidationError(GalleryError):
    """Input failed validation.

    The message is intended to be displayed directly to the admin user.
    ``errors`` lists every violated field, not only the first one.
    """

    def __init__(self, errors: list[FieldError]):
        self.errors = list(errors)
        fields = ", ".join(error.field for error in self.errors)
        super().__init__(f"Invalid value for: {fields}")


class AuthError(GalleryError):
    """Base class for authentication failures."""

    pass


class InvalidCredentials(AuthError):
    """Username unknown or password does not match."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class Unauthenticated(AuthError):
    """No bearer token was presented."""

    def __init__(self, message: str = "Access token required"):
        super().__init__(message)


class InvalidToken(AuthError):
    """Bearer token has a bad signature, is malformed, or has expired."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)


class NotFound(GalleryError):
    """The targeted prompt does not exist."""

    def __init__(self, message: str = "Prompt not found"):
        super().__init__(message)


class StoreError(GalleryError):
    """The underlying SQLite database failed."""

    pass
