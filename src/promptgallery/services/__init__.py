"""Prompt Gallery services.

Services hold the business rules and sit between the FastAPI routes and the
SQLite data store.

Modules
-------
auth
    Admin login and bearer token verification.
prompts
    Prompt CRUD, counting, and category enumeration.
"""

from .auth import AuthService
from .prompts import ALL_CATEGORY, PromptService

__all__ = ["ALL_CATEGORY", "AuthService", "PromptService"]
