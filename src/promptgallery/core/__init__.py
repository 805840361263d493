"""Core functionality for the Prompt Gallery.

- **GalleryConfig / config**: Configuration management using Pydantic Settings
- **PromptsDB**: SQLite storage for prompts and admin credentials
- **security**: Password hashing (passlib) and JWT helpers (PyJWT)
- **validation**: Field validation and HTML sanitization for prompts
- **errors**: Exception hierarchy translated to HTTP errors by the API layer

Architecture Overview
---------------------
1. **Configuration Layer** (config.py):
   - Environment-based configuration using Pydantic Settings
   - All settings prefixed with PROMPTGALLERY_ in .env files

2. **Storage Layer** (prompts_db.py, models.py):
   - One short-lived sqlite3 connection per operation
   - Rows returned as plain dataclasses

3. **Support Utilities** (security.py, validation.py, errors.py)
"""

from promptgallery.core.config import GalleryConfig, config
from promptgallery.core.prompts_db import PromptsDB

__all__ = [
    "GalleryConfig",
    "PromptsDB",
    "config",
]
