"""Domain records returned by the data store and services."""

from dataclasses import dataclass


@dataclass
class Prompt:
    """A gallery record pairing an image with descriptive text and a category tag.

    ``created_at`` is an ISO-8601 UTC timestamp string as stored in SQLite.
    """

    id: int
    category: str
    image_url: str
    prompt_text: str
    created_at: str


@dataclass
class Admin:
    """Administrator credentials row."""

    id: int
    username: str
    password_hash: str
    created_at: str


@dataclass(frozen=True)
class AdminIdentity:
    """Identity carried by a verified bearer token."""

    id: int
    username: str


@dataclass(frozen=True)
class Token:
    """Result of a successful admin login."""

    token: str
    username: str
