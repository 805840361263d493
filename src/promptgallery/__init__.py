"""Prompt Gallery - public prompt gallery with an authenticated admin API."""

__version__ = "1.0.0"

from promptgallery.core.config import GalleryConfig, config

__all__ = [
    "GalleryConfig",
    "config",
]
