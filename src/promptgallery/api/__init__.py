"""Prompt Gallery — FastAPI REST API layer.

This package contains the FastAPI application, the Pydantic request/response
models, and the request dependencies (service lookup, bearer token check).

Modules
-------
main
    Application factory, route handlers, error translation, and the
    ``main()`` CLI entry point.
models
    Pydantic models for API request and response validation.
deps
    Dependency providers and the per-application ``GalleryContext``.
"""
