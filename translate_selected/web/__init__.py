"""HTTP bridge for editor front-ends that cannot host the Python core."""

from flask import Flask

from translate_selected.config import initialize_app


def create_app() -> Flask:
    """Application factory for the HTTP bridge."""
    initialize_app()

    from .app import build_app  # Import here to avoid circular imports

    return build_app()


__all__ = ["create_app"]
