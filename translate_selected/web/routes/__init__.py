"""Route blueprints for the HTTP bridge."""

from .settings import settings_bp
from .translation import translation_bp

__all__ = [
    "settings_bp",
    "translation_bp",
]
