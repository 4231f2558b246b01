"""Core: config, application context, exception handlers and lifespan.

Single place for settings and the per-process wiring.
"""

from app.core.config import Settings, get_settings, load_settings

__all__ = ["Settings", "get_settings", "load_settings"]
