"""Consoler configuration module - public API.

Exports:
    settings: Singleton Settings instance
    Settings: Settings class (for testing/overrides)
"""

from consoler.configuration.settings import Settings, settings

__all__ = ["Settings", "settings"]
