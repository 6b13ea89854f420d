"""Configuration management for bigletters.

Loads and validates YAML-based configuration with Pydantic models.
Environment variables prefixed with ``BIGLETTERS_`` override file values.
"""

from bigletters.config.settings import Settings, load_settings

__all__ = ["Settings", "load_settings"]
