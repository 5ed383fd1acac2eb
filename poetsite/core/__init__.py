"""Core app configuration, database, roles and errors."""

from poetsite.core.auth_config import AuthConfig
from poetsite.core.config import get_settings, settings
from poetsite.core.database import get_db

__all__ = ["AuthConfig", "get_settings", "settings", "get_db"]
