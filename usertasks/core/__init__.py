"""Core: settings for the bridge client.

Single place for configuration loaded from the environment.
"""

from usertasks.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
