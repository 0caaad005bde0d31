"""Plain configuration structures handed to application use cases."""

from .system_info import SystemInfo

__all__ = ["SystemInfo"]
