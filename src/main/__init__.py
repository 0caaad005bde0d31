"""
Main module - Composition Root Layer

Sets up settings, logging and the dependency container, and creates the
FastAPI application. The only layer allowed to know every other layer.
"""

from .config import AppSettings, get_settings
from .container import AppContainer, get_container, init_container

__all__ = [
    "AppSettings",
    "get_settings",
    "AppContainer",
    "init_container",
    "get_container",
]
