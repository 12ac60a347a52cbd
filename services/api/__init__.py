from .app import app, create_app
from .config import APIConfig, get_config
from .dependencies import build_summary_client

__all__ = [
    "app",
    "create_app",
    "APIConfig",
    "get_config",
    "build_summary_client",
]
