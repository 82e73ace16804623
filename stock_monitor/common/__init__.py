# Common utilities and shared modules
"""
Shared components used by every Stock Monitor module:
- Data models (Pydantic schemas)
- Local key-value store
- Logging configuration
- Project configuration
"""

from .config import settings, PROJECT_ROOT, DATA_DIR
from .logging import get_logger, setup_logging
from .storage import KeyValueStore

__all__ = [
    "settings",
    "PROJECT_ROOT",
    "DATA_DIR",
    "get_logger",
    "setup_logging",
    "KeyValueStore",
]
