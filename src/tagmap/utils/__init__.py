"""Utility modules for tagmap.

Provides:
- logger: get_logger for logging
"""

from tagmap.utils.logger import get_logger

__all__ = ["get_logger"]
