"""Utility modules for Polish.

Provides:
- logger: get_logger for logging
"""

from polish.utils.logger import get_logger

__all__ = ["get_logger"]
