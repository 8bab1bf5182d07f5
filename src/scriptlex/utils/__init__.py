"""Utility modules for scriptlex.

Provides:
- logger: get_logger for logging
"""

from scriptlex.utils.logger import get_logger

__all__ = ["get_logger"]
