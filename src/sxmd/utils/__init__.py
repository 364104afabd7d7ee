"""Utility modules for sxmd.

Provides:
- logger: get_logger for namespaced logging
"""

from sxmd.utils.logger import get_logger

__all__ = ["get_logger"]
