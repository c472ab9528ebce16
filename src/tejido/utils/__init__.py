"""Utility modules for Tejido.

Provides:
- logger: get_logger for namespaced logging
"""

from tejido.utils.logger import get_logger

__all__ = ["get_logger"]
