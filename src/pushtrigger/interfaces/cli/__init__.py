"""
Command line interface for invoking push trigger callbacks.
"""

from .main import entry_point

__all__ = ["entry_point"]
