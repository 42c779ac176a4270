"""
Export module for summary downloads.
"""

from .factory import create_export_module

__all__ = ["create_export_module"]
