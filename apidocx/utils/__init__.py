"""
Utility functions for apidocx.
"""

from .type_names import simplify_type_name, simple_type_name

__all__ = [
    'simplify_type_name',
    'simple_type_name',
]
