"""Documentation model providers: sources of DocumentationTree values."""

from .tree_loader import TreeLoadError, load_tree, dump_tree
from .python_introspect import introspect_package, introspect_class, parse_docstring

__all__ = [
    "TreeLoadError",
    "load_tree",
    "dump_tree",
    "introspect_package",
    "introspect_class",
    "parse_docstring",
]
