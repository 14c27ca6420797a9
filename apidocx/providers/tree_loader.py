"""
JSON documentation-tree provider.

Reads and writes DocumentationTree files produced by any documentation model
provider (Javadoc exporters, the Python introspector, hand-written fixtures).
"""

import logging
from pathlib import Path

from pydantic import ValidationError

from apidocx.schemas import DocumentationTree

logger = logging.getLogger(__name__)


class TreeLoadError(RuntimeError):
    """Raised when a documentation tree file cannot be read or validated."""


def load_tree(path: Path) -> DocumentationTree:
    """
    Load a documentation tree from a JSON file.

    Args:
        path: Path to the JSON file

    Returns:
        Validated DocumentationTree

    Raises:
        TreeLoadError: If the file is unreadable or does not match the schema
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise TreeLoadError(f"Cannot read documentation tree {path}: {e}") from e

    try:
        tree = DocumentationTree.model_validate_json(raw)
    except ValidationError as e:
        raise TreeLoadError(f"Invalid documentation tree {path}: {e}") from e

    logger.info(f"Loaded {len(tree.packages)} packages, {len(tree.classes)} classes from {path}")
    return tree


def dump_tree(tree: DocumentationTree, path: Path) -> Path:
    """Write a documentation tree as indented JSON."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(tree.model_dump_json(indent=2), encoding="utf-8")
    return path
