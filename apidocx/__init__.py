"""
apidocx - API documentation to Word document generator.

Turns a documentation tree (packages, classes, fields, constructors, methods
and their markup comments) into a paginated, styled .docx document.

Main Components:
- Providers: load a tree from JSON or introspect a Python package
- Markup: comment markup to styled runs
- Layout: style presets, structure walker, document assembler
- Writer: python-docx backend

Usage:
    from apidocx import BuildOptions, DocumentAssembler, load_tree

    options = BuildOptions(file="api.docx", title="Acme API")
    DocumentAssembler(options).create(load_tree("tree.json"))
"""

from .config import BuildOptions, UnsupportedOptionError, OptionValueError
from .schemas import (
    # Documentation tree
    PackageUnit,
    ClassUnit,
    MemberUnit,
    CallableUnit,
    ParameterUnit,
    DocumentationTree,

    # Styled document
    StyledRun,
    Paragraph,
    Borders,
    HeaderFooterLine,
    Document,
)
from .markup import parse_markup
from .layout import DocumentAssembler, StructureWalker, run_build
from .providers import load_tree, dump_tree, introspect_package

__all__ = [
    "BuildOptions",
    "UnsupportedOptionError",
    "OptionValueError",
    "PackageUnit",
    "ClassUnit",
    "MemberUnit",
    "CallableUnit",
    "ParameterUnit",
    "DocumentationTree",
    "StyledRun",
    "Paragraph",
    "Borders",
    "HeaderFooterLine",
    "Document",
    "parse_markup",
    "DocumentAssembler",
    "StructureWalker",
    "run_build",
    "load_tree",
    "dump_tree",
    "introspect_package",
]

__version__ = "0.1.0"
