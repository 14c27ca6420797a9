"""
Python package introspection provider.

Builds a DocumentationTree from an importable Python package:

- every (public) module becomes a PackageUnit, module docstring as comment
- classes defined in the module become ClassUnits in definition order
- the primary-base chain (``__bases__[0]`` up to ``object``) is the superclass
  chain; the remaining direct bases are listed as interfaces
- Enum members become enum constants, class annotations and properties
  become fields, ``__init__`` becomes the constructor and public functions
  become methods

Docstrings are translated into the comment markup: blank lines become ``<p>``
and Sphinx field lists (``:param x:``, ``:returns:``, ``:raises E:``,
``:version:``, ``:author:``) fill the tag metadata.
"""

import enum
import importlib
import inspect
import logging
import pkgutil
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from apidocx.schemas import (
    CallableUnit,
    ClassUnit,
    DocumentationTree,
    MemberUnit,
    PackageUnit,
    ParameterUnit,
)

logger = logging.getLogger(__name__)

# ":name arg: text"; the closing colon must be followed by whitespace or end of line
_FIELD_LINE = re.compile(r"^:(\w+)(?:\s+([^:]+?))?:(?:\s+(.*))?$")
_BLANK_LINES = re.compile(r"\n\s*\n+")

_PARAM_FIELDS = {"param", "parameter", "arg", "argument", "key", "keyword"}
_RETURN_FIELDS = {"return", "returns"}
_RAISE_FIELDS = {"raise", "raises", "except", "exception", "throws"}
# Inline roles such as :class:`Foo` start description text, not a field
_ROLES = {"class", "func", "meth", "attr", "mod", "obj", "exc", "data", "const", "ref", "doc"}


@dataclass
class ParsedDocstring:
    """A docstring split into description and tag metadata."""
    description: str = ""
    params: Dict[str, str] = field(default_factory=dict)
    returns: str = ""
    raises: List[Tuple[str, str]] = field(default_factory=list)
    versions: List[str] = field(default_factory=list)
    authors: List[str] = field(default_factory=list)


def parse_docstring(doc: Optional[str]) -> ParsedDocstring:
    """
    Split a cleaned docstring into description and Sphinx field metadata.

    Blank-line separated paragraphs of the description are joined with
    ``<p>`` markers.
    """
    parsed = ParsedDocstring()
    if not doc:
        return parsed

    description_lines: List[str] = []
    fields: List[List[str]] = []  # [name, argument, text]
    for line in inspect.cleandoc(doc).splitlines():
        match = _FIELD_LINE.match(line.strip())
        if match and match.group(1).lower() not in _ROLES:
            name, argument, text = match.groups()
            fields.append([name.lower(), (argument or "").strip(), (text or "").strip()])
        elif fields and line.strip():
            # continuation of the previous field
            fields[-1][2] = f"{fields[-1][2]} {line.strip()}".strip()
        elif not fields:
            description_lines.append(line)

    description = "\n".join(description_lines).strip()
    parsed.description = "<p>".join(part.strip() for part in _BLANK_LINES.split(description))

    for name, argument, text in fields:
        if name in _PARAM_FIELDS and argument:
            # ':param int count:' names the parameter last
            parsed.params[argument.split()[-1]] = text
        elif name in _RETURN_FIELDS and not parsed.returns:
            parsed.returns = text
        elif name in _RAISE_FIELDS and argument:
            parsed.raises.append((argument, text))
        elif name == "version":
            parsed.versions.append(text)
        elif name == "author":
            parsed.authors.append(text)
    return parsed


def qualified_name(obj: Any) -> str:
    return f"{obj.__module__}.{obj.__qualname__}"


def format_annotation(annotation: Any) -> str:
    """Fully qualified text of a type annotation ('' when absent)."""
    if annotation is inspect.Parameter.empty:
        return ""
    if annotation is None or annotation is type(None):
        return "None"
    if isinstance(annotation, str):
        return annotation
    if isinstance(annotation, type) and not getattr(annotation, "__args__", None):
        return qualified_name(annotation)
    return repr(annotation)


def superclass_chain(cls: type) -> List[str]:
    """Primary-base ancestors, immediate parent first, ending at object."""
    chain = []
    base = cls.__bases__[0] if cls.__bases__ else None
    while base is not None:
        chain.append(qualified_name(base))
        base = base.__bases__[0] if base.__bases__ else None
    return chain


def _class_modifiers(cls: type) -> str:
    if issubclass(cls, enum.Enum):
        return "enum"
    if inspect.isabstract(cls):
        return "abstract class"
    return "class"


def _introspect_callable(
    func: Any,
    name: str,
    kind: str,
    modifiers: str,
    skip_first: bool,
    fallback_doc: Optional[ParsedDocstring] = None,
) -> CallableUnit:
    # own docstring only, not one inherited from a base method
    doc = parse_docstring(func.__doc__)
    param_comments = dict(fallback_doc.params) if fallback_doc else {}
    param_comments.update(doc.params)

    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        signature = None

    parameters = []
    return_type = "void"
    if signature is not None:
        params = list(signature.parameters.values())
        if skip_first and params:
            params = params[1:]
        for param in params:
            parameters.append(ParameterUnit(
                name=param.name,
                type_name=format_annotation(param.annotation) or "object",
            ))
        annotation = format_annotation(signature.return_annotation)
        if annotation and annotation != "None":
            return_type = annotation
        elif not annotation and doc.returns:
            return_type = "object"

    return CallableUnit(
        kind=kind,
        name=name,
        modifiers=modifiers,
        parameters=parameters,
        param_comments=param_comments,
        return_type_name=return_type if kind == "method" else "void",
        return_comment=doc.returns,
        thrown_types=[exc for exc, _ in doc.raises],
        throws_comments={exc: text for exc, text in doc.raises},
        comment_text=doc.description,
    )


def introspect_class(cls: type) -> ClassUnit:
    """Build a ClassUnit from a class object."""
    # own docstring only; inherited class docs (e.g. Enum) are not this class's
    class_doc = parse_docstring(cls.__dict__.get("__doc__"))

    enum_constants = []
    if issubclass(cls, enum.Enum):
        enum_constants = [MemberUnit(kind="enum_constant", name=member.name) for member in cls]

    fields = []
    for name, annotation in inspect.get_annotations(cls).items():
        if name.startswith("_"):
            continue
        fields.append(MemberUnit(kind="field", name=name, modifiers=format_annotation(annotation)))

    constructors = []
    methods = []
    for name, attr in cls.__dict__.items():
        if isinstance(attr, property):
            if not name.startswith("_"):
                prop_doc = parse_docstring(attr.__doc__)
                fields.append(MemberUnit(kind="field", name=name, modifiers="property",
                                         comment_text=prop_doc.description))
            continue
        if name == "__init__" and inspect.isfunction(attr):
            constructors.append(_introspect_callable(
                attr, cls.__name__, "constructor", "", skip_first=True, fallback_doc=class_doc
            ))
            continue
        if name.startswith("_"):
            continue
        if isinstance(attr, staticmethod):
            methods.append(_introspect_callable(attr.__func__, name, "method", "static", skip_first=False))
        elif isinstance(attr, classmethod):
            methods.append(_introspect_callable(attr.__func__, name, "method", "classmethod", skip_first=True))
        elif inspect.isfunction(attr):
            modifiers = "async" if inspect.iscoroutinefunction(attr) else ""
            methods.append(_introspect_callable(attr, name, "method", modifiers, skip_first=True))

    bases = [base for base in cls.__bases__ if base is not object]
    return ClassUnit(
        name=cls.__name__,
        qualified_name=qualified_name(cls),
        package=cls.__module__,
        modifiers=_class_modifiers(cls),
        superclass_chain=superclass_chain(cls),
        interfaces=[qualified_name(base) for base in bases[1:]],
        comment_text=class_doc.description,
        version_tags=class_doc.versions,
        author_tags=class_doc.authors,
        enum_constants=enum_constants,
        fields=fields,
        constructors=constructors,
        methods=methods,
    )


def introspect_module(
    module_name: str,
    packages: List[PackageUnit],
    classes: List[ClassUnit],
    depth: int = 0,
    max_depth: int = 3,
) -> None:
    """Recursively collect packages and classes of a module and its submodules."""
    if depth > max_depth:
        return

    module = importlib.import_module(module_name)
    packages.append(PackageUnit(
        name=module_name,
        comment_text=parse_docstring(module.__doc__).description,
    ))

    for name, obj in vars(module).items():
        if name.startswith("_") or not inspect.isclass(obj) or obj.__module__ != module_name:
            continue
        classes.append(introspect_class(obj))

    for info in pkgutil.iter_modules(getattr(module, "__path__", [])):
        if info.name.startswith("_"):
            continue
        submodule = f"{module_name}.{info.name}"
        try:
            introspect_module(submodule, packages, classes, depth + 1, max_depth)
        except Exception as e:
            logger.warning(f"Skipping {submodule}: failed to import ({e})")


def introspect_package(module_name: str, max_depth: int = 3) -> DocumentationTree:
    """
    Build a documentation tree from an importable Python package.

    Args:
        module_name: Dotted name of the root module/package
        max_depth: Maximum submodule depth to descend

    Returns:
        DocumentationTree in module/definition order

    Raises:
        ImportError: If the root module cannot be imported
    """
    packages: List[PackageUnit] = []
    classes: List[ClassUnit] = []
    introspect_module(module_name, packages, classes, max_depth=max_depth)
    logger.info(f"Introspected {module_name}: {len(packages)} packages, {len(classes)} classes")
    return DocumentationTree(packages=packages, classes=classes)
