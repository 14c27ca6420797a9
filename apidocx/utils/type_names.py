"""
Helpers for displaying type names in signatures.
"""

import re

# Standard-library prefixes that are noise in a signature
_WELL_KNOWN_PREFIXES = re.compile(r"(?<![\w.])(?:java\.(?:lang|util|io|nio)|builtins|typing|collections\.abc)\.")
_GENERIC_ARGS = re.compile(r"[<\[].*[>\]]$")


def simplify_type_name(type_name: str) -> str:
    """
    Strip well-known standard-library package prefixes, keeping everything else.

    Example:
        >>> simplify_type_name("java.util.Map<java.lang.String, com.acme.Item>")
        'Map<String, com.acme.Item>'
    """
    return _WELL_KNOWN_PREFIXES.sub("", type_name)


def simple_type_name(type_name: str) -> str:
    """
    Unqualified name of a type: generic arguments dropped, last dotted segment kept.

    Array suffixes survive, e.g. 'java.lang.String[]' -> 'String[]'.
    """
    suffix = ""
    base = type_name.strip()
    while base.endswith("[]"):
        base = base[:-2]
        suffix += "[]"
    base = _GENERIC_ARGS.sub("", base)
    return base.rsplit(".", 1)[-1] + suffix
