"""
Build configuration.

`BuildOptions` is an immutable value constructed once at startup and passed
explicitly to every component that needs it. Options can come from keyword
arguments, from a doclet-style option array (``[["-file", "api.docx"], ...]``)
or from a flat argument list (``["-file", "api.docx", "-title", "API"]``).
Unsupported option names are rejected before any document work begins.
"""

from pathlib import Path
from typing import Dict, Iterable, List, Literal, Sequence

from pydantic import BaseModel, ConfigDict, Field

# Prefix of the environment variables bound to CLI options
ENV_PREFIX = "APIDOCX_"


class UnsupportedOptionError(ValueError):
    """Raised for an option name that is not supported."""

    def __init__(self, name: str):
        super().__init__(f"Unsupported option: {name}")
        self.name = name


class OptionValueError(ValueError):
    """Raised when an option does not carry exactly one value."""


class BuildOptions(BaseModel):
    """Options controlling one document build."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    file: Path = Field(Path("document.docx"), description="Output file path")
    font1: str = Field("Meiryo UI", description="Primary body font family")
    font2: str = Field("Consolas", description="Font family for inline-tagged terms")
    title: str = Field("", description="Document title (cover page and header)")
    subtitle: str = Field("", description="Document subtitle (cover page and header)")
    version: str = Field("", description="Version string shown on the cover page")
    company: str = Field("", description="Organization shown on the cover page")
    copyright: str = Field("", description="Footer text")
    locale: Literal["ja", "en"] = Field("ja", description="Language of labels and the cover date")

    @classmethod
    def supported_options(cls) -> List[str]:
        """Option names in declaration order (without the leading '-')."""
        return list(cls.model_fields)

    @classmethod
    def from_option_pairs(cls, pairs: Iterable[Sequence[str]]) -> "BuildOptions":
        """
        Build options from a doclet-style option array.

        Args:
            pairs: Sequences of ``[name, value]`` where name starts with '-'

        Returns:
            Validated BuildOptions

        Raises:
            UnsupportedOptionError: If an option name is not supported
            OptionValueError: If an option does not carry exactly one value
        """
        values: Dict[str, str] = {}
        for pair in pairs:
            if not pair:
                raise OptionValueError("Empty option entry")
            name = pair[0]
            if option_length(name) == 0:
                raise UnsupportedOptionError(name)
            if len(pair) != 2:
                raise OptionValueError(f"Option {name} takes exactly one value, got {len(pair) - 1}")
            # first occurrence wins
            values.setdefault(name[1:], pair[1])
        return cls(**values)


def option_length(option: str) -> int:
    """
    Number of tokens an option consumes, including the option itself.

    Returns 0 for unsupported options.
    """
    if option.startswith("-") and option[1:] in BuildOptions.model_fields:
        return 2
    return 0


def parse_option_args(argv: Sequence[str]) -> List[List[str]]:
    """
    Pair a flat ``-name value ...`` argument list into option pairs.

    Raises:
        UnsupportedOptionError: If a name is not a supported option
        OptionValueError: If the last option has no value
    """
    pairs = []
    i = 0
    while i < len(argv):
        name = argv[i]
        length = option_length(name)
        if length == 0:
            raise UnsupportedOptionError(name)
        if i + length > len(argv):
            raise OptionValueError(f"Option {name} takes exactly one value")
        pairs.append(list(argv[i:i + length]))
        i += length
    return pairs
