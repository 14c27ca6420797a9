"""Tests for build options."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from apidocx.config import (
    BuildOptions,
    OptionValueError,
    UnsupportedOptionError,
    option_length,
    parse_option_args,
)


def test_defaults():
    options = BuildOptions()

    assert options.file == Path("document.docx")
    assert options.font1 == "Meiryo UI"
    assert options.font2 == "Consolas"
    assert options.title == options.subtitle == options.version == ""
    assert options.company == options.copyright == ""
    assert options.locale == "ja"


def test_supported_options():
    assert BuildOptions.supported_options() == [
        "file", "font1", "font2", "title", "subtitle", "version", "company", "copyright", "locale",
    ]


@pytest.mark.parametrize("option,length", [
    ("-file", 2),
    ("-title", 2),
    ("-copyright", 2),
    ("-locale", 2),
    ("-author", 0),
    ("file", 0),
    ("--file", 0),
    ("-", 0),
])
def test_option_length(option, length):
    assert option_length(option) == length


def test_from_option_pairs():
    options = BuildOptions.from_option_pairs([
        ["-file", "out/api.docx"],
        ["-title", "Acme API"],
        ["-font2", "Courier New"],
    ])

    assert options.file == Path("out/api.docx")
    assert options.title == "Acme API"
    assert options.font2 == "Courier New"
    assert options.font1 == "Meiryo UI"


def test_first_pair_wins():
    options = BuildOptions.from_option_pairs([["-title", "One"], ["-title", "Two"]])

    assert options.title == "One"


def test_unsupported_option_rejected():
    with pytest.raises(UnsupportedOptionError) as excinfo:
        BuildOptions.from_option_pairs([["-title", "API"], ["-author", "me"]])

    assert excinfo.value.name == "-author"
    assert str(excinfo.value) == "Unsupported option: -author"


@pytest.mark.parametrize("pair", [["-title"], ["-title", "a", "b"], []])
def test_option_needs_exactly_one_value(pair):
    with pytest.raises(OptionValueError):
        BuildOptions.from_option_pairs([pair])


def test_parse_option_args():
    pairs = parse_option_args(["-file", "api.docx", "-title", "API"])

    assert pairs == [["-file", "api.docx"], ["-title", "API"]]
    assert BuildOptions.from_option_pairs(pairs).title == "API"


def test_parse_option_args_missing_value():
    with pytest.raises(OptionValueError):
        parse_option_args(["-file", "api.docx", "-title"])


def test_parse_option_args_unknown():
    with pytest.raises(UnsupportedOptionError):
        parse_option_args(["-verbose", "-file", "api.docx"])


def test_options_are_immutable():
    options = BuildOptions()

    with pytest.raises(ValidationError):
        options.title = "changed"


def test_unknown_keyword_rejected():
    with pytest.raises(ValidationError):
        BuildOptions(author="me")


def test_invalid_locale_rejected():
    with pytest.raises(ValidationError):
        BuildOptions(locale="fr")


def test_options_do_not_read_environment(monkeypatch):
    monkeypatch.setenv("APIDOCX_TITLE", "From Env")

    assert BuildOptions().title == ""
