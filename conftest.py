"""Shared pytest fixtures for apidocx tests."""

from datetime import date

import pytest

from apidocx.config import BuildOptions
from apidocx.schemas import (
    CallableUnit,
    ClassUnit,
    DocumentationTree,
    MemberUnit,
    PackageUnit,
    ParameterUnit,
)


@pytest.fixture
def build_date():
    return date(2026, 10, 19)


@pytest.fixture
def options(tmp_path):
    return BuildOptions(
        file=tmp_path / "api.docx",
        title="Acme API",
        subtitle="Reference Manual",
        version="Version 1.2",
        company="Acme Corp.",
        copyright="(c) Acme Corp.",
    )


@pytest.fixture
def english_options(options):
    return options.model_copy(update={"locale": "en"})


@pytest.fixture
def store_class():
    """A class exercising every section of a class page."""
    return ClassUnit(
        name="Store",
        qualified_name="com.acme.core.Store",
        package="com.acme.core",
        modifiers="public",
        superclass_chain=["com.acme.core.AbstractStore", "java.lang.Object"],
        interfaces=["java.io.Closeable", "com.acme.core.Named"],
        comment_text="Key value store.<p>Use {@link #open} first.",
        version_tags=["1.2"],
        author_tags=["Alice", "Bob"],
        enum_constants=[],
        fields=[
            MemberUnit(name="size", modifiers="private int", comment_text="Entry count."),
            MemberUnit(name="name", modifiers="private String"),
        ],
        constructors=[
            CallableUnit(
                kind="constructor",
                name="Store",
                modifiers="public",
                parameters=[ParameterUnit(name="capacity", type_name="int")],
                param_comments={"capacity": "initial capacity"},
            )
        ],
        methods=[
            CallableUnit(
                kind="method",
                name="get",
                modifiers="public",
                parameters=[
                    ParameterUnit(name="key", type_name="java.lang.String"),
                    ParameterUnit(name="fallback", type_name="java.util.Optional<java.lang.String>"),
                ],
                param_comments={"key": "lookup key"},
                return_type_name="java.lang.String",
                return_comment="the stored value",
                thrown_types=["java.io.IOException", "com.acme.core.StoreException"],
                throws_comments={"java.io.IOException": "on read failure"},
                comment_text="Returns a value.",
            ),
            CallableUnit(
                kind="method",
                name="clear",
                modifiers="public",
                return_type_name="void",
            ),
        ],
    )


@pytest.fixture
def tree(store_class):
    """Two core classes separated by a class from another package."""
    return DocumentationTree(
        packages=[
            PackageUnit(name="com.acme.core", comment_text="Core types."),
            PackageUnit(name="com.acme.util"),
        ],
        classes=[
            store_class,
            ClassUnit(
                name="Strings",
                qualified_name="com.acme.util.Strings",
                package="com.acme.util",
                modifiers="public final",
                superclass_chain=["java.lang.Object"],
            ),
            ClassUnit(
                name="Color",
                qualified_name="com.acme.core.Color",
                package="com.acme.core",
                modifiers="public enum",
                superclass_chain=["java.lang.Enum", "java.lang.Object"],
                enum_constants=[
                    MemberUnit(kind="enum_constant", name="RED", modifiers="public static final"),
                    MemberUnit(kind="enum_constant", name="GREEN", modifiers="public static final"),
                ],
            ),
        ],
    )
