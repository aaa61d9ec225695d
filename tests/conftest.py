"""Shared pytest fixtures for the sharpgen test suite.

Provides reusable fixtures for:
- Pre-configured member builders (field, property, constructor)
- The ``Person`` class used across rendering and formatting tests
- Formatter configurations
"""

from __future__ import annotations

import pytest

from sharpgen import (
    AccessModifier,
    BraceStyle,
    ClassBuilder,
    FormatterConfig,
    create_class,
    create_constructor,
    create_field,
    create_property,
)


# ---------------------------------------------------------------------------
# Member builders
# ---------------------------------------------------------------------------

@pytest.fixture
def name_field():
    """``private readonly string _name;``"""
    return create_field("string", "_name").with_readonly()


@pytest.fixture
def name_property():
    """Read-only ``Name`` property backed by ``_name``."""
    return create_property("string", "Name").with_getter("_name").without_setter()


@pytest.fixture
def name_constructor():
    """``public Person(string name) { _name = name; }``"""
    return (
        create_constructor(AccessModifier.PUBLIC)
        .with_parameter("string", "name")
        .with_body("{ _name = name; }")
    )


# ---------------------------------------------------------------------------
# Classes
# ---------------------------------------------------------------------------

@pytest.fixture
def person_builder(name_field, name_property, name_constructor) -> ClassBuilder:
    """The ``Person`` class from the end-to-end example."""
    return (
        create_class("Person", AccessModifier.PUBLIC)
        .with_field(name_field)
        .with_property(name_property)
        .with_constructor(name_constructor)
    )


@pytest.fixture
def person_source() -> str:
    """Expected formatted source of ``person_builder``."""
    return (
        "public class Person {\n"
        "    private readonly string _name;\n"
        "\n"
        "    public string Name {\n"
        "        get => _name;\n"
        "    }\n"
        "\n"
        "    public Person(string name) {\n"
        "        _name = name;\n"
        "    }\n"
        "}"
    )


# ---------------------------------------------------------------------------
# Formatter configurations
# ---------------------------------------------------------------------------

@pytest.fixture
def next_line_config() -> FormatterConfig:
    """Allman-style braces with four-space indentation."""
    return FormatterConfig(brace_style=BraceStyle.NEXT_LINE)


@pytest.fixture
def tab_config() -> FormatterConfig:
    """End-of-line braces indented with tabs."""
    return FormatterConfig(use_tabs=True)
