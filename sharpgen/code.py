"""Factory entry points for the sharpgen builders.

Builders are not meant to be instantiated directly; these factories return a
builder, optionally pre-seeded with the settings most declarations need.

Quick usage::

    from sharpgen import code

    person = (
        code.create_class("Person")
        .with_field(code.create_field(str, "_name").with_readonly())
        .with_property(code.create_property(str, "Name").with_getter("_name"))
    )
    print(person.to_source_code())
"""

from __future__ import annotations

from typing import Optional

from sharpgen.builders import (
    ClassBuilder,
    ConstructorBuilder,
    EnumBuilder,
    FieldBuilder,
    InterfaceBuilder,
    PropertyBuilder,
)
from sharpgen.models import AccessModifier
from sharpgen.type_mapping import TypeLike


def create_class(
    name: Optional[str] = None,
    access_modifier: AccessModifier = AccessModifier.PUBLIC,
) -> ClassBuilder:
    """Start building a class."""
    return ClassBuilder(access_modifier, name)


def create_field(
    type: Optional[TypeLike] = None,
    name: Optional[str] = None,
    access_modifier: AccessModifier = AccessModifier.PRIVATE,
) -> FieldBuilder:
    """Start building a field (private unless told otherwise)."""
    return FieldBuilder(access_modifier, type, name)


def create_property(
    type: Optional[TypeLike] = None,
    name: Optional[str] = None,
    access_modifier: AccessModifier = AccessModifier.PUBLIC,
) -> PropertyBuilder:
    """Start building a property."""
    return PropertyBuilder(access_modifier, type, name)


def create_constructor(
    access_modifier: AccessModifier = AccessModifier.PUBLIC,
) -> ConstructorBuilder:
    """Start building a constructor; its name comes from the owning class."""
    return ConstructorBuilder(access_modifier)


def create_enum(
    name: Optional[str] = None,
    access_modifier: AccessModifier = AccessModifier.PUBLIC,
) -> EnumBuilder:
    """Start building an enum."""
    return EnumBuilder(access_modifier, name)


def create_interface(
    name: Optional[str] = None,
    access_modifier: AccessModifier = AccessModifier.PUBLIC,
) -> InterfaceBuilder:
    """Start building an interface."""
    return InterfaceBuilder(access_modifier, name)
