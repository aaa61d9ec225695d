"""sharpgen -- generates C# type declarations from a declarative model.

Builders collect the members of a class, enum or interface, ``build()`` turns
them into immutable pydantic models, and the models render themselves to
source text, optionally normalised by ``SourceFormatter``.

Quick usage::

    from sharpgen import create_class, create_field

    source = (
        create_class("Person")
        .with_field(create_field("string", "_name").with_readonly())
        .to_source_code()
    )
"""

from sharpgen.builders import (
    ClassBuilder,
    ConstructorBuilder,
    EnumBuilder,
    FieldBuilder,
    InterfaceBuilder,
    PropertyBuilder,
)
from sharpgen.code import (
    create_class,
    create_constructor,
    create_enum,
    create_field,
    create_interface,
    create_property,
)
from sharpgen.config import BraceStyle, FormatterConfig
from sharpgen.errors import MissingConfigurationError, SharpGenError
from sharpgen.formatter import SourceFormatter, format_source
from sharpgen.models import (
    AccessModifier,
    ClassModel,
    ConstructorModel,
    EnumMemberModel,
    EnumModel,
    FieldModel,
    InterfaceModel,
    ParameterModel,
    PropertyModel,
)

__version__ = "0.1.0"

__all__ = [
    # factories
    "create_class",
    "create_constructor",
    "create_enum",
    "create_field",
    "create_interface",
    "create_property",
    # builders
    "ClassBuilder",
    "ConstructorBuilder",
    "EnumBuilder",
    "FieldBuilder",
    "InterfaceBuilder",
    "PropertyBuilder",
    # models
    "AccessModifier",
    "ClassModel",
    "ConstructorModel",
    "EnumMemberModel",
    "EnumModel",
    "FieldModel",
    "InterfaceModel",
    "ParameterModel",
    "PropertyModel",
    # formatting & configuration
    "BraceStyle",
    "FormatterConfig",
    "SourceFormatter",
    "format_source",
    # errors
    "MissingConfigurationError",
    "SharpGenError",
]
