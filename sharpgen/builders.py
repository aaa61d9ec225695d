"""Fluent builders for C# declarations.

Each builder accumulates configuration through chainable ``with_*`` calls and
produces an immutable model from ``sharpgen.models`` on ``build()``.
Required settings are checked only in ``build()``, in a fixed order per
builder, and a missing one raises ``MissingConfigurationError``.

Builders are obtained through the factories in ``sharpgen.code``.
"""

from __future__ import annotations

import copy
import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

from sharpgen.config import FormatterConfig
from sharpgen.errors import MissingConfigurationError
from sharpgen.models import (
    AccessModifier,
    ClassModel,
    ConstructorModel,
    Declaration,
    EnumMemberModel,
    EnumModel,
    FieldModel,
    InterfaceModel,
    ParameterModel,
    PropertyModel,
)
from sharpgen.type_mapping import TypeLike, csharp_type_name

logger = logging.getLogger(__name__)


class _Builder(ABC):
    """Shared ``to_source_code`` / ``__str__`` behaviour."""

    @abstractmethod
    def build(self) -> Declaration:
        """Check the required settings and return the immutable model."""

    def to_source_code(
        self, formatted: bool = True, config: FormatterConfig | None = None
    ) -> str:
        """Build the declaration and return its source code."""
        return self.build().to_source_code(formatted, config)

    def __str__(self) -> str:
        return self.to_source_code()

    def _snapshot(self):
        """Detached copy stored by parent builders."""
        return copy.deepcopy(self)


def _resolve_type(value: Optional[TypeLike], entity: str, setting: str) -> str:
    """C# name of a configured type; an absent or unusable one counts as missing."""
    if value is None or value == "":
        raise MissingConfigurationError(entity, setting)
    try:
        return csharp_type_name(value)
    except TypeError as exc:
        raise MissingConfigurationError(entity, setting) from exc


# ---------------------------------------------------------------------------
# Members
# ---------------------------------------------------------------------------

class FieldBuilder(_Builder):
    """Builds a ``FieldModel``. Checks: name, then type."""

    def __init__(
        self,
        access_modifier: AccessModifier = AccessModifier.PRIVATE,
        type: Optional[TypeLike] = None,
        name: Optional[str] = None,
    ) -> None:
        self._access_modifier = access_modifier
        self._type = type
        self._name = name
        self._is_readonly = False

    def with_access_modifier(self, access_modifier: AccessModifier) -> FieldBuilder:
        self._access_modifier = access_modifier
        return self

    def with_type(self, type: TypeLike) -> FieldBuilder:
        self._type = type
        return self

    def with_name(self, name: str) -> FieldBuilder:
        self._name = name
        return self

    def with_readonly(self, is_readonly: bool = True) -> FieldBuilder:
        self._is_readonly = is_readonly
        return self

    def build(self) -> FieldModel:
        if not self._name:
            raise MissingConfigurationError("field", "name")
        type_name = _resolve_type(self._type, "field", "type")
        return FieldModel(
            access_modifier=self._access_modifier,
            type=type_name,
            name=self._name,
            is_readonly=self._is_readonly,
        )


class PropertyBuilder(_Builder):
    """Builds a ``PropertyModel``. Checks: name, then type.

    Accessor logic is either an expression or a block wrapped in ``{}``:

        PropertyBuilder().with_name("Identifier").with_type(int).with_getter("_id")

        public int Identifier {
            get => _id;
        }

    With neither a getter nor a setter the property renders as
    ``{ get; set; }``.
    """

    def __init__(
        self,
        access_modifier: AccessModifier = AccessModifier.PUBLIC,
        type: Optional[TypeLike] = None,
        name: Optional[str] = None,
    ) -> None:
        self._access_modifier = access_modifier
        self._type = type
        self._name = name
        self._getter: Optional[str] = None
        self._setter: Optional[str] = None

    def with_access_modifier(self, access_modifier: AccessModifier) -> PropertyBuilder:
        self._access_modifier = access_modifier
        return self

    def with_type(self, type: TypeLike) -> PropertyBuilder:
        self._type = type
        return self

    def with_name(self, name: str) -> PropertyBuilder:
        self._name = name
        return self

    def with_getter(self, expression: str) -> PropertyBuilder:
        """Set the getter logic; ``""`` renders a bare ``get;``."""
        self._getter = expression
        return self

    def without_getter(self) -> PropertyBuilder:
        self._getter = None
        return self

    def with_setter(self, expression: str) -> PropertyBuilder:
        """Set the setter logic; it may use the implicit ``value``."""
        self._setter = expression
        return self

    def without_setter(self) -> PropertyBuilder:
        self._setter = None
        return self

    def build(self) -> PropertyModel:
        if not self._name:
            raise MissingConfigurationError("property", "name")
        type_name = _resolve_type(self._type, "property", "type")
        return PropertyModel(
            access_modifier=self._access_modifier,
            type=type_name,
            name=self._name,
            getter=self._getter,
            setter=self._setter,
        )


class ConstructorBuilder(_Builder):
    """Builds a ``ConstructorModel``.

    The constructor takes its name from the class it is added to, so the
    class name is only known when the owning ``ClassBuilder`` builds. Calling
    ``build()`` without ``class_name`` raises ``MissingConfigurationError``;
    after that each parameter is checked for a name, then a type.
    """

    def __init__(self, access_modifier: AccessModifier = AccessModifier.PUBLIC) -> None:
        self._access_modifier = access_modifier
        self._parameters: list[tuple[Optional[TypeLike], str]] = []
        self._base_call: Optional[list[str]] = None
        self._body = ""

    def with_access_modifier(self, access_modifier: AccessModifier) -> ConstructorBuilder:
        self._access_modifier = access_modifier
        return self

    def with_parameter(self, type: TypeLike, name: str) -> ConstructorBuilder:
        self._parameters.append((type, name))
        return self

    def with_parameters(self, *parameters: tuple[TypeLike, str]) -> ConstructorBuilder:
        for type_, name in parameters:
            self.with_parameter(type_, name)
        return self

    def with_base_call(self, *arguments: str) -> ConstructorBuilder:
        """Chain to the base constructor with *arguments* (possibly none)."""
        self._base_call = list(arguments)
        return self

    def with_body(self, body: str) -> ConstructorBuilder:
        """Set the body: a ``{...}`` block kept verbatim, or plain statements."""
        self._body = body
        return self

    def build(self, class_name: Optional[str] = None) -> ConstructorModel:
        if not class_name:
            raise MissingConfigurationError("constructor", "class_name")
        parameters = []
        for type_, name in self._parameters:
            if not name:
                raise MissingConfigurationError("constructor", "parameter_name")
            type_name = _resolve_type(type_, "constructor", "parameter_type")
            parameters.append(ParameterModel(type=type_name, name=name))
        return ConstructorModel(
            access_modifier=self._access_modifier,
            class_name=class_name,
            parameters=parameters,
            base_call=self._base_call,
            body=self._body,
        )


# ---------------------------------------------------------------------------
# Type declarations
# ---------------------------------------------------------------------------

class ClassBuilder(_Builder):
    """Builds a ``ClassModel``.

    Member builders are stored as snapshots and built, in insertion order,
    when the class is built. Checks: name, then every field, property and
    constructor.
    """

    def __init__(
        self,
        access_modifier: AccessModifier = AccessModifier.PUBLIC,
        name: Optional[str] = None,
    ) -> None:
        self._access_modifier = access_modifier
        self._name = name
        self._inherited_class: Optional[str] = None
        self._implemented_interfaces: list[str] = []
        self._fields: list[FieldBuilder] = []
        self._properties: list[PropertyBuilder] = []
        self._constructors: list[ConstructorBuilder] = []

    def with_access_modifier(self, access_modifier: AccessModifier) -> ClassBuilder:
        self._access_modifier = access_modifier
        return self

    def with_name(self, name: str) -> ClassBuilder:
        self._name = name
        return self

    def with_inherited_class(self, name: str) -> ClassBuilder:
        self._inherited_class = name
        return self

    def with_implemented_interface(self, name: str) -> ClassBuilder:
        self._implemented_interfaces.append(name)
        return self

    def with_implemented_interfaces(self, *names: str) -> ClassBuilder:
        self._implemented_interfaces.extend(names)
        return self

    def with_field(self, builder: FieldBuilder) -> ClassBuilder:
        self._fields.append(builder._snapshot())
        return self

    def with_fields(self, *builders: FieldBuilder) -> ClassBuilder:
        for builder in builders:
            self.with_field(builder)
        return self

    def with_property(self, builder: PropertyBuilder) -> ClassBuilder:
        self._properties.append(builder._snapshot())
        return self

    def with_properties(self, *builders: PropertyBuilder) -> ClassBuilder:
        for builder in builders:
            self.with_property(builder)
        return self

    def with_constructor(self, builder: ConstructorBuilder) -> ClassBuilder:
        self._constructors.append(builder._snapshot())
        return self

    def with_constructors(self, *builders: ConstructorBuilder) -> ClassBuilder:
        for builder in builders:
            self.with_constructor(builder)
        return self

    def build(self) -> ClassModel:
        if not self._name:
            raise MissingConfigurationError("class", "name")

        model = ClassModel(
            access_modifier=self._access_modifier,
            name=self._name,
            inherited_class=self._inherited_class,
            implemented_interfaces=self._implemented_interfaces,
            fields=[b.build() for b in self._fields],
            properties=[b.build() for b in self._properties],
            constructors=[b.build(class_name=self._name) for b in self._constructors],
        )
        logger.debug(
            "Built class %s (%d fields, %d properties, %d constructors)",
            model.name, len(model.fields), len(model.properties), len(model.constructors),
        )
        return model


class EnumBuilder(_Builder):
    """Builds an ``EnumModel``. Checks: name, member names, then underlying type."""

    def __init__(
        self,
        access_modifier: AccessModifier = AccessModifier.PUBLIC,
        name: Optional[str] = None,
    ) -> None:
        self._access_modifier = access_modifier
        self._name = name
        self._underlying_type: Optional[TypeLike] = None
        self._members: list[tuple[str, Optional[str]]] = []

    def with_access_modifier(self, access_modifier: AccessModifier) -> EnumBuilder:
        self._access_modifier = access_modifier
        return self

    def with_name(self, name: str) -> EnumBuilder:
        self._name = name
        return self

    def with_underlying_type(self, type: Optional[TypeLike]) -> EnumBuilder:
        self._underlying_type = type
        return self

    def with_member(self, name: str, value: Any = None) -> EnumBuilder:
        """Add a member; *value* is rendered with ``str()`` when given."""
        self._members.append((name, None if value is None else str(value)))
        return self

    def with_members(self, *names: str) -> EnumBuilder:
        for name in names:
            self.with_member(name)
        return self

    def build(self) -> EnumModel:
        if not self._name:
            raise MissingConfigurationError("enum", "name")
        if any(not name for name, _ in self._members):
            raise MissingConfigurationError("enum", "member_name")
        underlying_type = None
        if self._underlying_type is not None:
            underlying_type = _resolve_type(self._underlying_type, "enum", "underlying_type")
        return EnumModel(
            access_modifier=self._access_modifier,
            name=self._name,
            underlying_type=underlying_type,
            members=[EnumMemberModel(name=n, value=v) for n, v in self._members],
        )


class InterfaceBuilder(_Builder):
    """Builds an ``InterfaceModel``. Checks: name, then every property."""

    def __init__(
        self,
        access_modifier: AccessModifier = AccessModifier.PUBLIC,
        name: Optional[str] = None,
    ) -> None:
        self._access_modifier = access_modifier
        self._name = name
        self._extended_interfaces: list[str] = []
        self._properties: list[PropertyBuilder] = []

    def with_access_modifier(self, access_modifier: AccessModifier) -> InterfaceBuilder:
        self._access_modifier = access_modifier
        return self

    def with_name(self, name: str) -> InterfaceBuilder:
        self._name = name
        return self

    def with_extended_interface(self, name: str) -> InterfaceBuilder:
        self._extended_interfaces.append(name)
        return self

    def with_extended_interfaces(self, *names: str) -> InterfaceBuilder:
        self._extended_interfaces.extend(names)
        return self

    def with_property(self, builder: PropertyBuilder) -> InterfaceBuilder:
        self._properties.append(builder._snapshot())
        return self

    def with_properties(self, *builders: PropertyBuilder) -> InterfaceBuilder:
        for builder in builders:
            self.with_property(builder)
        return self

    def build(self) -> InterfaceModel:
        if not self._name:
            raise MissingConfigurationError("interface", "name")
        return InterfaceModel(
            access_modifier=self._access_modifier,
            name=self._name,
            extended_interfaces=self._extended_interfaces,
            properties=[b.build() for b in self._properties],
        )
