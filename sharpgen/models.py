"""Pydantic v2 models for C# declarations.

Defines the immutable entities produced by the builders (fields, properties,
constructors, classes, enums and interfaces) together with their renderers.
Every ``render`` is a pure function of the model and the indentation level;
``to_source_code`` optionally runs the result through ``SourceFormatter``.
"""

from __future__ import annotations

from abc import abstractmethod
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from sharpgen.config import FormatterConfig
from sharpgen.formatter import format_source
from sharpgen.templates import get_renderer

# Raw rendering always indents with four spaces; FormatterConfig only applies
# to formatted output.
INDENT = "    "


def _pad(indent_level: int) -> str:
    return INDENT * indent_level


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class AccessModifier(str, Enum):
    """Visibility of a declaration."""
    PUBLIC = "public"
    PRIVATE = "private"
    INTERNAL = "internal"
    PROTECTED = "protected"
    PROTECTED_INTERNAL = "protected internal"
    PRIVATE_PROTECTED = "private protected"


# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------

class Declaration(BaseModel):
    """Common behaviour of every rendered entity."""

    model_config = ConfigDict(frozen=True)

    @abstractmethod
    def render(self, indent_level: int = 0) -> str:
        """Raw source text, indented by *indent_level* units of four spaces."""

    def to_source_code(
        self, formatted: bool = True, config: FormatterConfig | None = None
    ) -> str:
        """Return the source code of this declaration.

        Args:
            formatted: Run the raw rendering through the formatter.
            config: Formatter settings; defaults to ``FormatterConfig()``.
        """
        raw = self.render(0)
        if not formatted:
            return raw
        return format_source(raw, config)

    def __str__(self) -> str:
        return self.to_source_code()


# ---------------------------------------------------------------------------
# Members
# ---------------------------------------------------------------------------

class FieldModel(Declaration):
    """A field declaration, e.g. ``private readonly string _name;``."""
    access_modifier: AccessModifier = Field(default=AccessModifier.PRIVATE)
    type: str = Field(..., min_length=1, description="C# type of the field")
    name: str = Field(..., min_length=1, description="Field name")
    is_readonly: bool = Field(default=False)

    def render(self, indent_level: int = 0) -> str:
        parts = [self.access_modifier.value]
        if self.is_readonly:
            parts.append("readonly")
        parts.extend([self.type, self.name])
        return f"{_pad(indent_level)}{' '.join(parts)};"


class PropertyModel(Declaration):
    """A property declaration.

    ``getter`` and ``setter`` hold the accessor logic. ``None`` means the
    accessor is absent; when both are absent the property is rendered as an
    auto-property (``{ get; set; }``).
    """
    access_modifier: AccessModifier = Field(default=AccessModifier.PUBLIC)
    type: str = Field(..., min_length=1, description="C# type of the property")
    name: str = Field(..., min_length=1, description="Property name")
    getter: Optional[str] = Field(default=None, description="Expression or {block}")
    setter: Optional[str] = Field(default=None, description="Expression or {block}")

    def _accessors(self) -> list[tuple[str, str]]:
        accessors = []
        if self.getter is not None:
            accessors.append(("get", self.getter))
        if self.setter is not None:
            accessors.append(("set", self.setter))
        return accessors

    def render(self, indent_level: int = 0) -> str:
        pad = _pad(indent_level)
        header = f"{pad}{self.access_modifier.value} {self.type} {self.name}"
        accessors = self._accessors()
        if not accessors:
            return f"{header} {{ get; set; }}"
        if all(not body.strip() for _, body in accessors):
            keywords = " ".join(f"{keyword};" for keyword, _ in accessors)
            return f"{header} {{ {keywords} }}"

        lines = [f"{header} {{"]
        for keyword, body in accessors:
            lines.append(f"{_pad(indent_level + 1)}{_render_accessor(keyword, body)}")
        lines.append(f"{pad}}}")
        return "\n".join(lines)

    def render_signature(self, indent_level: int = 0) -> str:
        """Render the property as an interface member (no modifier, no bodies)."""
        keywords = [keyword for keyword, _ in self._accessors()] or ["get", "set"]
        accessor_list = " ".join(f"{keyword};" for keyword in keywords)
        return f"{_pad(indent_level)}{self.type} {self.name} {{ {accessor_list} }}"


def _render_accessor(keyword: str, body: str) -> str:
    """Render one accessor line.

    Text starting with ``{`` is a block body and is kept verbatim; anything
    else is an expression body. Blank text renders the bare accessor.
    """
    text = body.strip()
    if not text:
        return f"{keyword};"
    if text.startswith("{"):
        return f"{keyword} {text}"
    expression = text[:-1].rstrip() if text.endswith(";") else text
    return f"{keyword} => {expression};"


class ParameterModel(BaseModel):
    """A constructor parameter."""
    model_config = ConfigDict(frozen=True)

    type: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)

    def as_sig(self) -> str:
        return f"{self.type} {self.name}"


class ConstructorModel(Declaration):
    """A constructor declaration.

    ``class_name`` is supplied by the owning class when the class is built.
    ``base_call`` is ``None`` when there is no ``: base(...)`` clause; an empty
    tuple renders ``: base()``.
    """
    access_modifier: AccessModifier = Field(default=AccessModifier.PUBLIC)
    class_name: str = Field(..., min_length=1)
    parameters: tuple[ParameterModel, ...] = Field(default_factory=tuple)
    base_call: Optional[tuple[str, ...]] = Field(default=None)
    body: str = Field(default="")

    def render(self, indent_level: int = 0) -> str:
        pad = _pad(indent_level)
        params = ", ".join(p.as_sig() for p in self.parameters)
        header = f"{pad}{self.access_modifier.value} {self.class_name}({params})"
        if self.base_call is not None:
            header += f" : base({', '.join(self.base_call)})"

        body = self.body.strip()
        if body.startswith("{"):
            return f"{header} {body}"

        lines = [f"{header} {{"]
        inner = _pad(indent_level + 1)
        for line in body.splitlines():
            if line.strip():
                lines.append(f"{inner}{line.strip()}")
        lines.append(f"{pad}}}")
        return "\n".join(lines)


# ---------------------------------------------------------------------------
# Type declarations
# ---------------------------------------------------------------------------

class ClassModel(Declaration):
    """A class declaration and the members it owns.

    Members render in a fixed order regardless of insertion order: fields,
    then properties, then constructors. Insertion order is kept within each
    group.
    """
    access_modifier: AccessModifier = Field(default=AccessModifier.PUBLIC)
    name: str = Field(..., min_length=1, description="Class name")
    inherited_class: Optional[str] = Field(default=None)
    implemented_interfaces: tuple[str, ...] = Field(default_factory=tuple)
    fields: tuple[FieldModel, ...] = Field(default_factory=tuple)
    properties: tuple[PropertyModel, ...] = Field(default_factory=tuple)
    constructors: tuple[ConstructorModel, ...] = Field(default_factory=tuple)

    @property
    def bases(self) -> list[str]:
        """The inheritance list: base class first, then interfaces."""
        bases = [self.inherited_class] if self.inherited_class is not None else []
        bases.extend(self.implemented_interfaces)
        return bases

    def render(self, indent_level: int = 0) -> str:
        members = [f.render(indent_level + 1) for f in self.fields]
        members.extend(p.render(indent_level + 1) for p in self.properties)
        members.extend(c.render(indent_level + 1) for c in self.constructors)
        return get_renderer().render("class.cs.j2", {
            "indent": _pad(indent_level),
            "access_modifier": self.access_modifier.value,
            "name": self.name,
            "bases": self.bases,
            "members": members,
        })


class EnumMemberModel(BaseModel):
    """One enum member with an optional explicit value."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    value: Optional[str] = Field(default=None)

    def render(self, indent_level: int = 0) -> str:
        if self.value is None:
            return f"{_pad(indent_level)}{self.name}"
        return f"{_pad(indent_level)}{self.name} = {self.value}"


class EnumModel(Declaration):
    """An enum declaration."""
    access_modifier: AccessModifier = Field(default=AccessModifier.PUBLIC)
    name: str = Field(..., min_length=1, description="Enum name")
    underlying_type: Optional[str] = Field(default=None, description="e.g. 'byte'")
    members: tuple[EnumMemberModel, ...] = Field(default_factory=tuple)

    def render(self, indent_level: int = 0) -> str:
        return get_renderer().render("enum.cs.j2", {
            "indent": _pad(indent_level),
            "access_modifier": self.access_modifier.value,
            "name": self.name,
            "underlying_type": self.underlying_type,
            "members": [m.render(indent_level + 1) for m in self.members],
        })


class InterfaceModel(Declaration):
    """An interface declaration made of property signatures."""
    access_modifier: AccessModifier = Field(default=AccessModifier.PUBLIC)
    name: str = Field(..., min_length=1, description="Interface name")
    extended_interfaces: tuple[str, ...] = Field(default_factory=tuple)
    properties: tuple[PropertyModel, ...] = Field(default_factory=tuple)

    def render(self, indent_level: int = 0) -> str:
        return get_renderer().render("interface.cs.j2", {
            "indent": _pad(indent_level),
            "access_modifier": self.access_modifier.value,
            "name": self.name,
            "bases": list(self.extended_interfaces),
            "members": [p.render_signature(indent_level + 1) for p in self.properties],
        })
