"""Unit tests for the declaration models (sharpgen.models).

Tests cover:
- FieldModel rendering (modifiers, readonly, indentation)
- PropertyModel accessor policy (auto, expression, block, bare accessors)
- ConstructorModel parameters, base call and body forms
- ClassModel header, inheritance list and member order
- EnumModel and InterfaceModel rendering
- Immutability of built models
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

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


# ---------------------------------------------------------------------------
# AccessModifier
# ---------------------------------------------------------------------------


class TestAccessModifier:
    @pytest.mark.unit
    def test_compound_modifiers_render_with_space(self):
        assert AccessModifier.PROTECTED_INTERNAL.value == "protected internal"
        assert AccessModifier.PRIVATE_PROTECTED.value == "private protected"

    @pytest.mark.unit
    def test_is_closed_set(self):
        with pytest.raises(ValueError):
            AccessModifier("friend")


class TestDeclaration:
    @pytest.mark.unit
    def test_base_is_abstract(self):
        with pytest.raises(TypeError):
            Declaration()


# ---------------------------------------------------------------------------
# FieldModel
# ---------------------------------------------------------------------------


class TestFieldModel:
    @pytest.mark.unit
    def test_default_is_private(self):
        field = FieldModel(type="int", name="_id")
        assert field.render() == "private int _id;"

    @pytest.mark.unit
    def test_readonly(self):
        field = FieldModel(
            access_modifier=AccessModifier.PUBLIC, type="string", name="Name", is_readonly=True
        )
        assert field.render() == "public readonly string Name;"

    @pytest.mark.unit
    def test_indent_level(self):
        field = FieldModel(type="int", name="_id")
        assert field.render(2) == "        private int _id;"

    @pytest.mark.unit
    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            FieldModel(type="int", name="")

    @pytest.mark.unit
    def test_frozen(self):
        field = FieldModel(type="int", name="_id")
        with pytest.raises(ValidationError):
            field.name = "_other"


# ---------------------------------------------------------------------------
# PropertyModel
# ---------------------------------------------------------------------------


class TestPropertyModel:
    @pytest.mark.unit
    def test_auto_property(self):
        prop = PropertyModel(type="int", name="Id")
        assert prop.render() == "public int Id { get; set; }"

    @pytest.mark.unit
    def test_expression_getter_only(self):
        prop = PropertyModel(type="int", name="Id", getter="_id")
        assert prop.render() == "public int Id {\n    get => _id;\n}"

    @pytest.mark.unit
    def test_expression_setter_only(self):
        prop = PropertyModel(type="int", name="Id", setter="_id = value")
        assert prop.render() == "public int Id {\n    set => _id = value;\n}"

    @pytest.mark.unit
    def test_getter_and_setter_in_order(self):
        prop = PropertyModel(type="int", name="Id", getter="_id", setter="_id = value")
        assert prop.render() == (
            "public int Id {\n"
            "    get => _id;\n"
            "    set => _id = value;\n"
            "}"
        )

    @pytest.mark.unit
    def test_block_getter_kept_verbatim(self):
        prop = PropertyModel(type="int", name="One", getter="{ return 1; }")
        assert prop.render() == "public int One {\n    get { return 1; }\n}"

    @pytest.mark.unit
    def test_leading_whitespace_before_block_is_trimmed(self):
        prop = PropertyModel(type="int", name="One", getter="   { return 1; }")
        assert "get { return 1; }" in prop.render()
        assert "=>" not in prop.render()

    @pytest.mark.unit
    def test_trailing_semicolon_not_doubled(self):
        prop = PropertyModel(type="int", name="Id", getter="_id;")
        assert "get => _id;" in prop.render()
        assert ";;" not in prop.render()

    @pytest.mark.unit
    def test_empty_getter_differs_from_no_getter(self):
        read_only = PropertyModel(type="int", name="Id", getter="")
        auto = PropertyModel(type="int", name="Id")
        assert read_only.render() == "public int Id { get; }"
        assert auto.render() == "public int Id { get; set; }"

    @pytest.mark.unit
    def test_empty_getter_with_expression_setter(self):
        prop = PropertyModel(type="int", name="X", getter="", setter="_x = value")
        assert prop.render() == "public int X {\n    get;\n    set => _x = value;\n}"

    @pytest.mark.unit
    def test_indent_level(self):
        prop = PropertyModel(type="int", name="Id", getter="_id")
        assert prop.render(1) == "    public int Id {\n        get => _id;\n    }"

    @pytest.mark.unit
    def test_signature_defaults_to_get_set(self):
        prop = PropertyModel(type="int", name="Id", getter="{ return 1; }")
        assert PropertyModel(type="int", name="Id").render_signature() == "int Id { get; set; }"
        assert prop.render_signature() == "int Id { get; }"

    @pytest.mark.unit
    def test_render_is_repeatable(self):
        prop = PropertyModel(type="int", name="Id", getter="_id")
        assert prop.render() == prop.render()


# ---------------------------------------------------------------------------
# ConstructorModel
# ---------------------------------------------------------------------------


class TestConstructorModel:
    @pytest.mark.unit
    def test_block_body_verbatim(self):
        ctor = ConstructorModel(
            class_name="Person",
            parameters=[ParameterModel(type="string", name="name")],
            body="{ _name = name; }",
        )
        assert ctor.render() == "public Person(string name) { _name = name; }"

    @pytest.mark.unit
    def test_parameters_joined_in_order(self):
        ctor = ConstructorModel(
            class_name="Point",
            parameters=[ParameterModel(type="int", name="x"), ParameterModel(type="int", name="y")],
        )
        assert ctor.render().startswith("public Point(int x, int y) {")

    @pytest.mark.unit
    def test_empty_body(self):
        ctor = ConstructorModel(class_name="Empty")
        assert ctor.render() == "public Empty() {\n}"

    @pytest.mark.unit
    def test_statement_body_wrapped(self):
        ctor = ConstructorModel(
            class_name="P",
            parameters=[ParameterModel(type="int", name="a"), ParameterModel(type="int", name="b")],
            body="_a = a;\n_b = b;",
        )
        assert ctor.render() == "public P(int a, int b) {\n    _a = a;\n    _b = b;\n}"

    @pytest.mark.unit
    def test_base_call(self):
        ctor = ConstructorModel(
            class_name="Student",
            parameters=[ParameterModel(type="string", name="name")],
            base_call=("name",),
        )
        assert ctor.render() == "public Student(string name) : base(name) {\n}"

    @pytest.mark.unit
    def test_empty_base_call(self):
        ctor = ConstructorModel(class_name="Student", base_call=())
        assert ctor.render().startswith("public Student() : base() {")

    @pytest.mark.unit
    def test_no_base_call(self):
        ctor = ConstructorModel(class_name="Student")
        assert "base" not in ctor.render()


# ---------------------------------------------------------------------------
# ClassModel
# ---------------------------------------------------------------------------


class TestClassModel:
    @pytest.mark.unit
    def test_empty_class(self):
        assert ClassModel(name="Empty").render() == "public class Empty {\n}"

    @pytest.mark.unit
    def test_base_class_before_interfaces(self):
        cls = ClassModel(
            name="Student",
            inherited_class="Person",
            implemented_interfaces=("IComparable", "IDisposable"),
        )
        assert cls.render().splitlines()[0] == (
            "public class Student : Person, IComparable, IDisposable {"
        )

    @pytest.mark.unit
    def test_interfaces_without_base_class(self):
        cls = ClassModel(name="Repo", implemented_interfaces=("IRepo",))
        assert cls.render().splitlines()[0] == "public class Repo : IRepo {"

    @pytest.mark.unit
    def test_duplicate_interfaces_kept(self):
        cls = ClassModel(name="Repo", implemented_interfaces=("IRepo", "IRepo"))
        assert cls.render().splitlines()[0] == "public class Repo : IRepo, IRepo {"

    @pytest.mark.unit
    def test_members_separated_by_blank_line(self):
        cls = ClassModel(
            access_modifier=AccessModifier.INTERNAL,
            name="Counter",
            fields=(FieldModel(type="int", name="_count"),),
            properties=(PropertyModel(type="int", name="Count", getter="_count"),),
        )
        assert cls.render() == (
            "internal class Counter {\n"
            "    private int _count;\n"
            "\n"
            "    public int Count {\n"
            "        get => _count;\n"
            "    }\n"
            "}"
        )

    @pytest.mark.unit
    def test_nested_indent_level(self):
        cls = ClassModel(name="Inner", fields=(FieldModel(type="int", name="_a"),))
        assert cls.render(1) == "    public class Inner {\n        private int _a;\n    }"

    @pytest.mark.unit
    def test_bases_property(self):
        cls = ClassModel(name="A", inherited_class="B", implemented_interfaces=("IC",))
        assert cls.bases == ["B", "IC"]

    @pytest.mark.unit
    def test_unformatted_equals_render(self):
        cls = ClassModel(name="A", fields=(FieldModel(type="int", name="_a"),))
        assert cls.to_source_code(formatted=False) == cls.render()

    @pytest.mark.unit
    def test_str_is_formatted_source(self):
        cls = ClassModel(name="A")
        assert str(cls) == cls.to_source_code()


# ---------------------------------------------------------------------------
# EnumModel / InterfaceModel
# ---------------------------------------------------------------------------


class TestEnumModel:
    @pytest.mark.unit
    def test_members(self):
        enum = EnumModel(
            name="Color",
            members=(
                EnumMemberModel(name="Red"),
                EnumMemberModel(name="Green", value="2"),
                EnumMemberModel(name="Blue"),
            ),
        )
        assert enum.render() == "public enum Color {\n    Red,\n    Green = 2,\n    Blue\n}"

    @pytest.mark.unit
    def test_underlying_type(self):
        enum = EnumModel(name="Flags", underlying_type="byte")
        assert enum.render() == "public enum Flags : byte {\n}"


class TestInterfaceModel:
    @pytest.mark.unit
    def test_property_signatures(self):
        iface = InterfaceModel(
            name="IEntity",
            extended_interfaces=("IDisposable",),
            properties=(
                PropertyModel(type="int", name="Id", getter="_id"),
                PropertyModel(type="string", name="Name"),
            ),
        )
        assert iface.render() == (
            "public interface IEntity : IDisposable {\n"
            "    int Id { get; }\n"
            "\n"
            "    string Name { get; set; }\n"
            "}"
        )

    @pytest.mark.unit
    def test_empty_interface(self):
        assert InterfaceModel(name="IMarker").render() == "public interface IMarker {\n}"
