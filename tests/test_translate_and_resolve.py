"""Validator parsing, translation and type resolution."""

from __future__ import annotations

import logging

import pytest

from ast_typegen.schema import (
    UNRECOGNIZED_SHAPE,
    ChainOf,
    Each,
    ExactType,
    OneOfTypes,
    OneOfValues,
    TranslationError,
    UnknownValidator,
    parse_validator,
    render_literal,
    translate,
)
from ast_typegen.schema.registry import RegistryError, load_registry, registry_from_tables
from ast_typegen.schema.resolver import TypeResolver


def _array_of(item):
    return ChainOf((ExactType("array"), Each(item)))


# ---------------------------------------------------------------------------
# Parsing native validators
# ---------------------------------------------------------------------------


class TestParseValidator:
    def test_exact_type(self):
        assert parse_validator({"type": "string"}) == ExactType("string")

    def test_node_and_value_type_unions_share_a_variant(self):
        assert parse_validator({"oneOfNodeTypes": ["A", "B"]}) == OneOfTypes(("A", "B"))
        assert parse_validator({"oneOfNodeOrValueTypes": ["A", "null"]}) == OneOfTypes(
            ("A", "null")
        )

    def test_array_chain(self):
        parsed = parse_validator({"chainOf": [{"type": "array"}, {"each": {"type": "X"}}]})
        assert parsed == _array_of(ExactType("X"))

    def test_string_enum_chain(self):
        parsed = parse_validator({"chainOf": [{"type": "string"}, {"oneOf": ["a", "b"]}]})
        assert parsed == ChainOf((ExactType("string"), OneOfValues(("a", "b"))))

    def test_unknown_keys_are_kept_raw(self):
        raw = {"shapeOf": {"raw": {"type": "string"}}}
        assert parse_validator(raw) == UnknownValidator(raw)

    def test_empty_one_of_is_unrecognized(self):
        assert isinstance(parse_validator({"oneOf": []}), UnknownValidator)

    def test_none_means_no_validator(self):
        assert parse_validator(None) is None


# ---------------------------------------------------------------------------
# Translation
# ---------------------------------------------------------------------------


class TestTranslate:
    def test_exact_type_is_returned_verbatim(self):
        assert translate(ExactType("Expression")) == "Expression"

    def test_one_of_types_keeps_declared_order(self):
        assert translate(OneOfTypes(("Zeta", "Alpha", "Mid"))) == "Zeta | Alpha | Mid"

    def test_one_of_values_renders_literal_types(self):
        validator = OneOfValues((True, False, 1, 1.5, "in", None))
        assert translate(validator) == "true | false | 1 | 1.5 | 'in' | null"

    def test_float_literals_keep_full_precision(self):
        validator = OneOfValues((123456789012345.0, 0.1234567890123, 1e21))
        assert translate(validator) == "123456789012345 | 0.1234567890123 | 1e+21"

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(float("nan"), "NaN"), (float("inf"), "Infinity"), (float("-inf"), "-Infinity")],
    )
    def test_non_finite_floats(self, value, expected):
        assert render_literal(value) == expected

    def test_string_literals_escape_control_characters(self):
        assert render_literal("a\nb\r\t'c'\\") == "'a\\nb\\r\\t\\'c\\'\\\\'"

    def test_array_of_expression(self):
        assert translate(_array_of(ExactType("Expression"))) == "$ReadOnlyArray<Expression>"

    def test_nested_arrays_recurse(self):
        validator = _array_of(_array_of(OneOfTypes(("A", "B"))))
        assert translate(validator) == "$ReadOnlyArray<$ReadOnlyArray<A | B>>"

    def test_sequence_type_is_configurable(self):
        assert translate(_array_of(ExactType("T")), "Array") == "Array<T>"

    def test_string_enum_chain_is_double_quoted(self):
        validator = ChainOf((ExactType("string"), OneOfValues(("a", "b"))))
        assert translate(validator) == '"a" | "b"'

    @pytest.mark.parametrize(
        "validator",
        [
            UnknownValidator({"shapeOf": {}}),
            ChainOf((ExactType("object"), Each(ExactType("X")))),
            ChainOf((ExactType("array"), Each(ExactType("X")), ExactType("Y"))),
            ChainOf((ExactType("string"), ExactType("Y"))),
            _array_of(UnknownValidator({"custom": True})),
        ],
    )
    def test_unrecognized_shapes_raise(self, validator):
        with pytest.raises(TranslationError) as excinfo:
            translate(validator)
        assert excinfo.value.code == UNRECOGNIZED_SHAPE

    def test_failure_carries_offending_validator(self):
        inner = UnknownValidator({"custom": True})
        with pytest.raises(TranslationError) as excinfo:
            translate(_array_of(inner))
        assert excinfo.value.validator == inner


# ---------------------------------------------------------------------------
# Type resolution
# ---------------------------------------------------------------------------


def _registry(fields, builder_keys=(), aliases=()):
    return registry_from_tables(
        node_fields={"Thing": fields},
        builder_keys={"Thing": list(builder_keys)},
        alias_keys={"Thing": list(aliases)},
    )


def test_override_takes_precedence_over_validator() -> None:
    registry = registry_from_tables(
        node_fields={"Identifier": {"name": {"validate": {"type": "number"}}}},
        builder_keys={"Identifier": ["name"]},
    )
    resolver = TypeResolver(registry=registry)
    assert resolver.resolve("Identifier", "name") == "string"


def test_custom_override_table() -> None:
    registry = _registry({"key": {"validate": {"type": "Node"}}})
    resolver = TypeResolver(registry=registry, overrides={"Thing": {"key": "Expression"}})
    assert resolver.resolve("Thing", "key") == "Expression"


def test_missing_validator_resolves_to_unknown() -> None:
    resolver = TypeResolver(registry=_registry({"value": {}}))
    assert resolver.resolve("Thing", "value") == "mixed"


def test_unrecognized_shape_degrades_and_logs(caplog: pytest.LogCaptureFixture) -> None:
    registry = _registry({"value": {"validate": {"shapeOf": {"raw": {"type": "string"}}}}})
    resolver = TypeResolver(registry=registry, unknown_type="any")

    with caplog.at_level(logging.WARNING, logger="ast_typegen.schema.resolver"):
        assert resolver.resolve("Thing", "value") == "any"

    assert "Unrecognised validator type for Thing.value" in caplog.text
    assert "shapeOf" in caplog.text
    assert [(d.kind, d.field) for d in resolver.diagnostics] == [("Thing", "value")]


def test_other_translation_errors_are_reraised(monkeypatch: pytest.MonkeyPatch) -> None:
    def _broken(validator, sequence_type):
        raise TranslationError(code="corrupt_registry", validator=validator)

    monkeypatch.setattr("ast_typegen.schema.resolver.translate", _broken)
    resolver = TypeResolver(registry=_registry({"value": {"validate": {"type": "X"}}}))
    with pytest.raises(TranslationError, match="corrupt_registry"):
        resolver.resolve("Thing", "value")
    assert resolver.diagnostics == []


def test_unknown_field_is_an_error() -> None:
    resolver = TypeResolver(registry=_registry({"value": {}}))
    with pytest.raises(KeyError):
        resolver.resolve("Thing", "missing")


# ---------------------------------------------------------------------------
# Registry loading
# ---------------------------------------------------------------------------


def test_field_order_is_builder_keys_then_sorted() -> None:
    registry = _registry(
        {"z": {}, "b": {}, "a": {}, "m": {}},
        builder_keys=["m", "b"],
    )
    assert registry.get("Thing").ordered_fields() == ["m", "b", "a", "z"]


def test_defaulted_field_is_optional() -> None:
    registry = _registry({"flag": {"default": False}, "name": {}, "maybe": {"optional": True}})
    spec = registry.get("Thing")
    assert spec.fields["flag"].is_optional
    assert spec.fields["maybe"].is_optional
    assert not spec.fields["name"].is_optional


def test_builder_key_without_field_is_rejected() -> None:
    with pytest.raises(RegistryError, match="Thing"):
        _registry({"a": {}}, builder_keys=["a", "b"])


def test_load_registry_rejects_invalid_documents(tmp_path) -> None:
    bad_json = tmp_path / "bad.json"
    bad_json.write_text("{not json", encoding="utf-8")
    with pytest.raises(RegistryError, match="invalid JSON"):
        load_registry(bad_json)

    no_builders = tmp_path / "no_builders.json"
    no_builders.write_text('{"NODE_FIELDS": {}}', encoding="utf-8")
    with pytest.raises(RegistryError, match="BUILDER_KEYS"):
        load_registry(no_builders)

    with pytest.raises(RegistryError, match="cannot read"):
        load_registry(tmp_path / "missing.json")
