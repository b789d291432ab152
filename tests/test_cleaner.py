"""Tests for SchemaCleaner and constraint softening."""

import pytest

from toolschema.cleaner import (
    REMOVED_FIELDS,
    VALIDATION_FIELDS,
    SchemaCleaner,
    ValidationConstraint,
    format_validation_suffix,
    json_text,
)


@pytest.fixture
def cleaner():
    return SchemaCleaner()


class TestValidationConstraint:

    @pytest.mark.parametrize(
        "value, text",
        [
            (1, "1"),
            (0.5, "0.5"),
            (True, "true"),
            (None, "null"),
            ("^[a-z]+$", '"^[a-z]+$"'),
            ("café", '"café"'),
            ([1, 2], "[1,2]"),
        ],
    )
    def test_json_text(self, value, text):
        assert json_text(value) == text

    def test_render(self):
        assert ValidationConstraint("minLength", "minLen", 3).render() == "minLen: 3"

    def test_suffix(self):
        constraints = [
            ValidationConstraint("minimum", "min", 0),
            ValidationConstraint("pattern", "pattern", "^x"),
        ]
        assert format_validation_suffix(constraints) == ' [Validation: min: 0, pattern: "^x"]'


class TestSoftenConstraints:

    def test_creates_description(self, cleaner):
        node = {"type": "string", "minLength": 1}
        cleaner.clean(node)
        assert node == {"type": "string", "description": " [Validation: minLen: 1]"}

    def test_appends_to_existing_description(self, cleaner):
        node = {"description": "City name", "maxLength": 64}
        cleaner.clean(node)
        assert node["description"] == "City name [Validation: maxLen: 64]"

    def test_fixed_order(self, cleaner):
        node = {
            "pattern": "^a",
            "multipleOf": 2,
            "exclusiveMaximum": 100,
            "exclusiveMinimum": 0,
            "maxItems": 5,
            "minItems": 1,
            "maximum": 99,
            "minimum": 1,
            "maxLength": 10,
            "minLength": 2,
        }
        cleaner.clean(node)
        assert node == {
            "description": (
                " [Validation: minLen: 2, maxLen: 10, min: 1, max: 99, minItems: 1, "
                'maxItems: 5, exclMin: 0, exclMax: 100, multipleOf: 2, pattern: "^a"]'
            )
        }
        assert cleaner.softened_count == len(VALIDATION_FIELDS)

    def test_returns_lifted_constraints(self, cleaner):
        node = {"maximum": 10, "minimum": 1}
        lifted = cleaner.soften_constraints(node)
        assert [c.key for c in lifted] == ["minimum", "maximum"]
        assert [c.label for c in lifted] == ["min", "max"]

    def test_no_constraints_no_description(self, cleaner):
        node = {"type": "string"}
        assert cleaner.soften_constraints(node) == []
        assert "description" not in node

    def test_non_string_description_kept(self, cleaner):
        node = {"description": {"en": "x"}, "minLength": 1}
        cleaner.clean(node)
        assert node == {"description": {"en": "x"}}


class TestRemoveUnsupported:

    def test_removes_all_regardless_of_value(self, cleaner):
        node = {field: None for field in REMOVED_FIELDS}
        node["additionalProperties"] = {"type": "string"}
        node["type"] = "object"
        cleaner.clean(node)
        assert node == {"type": "object"}
        assert cleaner.removed_count == len(REMOVED_FIELDS)

    def test_keeps_other_keywords(self, cleaner):
        node = {"type": "string", "enum": ["a", "b"], "title": "Choice"}
        cleaner.clean(node)
        assert node == {"type": "string", "enum": ["a", "b"], "title": "Choice"}


class TestNormalizeType:

    def test_string(self, cleaner):
        node = {"type": "OBJECT"}
        cleaner.clean(node)
        assert node["type"] == "object"

    def test_union_list(self, cleaner):
        node = {"type": ["STRING", "Null"]}
        cleaner.clean(node)
        assert node["type"] == ["string", "null"]

    def test_non_string_items_untouched(self, cleaner):
        node = {"type": ["Integer", 3, None]}
        cleaner.clean(node)
        assert node["type"] == ["integer", 3, None]

    @pytest.mark.parametrize("payload", [42, None, {"Kind": "X"}])
    def test_other_shapes_untouched(self, cleaner, payload):
        node = {"type": payload}
        cleaner.clean(node)
        assert node["type"] == payload


class TestRecursion:

    def test_nested_schemas(self, cleaner):
        node = {
            "type": "OBJECT",
            "properties": {
                "tags": {
                    "type": "ARRAY",
                    "uniqueItems": True,
                    "items": {"type": "STRING", "format": "uuid"},
                },
            },
            "anyOf": [[{"type": "NUMBER", "minimum": 0}]],
        }
        cleaner.clean(node)
        assert node == {
            "type": "object",
            "properties": {
                "tags": {"type": "array", "items": {"type": "string"}},
            },
            "anyOf": [[{"type": "number", "description": " [Validation: min: 0]"}]],
        }

    @pytest.mark.parametrize("value", ["Text", 3, 2.5, True, None])
    def test_scalar_no_op(self, cleaner, value):
        cleaner.clean(value)

    def test_reset_counts(self, cleaner):
        cleaner.clean({"format": "x", "minimum": 1})
        cleaner.reset_counts()
        assert cleaner.softened_count == 0
        assert cleaner.removed_count == 0
