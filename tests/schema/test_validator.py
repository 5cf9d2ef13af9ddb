"""
Unit tests for input-schema shape checks and template-input validation.
"""

import copy
import json

import pytest

from prowrite.schema import (
    AggregateValidationError,
    FieldType,
    InputSchema,
    ValidationResult,
    get_required_field_names,
    parse_input_schema,
    validate_input_schema_shape,
    validate_template_input,
    validate_template_input_or_throw,
)


def _with_field_change(schema, index, **changes):
    """Copy of schema with one field's keys replaced (None deletes a key)."""
    changed = copy.deepcopy(schema)
    for key, value in changes.items():
        if value is None:
            changed["fields"][index].pop(key, None)
        else:
            changed["fields"][index][key] = value
    return changed


VALID_DATA = {
    "recipient_name": "Ana Lopez",
    "company": "Northwind",
    "pitch": "We cut onboarding time in half.",
}


class TestSchemaShape:
    """Tests for validate_input_schema_shape."""

    def test_valid_schema(self, email_schema):
        """A well-formed schema passes."""
        assert validate_input_schema_shape(email_schema) is True

    def test_model_instance_is_valid(self, email_schema):
        """A parsed model passes without revalidation."""
        model = InputSchema.model_validate(email_schema)
        assert validate_input_schema_shape(model) is True

    @pytest.mark.parametrize("schema", [None, "fields", 42, [], ["fields"]])
    def test_non_object_is_invalid(self, schema):
        """Only mappings can be schemas."""
        assert validate_input_schema_shape(schema) is False

    @pytest.mark.parametrize("schema", [{}, {"fields": []}, {"fields": "name"}, {"fields": None}])
    def test_missing_or_empty_fields_is_invalid(self, schema):
        """fields must be a non-empty list."""
        assert validate_input_schema_shape(schema) is False

    @pytest.mark.parametrize("changes", [
        {"name": None},
        {"name": ""},
        {"name": "   "},
        {"name": 7},
        {"label": None},
        {"label": " "},
        {"type": "checkbox"},
        {"type": None},
        {"required": None},
        {"required": "yes"},
        {"required": 1},
        {"placeholder": 5},
        {"options": "Formal"},
        {"options": ["Formal", 2]},
        {"options": ["Formal", ""]},
        {"validation": "short"},
        {"validation": {"minLength": "5"}},
        {"validation": {"maxLength": True}},
        {"validation": {"pattern": 3}},
    ])
    def test_malformed_field_is_invalid(self, email_schema, changes):
        """Each bad key or value fails the check."""
        schema = _with_field_change(email_schema, 0, **changes)
        assert validate_input_schema_shape(schema) is False

    def test_duplicate_names_are_invalid(self, email_schema):
        """Field names must be unique."""
        schema = _with_field_change(email_schema, 1, name="recipient_name")
        assert validate_input_schema_shape(schema) is False

    @pytest.mark.parametrize("field_type", [t.value for t in FieldType])
    def test_every_field_type_accepted(self, email_schema, field_type):
        """All four widget types are allowed."""
        schema = _with_field_change(email_schema, 0, type=field_type)
        assert validate_input_schema_shape(schema) is True

    def test_fractional_lengths_accepted(self, email_schema):
        """Length limits may be floats."""
        schema = _with_field_change(email_schema, 3, validation={"minLength": 2.5, "pattern": "^\\w+$"})
        assert validate_input_schema_shape(schema) is True

    def test_unknown_keys_are_ignored(self, email_schema):
        """Extra keys do not fail the check."""
        schema = _with_field_change(email_schema, 0, description="Who receives the email")
        schema["version"] = 2
        assert validate_input_schema_shape(schema) is True


class TestParseInputSchema:
    """Tests for parse_input_schema error reporting."""

    def test_returns_model(self, email_schema):
        """Parsing yields typed fields in order."""
        parsed = parse_input_schema(email_schema)
        assert [f.name for f in parsed.fields] == ["recipient_name", "company", "tone", "pitch"]
        assert parsed.fields[3].validation.min_length == 10

    def test_duplicate_names_reported(self, email_schema):
        """The uniqueness error reaches the message."""
        schema = _with_field_change(email_schema, 1, name="recipient_name")
        with pytest.raises(AggregateValidationError) as exc_info:
            parse_input_schema(schema)
        assert "unique" in str(exc_info.value)

    def test_every_problem_reported(self, email_schema):
        """Each invalid value gets its own message."""
        schema = _with_field_change(email_schema, 0, type="checkbox")
        schema = _with_field_change(schema, 1, required="yes")
        with pytest.raises(AggregateValidationError) as exc_info:
            parse_input_schema(schema)

        errors = exc_info.value.errors
        assert len(errors) == 2
        assert errors[0].startswith("fields.0.type")
        assert errors[1].startswith("fields.1.required")

    def test_non_object_reported(self):
        """Non-mappings get a single message."""
        with pytest.raises(AggregateValidationError) as exc_info:
            parse_input_schema(["fields"])
        assert exc_info.value.errors == ["input_schema must be an object"]

    def test_is_value_error(self):
        """Callers can catch ValueError."""
        with pytest.raises(ValueError):
            parse_input_schema({"fields": []})


class TestSchemaJson:
    """Tests for the stored JSON format."""

    def test_round_trip(self, email_schema):
        """Serialized schemas parse back equal."""
        schema = InputSchema.model_validate(email_schema)
        assert InputSchema.from_json(schema.to_json()) == schema

    def test_stored_keys(self, email_schema):
        """Stored JSON uses camelCase and omits unset keys."""
        stored = json.loads(InputSchema.model_validate(email_schema).to_json())

        assert stored == email_schema


class TestTemplateInput:
    """Tests for validate_template_input."""

    def test_complete_input_is_valid(self, email_schema):
        """All required values present passes."""
        result = validate_template_input(email_schema, VALID_DATA)
        assert result == ValidationResult(valid=True, errors=[])

    def test_missing_field(self, email_schema):
        """An absent key is missing."""
        data = {k: v for k, v in VALID_DATA.items() if k != "company"}
        result = validate_template_input(email_schema, data)

        assert result.valid is False
        assert result.errors == ["Missing required field: company"]

    def test_none_value_is_missing(self, email_schema):
        """None counts as missing."""
        result = validate_template_input(email_schema, {**VALID_DATA, "company": None})
        assert result.errors == ["Missing required field: company"]

    @pytest.mark.parametrize("blank", ["", " ", "\n\t  "])
    def test_blank_string_is_empty(self, email_schema, blank):
        """Whitespace-only strings are empty."""
        result = validate_template_input(email_schema, {**VALID_DATA, "recipient_name": blank})
        assert result.errors == ["Required field cannot be empty: recipient_name"]

    @pytest.mark.parametrize("value", [0, False, [], 3.5])
    def test_non_string_values_count_as_present(self, email_schema, value):
        """Falsy non-strings are still present."""
        result = validate_template_input(email_schema, {**VALID_DATA, "pitch": value})
        assert result.valid is True

    def test_errors_follow_schema_order(self, email_schema):
        """Errors are listed in field order."""
        result = validate_template_input(email_schema, {"company": "Northwind"})
        assert result.errors == [
            "Missing required field: recipient_name",
            "Missing required field: pitch",
        ]

    def test_optional_and_unknown_keys_ignored(self, email_schema):
        """Optional and undeclared keys are not checked."""
        result = validate_template_input(email_schema, {**VALID_DATA, "tone": "", "extra": None})
        assert result.valid is True

    @pytest.mark.parametrize("schema", [None, {}, {"fields": None}, {"fields": "bad"}])
    def test_no_schema_means_no_constraints(self, schema):
        """Without fields, any data passes."""
        assert validate_template_input(schema, {}).valid is True

    def test_model_and_mapping_agree(self, email_schema):
        """Models and raw mappings validate the same."""
        model = InputSchema.model_validate(email_schema)
        data = {"recipient_name": " "}
        assert validate_template_input(model, data) == validate_template_input(email_schema, data)

    def test_no_data_reports_every_required_field(self, email_schema):
        """None data fails every required field."""
        result = validate_template_input(email_schema, None)
        assert len(result.errors) == 3


class TestTemplateInputOrThrow:
    """Tests for validate_template_input_or_throw."""

    def test_valid_input_passes(self, email_schema):
        """Valid input returns quietly."""
        assert validate_template_input_or_throw(email_schema, VALID_DATA) is None

    def test_errors_joined(self, email_schema):
        """All errors are joined into one message."""
        with pytest.raises(AggregateValidationError) as exc_info:
            validate_template_input_or_throw(email_schema, {"pitch": "Our product saves time."})

        assert str(exc_info.value) == (
            "Missing required field: recipient_name; Missing required field: company"
        )
        assert exc_info.value.errors == [
            "Missing required field: recipient_name",
            "Missing required field: company",
        ]


class TestRequiredFieldNames:
    """Tests for get_required_field_names."""

    def test_schema_order(self, email_schema):
        """Required names come in field order."""
        assert get_required_field_names(email_schema) == ["recipient_name", "company", "pitch"]

    def test_none_schema(self):
        """No schema has no required names."""
        assert get_required_field_names(None) == []
