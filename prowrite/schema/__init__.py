"""Schema — Template input schemas and their validation."""

from prowrite.schema.models import (
    FieldType,
    FieldValidation,
    InputField,
    InputSchema,
    ModuleType,
    ValidationResult,
)
from prowrite.schema.validator import (
    AggregateValidationError,
    get_required_field_names,
    parse_input_schema,
    validate_input_schema_shape,
    validate_template_input,
    validate_template_input_or_throw,
)

__all__ = [
    "AggregateValidationError",
    "FieldType",
    "FieldValidation",
    "InputField",
    "InputSchema",
    "ModuleType",
    "ValidationResult",
    "get_required_field_names",
    "parse_input_schema",
    "validate_input_schema_shape",
    "validate_template_input",
    "validate_template_input_or_throw",
]
