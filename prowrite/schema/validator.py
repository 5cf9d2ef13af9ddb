"""
Schema Validator — Checks input schemas and the data submitted against them.

Two separate concerns:
- Shape: is the schema itself well-formed? (create/update of templates)
- Input: does submitted data satisfy the schema's required fields? (generate)

Neither check raises. The *_or_throw wrapper and parse_input_schema are the
only places an AggregateValidationError leaves this module.
"""

from collections.abc import Mapping
from typing import Any, Iterator, Optional, Union

from pydantic import ValidationError

from prowrite.core.logging import get_component_logger
from prowrite.schema.models import InputSchema, ValidationResult

log = get_component_logger(__name__)

SchemaLike = Union[InputSchema, Mapping, None]


class AggregateValidationError(ValueError):
    """All validation messages joined into one client-facing error."""

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


def validate_input_schema_shape(schema: Any) -> bool:
    """
    Check that a schema is structurally valid.

    Requires a non-empty `fields` list whose entries carry a non-blank name
    and label, a known type and a boolean `required`; optional placeholder,
    options and validation entries are type-checked; names must be unique.
    """
    if isinstance(schema, InputSchema):
        return True
    if not isinstance(schema, Mapping):
        return False

    try:
        InputSchema.model_validate(schema)
    except ValidationError as e:
        log.verbose("schema_shape_invalid", error_count=e.error_count())
        return False
    return True


def parse_input_schema(schema: Any) -> InputSchema:
    """
    Parse a raw schema mapping into an InputSchema.

    Raises:
        AggregateValidationError: One message per structural problem
    """
    if isinstance(schema, InputSchema):
        return schema
    if not isinstance(schema, Mapping):
        raise AggregateValidationError(["input_schema must be an object"])

    try:
        return InputSchema.model_validate(schema)
    except ValidationError as e:
        messages = []
        for err in e.errors():
            loc = ".".join(str(part) for part in err["loc"]) or "input_schema"
            messages.append(f"{loc}: {err['msg']}")
        raise AggregateValidationError(messages) from e


def _fields(schema: SchemaLike) -> Iterator[tuple[Optional[str], bool]]:
    """Yield (name, required) pairs from a model or a raw mapping."""
    if schema is None:
        return
    if isinstance(schema, InputSchema):
        for f in schema.fields:
            yield f.name, f.required
        return

    raw_fields = schema.get("fields") if isinstance(schema, Mapping) else None
    if not isinstance(raw_fields, list):
        return
    for f in raw_fields:
        if isinstance(f, Mapping):
            yield f.get("name"), bool(f.get("required"))


def validate_template_input(schema: SchemaLike, data: Optional[Mapping]) -> ValidationResult:
    """
    Validate submitted data against a template's input schema.

    Every required field must be present and not None; string values must
    also be non-blank. Keys the schema does not declare are ignored.

    Args:
        schema: InputSchema or raw schema mapping (None means no constraints)
        data: The user-submitted values

    Returns:
        ValidationResult with one message per failing field, in schema order
    """
    data = data or {}
    errors: list[str] = []

    for name, required in _fields(schema):
        if not required:
            continue

        value = data.get(name)
        if value is None:
            errors.append(f"Missing required field: {name}")
            continue

        if isinstance(value, str) and value.strip() == "":
            errors.append(f"Required field cannot be empty: {name}")

    if errors:
        log.verbose("template_input_invalid", errors=len(errors))

    return ValidationResult(valid=not errors, errors=errors)


def validate_template_input_or_throw(schema: SchemaLike, data: Optional[Mapping]) -> None:
    """
    Validate input data and raise if any required field fails.

    Raises:
        AggregateValidationError: Message is every error joined with "; "
    """
    result = validate_template_input(schema, data)
    if not result.valid:
        raise AggregateValidationError(result.errors)


def get_required_field_names(schema: SchemaLike) -> list[str]:
    """Names of required fields, in schema order."""
    return [name for name, required in _fields(schema) if required]
