"""
Schema Models — Pydantic models for template input schemas.

A template declares the form fields a user fills in before generation.
JSON keys follow the stored format (camelCase inside `validation`).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    field_validator,
    model_validator,
)


class ModuleType(str, Enum):
    """Content module a template belongs to."""
    COLD_EMAIL = "cold_email"
    WEBSITE_COPY = "website_copy"
    YOUTUBE_SCRIPTS = "youtube_scripts"
    HR_DOCS = "hr_docs"


class FieldType(str, Enum):
    """Widget type of an input field."""
    TEXT = "text"
    TEXTAREA = "textarea"
    SELECT = "select"
    NUMBER = "number"


# Booleans are not accepted where a number is expected
Number = Union[StrictInt, StrictFloat]


class FieldValidation(BaseModel):
    """Optional per-field constraints."""

    model_config = ConfigDict(populate_by_name=True)

    min_length: Optional[Number] = Field(None, alias="minLength")
    max_length: Optional[Number] = Field(None, alias="maxLength")
    pattern: Optional[StrictStr] = Field(None, description="Regex the value should match")


class InputField(BaseModel):
    """One entry of an input schema."""

    name: StrictStr = Field(..., description="Key of the value in the submitted data")
    label: StrictStr = Field(..., description="Human-readable label")
    type: FieldType
    required: StrictBool
    placeholder: Optional[StrictStr] = None
    options: Optional[list[StrictStr]] = Field(None, description="Choices for select fields")
    validation: Optional[FieldValidation] = None

    @field_validator("name", "label")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("options")
    @classmethod
    def _options_not_empty(cls, value: Optional[list[str]]) -> Optional[list[str]]:
        if value is not None and any(not option for option in value):
            raise ValueError("options must be non-empty strings")
        return value


class InputSchema(BaseModel):
    """Ordered list of input fields with unique names."""

    fields: list[InputField] = Field(..., min_length=1)

    @model_validator(mode="after")
    def _unique_names(self) -> "InputSchema":
        names = [f.name for f in self.fields]
        if len(set(names)) != len(names):
            raise ValueError("field names must be unique")
        return self

    def to_json(self, indent: Optional[int] = None) -> str:
        """Serialize using the stored (camelCase) key names."""
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)

    @classmethod
    def from_json(cls, json_str: str) -> "InputSchema":
        return cls.model_validate_json(json_str)


@dataclass
class ValidationResult:
    """Outcome of checking submitted data against a schema."""

    valid: bool
    errors: list[str] = field(default_factory=list)
