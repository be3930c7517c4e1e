# ABOUTME: Field descriptor models and semantic type enumeration
# ABOUTME: Pydantic models for detected fields, user type overrides, and display ordering

from enum import Enum

from pydantic import BaseModel


class FieldType(str, Enum):
    """Semantic role of a column for charting defaults."""
    QUANTITATIVE = "quantitative"
    NOMINAL = "nominal"
    ORDINAL = "ordinal"
    TEMPORAL = "temporal"


class DetectedField(BaseModel):
    """A column name, its resolved semantic type, and its distinct value count."""
    name: str
    type: FieldType
    unique_count: int


class FieldNotFoundError(LookupError):
    """Raised when an override names a field that is not in the descriptor list."""


class FieldTypeOverrideError(ValueError):
    """Raised when an override targets a field whose type is not user-togglable."""


# Only these two types may be swapped by the user
TOGGLEABLE_TYPES = (FieldType.ORDINAL, FieldType.NOMINAL)

# Display order for field lists
TYPE_ORDER = {
    FieldType.QUANTITATIVE: 0,
    FieldType.TEMPORAL: 1,
    FieldType.ORDINAL: 2,
    FieldType.NOMINAL: 3,
}


def toggle_field_type(fields: list[DetectedField], field_name: str) -> list[DetectedField]:
    """
    Flip a field between ordinal and nominal.

    Returns a new list; the input descriptors are left untouched.

    Raises:
        FieldNotFoundError: No descriptor has the given name
        FieldTypeOverrideError: The field is quantitative or temporal
    """
    if not any(field.name == field_name for field in fields):
        raise FieldNotFoundError(f"No field named '{field_name}'")

    updated = []
    for field in fields:
        if field.name != field_name:
            updated.append(field)
            continue

        if field.type not in TOGGLEABLE_TYPES:
            raise FieldTypeOverrideError(
                f"Field '{field_name}' is {field.type.value}; only ordinal and nominal fields can be toggled"
            )

        new_type = FieldType.NOMINAL if field.type == FieldType.ORDINAL else FieldType.ORDINAL
        updated.append(field.model_copy(update={"type": new_type}))

    return updated


def sort_fields(fields: list[DetectedField]) -> list[DetectedField]:
    """Order fields quantitative, temporal, ordinal, nominal, then by name ignoring case."""
    return sorted(fields, key=lambda field: (TYPE_ORDER[field.type], field.name.lower(), field.name))
