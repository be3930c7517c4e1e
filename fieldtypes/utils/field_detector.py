# ABOUTME: Semantic field type detection for chart encoding defaults
# ABOUTME: Classifies columns as quantitative, nominal, ordinal, or temporal from values and names

import logging
import re

from fieldtypes.models.fields import DetectedField, FieldType
from fieldtypes.utils.value_cleaners import (
    drop_absent,
    is_integral,
    is_numeric,
    to_number,
)

logger = logging.getLogger(__name__)

# Only the first non-absent values are inspected
SAMPLE_SIZE = 100

TEMPORAL_THRESHOLD = 0.8
ORDINAL_MATCH_THRESHOLD = 0.5
CATEGORICAL_THRESHOLD = 20
QUANTITATIVE_RANGE = 100
ID_SEQUENTIAL_RATIO = 0.7
ID_LARGE_VALUE = 10000
ID_LARGE_SEQUENTIAL_RATIO = 0.3

DATE_PATTERNS = (
    re.compile(r"^\d{4}-\d{2}-\d{2}\Z", re.ASCII),                # YYYY-MM-DD
    re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}", re.ASCII),  # ISO 8601 datetime prefix
    re.compile(r"^\d{1,2}/\d{1,2}/\d{2,4}\Z", re.ASCII),          # MM/DD/YYYY or M/D/YY
    re.compile(r"^\d{1,2}-\d{1,2}-\d{2,4}\Z", re.ASCII),          # MM-DD-YYYY or M-D-YY
)

ORDINAL_STRING_PATTERNS = (
    # Sizes
    re.compile(r"^(?:x{0,3}[sml]|small|medium|large|x+-?large)\Z", re.IGNORECASE),
    # Priorities
    re.compile(r"^(?:low|medium|high|critical|urgent)\Z", re.IGNORECASE),
    # Quality
    re.compile(r"^(?:poor|fair|good|excellent|outstanding)\Z", re.IGNORECASE),
    # Agreement scales
    re.compile(r"^(?:strongly\s*disagree|disagree|neutral|agree|strongly\s*agree)\Z", re.IGNORECASE),
)

ID_NAME_PATTERNS = (
    re.compile(r"^id\Z", re.IGNORECASE),
    re.compile(r"_id\Z", re.IGNORECASE),
    re.compile(r"id\Z", re.IGNORECASE),
    re.compile(r"code\Z", re.IGNORECASE),
    re.compile(r"key\Z", re.IGNORECASE),
    re.compile(r"_key\Z", re.IGNORECASE),
)


def is_temporal_field(values: list) -> bool:
    """
    Check whether values are (almost) all date strings.

    Only explicit date shapes count. Numbers never qualify, so a column of
    years stored as integers is not temporal.
    """
    string_values = [v for v in values if isinstance(v, str)]

    if len(string_values) < len(values) * TEMPORAL_THRESHOLD:
        return False

    date_matches = [
        v for v in string_values
        if any(pattern.match(v) for pattern in DATE_PATTERNS)
    ]

    return len(date_matches) >= len(string_values) * TEMPORAL_THRESHOLD


def is_ordinal_string(values: list) -> bool:
    """Check whether text values come from a known ordered vocabulary."""
    string_values = [v for v in values if isinstance(v, str)]
    if len(string_values) != len(values):
        return False

    # A single repeated value has nothing to rank
    if len(set(string_values)) < 2:
        return False

    matching_values = [
        v for v in string_values
        if any(pattern.match(v) for pattern in ORDINAL_STRING_PATTERNS)
    ]

    return len(matching_values) >= len(string_values) * ORDINAL_MATCH_THRESHOLD


def has_id_field_name(field_name: str) -> bool:
    """Check whether a column name reads like an identifier (id, *_id, *code, *key)."""
    return any(pattern.search(field_name) for pattern in ID_NAME_PATTERNS)


def sequential_ratio(numbers: list) -> float:
    """
    Fraction of adjacent sorted values that differ by exactly one.

    Returns 0.0 for fewer than two values.
    """
    if len(numbers) < 2:
        return 0.0

    ordered = sorted(numbers)
    steps = sum(1 for prev, cur in zip(ordered, ordered[1:]) if cur - prev == 1)
    return steps / (len(ordered) - 1)


def looks_like_id(numbers: list) -> bool:
    """
    Check whether integers look like surrogate keys.

    Dense runs are IDs regardless of magnitude. Very large values are IDs
    when they show at least some run structure.
    """
    if not numbers or not all(is_integral(n) for n in numbers):
        return False

    # Exact integer arithmetic; values may exceed float range
    integers = [int(n) for n in numbers]

    ratio = sequential_ratio(integers)
    if ratio > ID_SEQUENTIAL_RATIO:
        return True

    # Mean above the threshold, without dividing
    if sum(integers) > ID_LARGE_VALUE * len(integers) and ratio > ID_LARGE_SEQUENTIAL_RATIO:
        return True

    return False


def _check_temporal(sample: list, field_name: str | None) -> FieldType | None:
    if is_temporal_field(sample):
        return FieldType.TEMPORAL
    return None


def _check_ordinal_string(sample: list, field_name: str | None) -> FieldType | None:
    if is_ordinal_string(sample):
        return FieldType.ORDINAL
    return None


def _check_numeric(sample: list, field_name: str | None) -> FieldType | None:
    if not all(is_numeric(v) for v in sample):
        return None

    # Naming intent overrides value shape
    if field_name and has_id_field_name(field_name):
        return FieldType.NOMINAL

    numbers = [to_number(v) for v in sample]

    if looks_like_id(numbers):
        return FieldType.NOMINAL

    if not all(is_integral(n) for n in numbers):
        return FieldType.QUANTITATIVE

    integers = [int(n) for n in numbers]
    value_range = max(integers) - min(integers)
    if value_range > QUANTITATIVE_RANGE:
        return FieldType.QUANTITATIVE

    unique_count = len(set(sample))
    if unique_count == 1:
        return FieldType.QUANTITATIVE

    # Small, tightly clustered integer sets read as rating scales
    if unique_count <= CATEGORICAL_THRESHOLD and value_range <= CATEGORICAL_THRESHOLD:
        return FieldType.ORDINAL

    return FieldType.QUANTITATIVE


# Evaluated in order; the first check that returns a type wins
TYPE_CHECKS = (
    _check_temporal,
    _check_ordinal_string,
    _check_numeric,
)


def detect_field_type(values, field_name: str | None = None) -> FieldType:
    """
    Detect the semantic type of a column from its values and name.

    Args:
        values: Raw cell values in row order (text, numbers, or None/"")
        field_name: Optional column name, used to spot identifier columns

    Returns:
        A FieldType. Empty or all-absent columns are nominal.
    """
    non_null_values = drop_absent(values)

    if not non_null_values:
        return FieldType.NOMINAL

    sample = non_null_values[:SAMPLE_SIZE]

    for check in TYPE_CHECKS:
        field_type = check(sample, field_name)
        if field_type is not None:
            return field_type

    return FieldType.NOMINAL


def count_unique(values) -> int:
    """Count distinct non-absent values."""
    return len(set(drop_absent(values)))


def detect_all_fields(rows: list[dict]) -> list[DetectedField]:
    """
    Detect a descriptor for every column of a dataset.

    Columns are taken from the first row, in its key order. Rows missing a
    column contribute an absent value. The unique count covers the whole
    column, not just the detection sample.
    """
    if not rows:
        return []

    fields = []
    for name in rows[0].keys():
        values = [row.get(name) for row in rows]
        field_type = detect_field_type(values, name)
        unique_count = count_unique(values)

        logger.debug("Detected field %s as %s (%d unique values)", name, field_type.value, unique_count)

        fields.append(DetectedField(name=name, type=field_type, unique_count=unique_count))

    return fields
