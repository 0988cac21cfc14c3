# SPDX-License-Identifier: MIT

import datetime
import math
import re
from pathlib import PurePath
from typing import Any, Optional

import pendulum
from loguru import logger

from heatgrid.model.record import (
    FILENAME_DATE_PROPERTY,
    DatedRecord,
    ExtractedValue,
    RawRecord,
    ValueKind,
)
from heatgrid.time import calendar_date, calendar_date_from_str_optional

PROPERTY_PREFIXES = ("note.", "frontmatter.")

ISO_FILENAME_PATTERN = re.compile(r"^(\d{4}-\d{2}-\d{2})")
LONG_FILENAME_PATTERN = re.compile(r"^([A-Za-z]+ \d{1,2}, \d{4})")
# Daily notes filed as YYYY/MM/DD.md, matched against the end of the path
NESTED_PATH_PATTERN = re.compile(r"(\d{4})/(\d{2})/(\d{2})[^/]*$")

# Full month names first, then abbreviations ("Jan 15, 2024")
LONG_FILENAME_FORMATS = ("MMMM D, YYYY", "MMM D, YYYY")

TRUE_STRINGS = ("true", "yes")
FALSE_STRINGS = ("false", "no")


def _property_key(property_name: str) -> str:
    for prefix in PROPERTY_PREFIXES:
        if property_name.startswith(prefix):
            return property_name[len(prefix) :]
    return property_name


def _get_property(record: RawRecord, property_name: str) -> Any:
    return record["properties"].get(_property_key(property_name))


def _to_calendar_date(value: datetime.date) -> pendulum.Date:
    return calendar_date(value.year, value.month, value.day)


def _format_number(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def parse_date_from_filename(source: str) -> Optional[pendulum.Date]:
    """Parse a daily-note style date from a file name or its parent folders."""
    path = re.sub(r"\.md$", "", PurePath(source).as_posix(), flags=re.IGNORECASE)
    name = PurePath(path).name

    iso_match = ISO_FILENAME_PATTERN.match(name)
    if iso_match is not None:
        parsed = calendar_date_from_str_optional(iso_match.group(1))
        if parsed is not None:
            return parsed

    nested_match = NESTED_PATH_PATTERN.search(path)
    if nested_match is not None:
        parsed = calendar_date_from_str_optional("-".join(nested_match.groups()))
        if parsed is not None:
            return parsed

    long_match = LONG_FILENAME_PATTERN.match(name)
    if long_match is not None:
        for fmt in LONG_FILENAME_FORMATS:
            try:
                return pendulum.from_format(long_match.group(1), fmt).date()
            except ValueError:
                continue

    return None


def parse_date_from_property(value: Any) -> Optional[pendulum.Date]:
    """Interpret a property value as a calendar date, or None."""
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, datetime.date):
        return _to_calendar_date(value)

    if isinstance(value, (int, float)):
        # Unix timestamp in milliseconds
        try:
            return pendulum.from_timestamp(value / 1000, tz="local").date()
        except (OverflowError, OSError, ValueError):
            return None

    if isinstance(value, str):
        parsed = calendar_date_from_str_optional(value)
        if parsed is not None:
            return parsed
        try:
            lenient = pendulum.parse(value, strict=False)
        except (ValueError, OverflowError):
            return None
        if isinstance(lenient, datetime.date):
            return _to_calendar_date(lenient)

    return None


def _uses_filename(date_property: str) -> bool:
    return date_property == FILENAME_DATE_PROPERTY or not date_property


def _resolve_date(record: RawRecord, date_property: str) -> Optional[pendulum.Date]:
    if _uses_filename(date_property):
        return parse_date_from_filename(record["source"])
    return parse_date_from_property(_get_property(record, date_property))


def extract_date(record: RawRecord, date_property: str) -> Optional[pendulum.Date]:
    """Resolve the calendar date of a record, logging when it cannot."""
    parsed = _resolve_date(record, date_property)
    if parsed is not None:
        return parsed

    if _uses_filename(date_property):
        logger.warning(f"Failed to parse date from filename: {record['source']!r}")
    else:
        raw_value = _get_property(record, date_property)
        if raw_value is not None:
            logger.warning(
                f"Invalid date in property {date_property!r}: {raw_value!r} "
                f"({record['source']})"
            )
    return None


def extract_value(record: RawRecord, value_property: str) -> ExtractedValue:
    """Normalize a record's raw property value into a plottable value."""
    raw_value = _get_property(record, value_property)

    if raw_value is None:
        return {
            "value": None,
            "display_text": f"{value_property}: not set",
            "kind": "unsupported",
        }

    if isinstance(raw_value, bool):
        return {
            "value": 1 if raw_value else 0,
            "display_text": "Yes" if raw_value else "No",
            "kind": "boolean",
        }

    if isinstance(raw_value, (int, float)):
        if not math.isfinite(raw_value):
            return {"value": None, "display_text": str(raw_value), "kind": "unsupported"}
        return {
            "value": raw_value,
            "display_text": _format_number(raw_value),
            "kind": "number",
        }

    if isinstance(raw_value, str):
        try:
            number = float(raw_value)
        except ValueError:
            number = None
        if number is not None and math.isfinite(number):
            return {"value": number, "display_text": raw_value, "kind": "number"}

        lower = raw_value.strip().lower()
        if lower in TRUE_STRINGS:
            return {"value": 1, "display_text": "Yes", "kind": "boolean"}
        if lower in FALSE_STRINGS:
            return {"value": 0, "display_text": "No", "kind": "boolean"}

        return {"value": None, "display_text": raw_value, "kind": "unsupported"}

    # Anything else (lists, dates, mappings) counts by truthiness
    return {
        "value": 1 if raw_value else 0,
        "display_text": str(raw_value),
        "kind": "boolean",
    }


def extract_records(
    records: list[RawRecord], date_property: str, value_property: str
) -> list[DatedRecord]:
    return [
        {
            "date": extract_date(record, date_property),
            "value": extract_value(record, value_property),
            "source": record["source"],
        }
        for record in records
    ]


def detect_value_type(
    records: list[RawRecord], value_property: str, date_property: str
) -> ValueKind:
    """
    Classify the value property across the whole dataset.

    Only dated records with the property set are considered. A single
    uninterpretable value makes the dataset unsupported, as does having no
    usable values at all. Values other than 0 and 1 make it numeric.
    """
    seen_boolean = False
    seen_number = False

    for record in records:
        if _resolve_date(record, date_property) is None:
            continue
        if _get_property(record, value_property) is None:
            continue

        extracted = extract_value(record, value_property)
        if extracted["kind"] == "unsupported":
            return "unsupported"
        if extracted["value"] not in (0, 1):
            seen_number = True
        else:
            seen_boolean = True

    if seen_number:
        return "number"
    if seen_boolean:
        return "boolean"
    return "unsupported"
