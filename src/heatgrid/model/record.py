# SPDX-License-Identifier: MIT

from typing import Any, Literal, Optional, TypedDict

import pendulum

ValueKind = Literal["boolean", "number", "unsupported"]

FILENAME_DATE_PROPERTY = "__filename__"


class RawRecord(TypedDict):
    source: str  # file name or path of the originating note
    properties: dict[str, Any]


class ExtractedValue(TypedDict):
    value: Optional[float]
    display_text: str
    kind: ValueKind


class DatedRecord(TypedDict):
    """A record after the date and value have been pulled out of it."""

    date: Optional[pendulum.Date]
    value: ExtractedValue
    source: str
