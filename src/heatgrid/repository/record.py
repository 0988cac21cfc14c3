# SPDX-License-Identifier: MIT

from copy import deepcopy
from pathlib import Path
from typing import Any, Optional

from loguru import logger
from yaml import YAMLError, load

try:
    from yaml import CSafeLoader as Loader
except ImportError:
    from yaml import SafeLoader as Loader  # type: ignore[assignment]

from heatgrid.model.record import RawRecord


class RecordFileError(Exception):
    """Raised when a records file cannot be read or has the wrong shape."""

    pass


class RecordRepository:
    """
    Read-only access to a YAML records file.

    The file holds a list of records (optionally under a top-level
    "records" key). Each record is a mapping with a "source" (or "file")
    and a "properties" mapping; a record without "properties" uses its
    remaining keys as properties.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self._records: Optional[list[RawRecord]] = None

    @property
    def records(self) -> list[RawRecord]:
        if self._records is None:
            self.__load_data()
        if self._records is None:
            raise RecordFileError(f"Records were not loaded from {self.path}")
        return self._records

    def __load_data(self) -> None:
        try:
            raw_data = load(self.path.read_text(), Loader=Loader)
        except (OSError, YAMLError) as e:
            raise RecordFileError(f"Cannot read records file {self.path}: {e}") from e

        if raw_data is None:
            raw_data = []
        if isinstance(raw_data, dict):
            raw_data = raw_data.get("records") or []
        if not isinstance(raw_data, list):
            raise RecordFileError(f"Records file {self.path} must contain a list")

        self._records = []
        for index, raw_record in enumerate(raw_data):
            record = self.__convert_record_for_deserialization(index, raw_record)
            if record is not None:
                self._records.append(record)

    def __convert_record_for_deserialization(
        self, index: int, raw_record: Any
    ) -> Optional[RawRecord]:
        if not isinstance(raw_record, dict):
            logger.warning(f"Skipping record #{index} in {self.path}: not a mapping")
            return None

        raw_record = dict(raw_record)
        source = raw_record.pop("source", None) or raw_record.pop("file", None)
        if source is None:
            source = f"{self.path.name}#{index}"

        properties = raw_record.pop("properties", None)
        if properties is None:
            properties = raw_record
        if not isinstance(properties, dict):
            logger.warning(
                f"Skipping record #{index} in {self.path}: properties must be a mapping"
            )
            return None

        return {"source": str(source), "properties": properties}

    def get_records(self) -> list[RawRecord]:
        return deepcopy(self.records)
