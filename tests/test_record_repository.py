# SPDX-License-Identifier: MIT

import datetime

import pytest

from heatgrid.repository.record import RecordFileError, RecordRepository


class TestRecordRepository:
    def test_list_of_records(self, tmp_path):
        path = tmp_path / "records.yaml"
        path.write_text(
            "- source: 2024-01-01.md\n"
            "  properties:\n"
            "    steps: 4000\n"
            "- file: 2024-01-02.md\n"
            "  steps: 5000\n"
            "  created: 2024-01-02\n"
        )

        records = RecordRepository(path).get_records()
        assert records == [
            {"source": "2024-01-01.md", "properties": {"steps": 4000}},
            {
                "source": "2024-01-02.md",
                "properties": {"steps": 5000, "created": datetime.date(2024, 1, 2)},
            },
        ]

    def test_records_key(self, tmp_path):
        path = tmp_path / "records.yaml"
        path.write_text("records:\n  - source: a.md\n    done: true\n")
        assert RecordRepository(path).get_records() == [
            {"source": "a.md", "properties": {"done": True}}
        ]

    def test_missing_source_uses_position(self, tmp_path):
        path = tmp_path / "records.yaml"
        path.write_text("- done: true\n")
        assert RecordRepository(path).get_records()[0]["source"] == "records.yaml#0"

    def test_bad_items_are_skipped(self, tmp_path, log_messages):
        path = tmp_path / "records.yaml"
        path.write_text("- 42\n- source: a.md\n  properties: [1, 2]\n- source: b.md\n")
        records = RecordRepository(path).get_records()
        assert [record["source"] for record in records] == ["b.md"]
        assert len(log_messages) == 2

    def test_empty_file(self, tmp_path):
        path = tmp_path / "records.yaml"
        path.write_text("")
        assert RecordRepository(path).get_records() == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(RecordFileError):
            RecordRepository(tmp_path / "missing.yaml").get_records()

    def test_scalar_document(self, tmp_path):
        path = tmp_path / "records.yaml"
        path.write_text("just text\n")
        with pytest.raises(RecordFileError):
            RecordRepository(path).get_records()
