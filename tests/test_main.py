import json
import os

import pandas as pd
import pytest

from owner_mapper.exceptions import InputNotFoundError, OwnerMapperError, PropertyIdNotFoundError
from owner_mapper.main import process_document, run, run_batch

from conftest import LEE_HTML_NO_ID, MIAMI_DADE_RECORD, person


def test_run_writes_owner_data(miami_dade_file, tmp_path):
    out_dir = tmp_path / "owners"
    data = run(miami_dade_file, "miami dade", str(out_dir), "owner_data.json")
    with open(out_dir / "owner_data.json", encoding="utf-8") as f:
        assert json.load(f) == data
    assert "property_30-4022-003-0010" in data


def test_property_id_override(miami_dade_file):
    data = process_document(miami_dade_file, "miami dade", property_id="override")
    assert list(data) == ["property_override"]


def test_missing_input(tmp_path):
    with pytest.raises(InputNotFoundError):
        process_document(str(tmp_path / "missing.html"), "lee")


def test_missing_property_id(write_file):
    path = write_file("no_id.html", LEE_HTML_NO_ID)
    with pytest.raises(PropertyIdNotFoundError):
        process_document(path, "lee")
    data = process_document(path, "lee", id_from_filename=True)
    assert data["property_no_id"]["owners_by_date"] == {"current": [person("Maria", "Garcia")]}


def test_run_batch(write_file, tmp_path):
    write_file("batch/a.json", MIAMI_DADE_RECORD)
    write_file("batch/b.json", {"OwnerInfos": [{"Name": "LOPEZ JUAN"}]})
    write_file("batch/c.json", "{not json")
    write_file("batch/notes.txt", "ignored")
    out_dir = tmp_path / "out"

    merged, summary, failures = run_batch(str(tmp_path / "batch"), "miami dade", str(out_dir), max_workers=2)

    assert list(merged) == ["property_30-4022-003-0010", "property_b"]
    assert list(failures) == [os.path.join(str(tmp_path / "batch"), "c.json")]
    assert len(summary) == 2

    with open(out_dir / "owner_data.json", encoding="utf-8") as f:
        assert json.load(f) == merged
    csv = pd.read_csv(out_dir / "owner_summary.csv")
    row = csv[csv["property"] == "property_30-4022-003-0010"].iloc[0]
    assert row["current_owners"] == 2
    assert row["current_companies"] == 1
    assert row["dated_buckets"] == 2


def test_run_batch_empty_directory(tmp_path):
    with pytest.raises(OwnerMapperError):
        run_batch(str(tmp_path), "lee", str(tmp_path / "out"))


def test_run_batch_keeps_going_after_adapter_error(write_file, tmp_path):
    write_file("mixed/a.json", MIAMI_DADE_RECORD)
    # owner entries must be objects; a bare string breaks the adapter
    write_file("mixed/b.json", {"OwnerInfos": ["GARCIA MARIA"]})
    out_dir = tmp_path / "out"

    merged, summary, failures = run_batch(str(tmp_path / "mixed"), "miami dade", str(out_dir))

    assert list(merged) == ["property_30-4022-003-0010"]
    assert list(failures) == [os.path.join(str(tmp_path / "mixed"), "b.json")]
    assert len(summary) == 1
    assert (out_dir / "owner_data.json").exists()
    assert (out_dir / "owner_summary.csv").exists()
