from __future__ import annotations

import pytest

from json2ged.core.exceptions import InputFormatError, InputNotFoundError
from json2ged.loader import load_dataset, read_json, resolve_input_path
from json2ged.utils import mock_file_path


def test_mock_file_exists() -> None:
    path = mock_file_path("familie.json")
    assert path.is_file(), f"Expected JSON file at: {path}"


def test_load_bundled_sample() -> None:
    dataset = load_dataset(mock_file_path("familie.json"))

    assert [i.id for i in dataset.individuals] == ["I1", "I2", "I3", "I4"]
    assert [f.id for f in dataset.families] == ["F1"]
    assert dataset.skipped == []


def test_missing_input_raises(tmp_path) -> None:
    with pytest.raises(InputNotFoundError):
        read_json(tmp_path / "nope.json")

    # Still a FileNotFoundError for callers that only know the builtin.
    with pytest.raises(FileNotFoundError):
        resolve_input_path(tmp_path / "nope.json")


def test_directory_input_raises(tmp_path) -> None:
    with pytest.raises(InputNotFoundError):
        resolve_input_path(tmp_path)


def test_invalid_json_raises(tmp_path) -> None:
    path = tmp_path / "broken.json"
    path.write_text('{"individuals": {', encoding="utf-8")

    with pytest.raises(InputFormatError):
        read_json(path)


def test_read_json_preserves_key_order(write_json) -> None:
    path = write_json({"individuals": {"b": {"id": "B"}, "a": {"id": "A"}}})
    data = read_json(path)
    assert list(data["individuals"]) == ["b", "a"]


@pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity"])
def test_non_json_number_literals_are_rejected(tmp_path, literal) -> None:
    path = tmp_path / "nan.json"
    path.write_text('{"individuals": {"I1": {"id": %s}}}' % literal, encoding="utf-8")

    with pytest.raises(InputFormatError):
        read_json(path)


def test_non_utf8_input_is_rejected(tmp_path) -> None:
    path = tmp_path / "latin1.json"
    path.write_bytes('{"individuals": {"I1": {"id": "I1", "name": "Müller"}}}'.encode("latin-1"))

    with pytest.raises(InputFormatError):
        read_json(path)
