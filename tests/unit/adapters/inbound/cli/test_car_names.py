"""Unit tests for the car names console utility."""

import json

from car_catalog.adapters.inbound.cli.car_names import load_car_names, run, save_car_names


def _run(path, answer):
    output = []
    names = run(path=path, read_input=lambda prompt: answer, write_output=output.append)
    return names, output


def test_load_missing_file_returns_empty(tmp_path):
    """Test that a missing file yields an empty list."""
    assert load_car_names(tmp_path / "cars.json") == []


def test_load_malformed_file_returns_empty(tmp_path):
    """Test that unparsable content is ignored."""
    path = tmp_path / "cars.json"
    path.write_text("{not json", encoding="utf-8")

    assert load_car_names(path) == []


def test_load_non_list_returns_empty(tmp_path):
    """Test that a JSON value other than an array is ignored."""
    path = tmp_path / "cars.json"
    path.write_text('{"name": "Audi A6"}', encoding="utf-8")

    assert load_car_names(path) == []


def test_load_array_with_non_strings_returns_empty(tmp_path):
    """Test that an array holding non-string entries is treated as unreadable."""
    path = tmp_path / "cars.json"
    path.write_text('["Audi A6", 1, null]', encoding="utf-8")

    assert load_car_names(path) == []


def test_save_writes_pretty_json(tmp_path):
    """Test that the whole list is written pretty-printed."""
    path = tmp_path / "cars.json"

    save_car_names(path, ["Audi A6", "Škoda Octavia"])

    content = path.read_text(encoding="utf-8")
    assert content == '[\n  "Audi A6",\n  "Škoda Octavia"\n]'


def test_run_appends_name_and_prints_list(tmp_path):
    """Test that a non-blank name is appended to the stored list."""
    path = tmp_path / "Data" / "cars.json"
    path.parent.mkdir()
    save_car_names(path, ["BMW 320d"])

    names, output = _run(path, "Audi A6")

    assert names == ["BMW 320d", "Audi A6"]
    assert json.loads(path.read_text(encoding="utf-8")) == ["BMW 320d", "Audi A6"]
    assert "\nAdded successfully: Audi A6" in output
    assert output[-2:] == ["- BMW 320d", "- Audi A6"]


def test_run_creates_data_directory(tmp_path):
    """Test that the parent directory is created when missing."""
    path = tmp_path / "Data" / "cars.json"

    names, _ = _run(path, "Audi A6")

    assert names == ["Audi A6"]
    assert path.exists()


def test_run_rejects_blank_name(tmp_path):
    """Test that a blank name is not stored and the file is left untouched."""
    path = tmp_path / "cars.json"
    save_car_names(path, ["BMW 320d"])
    before = path.read_text(encoding="utf-8")

    names, output = _run(path, "   ")

    assert names == ["BMW 320d"]
    assert path.read_text(encoding="utf-8") == before
    assert "\nError: The name cannot be empty." in output
    assert output[-1] == "- BMW 320d"


def test_run_recovers_from_corrupt_file(tmp_path):
    """Test that a corrupt file is replaced by a fresh list on the next save."""
    path = tmp_path / "cars.json"
    path.write_text("garbage", encoding="utf-8")

    names, _ = _run(path, "Audi A6")

    assert names == ["Audi A6"]
    assert json.loads(path.read_text(encoding="utf-8")) == ["Audi A6"]
