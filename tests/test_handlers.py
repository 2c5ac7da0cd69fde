import json

import pytest

from json_csv_flattener.handlers import (
    build_table_previews,
    export_csv_handler,
    flatten_pasted_json,
    load_and_flatten_json,
    reflatten_handler,
)

DOC = {
    "title": "Inventory",
    "items": [
        {"sku": "A", "qty": 2},
        {"sku": "B"},
    ],
}


@pytest.fixture
def json_file(tmp_path):
    path = tmp_path / "doc.json"
    path.write_text(json.dumps(DOC), encoding="utf-8")
    return path


@pytest.fixture
def temp_output_dir(tmp_path, monkeypatch):
    out = tmp_path / "out"
    out.mkdir()
    monkeypatch.setattr("json_csv_flattener.io_utils.tempfile.gettempdir", lambda: str(out))
    return out


class TestLoadAndFlatten:

    def test_load_from_path(self, json_file):
        data, message, csv_text, count_text = load_and_flatten_json(str(json_file))

        assert data == DOC
        assert message == "Successfully loaded. Found 2 tables."
        assert csv_text == ".title\r\nInventory\r\n\r\nitems.sku, items.qty\r\nA, 2"
        assert count_text == "Tables: 2 | Values: 4"

    def test_load_with_padding_and_lf(self, json_file):
        _, _, csv_text, _ = load_and_flatten_json(json_file, "pad-with-empty", "lf")

        assert csv_text == ".title\nInventory\n\nitems.sku, items.qty\nA, 2\nB, "

    def test_load_file_object(self, json_file):
        with open(json_file, "rb") as f:
            data, _, _, _ = load_and_flatten_json(f)
        assert data == DOC

    def test_no_file(self):
        assert load_and_flatten_json(None) == (None, "No file uploaded.", "", "")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")

        data, message, csv_text, _ = load_and_flatten_json(str(path))

        assert data is None
        assert message.startswith("Error parsing JSON")
        assert csv_text == ""

    def test_bad_option_is_reported(self, json_file):
        data, message, _, _ = load_and_flatten_json(str(json_file), "nope")

        assert data == DOC
        assert message.startswith("Error flattening JSON")


class TestOtherHandlers:

    def test_reflatten(self):
        csv_text, _ = reflatten_handler(DOC, "drop-ragged-row", "lf", True)
        assert csv_text == ".title\nInventory\n\nitems.sku, items.qty\nA, 2"
        assert reflatten_handler(None) == ("", "")

    def test_previews(self):
        previews = build_table_previews(DOC, "pad-with-empty", limit=1)

        assert previews == [
            ("(root)", ["title"], [["Inventory"]]),
            ("items", ["sku", "qty"], [["A", "2"]]),
        ]
        assert build_table_previews(None) == []

    def test_pasted_json(self):
        data, message, csv_text, _ = flatten_pasted_json('{"x": [1, 2]}')

        assert data == {"x": [1, 2]}
        assert message == "Successfully parsed pasted JSON."
        assert csv_text == "x.\r\n1\r\n2"

    def test_pasted_json_errors(self):
        assert flatten_pasted_json("   ")[1] == "No JSON provided."
        assert flatten_pasted_json("{bad")[1].startswith("Error parsing JSON")


class TestExport:

    def test_export_writes_text_unchanged(self, temp_output_dir):
        path, message = export_csv_handler("h.a\r\n1", "tables")

        assert path == str(temp_output_dir / "tables.csv")
        assert message == f"Export successful! Saved to {path}"
        with open(path, newline="", encoding="utf-8") as f:
            assert f.read() == "h.a\r\n1"

    def test_export_default_name(self, temp_output_dir):
        path, _ = export_csv_handler("x", "  ")
        assert path == str(temp_output_dir / "output.csv")

    def test_nothing_to_export(self):
        assert export_csv_handler("", "x") == (None, "Nothing to export.")
