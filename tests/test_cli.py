import json

import pytest

from json_csv_flattener.cli import main


@pytest.fixture
def doc_path(tmp_path):
    path = tmp_path / "doc.json"
    path.write_text(json.dumps({"list": [{"x": 1}, {"x": 2}]}), encoding="utf-8")
    return path


def test_writes_output_file(doc_path, tmp_path):
    out = tmp_path / "nested" / "out.csv"

    assert main(["--input", str(doc_path), "--output", str(out)]) == 0
    with open(out, newline="", encoding="utf-8") as f:
        assert f.read() == "list.x\r\n1\r\n2"


def test_writes_stdout(doc_path, capsys):
    assert main(["--input", str(doc_path), "--line-ending", "lf"]) == 0
    assert capsys.readouterr().out == "list.x\n1\n2\n"


def test_missing_input(tmp_path):
    assert main(["--input", str(tmp_path / "missing.json")]) == 1


def test_rejects_unknown_policy(doc_path):
    with pytest.raises(SystemExit) as exc:
        main(["--input", str(doc_path), "--row-policy", "nope"])
    assert exc.value.code == 2
