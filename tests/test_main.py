import io
import json

from main import main


def test_json_output(capsys):
    assert main(["Gen 1:1-3, Act 9"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data == [
        {"book": "Gen", "locations": [{"chapters": [1], "verses": [1, 2, 3]}]},
        {"book": "Act", "locations": [{"chapters": [9], "verses": None}]},
    ]


def test_text_output_from_file(tmp_path, capsys):
    path = tmp_path / "notes.txt"
    path.write_text("Read II Ki. 3:12-14, 25 and Быт 1.", encoding="utf-8")
    assert main(["--file", str(path), "--format", "text"]) == 0
    assert capsys.readouterr().out.splitlines() == ["II Ki. 3:12-14,25", "Быт 1"]


def test_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Rev 2,4"))
    assert main(["--format", "text"]) == 0
    assert capsys.readouterr().out.strip() == "Rev 2,4"


def test_no_references_exit_code(capsys):
    assert main(["123"]) == 1
    assert json.loads(capsys.readouterr().out) == []


def test_bad_grammar_file(tmp_path, capsys):
    path = tmp_path / "grammar.json"
    path.write_text(json.dumps({"reference_pattern": "(?P<Book>\\w+)"}), encoding="utf-8")
    assert main(["--grammar", str(path), "Gen 1"]) == 2
    assert "missing groups" in capsys.readouterr().err


def test_missing_input_file(tmp_path, capsys):
    assert main(["--file", str(tmp_path / "absent.txt")]) == 2
    assert capsys.readouterr().err.startswith("error:")


def test_non_utf8_input_file(tmp_path, capsys):
    path = tmp_path / "notes.txt"
    path.write_bytes(b"Gen 1 \xff\xfe")
    assert main(["--file", str(path)]) == 2
    assert capsys.readouterr().err.startswith("error:")


def test_non_string_grammar_pattern(tmp_path, capsys):
    path = tmp_path / "grammar.json"
    path.write_text(json.dumps({"reference_pattern": 5}), encoding="utf-8")
    assert main(["--grammar", str(path), "Gen 1"]) == 2
    assert "must be a string" in capsys.readouterr().err


def test_missing_grammar_file(tmp_path, capsys):
    assert main(["--grammar", str(tmp_path / "typo.json"), "Gen 1"]) == 2
    assert "does not exist" in capsys.readouterr().err
