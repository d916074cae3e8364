import io

import pytest

from ranking_bm25.cli import main


@pytest.fixture
def moby_dick_file(tmp_path, moby_dick_texts):
    path = tmp_path / "mobydick.txt"
    path.write_text("\n".join(moby_dick_texts) + "\n", encoding="utf-8")
    return path


def test_cli_ishmael(moby_dick_file, capsys):
    assert main([str(moby_dick_file), "--query", "Ishmael"]) == 0

    out = capsys.readouterr().out
    lines = out.splitlines()
    assert lines[0] == 'Top 3 Relevant Docs to "Ishmael":'
    assert lines[1] == "\tID   : 0"
    assert lines[2] == "\tScore: 3.761"
    assert lines[3] == '\tDoc  : "Call me Ishmael ."'
    # Zero-score ties keep document order
    assert lines[4] == "\tID   : 1"
    assert lines[5] == "\tScore: 0.000"
    assert lines[7] == "\tID   : 2"


def test_cli_top_k(moby_dick_file, capsys):
    assert main([str(moby_dick_file), "--query", "whenever", "--top-k", "4"]) == 0

    out = capsys.readouterr().out
    ids = [line.split(":")[1].strip() for line in out.splitlines() if line.startswith("\tID")]
    assert ids == ["3", "4", "5", "6"]


@pytest.mark.parametrize("top_k", ["-1", "0", "two"])
def test_cli_rejects_invalid_top_k(moby_dick_file, capsys, top_k):
    with pytest.raises(SystemExit) as exc_info:
        main([str(moby_dick_file), "--query", "whenever", "--top-k", top_k])
    assert exc_info.value.code == 2
    captured = capsys.readouterr()
    assert "--top-k" in captured.err
    assert captured.out == ""


def test_cli_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("foo bar\nbaz qux\n"))
    assert main(["-", "--query", "qux", "--top-k", "1"]) == 0
    assert "\tID   : 1" in capsys.readouterr().out


def test_cli_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt"), "--query", "x"]) == 1
    assert capsys.readouterr().err.startswith("Error:")


def test_cli_empty_corpus(tmp_path, capsys):
    path = tmp_path / "empty.txt"
    path.write_text("\n\n", encoding="utf-8")
    assert main([str(path), "--query", "x"]) == 1
    assert "Error:" in capsys.readouterr().err
