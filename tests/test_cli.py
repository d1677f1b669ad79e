import argparse
import io
import json
from urllib.parse import unquote

import pytest

from ray_this import cli
from ray_this.utils import decode_code


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    for name in (
        "RAY_THIS_COLORS",
        "RAY_THIS_PADDING",
        "RAY_THIS_BACKGROUND",
        "RAY_THIS_DARK_MODE",
        "RAY_THIS_FILETYPES",
        "RAY_THIS_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(cli, "setup_logging", lambda level: None)


@pytest.fixture
def opened(monkeypatch):
    urls = []
    monkeypatch.setattr(
        "ray_this.editor.launcher.webbrowser.open",
        lambda url: urls.append(url) or True,
    )
    return urls


def _printed_url(output):
    line = next(line for line in output.splitlines() if line.startswith("[Screenshot url]("))
    return line[len("[Screenshot url]("):-1]


@pytest.mark.parametrize("value, expected", [("3:7", (3, 7)), ("5", (5, 5))])
def test_parse_line_range(value, expected):
    assert cli.parse_line_range(value) == expected


@pytest.mark.parametrize("value", ["0:2", "5:3", "a:b", ""])
def test_parse_line_range_rejects(value):
    with pytest.raises(argparse.ArgumentTypeError):
        cli.parse_line_range(value)


def test_publishes_file_selection(tmp_path, capsys, opened):
    path = tmp_path / "script.py"
    path.write_text("import sys\nprint(sys.argv)\n", encoding="utf-8")

    exit_code = cli.main([str(path), "--lines", "2:2", "--no-format", "--colors", "sunset"])

    assert exit_code == 0
    url = _printed_url(capsys.readouterr().out)
    assert opened == [url]
    assert "colors=sunset" in url
    assert "title=script.py" in url
    assert "language=python" in url
    code = url.split("code=", 1)[1].split("&", 1)[0]
    assert decode_code(unquote(code)) == "print(sys.argv)"


def test_no_open_does_not_launch_browser(tmp_path, capsys, opened):
    path = tmp_path / "a.js"
    path.write_text("let a = 1", encoding="utf-8")

    assert cli.main([str(path), "--no-format", "--no-open", "--title", "Demo"]) == 0
    assert opened == []
    assert "title=Demo" in capsys.readouterr().out


def test_reads_stdin(monkeypatch, capsys, opened):
    monkeypatch.setattr("sys.stdin", io.StringIO("SELECT 1;\n"))

    assert cli.main(["-", "--file-name", "query.sql", "--no-format", "--no-open"]) == 0
    assert "language=sql" in capsys.readouterr().out


def test_missing_file_reports_no_editor(tmp_path, capsys, opened):
    exit_code = cli.main([str(tmp_path / "missing.py"), "--no-format"])

    assert exit_code == 1
    assert "open editor" in capsys.readouterr().err
    assert opened == []


def test_empty_file_reports_empty_selection(tmp_path, capsys, opened):
    path = tmp_path / "empty.py"
    path.write_text("", encoding="utf-8")

    assert cli.main([str(path), "--no-format"]) == 1
    assert "text selected" in capsys.readouterr().err


def test_custom_filetypes(tmp_path, capsys, opened):
    table = tmp_path / "types.json"
    table.write_text(json.dumps([{"value": "python", "extensions": ["txt"]}]), encoding="utf-8")
    path = tmp_path / "notes.txt"
    path.write_text("x = 1", encoding="utf-8")

    assert cli.main([str(path), "--filetypes", str(table), "--no-format", "--no-open"]) == 0
    assert "language=python" in capsys.readouterr().out


def test_bad_filetypes_exits(tmp_path, capsys):
    path = tmp_path / "a.py"
    path.write_text("x", encoding="utf-8")

    assert cli.main([str(path), "--filetypes", str(tmp_path / "nope.json")]) == 1
    assert "Error:" in capsys.readouterr().err


def test_undecodable_stdin_reports_no_editor(monkeypatch, capsys, opened):
    monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(b"\xff\xfe\xfa"), encoding="utf-8"))

    assert cli.main(["-", "--no-format"]) == 1
    assert "open editor" in capsys.readouterr().err
    assert opened == []
