# tests/auditor/test_cli.py
import io

import pytest

from a11y_auditor import cli


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    """Keep the CLI from replacing the root logger's handlers during tests."""
    monkeypatch.setattr(cli, "configure_logger", lambda **kwargs: None)


@pytest.fixture
def html_file(tmp_path):
    def _write(name, content):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)
    return _write


def test_nav_errors_exit_one(html_file, capsys):
    path = html_file("page.html", "<nav></nav>")
    exit_code = cli.main(["nav", path, "--style", "inline"])
    assert exit_code == 1
    assert "Navigation element is missing aria-label" in capsys.readouterr().out


def test_clean_file_exits_zero(html_file, capsys):
    path = html_file("ok.html", '<nav aria-label="Main"><ul><li><a href="/">Home</a></li></ul></nav>')
    assert cli.main(["nav", path]) == 0
    assert capsys.readouterr().out.strip() == "✅ No accessibility issues found in 1 navigation element(s)"


def test_warnings_only_exit_zero(html_file):
    path = html_file("warn.html", '<button aria-expanded="false">Menu</button>')
    assert cli.main(["dropdown", path, "--style", "notification"]) == 0


def test_no_suggestions_flag(html_file, capsys):
    path = html_file("page.html", "<nav></nav>")
    cli.main(["nav", path, "--no-suggestions"])
    out = capsys.readouterr().out
    assert "❌ ERROR" in out
    assert "💡" not in out


def test_multiple_files_are_labelled(html_file, capsys):
    first = html_file("a.html", "<nav></nav>")
    second = html_file("b.html", '<nav aria-label="x"></nav>')
    cli.main(["nav", first, second, "--style", "notification"])
    out = capsys.readouterr().out
    assert f"== {first}" in out
    assert f"== {second}" in out


def test_stdin_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO('<button aria-expanded="maybe">Menu</button>'))
    assert cli.main(["dropdown", "-", "--style", "inline"]) == 1
    assert 'invalid value "maybe"' in capsys.readouterr().out


def test_unreadable_file(tmp_path, capsys):
    assert cli.main(["nav", str(tmp_path / "missing.html")]) == 1
    assert "Could not read" in capsys.readouterr().err


def test_no_command_prints_help(capsys):
    assert cli.main([]) == 0
    assert "a11y-helper" in capsys.readouterr().out


def test_invalid_style_rejected():
    with pytest.raises(SystemExit):
        cli.main(["nav", "-", "--style", "popup"])
