"""
Tests for the lispcss command line.
"""
import io
import json
import os

import pytest

from compiler import set_verbose
from lispcss import STARTER_FILE, main


@pytest.fixture(autouse=True)
def workdir(tmp_path, monkeypatch):
    """Run every test in an empty directory with no config file."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    yield tmp_path
    set_verbose(False)


class TestBuild:
    """Tests for 'lispcss build'."""

    def test_build_to_stdout(self, workdir, capsys):
        """CSS goes to stdout by default."""
        (workdir / "a.lcss").write_text("(body color red)")
        main(["build", "a.lcss"])
        assert capsys.readouterr().out == " body {\n    color: red;\n}\n"

    def test_build_to_file(self, workdir, capsys):
        """-o writes the CSS to a file and logs to stderr."""
        (workdir / "a.lcss").write_text("(ul (li color red))")
        main(["build", "a.lcss", "-o", "out.css"])
        assert (workdir / "out.css").read_text() == " ul li {\n    color: red;\n}\n"
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "INFO:" in captured.err

    def test_build_from_stdin(self, monkeypatch, capsys):
        """No filename reads the document from stdin."""
        monkeypatch.setattr("sys.stdin", io.StringIO("(p color blue)"))
        main(["build"])
        assert capsys.readouterr().out == " p {\n    color: blue;\n}\n"

    def test_missing_file(self, capsys):
        """A missing input file exits 1."""
        with pytest.raises(SystemExit) as exc_info:
            main(["build", "nope.lcss"])
        assert exc_info.value.code == 1
        assert "not found" in capsys.readouterr().err

    def test_failure_writes_nothing_to_stdout(self, workdir, capsys):
        """A strict lex failure exits 1 with an empty stdout."""
        (workdir / "a.lcss").write_text("(p width calc(1px")
        with pytest.raises(SystemExit):
            main(["build", "a.lcss", "--strict"])
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Compilation Failed" in captured.err

    def test_unbalanced_close_fails_in_lenient_mode(self, workdir, capsys):
        """An extra ')' exits 1 with an empty stdout even without --strict."""
        (workdir / "a.lcss").write_text("(p color blue)\n(body color red))")
        with pytest.raises(SystemExit) as exc_info:
            main(["build", "a.lcss"])
        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Unexpected ')'" in captured.err

    def test_very_deep_file(self, workdir, capsys):
        """A thousand nested groups compile without a traceback."""
        (workdir / "deep.lcss").write_text("(a " * 1000 + "color red" + ")" * 1000)
        main(["build", "deep.lcss"])
        assert capsys.readouterr().out == " a" * 1000 + " {\n    color: red;\n}\n"

    def test_strict_from_config(self, workdir, capsys):
        """"strict": true in lispcss.json turns on strict mode."""
        (workdir / "lispcss.json").write_text(json.dumps({"strict": True}))
        (workdir / "a.lcss").write_text("(body color)")
        with pytest.raises(SystemExit):
            main(["build", "a.lcss"])
        assert capsys.readouterr().out == ""

    def test_indent_from_config(self, workdir, capsys):
        """The configured indent is used for rule lines."""
        (workdir / "lispcss.json").write_text(json.dumps({"indent": "  "}))
        (workdir / "a.lcss").write_text("(body color red)")
        main(["build", "a.lcss"])
        assert capsys.readouterr().out == " body {\n  color: red;\n}\n"

    def test_verbose(self, workdir, capsys):
        """--verbose logs dropped groups to stderr."""
        (workdir / "a.lcss").write_text("(body color)")
        main(["--verbose", "build", "a.lcss"])
        assert "DEBUG:" in capsys.readouterr().err


class TestTree:
    """Tests for 'lispcss tree'."""

    def test_prints_json(self, workdir, capsys):
        """The parsed nodes and diagnostics are printed as JSON."""
        (workdir / "a.lcss").write_text("(ul padding 0 (li color red))\n(p color)")
        main(["tree", "a.lcss"])
        data = json.loads(capsys.readouterr().out)
        ul = data["nodes"][0]
        assert ul["selector"]["text"] == "ul"
        assert ul["rules"][0] == {"property": "padding", "value": ["0"]}
        assert ul["children"][0]["selector"]["text"] == "li"
        assert data["diagnostics"][0]["group_index"] == 1


class TestInit:
    """Tests for 'lispcss init'."""

    def test_creates_starter_file(self, workdir, capsys):
        """init writes a starter file that compiles."""
        main(["init"])
        assert os.path.exists(STARTER_FILE)
        main(["build", STARTER_FILE])
        assert " body a:hover {" in capsys.readouterr().out

    def test_does_not_overwrite(self, workdir):
        """init leaves an existing starter file alone."""
        (workdir / STARTER_FILE).write_text("(p color blue)")
        main(["init"])
        assert (workdir / STARTER_FILE).read_text() == "(p color blue)"


def test_no_command_prints_help(capsys):
    """Without a subcommand the help text is printed."""
    main([])
    assert "usage" in capsys.readouterr().out
