import logging
import shutil

import pytest

from litforge import __version__
from litforge.cli import main, parse_args, read_argfile


def _copy(fixture_path, tmp_path, *parts):
    dest = tmp_path / parts[-1]
    shutil.copy(fixture_path(*parts), dest)
    return dest


def test_writes_html_next_to_first_input(fixture_path, tmp_path, caplog):
    src = _copy(fixture_path, tmp_path, "c", "hello-world.c")
    with caplog.at_level(logging.INFO):
        assert main([str(src)]) == 0
    out = tmp_path / "hello-world.html"
    assert out.exists()
    assert "hello-world.c" in out.read_text(encoding="utf-8")
    assert any(
        "Processed 1 files with 10 blocks (6 comments, 4 code)" in r.message for r in caplog.records
    )


def test_stdout_mode_prints_page_and_writes_nothing(fixture_path, tmp_path, capsys):
    src = _copy(fixture_path, tmp_path, "js", "example.js")
    assert main([str(src), "--stdout", "--title", "JS Demo"]) == 0
    captured = capsys.readouterr()
    assert "<title>JS Demo</title>" in captured.out
    assert not (tmp_path / "example.html").exists()


def test_explicit_output_and_code_url(fixture_path, tmp_path):
    src = _copy(fixture_path, tmp_path, "c", "hello-world.c")
    out = tmp_path / "docs.html"
    assert main([str(src), "-o", str(out), "-u", "https://example.com/repo"]) == 0
    assert "https://example.com/repo/" in out.read_text(encoding="utf-8")


def test_unsupported_extension_fails_without_output(tmp_path, caplog):
    good = tmp_path / "a.c"
    good.write_text("/** a */\nint a;\n", encoding="utf-8")
    bad = tmp_path / "notes.xyz"
    bad.write_text("hello", encoding="utf-8")
    out = tmp_path / "out.html"
    with caplog.at_level(logging.ERROR):
        assert main([str(good), str(bad), "-o", str(out)]) == 1
    assert not out.exists()
    assert any("Unsupported file extension: .xyz" in r.message for r in caplog.records)


def test_missing_file_fails(tmp_path):
    assert main([str(tmp_path / "nope.c"), "-o", str(tmp_path / "out.html")]) == 1
    assert not (tmp_path / "out.html").exists()


def test_argfile_replaces_arguments(fixture_path, tmp_path):
    src = _copy(fixture_path, tmp_path, "c", "hello-world.c")
    out = tmp_path / "from-argfile.html"
    argfile = tmp_path / "project.argfile"
    argfile.write_text(
        f'# project settings\n{src} --output-html {out} --title "My Project"\n', encoding="utf-8"
    )
    assert main(["--argfile", str(argfile)]) == 0
    assert "<title>My Project</title>" in out.read_text(encoding="utf-8")


def test_read_argfile_handles_quotes(tmp_path):
    argfile = tmp_path / "a.argfile"
    argfile.write_text("a.c 'b c.js' --title \"Two Words\"", encoding="utf-8")
    assert read_argfile(str(argfile)) == ["a.c", "b c.js", "--title", "Two Words"]


def test_missing_argfile_exits(tmp_path):
    with pytest.raises(SystemExit):
        read_argfile(str(tmp_path / "missing.argfile"))


def test_no_inputs_is_usage_error():
    with pytest.raises(SystemExit) as exc:
        parse_args([])
    assert exc.value.code == 2


def test_version(capsys):
    with pytest.raises(SystemExit) as exc:
        parse_args(["--version"])
    assert exc.value.code == 0
    assert f"litforge v{__version__}" in capsys.readouterr().out


def test_directory_input_is_expanded(fixture_path, tmp_path, capsys):
    _copy(fixture_path, tmp_path, "c", "hello-world.c")
    _copy(fixture_path, tmp_path, "js", "example.js")
    (tmp_path / "README.txt").write_text("not source", encoding="utf-8")
    assert main([str(tmp_path), "--stdout"]) == 0
    assert "Literate Code (2 files)" in capsys.readouterr().out
