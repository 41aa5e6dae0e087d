import io

import pytest

from minils.helpers import Flags, file_block_count, format_long_entry
from minils.listing import Lister, main, run


def _run(argv):
    out, err = io.StringIO(), io.StringIO()
    status = run(argv, out, err)
    return status, out.getvalue(), err.getvalue()


def test_single_file_prints_its_name(tmp_path):
    target = tmp_path / "a.txt"
    target.write_text("hello")
    status, out, err = _run([str(target)])
    assert status == 0
    assert out == "a.txt\n"
    assert err == ""


def test_directory_hides_hidden_without_A(tmp_path):
    (tmp_path / "visible").write_text("x")
    (tmp_path / ".hidden").write_text("x")
    _, out, _ = _run([str(tmp_path)])
    assert out.splitlines() == ["visible"]


def test_directory_shows_hidden_with_A(tmp_path):
    (tmp_path / "visible").write_text("x")
    (tmp_path / ".hidden").write_text("x")
    _, out, _ = _run(["-A", str(tmp_path)])
    assert sorted(out.splitlines()) == [".hidden", "visible"]


def test_missing_file_reports_error(tmp_path):
    missing = tmp_path / "nope"
    status, out, err = _run([str(missing)])
    assert status == 0
    assert out == ""
    assert err.startswith("ls: cannot access nope: ")


def test_recursive_single_directory(tmp_path):
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "inner.txt").write_text("x")
    _, out, _ = _run(["-R", str(tmp_path)])
    assert out == f"{tmp_path}:\nsub\n\n{tmp_path}/sub:\ninner.txt\n"


def test_recursive_without_subdirectories_has_no_header(tmp_path):
    (tmp_path / "only.txt").write_text("x")
    _, out, _ = _run(["-R", str(tmp_path)])
    assert out == "only.txt\n"


def test_multiple_operands_files_before_directories(tmp_path):
    directory = tmp_path / "dir"
    directory.mkdir()
    (directory / "b.txt").write_text("x")
    target = tmp_path / "a.txt"
    target.write_text("x")
    _, out, _ = _run([str(directory), str(target)])
    assert out == f"a.txt\n\n{directory}:\nb.txt\n"


def test_multiple_directories_separated_by_blank_line(tmp_path):
    first = tmp_path / "one"
    second = tmp_path / "two"
    first.mkdir()
    second.mkdir()
    (first / "f1").write_text("x")
    (second / "f2").write_text("x")
    _, out, _ = _run([str(first), str(second)])
    assert out == f"{first}:\nf1\n\n{second}:\nf2\n"


def test_long_format_directory(tmp_path):
    target = tmp_path / "data.bin"
    target.write_bytes(b"x" * 5000)
    _, out, _ = _run(["-l", str(tmp_path)])
    lines = out.splitlines()
    assert lines[0] == f"total {file_block_count(str(target))}"
    assert len(lines) == 2
    assert lines[1].endswith(" data.bin")
    assert lines[1].startswith("-")
    assert " 5000 " in lines[1]


def test_long_format_single_file_matches_helper(tmp_path):
    target = tmp_path / "f.txt"
    target.write_text("abc")
    out, err = io.StringIO(), io.StringIO()
    Lister(Flags(long_format=True), out, err).ls(str(target))
    expected = format_long_entry(str(target), "f.txt")
    assert out.getvalue().rstrip("\n").split()[:6] == expected.split()[:6]
    assert out.getvalue().rstrip("\n").endswith(" f.txt")


def test_no_operands_lists_current_directory(tmp_path, monkeypatch):
    (tmp_path / "here").write_text("x")
    monkeypatch.chdir(tmp_path)
    _, out, _ = _run([])
    assert out == "here\n"


def test_no_operands_recursive_prints_dot_header(tmp_path, monkeypatch):
    (tmp_path / "here").write_text("x")
    monkeypatch.chdir(tmp_path)
    _, out, _ = _run(["-R"])
    assert out == ".:\nhere\n"


@pytest.mark.parametrize("flags", [Flags(), Flags(long_format=True)])
def test_process_directory_missing_reports_error(tmp_path, flags):
    out, err = io.StringIO(), io.StringIO()
    missing = str(tmp_path / "gone")
    Lister(flags, out, err).process_directory(missing)
    assert out.getvalue() == ""
    assert err.getvalue().startswith(f"ls: cannot open directory {missing}/: ")


def test_process_file_skips_hidden_name(tmp_path):
    target = tmp_path / ".secretfile"
    target.write_text("x")
    out, err = io.StringIO(), io.StringIO()
    Lister(Flags(), out, err).process_file(str(target), ".secretfile")
    assert out.getvalue() == ""
    assert err.getvalue() == ""


def test_process_file_prints_hidden_name_with_A(tmp_path):
    target = tmp_path / ".dotfile"
    target.write_text("x")
    out, err = io.StringIO(), io.StringIO()
    Lister(Flags(almost_all=True), out, err).process_file(str(target), ".dotfile")
    assert out.getvalue() == ".dotfile\n"


def test_options_after_operands_are_honoured(tmp_path):
    (tmp_path / ".h").write_text("x")
    _, out, _ = _run([str(tmp_path), "-A"])
    assert out == ".h\n"


def test_main_returns_zero(tmp_path, capsys):
    (tmp_path / "z").write_text("x")
    assert main([str(tmp_path)]) == 0
    assert capsys.readouterr().out == "z\n"