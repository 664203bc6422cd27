import io

import pytest

from tinyfs.screen import TextScreen
from tinyfs.shell import PROMPT, Shell, banner, main


@pytest.fixture
def shell():
    return Shell(io.StringIO())


def output_of(shell):
    return shell.output.getvalue()


def test_banner_starts_with_version_line():
    text = banner()
    assert text.splitlines()[0] == "Tiny OS -version 0.1"
    assert len(text.splitlines()) == 7


def test_dir_on_empty_root(shell):
    assert shell.execute("dir") is True
    assert output_of(shell) == (
        "      <DIR>                         .\n"
        "Total: 0 directors      0 files\n"
    )


def test_dir_lists_entries_in_creation_order(shell):
    shell.execute("mkdir docs")
    shell.execute("create notes")
    shell.output.seek(0)
    shell.output.truncate()
    shell.execute("dir")
    lines = output_of(shell).splitlines()
    assert lines[1].endswith("docs") and "<DIR>" in lines[1]
    assert lines[2].endswith("notes") and "<FILE>" in lines[2]
    assert lines[-1] == "Total: 1 directors      1 files"


def test_dir_in_subdirectory_counts_parent(shell):
    shell.execute("mkdir docs")
    shell.execute("cd docs")
    shell.output.seek(0)
    shell.output.truncate()
    shell.execute("dir")
    lines = output_of(shell).splitlines()
    assert lines[0].endswith("..")
    assert lines[-1] == "Total: 1 directors      0 files"


def test_cd_changes_file_system_path(shell):
    shell.execute("mkdir a")
    shell.execute("cd a")
    shell.execute("mkdir b")
    shell.execute("cd b")
    assert shell.fs.path == "/a/b"
    shell.execute("cd ..")
    assert shell.fs.path == "/a"
    shell.execute("cd /")
    assert shell.fs.at_root


def test_errors_are_reported_not_raised(shell):
    shell.execute("mkdir a")
    assert shell.execute("mkdir a") is True
    assert "already exists" in output_of(shell)
    shell.execute("delete ghost")
    assert "no such file" in output_of(shell)


def test_failed_cd_keeps_directory(shell):
    shell.execute("create f")
    shell.execute("cd f")
    assert shell.fs.at_root
    assert "not a directory" in output_of(shell)


def test_delete_and_rm_remove_entries(shell):
    shell.execute("create f")
    shell.execute("mkdir d")
    shell.execute("delete f")
    shell.execute("rm d")
    assert shell.fs.list_dir() == []


def test_missing_argument_prints_usage(shell):
    shell.execute("mkdir")
    assert output_of(shell).startswith("usage: mkdir")
    assert shell.fs.list_dir() == []


def test_unknown_command_is_ignored(shell):
    assert shell.execute("frobnicate") is True
    assert shell.execute("   ") is True
    assert output_of(shell) == ""


def test_poweroff_stops(shell):
    assert shell.execute("poweroff") is False


def test_clear_uses_screen_clear():
    screen = TextScreen(20, 5)
    sh = Shell(screen)
    sh.execute("dir")
    assert any(screen.lines())
    sh.execute("clear")
    assert screen.lines() == [""] * 5
    assert screen.cursor == (0, 0)


def test_run_takes_argument_from_next_line(shell):
    shell.run(["mkdir", "docs", "cd", "docs"])
    assert shell.fs.path == "/docs"


def test_run_stops_at_poweroff(shell):
    shell.run(["mkdir a", "poweroff", "mkdir b"])
    assert [n.name for n in shell.fs.list_dir()] == ["a"]
    assert output_of(shell).count(PROMPT) == 2


def test_run_prompts_until_input_ends(shell):
    shell.run(["dir"])
    assert output_of(shell).startswith(PROMPT)
    assert output_of(shell).count(PROMPT) == 2


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("mkdir x\ndir\npoweroff\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Tiny OS -version 0.1")
    assert "Total: 1 directors      0 files" in out


def test_main_without_banner(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["--no-banner"]) == 0
    assert capsys.readouterr().out.startswith(PROMPT)