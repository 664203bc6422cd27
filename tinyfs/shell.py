"""Interactive command shell over the in-memory file system."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from typing import Protocol

from tinyfs.filesystem import FileSystem, FileSystemError
from tinyfs.screen import format_message

PROMPT = "TinyOS #"

_BANNER = (
    "Tiny OS -version 0.1\n"
    " _____ _                ___  ____  \n"
    "|_   _(_)_ __  _   _   / _ \\/ ___| \n"
    "  | | | | '_ \\| | | | | | | \\___ \\ \n"
    "  | | | | | | | |_| | | |_| |___) |\n"
    "  |_| |_|_| |_|\\__, |  \\___/|____/ \n"
    "               |___/               \n"
)

_CLEAR_SEQUENCE = "\x1b[2J\x1b[H"

_ROOT_LINE = "      <DIR>                         %s\n"
_DIR_LINE = "      <DIR>                        %s\n"
_FILE_LINE = "      <FILE>                       %s\n"
_TOTAL_LINE = "Total: %d directors      %d files\n"

# Commands that take a name or path as their argument.
_ARGUMENT_COMMANDS = frozenset({"cd", "create", "delete", "mkdir", "rm"})


class _Writable(Protocol):
    def write(self, text: str) -> object: ...


def banner() -> str:
    """Return the start-up banner."""
    return _BANNER


class Shell:
    """Reads commands and applies them to a file system, writing to output."""

    def __init__(self, output: _Writable) -> None:
        self.output = output
        self.fs = FileSystem()

    def _say(self, fmt: str, *args: object) -> None:
        self.output.write(format_message(fmt, *args))

    def _clear(self) -> None:
        clear = getattr(self.output, "clear", None)
        if callable(clear):
            clear()
        else:
            self.output.write(_CLEAR_SEQUENCE)

    def _dir(self) -> None:
        dirs = files = 0
        if self.fs.at_root:
            self._say(_ROOT_LINE, ".")
        else:
            self._say(_ROOT_LINE, "..")
            dirs += 1
        for entry in self.fs.list_dir():
            if entry.is_dir:
                self._say(_DIR_LINE, entry.name)
                dirs += 1
            else:
                self._say(_FILE_LINE, entry.name)
                files += 1
        self._say(_TOTAL_LINE, dirs, files)

    def _with_argument(self, command: str, argument: str) -> None:
        fs = self.fs
        try:
            if command == "cd":
                fs.cd(argument)
            elif command == "create":
                fs.create(argument)
                self._say("File created.\n")
            elif command == "delete":
                fs.delete(argument)
                self._say("File deleted.\n")
            elif command == "mkdir":
                fs.mkdir(argument)
                self._say("Directory created.\n")
            elif command == "rm":
                fs.remove_dir(argument)
                self._say("Directory removed.\n")
        except FileSystemError as error:
            self._say("%s\n", error)

    def execute(self, line: str) -> bool:
        """Run one command line; return False when the shell should stop."""
        parts = line.strip().split(maxsplit=1)
        if not parts:
            return True
        command = parts[0]
        argument = parts[1].strip() if len(parts) > 1 else ""
        if command == "poweroff":
            return False
        if command == "clear":
            self._clear()
        elif command == "dir":
            self._dir()
        elif command in _ARGUMENT_COMMANDS:
            if argument:
                self._with_argument(command, argument)
            else:
                self._say("usage: %s <name>\n", command)
        return True

    def run(self, lines: Iterable[str]) -> None:
        """Prompt for and execute commands until input ends or poweroff.

        A command that needs an argument but has none on its line takes
        the next line as its argument.
        """
        source = iter(lines)
        while True:
            self._say(PROMPT)
            line = next(source, None)
            if line is None:
                break
            parts = line.split()
            if len(parts) == 1 and parts[0] in _ARGUMENT_COMMANDS:
                argument = next(source, None)
                if argument is None:
                    break
                line = f"{parts[0]} {argument.strip()}"
            if not self.execute(line):
                break


def main(argv: list[str] | None = None) -> int:
    """Start the shell on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="tinyfs", description="Shell over an in-memory file system."
    )
    parser.add_argument(
        "--no-banner", action="store_true", help="do not print the start-up banner"
    )
    args = parser.parse_args(argv)
    if not args.no_banner:
        sys.stdout.write(banner())
    Shell(sys.stdout).run(line.rstrip("\n") for line in sys.stdin)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())