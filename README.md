# tinyfs

A small in-memory file system organised as a tree of directories and
empty files, a tiny command shell to drive it, and a text-screen model
with keyboard scan-code decoding.

Nothing touches your real disk. Everything you create exists only as long
as the session runs.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install .[test]
pytest
```

## The shell

Start an interactive session:

```
tinyfs
```

A banner is printed, then the `TinyOS #` prompt. Pass `--no-banner` to
skip the banner. The shell reads one command per line:

| Command         | Effect                                             |
|-----------------|----------------------------------------------------|
| `mkdir NAME`    | make a directory in the current directory          |
| `create NAME`   | create an empty file in the current directory      |
| `delete NAME`   | delete a file from the current directory           |
| `rm NAME`       | remove a directory, and everything in it, from the current directory |
| `cd PATH`       | change directory (`.`, `..`, `/`, relative or absolute paths) |
| `dir`           | list the current directory                         |
| `clear`         | clear the screen                                   |
| `poweroff`      | end the session                                    |

If one of `mkdir`, `create`, `delete`, `rm` or `cd` is given alone on a
line, the next line is taken as its argument. Any other command is
ignored. The session ends on `poweroff` or when the input ends.

A file and a directory may share a name; two files, or two directories,
in the same directory may not. Failures are reported as a line of text,
for example `directory already exists: docs`, `no such file: notes` or
`not a directory: notes`.

Example session:

```
TinyOS #mkdir docs
Directory created.
TinyOS #cd docs
TinyOS #create notes
File created.
TinyOS #dir
      <DIR>                         ..
      <FILE>                       notes
Total: 1 directors      1 files
TinyOS #poweroff
```

## Using the library

```python
from tinyfs.filesystem import FileSystem, FileSystemError

fs = FileSystem()
fs.mkdir("docs")
fs.cd("docs")
fs.create("notes")
print(fs.path)                       # /docs
print([n.name for n in fs.list_dir()])

try:
    fs.cd("notes")                   # a file, not a directory
except FileSystemError as exc:
    print(exc)
```

`FileSystem` holds the tree of `FileNode` objects (`name`, `is_dir`,
`parent`, `children`), the current directory (`current`, `at_root`) and
its `path`. `mkdir`, `create`, `delete`, `remove_dir` and `cd` raise
`FileSystemError` when they fail; a failed `cd` leaves the current
directory as it was. `list_dir` returns entries in creation order.

Driving the shell from code:

```python
import io
from tinyfs.shell import Shell

out = io.StringIO()
Shell(out).run(["mkdir a", "cd a", "dir"])
print(out.getvalue())
```

`Shell.execute(line)` runs a single command and returns `False` for
`poweroff`. The output object needs a `write` method; if it also has a
`clear` method, `clear` calls it, otherwise an ANSI clear-screen sequence
is written. `banner()` returns the start-up banner.

## The screen module

`tinyfs.screen` provides:

- `TextScreen(width=80, height=25)`: a character grid with a cursor,
  line wrapping and scrolling, with `put_char`, `write`, `backspace`,
  `clear`, `lines()` and a `cursor` property. It has `write` and `clear`,
  so it can serve as a `Shell` output.
- `format_message(fmt, *args)`: formats `%s`, `%c` and `%d`; any other
  specifier is dropped.
- `decode_scan_code(code)`: turns a keyboard scan code into a character,
  or `None` for key releases and keys without one.
- `read_line(scan_codes, screen=None)`: reads scan codes up to Enter,
  handling backspace and echoing to the screen; raises `EOFError` if the
  codes run out first.

## What it does not do

Files have no contents: there is no command or method to read or write
data in them. The tree is not saved anywhere. The shell reads text lines
from standard input; it does not read scan codes or draw on a
`TextScreen` unless you wire that up yourself.