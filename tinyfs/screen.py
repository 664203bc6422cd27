"""Text-mode screen model, message formatting and keyboard scan-code decoding."""

from __future__ import annotations

from collections.abc import Iterable

# Scan code set 1 make codes 0x00-0x39; every other code has no character.
_SCAN_CODES = (
    "\0\x1b1234567890-=\b"
    "\tqwertyuiop[]\n"
    "\0asdfghjkl;'`"
    "\0\\zxcvbnm,./\0"
    "*\0 "
)

_RELEASE_BIT = 0x80


def decode_scan_code(code: int) -> str | None:
    """Return the character for a keyboard scan code.

    Key releases and keys without a character give None.
    """
    if not 0 <= code <= 0xFF:
        raise ValueError(f"scan code out of range: {code}")
    if code & _RELEASE_BIT or code >= len(_SCAN_CODES):
        return None
    char = _SCAN_CODES[code]
    return None if char == "\0" else char


class TextScreen:
    """A fixed-size character screen with a cursor, wrapping and scrolling."""

    def __init__(self, width: int = 80, height: int = 25) -> None:
        if width < 1 or height < 1:
            raise ValueError("screen dimensions must be positive")
        self.width = width
        self.height = height
        self._cells = [self._blank_row() for _ in range(height)]
        self.row = 0
        self.col = 0

    def _blank_row(self) -> list[str]:
        return [" "] * self.width

    @property
    def cursor(self) -> tuple[int, int]:
        """The cursor position as (row, column)."""
        return self.row, self.col

    def put_char(self, char: str) -> None:
        """Write one character at the cursor and advance it."""
        if len(char) != 1:
            raise ValueError("put_char takes exactly one character")
        if char == "\n":
            self.col = 0
            self.row += 1
        else:
            self._cells[self.row][self.col] = char
            self.col += 1
            if self.col >= self.width:
                self.col = 0
                self.row += 1
        if self.row >= self.height:
            del self._cells[0]
            self._cells.append(self._blank_row())
            self.row = self.height - 1

    def write(self, text: str) -> None:
        """Write every character of text."""
        for char in text:
            self.put_char(char)

    def backspace(self) -> None:
        """Move the cursor back one cell and blank it."""
        if self.col > 0:
            self.col -= 1
        elif self.row > 0:
            self.row -= 1
            self.col = self.width - 1
        self._cells[self.row][self.col] = " "

    def clear(self) -> None:
        """Blank the whole screen and home the cursor."""
        self._cells = [self._blank_row() for _ in range(self.height)]
        self.row = 0
        self.col = 0

    def lines(self) -> list[str]:
        """Return every screen row with trailing blanks removed."""
        return ["".join(row).rstrip() for row in self._cells]


def format_message(fmt: str, *args: object) -> str:
    """Expand %s, %c and %d in fmt; any other specifier is dropped."""
    out: list[str] = []
    values = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            out.append(char)
            continue
        spec = next(chars, "")
        if spec not in ("s", "c", "d"):
            continue
        try:
            value = next(values)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None
        if spec == "s":
            out.append(str(value))
        elif spec == "c":
            out.append(value if isinstance(value, str) else chr(value))
        else:
            out.append(str(int(value)))
    return "".join(out)


def read_line(scan_codes: Iterable[int], screen: TextScreen | None = None) -> str:
    """Read keys until Enter, echoing to screen and honouring backspace."""
    buffer: list[str] = []
    for code in scan_codes:
        char = decode_scan_code(code)
        if char is None:
            continue
        if char == "\n":
            if screen is not None:
                screen.put_char("\n")
            return "".join(buffer)
        if char == "\b":
            if buffer:
                buffer.pop()
                if screen is not None:
                    screen.backspace()
            continue
        buffer.append(char)
        if screen is not None:
            screen.put_char(char)
    raise EOFError("input ended before the end of the line")