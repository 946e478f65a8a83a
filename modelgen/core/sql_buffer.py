"""
Whitespace-collapsing accumulator for SQL fragments.
"""

from typing import Union

_WHITESPACE = b" \t\n"
_SPACE = ord(" ")


class SQLBuffer:
    """
    Append-only SQL text buffer.

    Runs of spaces, tabs and newlines are collapsed into a single space as
    they are written; every other byte is kept verbatim. ``dump`` returns
    the text and leaves the buffer empty for reuse.
    """

    def __init__(self):
        self._buf = bytearray()

    def write_sql(self, ch: Union[str, int]) -> None:
        """Append one byte value, or one character encoded as UTF-8."""
        if isinstance(ch, int):
            self._write_byte(ch)
            return

        if len(ch) != 1:
            raise ValueError(f"write_sql expects a single character, got {ch!r}")
        for b in ch.encode("utf-8"):
            self._write_byte(b)

    def _write_byte(self, b: int) -> None:
        if b in _WHITESPACE:
            if not self._buf or self._buf[-1] != _SPACE:
                self._buf.append(_SPACE)
        else:
            self._buf.append(b)

    def write_string(self, text: str) -> None:
        """Feed every character of ``text`` through :meth:`write_sql`."""
        for ch in text:
            self.write_sql(ch)

    def dump(self) -> str:
        """Return the accumulated text and reset the buffer."""
        text = self._buf.decode("utf-8", errors="surrogateescape")
        self._buf = bytearray()
        return text

    def __len__(self) -> int:
        return len(self._buf)

    def __str__(self) -> str:
        return self._buf.decode("utf-8", errors="surrogateescape")


def normalize_sql(text: str) -> str:
    """Collapse all whitespace runs in ``text`` into single spaces."""
    buf = SQLBuffer()
    buf.write_string(text)
    return buf.dump()
