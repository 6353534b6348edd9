from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class LineCursor:
    """Read position inside a single line of a query file.

    The cursor is immutable: each move returns a new cursor, so that
    a component can remember where a token started by keeping the old one.

    Attributes
    ----------
    text:
        The complete line, without the line terminator
    offset:
        The index of the current character in `text`
    """

    text: str
    offset: int = 0

    @property
    def at_end(self) -> bool:
        return self.offset >= len(self.text)

    @property
    def remaining(self) -> int:
        """The number of characters left in the line."""
        return max(len(self.text) - self.offset, 0)

    def peek(self, ahead: int = 0) -> str:
        """Return the character `ahead` positions after the current one,
        or an empty string at the end of the line."""
        index = self.offset + ahead
        return self.text[index] if index < len(self.text) else ""

    def advance(self, count: int = 1) -> "LineCursor":
        return LineCursor(self.text, min(self.offset + count, len(self.text)))

    def take(self, count: int) -> tuple[str, "LineCursor"]:
        """Return the next `count` characters and the cursor behind them."""
        end = self.advance(count)
        return self.text[self.offset : end.offset], end

    def take_while(self, predicate: Callable[[str], bool]) -> tuple[str, "LineCursor"]:
        """Return the longest run of characters matching `predicate`
        and the cursor behind it."""
        end = self.offset
        while end < len(self.text) and predicate(self.text[end]):
            end += 1
        return self.text[self.offset : end], LineCursor(self.text, end)

    def skip_whitespace(self) -> "LineCursor":
        return self.take_while(str.isspace)[1]

    def text_from(self, start: int, max_len: int | None = None) -> str:
        """Return the text between `start` and the current offset,
        shortened to `max_len` characters if given."""
        text = self.text[start : self.offset]
        return text if max_len is None else text[:max_len]
