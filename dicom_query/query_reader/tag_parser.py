import string
from collections.abc import Callable
from dataclasses import dataclass

from pydicom.tag import BaseTag

from dicom_query.query.query_spec import DiagnosticCode
from dicom_query.query_reader.cursor import LineCursor

Reporter = Callable[[DiagnosticCode, str], None]

CREATOR_START = "["
CREATOR_END = "]"
TAG_LENGTH = 8


@dataclass
class ParsedTag:
    """The tag ID and private creator at the start of a query line.

    Attributes
    ----------
    tag:
        The tag ID, (0000,0000) if the tag text is not a valid tag ID
    creator:
        The private creator, or an empty string
    start:
        The offset of the tag text in the line
    end:
        The offset behind the tag text
    """

    tag: BaseTag
    creator: str
    start: int
    end: int


def is_tag_char(char: str) -> bool:
    return char.isascii() and char.isalnum()


def tag_from_text(text: str) -> BaseTag:
    """Return the tag ID for a text of exactly eight hex digits,
    and the zero tag ID for any other text."""
    if len(text) == TAG_LENGTH and all(c in string.hexdigits for c in text):
        return BaseTag(int(text, 16))
    return BaseTag(0)


def parse_creator(cursor: LineCursor) -> tuple[str, LineCursor] | None:
    """Parse an optional private creator in square brackets.
    Returns `None` if the closing bracket is missing."""
    if cursor.peek() != CREATOR_START:
        return "", cursor
    creator, end = cursor.advance().take_while(lambda c: c != CREATOR_END)
    if end.at_end:
        return None
    return creator, end.advance()


def parse_tag(
    cursor: LineCursor, report: Reporter
) -> tuple[ParsedTag, LineCursor] | None:
    """Parse the optional private creator and the tag ID.

    Returns the parsed tag and the cursor behind the tag text,
    or `None` if the line has to be ignored.
    """
    result = parse_creator(cursor)
    if result is None:
        report(
            DiagnosticCode.UnterminatedCreatorBlock,
            f'Block is missing the final "{CREATOR_END}".',
        )
        return None
    creator, cursor = result
    text, end = cursor.take_while(is_tag_char)
    return ParsedTag(tag_from_text(text), creator, cursor.offset, end.offset), end
