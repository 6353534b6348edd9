from collections.abc import Iterable, Iterator

COMMENT_CHAR = "#"


def is_ignored(line: str) -> bool:
    """Return `True` for blank and comment lines.
    Expects the leading whitespace to be removed."""
    return not line or line.startswith(COMMENT_CHAR)


def scan_lines(lines: Iterable[str]) -> Iterator[tuple[int, str]]:
    """Yield the line number and the content of each query line.

    Line terminators and leading whitespace are removed, blank lines
    and comment lines are skipped. Line numbers count all lines,
    starting with 1.
    """
    for line_number, line in enumerate(lines, start=1):
        line = line.rstrip("\r\n").lstrip()
        if not is_ignored(line):
            yield line_number, line
