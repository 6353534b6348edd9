from dicom_query.query_reader.cursor import LineCursor

VALUE_SEPARATOR = "="
QUOTE = '"'


def decode_quoted(cursor: LineCursor) -> tuple[str, LineCursor]:
    """Decode a quoted value starting at the opening quote.

    A doubled quote inside the value stands for a literal quote.
    A value without closing quote ends at the end of the line.
    """
    delimiter = cursor.peek()
    cursor = cursor.advance()
    chars = []
    while not cursor.at_end:
        char = cursor.peek()
        if char == delimiter:
            if cursor.peek(1) != delimiter:
                return "".join(chars), cursor.advance()
            cursor = cursor.advance()
        chars.append(char)
        cursor = cursor.advance()
    return "".join(chars), cursor


def decode_value(cursor: LineCursor) -> tuple[str, LineCursor]:
    """Decode the optional value or pattern following '='.

    Returns an empty string if no value is given, which makes
    the attribute a wildcard.
    """
    if cursor.peek() != VALUE_SEPARATOR:
        return "", cursor
    cursor = cursor.advance()
    if cursor.peek() == QUOTE:
        return decode_quoted(cursor)
    return cursor.take_while(lambda c: not c.isspace())
