"""Whitespace handling utilities for the EJSON parser.

Whitespace is only significant where the grammar shows it: after a minus
or plus sign, around the commas of a list, and around the colon of a map
pair. The document driver additionally skips it around the top-level value.
"""

from ejsonparser.syntax.cursor import Cursor


def skip_whitespace(cursor: Cursor) -> Cursor:
    """Skip inter-token whitespace (space, tab, LF, CR).

    Args:
        cursor: Current position in source

    Returns:
        New cursor at first non-whitespace character (or EOF)

    Design:
        Immutable cursor ensures termination.
    """
    return cursor.skip_whitespace()


def skip_padded(cursor: Cursor, char: str) -> Cursor | None:
    """Consume WS* char WS* as one atomic token.

    Used for the comma separator of lists and the colon of map pairs.

    Args:
        cursor: Current position in source
        char: The separator character

    Returns:
        Cursor after the trailing whitespace, or None if the separator is
        absent. On None nothing has been consumed.
    """
    after_char = skip_whitespace(cursor).expect(char)
    if after_char is None:
        return None
    return skip_whitespace(after_char)
