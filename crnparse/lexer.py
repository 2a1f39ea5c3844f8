"""
Delimiters and comments of the reaction network text format.

Every function here peeks at ``text`` starting at offset ``pos`` and returns
the offset just past what it matched, or None if nothing matched. None of
them produce a value: delimiters and comments decide where tokens start and
end, but never appear in a parsed :py:class:`crnparse.core.Document`.

The recognised delimiters are:

- ``space_delimiter``: one or more spaces
- ``plus_delimiter``: ``+`` with optional spaces either side
- ``fat_arrow_delimiter``: ``=>`` with optional spaces either side
- ``comma_delimiter``: ``,`` with optional spaces either side
- ``new_line_delimiter``: a line break with optional spaces either side

A comment runs from ``//`` up to the next new line delimiter.
"""

SPACE = ' '
PLUS = '+'
FAT_ARROW = '=>'
COMMA = ','
COMMENT_START = '//'
LINE_BREAK_CHARS = '\r\n'


def _spaces(text, pos):
    """Offset of the first non-space character at or after pos."""
    end = pos
    length = len(text)
    while end < length and text[end] == SPACE:
        end += 1
    return end


def _padded(symbol):
    def match(text, pos):
        end = _spaces(text, pos)
        if text.startswith(symbol, end):
            return _spaces(text, end + len(symbol))
        return None
    match.__doc__ = "Match %r surrounded by optional spaces." % symbol
    return match


plus_delimiter = _padded(PLUS)
fat_arrow_delimiter = _padded(FAT_ARROW)
comma_delimiter = _padded(COMMA)


def space_delimiter(text, pos):
    """Match one or more spaces."""
    end = _spaces(text, pos)
    return end if end > pos else None


def line_break(text, pos):
    """Match a single ``\\r\\n``, ``\\n`` or ``\\r``."""
    if text.startswith('\r\n', pos):
        return pos + 2
    if pos < len(text) and text[pos] in LINE_BREAK_CHARS:
        return pos + 1
    return None


def new_line_delimiter(text, pos):
    """Match a line break surrounded by optional spaces."""
    end = line_break(text, _spaces(text, pos))
    if end is None:
        return None
    return _spaces(text, end)


def line_end(text, pos):
    """Offset of the next line break character, or len(text)."""
    end = len(text)
    for char in LINE_BREAK_CHARS:
        found = text.find(char, pos, end)
        if found != -1:
            end = found
    return end


def comment(text, pos):
    """
    Match a ``//`` comment

    The comment stops where a new line delimiter would start, so spaces
    before the line break are left for the delimiter.
    """
    if not text.startswith(COMMENT_START, pos):
        return None
    start = pos + len(COMMENT_START)
    end = line_end(text, start)
    if end < len(text):
        while end > start and text[end - 1] == SPACE:
            end -= 1
    return end


# Padded delimiters also start with spaces, so space_delimiter goes last to
# let the longest match win
DELIMITERS = (new_line_delimiter, fat_arrow_delimiter, plus_delimiter,
              comma_delimiter, space_delimiter)


def delimiter(text, pos):
    """Match any delimiter."""
    for predicate in DELIMITERS:
        end = predicate(text, pos)
        if end is not None:
            return end
    return None


def at_name_boundary(text, pos):
    """True if a name cannot continue at pos."""
    return pos >= len(text) or \
        text.startswith(COMMENT_START, pos) or \
        delimiter(text, pos) is not None


def at_line_end(text, pos):
    """True at end of input or at a new line delimiter."""
    return pos >= len(text) or new_line_delimiter(text, pos) is not None


def skip_noise(text, pos):
    """
    Consume spaces, stray commas and comments on the current line

    Line breaks are never consumed.
    """
    while True:
        for predicate in (comma_delimiter, comment, space_delimiter):
            end = predicate(text, pos)
            if end is not None and end > pos:
                pos = end
                break
        else:
            return pos


def is_reaction_line(text, pos):
    """
    True if a fat arrow comes up on the current line before any comma

    Reactant lists never contain commas, so a comma ahead of the arrow means
    the line cannot hold a reaction. Comments are not searched. Names can
    never contain ``=>``, so any occurrence found is a fat arrow delimiter.
    """
    end = line_end(text, pos)
    for stop in (COMMENT_START, COMMA):
        found = text.find(stop, pos, end)
        if found != -1:
            end = found
    return text.find(FAT_ARROW, pos, end) != -1
