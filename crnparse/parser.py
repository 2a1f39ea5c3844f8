"""
Parser for reaction network text.

The format is line oriented. Each line holds at most one record, either a
reaction::

    2 A + B => C, 5

or an initial species count::

    A, 100

``NULL`` stands for an empty reactant or product list. Blank lines, ``//``
comments, extra spaces and trailing commas are ignored::

    // initialize species
    A, 100,,,
    NULL => D, 1

Use :py:func:`parse` to turn a string into a
:py:class:`crnparse.core.Document`. Parsing stops at the first error, which
is raised as a subclass of :py:class:`ParseError` carrying the offset, line
and column of the problem.
"""

import string
from crnparse import lexer
from crnparse.core import Term, Reaction, SpeciesCount, Document
from crnparse.logging import get_logger, EXTENDED_DEBUG

NULL_KEYWORD = 'NULL'
NONZERO_DIGITS = string.digits[1:]


def _line_and_column(text, offset):
    prefix = text[:offset]
    line = prefix.count('\n') + prefix.count('\r') - prefix.count('\r\n') + 1
    line_start = max(prefix.rfind('\n'), prefix.rfind('\r')) + 1
    return line, offset - line_start + 1


class ParseError(ValueError):
    """
    Base class for errors in reaction network text

    Attributes
    ----------
    expected : string
        Description of the construct that was expected.
    offset : int
        Zero-based character offset of the problem.
    line, column : int
        One-based line and column of the problem.
    """
    description = 'Parse error'

    def __init__(self, expected, offset, text):
        self.expected = expected
        self.offset = offset
        self.line, self.column = _line_and_column(text, offset)
        super(ParseError, self).__init__(
            '%s: expected %s at line %d, column %d' % (
                self.description, expected, self.line, self.column))


class InvalidCoefficient(ParseError):
    description = 'Invalid coefficient'


class EmptyName(ParseError):
    description = 'Empty species name'


class EmptyList(ParseError):
    description = 'Empty species list'


class _ComponentError(ParseError):
    def __init__(self, component, expected, offset, text):
        self.component = component
        self.description = '%s (%s)' % (self.description, component)
        super(_ComponentError, self).__init__(expected, offset, text)


class MalformedReaction(_ComponentError):
    """
    A line led by a fat arrow that is not a valid reaction

    ``component`` is one of ``'reactants'``, ``'=>'``, ``'products'``,
    ``','`` or ``'rate'``.
    """
    description = 'Malformed reaction'


class MalformedSpeciesCount(_ComponentError):
    """
    A ``name, count`` line whose count is missing or invalid

    ``component`` is one of ``'name'``, ``','`` or ``'count'``.
    """
    description = 'Malformed species count'


class UnrecognizedLine(ParseError):
    description = 'Unrecognized line'


class TrailingContent(ParseError):
    description = 'Trailing content'


class Parser(object):
    """
    Recursive descent parser over one input string

    Each ``parse_*`` method takes a start offset and returns a
    ``(value, end)`` pair, raising a :py:class:`ParseError` subclass if the
    construct is not found there. Offsets are plain integers, so a failed
    attempt leaves nothing behind for the next one.

    Parameters
    ----------
    text : string
        The reaction network text.
    name : string, optional
        Name given to the resulting document and prepended to log messages.
    """
    def __init__(self, text, name=None):
        self.text = text
        self.name = name
        self._log = get_logger(__name__,
                               document=self if name is not None else None)

    def _error(self, error_class, pos, expected, *args):
        return error_class(*(args + (expected, pos, self.text)))

    def _wrap(self, error_class, component, error):
        return error_class(component, error.expected, error.offset, self.text)

    def _scan_coefficient(self, pos):
        text = self.text
        if pos >= len(text) or text[pos] not in NONZERO_DIGITS:
            return None
        end = pos + 1
        while end < len(text) and text[end] in string.digits:
            end += 1
        return end

    def _scan_name(self, pos):
        end = pos
        while not lexer.at_name_boundary(self.text, end):
            end += 1
        return end

    def _coefficient_value(self, pos, end):
        try:
            return int(self.text[pos:end])
        except ValueError as e:
            # Python caps int() conversion of very long digit strings
            raise self._error(InvalidCoefficient, pos,
                              'a coefficient within integer limits') from e

    def parse_coefficient(self, pos):
        """Parse ``[1-9][0-9]*``."""
        end = self._scan_coefficient(pos)
        if end is None:
            raise self._error(InvalidCoefficient, pos,
                              'a positive integer without leading zeros')
        return self._coefficient_value(pos, end), end

    def parse_name(self, pos):
        """Parse a species name, which runs up to the next delimiter."""
        end = self._scan_name(pos)
        if end == pos:
            raise self._error(EmptyName, pos, 'a species name')
        return self.text[pos:end], end

    def parse_term(self, pos):
        """
        Parse ``coefficient name`` or a bare ``name``

        The coefficient form is tried first. ``2 A`` is two of ``A``, while
        ``2A`` (no space) is one of a species called ``2A``.
        """
        coefficient_end = self._scan_coefficient(pos)
        if coefficient_end is not None:
            name_start = lexer.space_delimiter(self.text, coefficient_end)
            if name_start is not None:
                name_end = self._scan_name(name_start)
                if name_end > name_start:
                    return Term(self._coefficient_value(pos, coefficient_end),
                                self.text[name_start:name_end]), name_end
        name, end = self.parse_name(pos)
        return Term(1, name), end

    def parse_term_list(self, pos):
        """
        Parse ``NULL`` or terms joined by ``+``

        Returns a tuple of :py:class:`crnparse.core.Term`, empty for
        ``NULL``.
        """
        name_end = self._scan_name(pos)
        if self.text[pos:name_end] == NULL_KEYWORD:
            return (), name_end
        try:
            term, end = self.parse_term(pos)
        except EmptyName as e:
            raise self._error(EmptyList, pos,
                              "'%s' or a species term" % NULL_KEYWORD) from e
        terms = [term]
        while True:
            next_term = lexer.plus_delimiter(self.text, end)
            if next_term is None:
                return tuple(terms), end
            term, end = self.parse_term(next_term)
            terms.append(term)

    def parse_reaction(self, pos):
        """Parse ``reactants => products, rate``."""
        try:
            reactants, end = self.parse_term_list(pos)
        except ParseError as e:
            raise self._wrap(MalformedReaction, 'reactants', e) from e

        products_start = lexer.fat_arrow_delimiter(self.text, end)
        if products_start is None:
            raise self._error(MalformedReaction, end, "'=>'", '=>')
        try:
            products, end = self.parse_term_list(products_start)
        except ParseError as e:
            raise self._wrap(MalformedReaction, 'products', e) from e

        rate_start = lexer.comma_delimiter(self.text, end)
        if rate_start is None:
            raise self._error(MalformedReaction, end, "',' before the rate",
                              ',')
        try:
            rate, end = self.parse_coefficient(rate_start)
        except InvalidCoefficient as e:
            raise self._wrap(MalformedReaction, 'rate', e) from e

        return Reaction(reactants, products, rate), end

    def parse_species_count(self, pos):
        """Parse ``name, count``."""
        try:
            name, end = self.parse_name(pos)
        except EmptyName as e:
            raise self._wrap(MalformedSpeciesCount, 'name', e) from e

        count_start = lexer.comma_delimiter(self.text, end)
        if count_start is None:
            raise self._error(MalformedSpeciesCount, end, "','", ',')
        try:
            count, end = self.parse_coefficient(count_start)
        except InvalidCoefficient as e:
            raise self._wrap(MalformedSpeciesCount, 'count', e) from e

        return SpeciesCount(name, count), end

    def _attempt_reaction(self, pos):
        # A fat arrow ahead of any comma commits the line to being a reaction
        if not lexer.is_reaction_line(self.text, pos):
            return None
        return self.parse_reaction(pos)

    def _attempt_species_count(self, pos):
        # "name," commits the line to being a species count
        name_end = self._scan_name(pos)
        if name_end == pos or \
                lexer.comma_delimiter(self.text, name_end) is None:
            return None
        return self.parse_species_count(pos)

    def parse_line(self, pos):
        """
        Parse one logical line, up to but not including its line break

        Returns ``(record, end)`` where record is None for a line holding
        only spaces, commas and comments.
        """
        start = lexer.skip_noise(self.text, pos)
        if lexer.at_line_end(self.text, start):
            return None, start

        parsed = self._attempt_reaction(start) or \
            self._attempt_species_count(start)
        if parsed is None:
            raise self._error(UnrecognizedLine, start,
                              'a reaction or a species count')

        record, end = parsed
        end = lexer.skip_noise(self.text, end)
        if not lexer.at_line_end(self.text, end):
            if self._content_follows(end):
                raise self._error(UnrecognizedLine, end,
                                  'a line break after the record')
            raise self._error(TrailingContent, end, 'end of input')
        return record, end

    def _content_follows(self, pos):
        """True if a later line has more than spaces, commas and comments."""
        pos = lexer.line_end(self.text, pos)
        while pos < len(self.text):
            pos = lexer.skip_noise(self.text,
                                   lexer.new_line_delimiter(self.text, pos))
            if not lexer.at_line_end(self.text, pos):
                return True
            pos = lexer.line_end(self.text, pos)
        return False

    def parse_document(self):
        """Parse the whole text into a :py:class:`crnparse.core.Document`."""
        records = []
        pos = 0
        line = 1
        while True:
            record, pos = self.parse_line(pos)
            if record is not None:
                self._log.log(EXTENDED_DEBUG, 'Line %d: %s', line, record)
                records.append(record)
            if pos >= len(self.text):
                break
            pos = lexer.new_line_delimiter(self.text, pos)
            line += 1

        document = Document(records, name=self.name)
        self._log.debug('Parsed %d lines into %d reactions and %d species '
                        'counts', line, len(document.reactions),
                        len(document.species_counts))
        return document


def parse(text, name=None):
    """
    Parse reaction network text

    Parameters
    ----------
    text : string
        The reaction network text.
    name : string, optional
        Name for the returned document.

    Returns
    -------
    crnparse.core.Document

    Raises
    ------
    ParseError
        A subclass identifying the first problem found.

    Examples
    --------

    >>> from crnparse import parse
    >>> doc = parse('2 A + B => C, 5\\nA, 100')
    >>> doc[0].reactants
    (Term(coefficient=2, name='A'), Term(coefficient=1, name='B'))
    >>> doc[1]
    SpeciesCount(name='A', count=100)
    """
    return Parser(text, name=name).parse_document()


def parse_coefficient(text):
    """
    Parse a whole string as a single coefficient

    >>> parse_coefficient('42')
    42
    """
    value, end = Parser(text).parse_coefficient(0)
    if end != len(text):
        raise InvalidCoefficient('a positive integer without leading zeros',
                                 end, text)
    return value
