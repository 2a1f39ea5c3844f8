"""
Module containing a class for writing a document as canonical reaction
network text.

The canonical form writes one record per line, always spells out
coefficients, and uses single-space separators::

    2 A + 1 B => 1 C, 5
    A, 100
    NULL => 1 D, 1

Parsing the output again gives a document equal to the one exported.

For information on how to use the exporters, see the documentation
for :py:mod:`crnparse.export`.
"""

from crnparse.export import Exporter
from crnparse.core import Reaction
from crnparse.lexer import COMMENT_START
from crnparse.parser import NULL_KEYWORD


def format_terms(terms):
    if not terms:
        return NULL_KEYWORD
    return ' + '.join('%d %s' % (t.coefficient, t.name) for t in terms)


def format_record(record):
    """Canonical text for one Reaction or SpeciesCount."""
    if isinstance(record, Reaction):
        return '%s => %s, %d' % (format_terms(record.reactants),
                                 format_terms(record.products), record.rate)
    return '%s, %d' % (record.name, record.count)


class CrnExporter(Exporter):
    """A class for returning the canonical text for a given document.

    Inherits from :py:class:`crnparse.export.Exporter`, which implements
    basic functionality for all exporters.
    """
    def export(self):
        """Generate the canonical reaction network text for the document.

        Returns
        -------
        string
            The text, ending with a line break.
        """
        output = ''
        if self.docstring:
            for line in self.docstring.splitlines():
                output += ('%s %s' % (COMMENT_START, line)).rstrip() + '\n'
        for record in self.document:
            output += format_record(record) + '\n'
        return output
