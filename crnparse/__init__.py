__version__ = '0.1.0'

from crnparse.core import Term, Reaction, SpeciesCount, Document
from crnparse.parser import parse, Parser, ParseError, InvalidCoefficient, \
    EmptyName, EmptyList, MalformedReaction, MalformedSpeciesCount, \
    UnrecognizedLine, TrailingContent

__all__ = ['Term', 'Reaction', 'SpeciesCount', 'Document', 'parse', 'Parser',
           'ParseError', 'InvalidCoefficient', 'EmptyName', 'EmptyList',
           'MalformedReaction', 'MalformedSpeciesCount', 'UnrecognizedLine',
           'TrailingContent']
