"""
Record types produced by :py:func:`crnparse.parse`.

A parsed reaction network is a :py:class:`Document`: an ordered, immutable
sequence of :py:class:`Reaction` and :py:class:`SpeciesCount` records, in the
order they appeared in the source text. Records are never merged or
deduplicated, so two counts for the same species both survive parsing.
"""

import collections


class Term(collections.namedtuple('Term', ['coefficient', 'name'])):
    """
    A species name with its stoichiometric coefficient

    Compares equal to a plain ``(coefficient, name)`` tuple.
    """
    __slots__ = ()


class Reaction(collections.namedtuple('Reaction',
                                      ['reactants', 'products', 'rate'])):
    """
    A reaction: reactant terms, product terms and an integer rate constant

    Either side may be empty (written ``NULL`` in source text), which
    describes a source or sink reaction.

    Parameters
    ----------
    reactants : iterable of Term or (coefficient, name) tuples
    products : iterable of Term or (coefficient, name) tuples
    rate : int
        Positive rate constant.

    Examples
    --------

    >>> r = Reaction([], [(1, 'D')], 1)
    >>> r.is_source, r.is_sink
    (True, False)
    """
    __slots__ = ()

    def __new__(cls, reactants, products, rate):
        return super(Reaction, cls).__new__(
            cls,
            tuple(Term(*t) for t in reactants),
            tuple(Term(*t) for t in products),
            rate
        )

    @property
    def is_source(self):
        """True if the reaction has no reactants."""
        return not self.reactants

    @property
    def is_sink(self):
        """True if the reaction has no products."""
        return not self.products


class SpeciesCount(collections.namedtuple('SpeciesCount', ['name', 'count'])):
    """ Initial particle count for a species """
    __slots__ = ()


class Document(object):
    """
    An ordered collection of parsed records

    Parameters
    ----------
    records : iterable of Reaction or SpeciesCount
        The records in source order.
    name : string, optional
        A label for the document, used in log messages and export headers.
        Not part of equality.
    """
    _record_types = (Reaction, SpeciesCount)

    def __init__(self, records=(), name=None):
        records = tuple(records)
        for record in records:
            if not isinstance(record, self._record_types):
                raise TypeError('Document records must be Reaction or '
                                'SpeciesCount instances, not %s' %
                                type(record).__name__)
        self._records = records
        self.name = name

    @property
    def records(self):
        return self._records

    @property
    def reactions(self):
        """Tuple of the Reaction records, in source order."""
        return tuple(r for r in self._records if isinstance(r, Reaction))

    @property
    def species_counts(self):
        """Tuple of the SpeciesCount records, in source order."""
        return tuple(r for r in self._records if isinstance(r, SpeciesCount))

    @property
    def species(self):
        """
        Names of all species mentioned by any record

        Listed once each, in order of first appearance.
        """
        names = collections.OrderedDict()
        for record in self._records:
            if isinstance(record, SpeciesCount):
                names[record.name] = None
            else:
                for term in record.reactants + record.products:
                    names[term.name] = None
        return tuple(names)

    def __len__(self):
        return len(self._records)

    def __iter__(self):
        return iter(self._records)

    def __getitem__(self, index):
        return self._records[index]

    def __eq__(self, other):
        if not isinstance(other, Document):
            return NotImplemented
        return self._records == other._records

    def __hash__(self):
        return hash(self._records)

    def __repr__(self):
        value = '%s(%s' % (self.__class__.__name__, repr(list(self._records)))
        if self.name is not None:
            value += ', name=%s' % repr(self.name)
        value += ')'
        return value
