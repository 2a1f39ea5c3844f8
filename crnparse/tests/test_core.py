import pytest
from crnparse.core import Document, Reaction, SpeciesCount, Term


def test_term_is_a_pair():
    t = Term(2, 'A')
    assert t == (2, 'A')
    assert t.coefficient == 2
    assert t.name == 'A'


def test_reaction_converts_terms():
    r = Reaction([(2, 'A'), Term(1, 'B')], [[1, 'C']], 5)
    assert isinstance(r.reactants, tuple)
    assert all(isinstance(t, Term) for t in r.reactants + r.products)
    assert r.products == (Term(1, 'C'), )
    assert hash(r) == hash(Reaction([(2, 'A'), (1, 'B')], [(1, 'C')], 5))


def test_document_sequence():
    records = [SpeciesCount('A', 1), Reaction([], [(1, 'A')], 3)]
    doc = Document(records, name='doc')
    assert len(doc) == 2
    assert list(doc) == records
    assert doc[1].rate == 3
    assert doc.reactions == (records[1], )
    assert doc.species_counts == (records[0], )
    assert doc.species == ('A', )


def test_document_equality_ignores_name():
    a = Document([SpeciesCount('A', 1)], name='a')
    b = Document([SpeciesCount('A', 1)], name='b')
    assert a == b
    assert hash(a) == hash(b)
    assert a != Document()
    assert a != [SpeciesCount('A', 1)]


def test_document_rejects_other_records():
    with pytest.raises(TypeError):
        Document([('A', 1)])


def test_document_repr():
    assert repr(Document()) == 'Document([])'
    assert repr(Document([SpeciesCount('A', 1)], name='x')) == \
        "Document([SpeciesCount(name='A', count=1)], name='x')"
