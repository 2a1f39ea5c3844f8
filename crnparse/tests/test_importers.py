import json
import pytest
from crnparse import parse
from crnparse.export import export
from crnparse.importers.json import document_from_json, CrnJSONDecodeError


def test_import_keeps_name():
    doc = parse('A => B, 1\nA, 5', name='named')
    reread = document_from_json(export(doc, 'json'))
    assert reread == doc
    assert reread.name == 'named'


def _document_json(records, protocol=1):
    return json.dumps({'protocol': protocol, 'name': None,
                       'records': records})


@pytest.mark.parametrize('json_str', [
    '[]',
    '{"records": []}',
    '{"protocol": "1", "records": []}',
    _document_json([], protocol=2),
    _document_json([{'type': 'rule'}]),
    _document_json([['reaction']]),
    _document_json([{'type': 'reaction', 'reactants': [],
                     'products': []}]),
    _document_json([{'type': 'reaction', 'reactants': [[0, 'A']],
                     'products': [], 'rate': 1}]),
    _document_json([{'type': 'reaction', 'reactants': [[1, 'A', 2]],
                     'products': [], 'rate': 1}]),
    _document_json([{'type': 'reaction', 'reactants': [],
                     'products': [], 'rate': 1.5}]),
    _document_json([{'type': 'species_count', 'name': 'A',
                     'count': True}]),
    _document_json([{'type': 'species_count', 'name': 'A',
                     'count': -3}]),
    _document_json([{'type': 'reaction', 'reactants': [[1, '']],
                     'products': [], 'rate': 1}]),
    _document_json([{'type': 'reaction', 'reactants': [[1, 'A B']],
                     'products': [], 'rate': 1}]),
    _document_json([{'type': 'reaction', 'reactants': [],
                     'products': [[1, 'x,y']], 'rate': 1}]),
    _document_json([{'type': 'reaction', 'reactants': [],
                     'products': [[1, 'A=>B']], 'rate': 1}]),
    _document_json([{'type': 'reaction', 'reactants': [[1, 5]],
                     'products': [], 'rate': 1}]),
    _document_json([{'type': 'species_count', 'name': 'a//b',
                     'count': 1}]),
    _document_json([{'type': 'species_count', 'name': 'A\nB',
                     'count': 1}]),
    _document_json([{'type': 'species_count', 'name': None,
                     'count': 1}]),
])
def test_import_errors(json_str):
    with pytest.raises(CrnJSONDecodeError):
        document_from_json(json_str)


def test_import_errors_are_value_errors():
    with pytest.raises(ValueError):
        document_from_json(_document_json([{'type': 'bogus'}]))


def test_import_accepts_parseable_names():
    names = ['A=B', 'H2O/l', '2A', 'NULL', 'x_1']
    records = [{'type': 'species_count', 'name': n, 'count': 1}
               for n in names]
    doc = document_from_json(_document_json(records))
    assert [sc.name for sc in doc.species_counts] == names
    assert parse(export(doc, 'crn')) == doc


def test_import_bad_name_chains_parse_error():
    with pytest.raises(CrnJSONDecodeError) as exc:
        document_from_json(_document_json(
            [{'type': 'species_count', 'name': '', 'count': 1}]))
    assert isinstance(exc.value.__cause__, ValueError)
