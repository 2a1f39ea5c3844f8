from json import JSONDecoder
import json
from collections.abc import Mapping
from crnparse.core import Document, Reaction, SpeciesCount, Term
from crnparse.logging import get_logger
from crnparse.parser import Parser, ParseError


class CrnJSONDecodeError(ValueError):
    pass


class CrnJSONDecoder(JSONDecoder):
    """
    Decode a JSON-encoded reaction network document

    See :py:mod:`crnparse.export.json` for implementation details.
    """
    MAX_SUPPORTED_PROTOCOL = 1

    def __init__(self, **kwargs):
        super(CrnJSONDecoder, self).__init__(**kwargs)
        self._log = get_logger(__name__)

    @classmethod
    def _check_positive_int(cls, value, what):
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise CrnJSONDecodeError('%s must be a positive integer, not %r'
                                     % (what, value))
        return value

    @classmethod
    def _check_name(cls, name, what):
        """Accept only names that parse back as one whole species name."""
        if isinstance(name, str):
            try:
                if Parser(name).parse_name(0) == (name, len(name)):
                    return name
            except ParseError as e:
                raise CrnJSONDecodeError('%s must not be empty' % what) from e
        raise CrnJSONDecodeError('%s is not a valid species name: %r'
                                 % (what, name))

    def decode_terms(self, terms):
        decoded = []
        for term in terms:
            try:
                coefficient, name = term
            except (TypeError, ValueError) as e:
                raise CrnJSONDecodeError('Invalid term: %r' % (term, )) from e
            decoded.append(Term(
                self._check_positive_int(coefficient, 'Term coefficient'),
                self._check_name(name, 'Term name')))
        return decoded

    def decode_reaction(self, rxn):
        return Reaction(self.decode_terms(rxn['reactants']),
                        self.decode_terms(rxn['products']),
                        self._check_positive_int(rxn['rate'], 'Reaction rate'))

    def decode_species_count(self, sc):
        return SpeciesCount(self._check_name(sc['name'], 'Species name'),
                            self._check_positive_int(sc['count'],
                                                     'Species count'))

    def decode_record(self, record):
        decoders = {
            'reaction': self.decode_reaction,
            'species_count': self.decode_species_count
        }
        if not isinstance(record, Mapping):
            raise CrnJSONDecodeError('Record is not a JSON object: %r' %
                                     (record, ))
        try:
            decoder = decoders[record['type']]
        except KeyError:
            raise CrnJSONDecodeError('Unknown record type: %r' %
                                     (record.get('type'), ))
        try:
            return decoder(record)
        except KeyError as e:
            raise CrnJSONDecodeError('Record %r is missing field %s' %
                                     (record, e)) from e

    def decode(self, s):
        res = super(CrnJSONDecoder, self).decode(s)

        if not isinstance(res, Mapping):
            raise CrnJSONDecodeError('Decode error (not a JSON object)')

        if 'protocol' not in res:
            raise CrnJSONDecodeError(
                'No "protocol" entry found - is this a crnparse document?')
        if not isinstance(res['protocol'], int):
            raise CrnJSONDecodeError('"protocol" attribute is not an integer')

        if res['protocol'] > self.MAX_SUPPORTED_PROTOCOL:
            raise CrnJSONDecodeError(
                'Unsupported protocol version {}; maximum supported is '
                '{}. Upgrade crnparse to import this document.'.format(
                    res['protocol'], self.MAX_SUPPORTED_PROTOCOL))

        records = [self.decode_record(r) for r in res.get('records', [])]
        self._log.debug('Decoded %d records from JSON', len(records))
        return Document(records, name=res.get('name'))


def document_from_json(json_str):
    """
    Create a Document from a JSON string

    Parameters
    ----------
    json_str : str
        JSON string produced by :py:mod:`crnparse.export.json`

    Returns
    -------
    crnparse.core.Document
    """
    return json.loads(json_str, cls=CrnJSONDecoder)
