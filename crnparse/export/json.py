"""
Module containing a class for exporting a document to JSON

For information on how to use the exporters, see the documentation
for :py:mod:`crnparse.export`.
"""

from crnparse.export import Exporter
from crnparse.core import Document, Reaction, SpeciesCount
import json


class JsonExporter(Exporter):
    """A class for returning the JSON for a given document.

    Inherits from :py:class:`crnparse.export.Exporter`, which implements
    basic functionality for all exporters.
    """

    def export(self):
        """Generate the corresponding JSON for the document associated
        with the exporter.

        Returns
        -------
        string
            The JSON output for the document.
        """
        return json.dumps(self.document, cls=CrnJSONEncoder,
                          docstring=self.docstring)


class CrnJSONEncoder(json.JSONEncoder):
    """
    Encode a reaction network document in JSON

    Records are stored in source order, each tagged with its ``type``
    (``reaction`` or ``species_count``). Terms are stored as
    ``[coefficient, name]`` pairs.

    The protocol number (currently: 1) specifies semantic compatibility, and
    should be incremented if new features are added which prevent a document
    being loaded by :py:class:`crnparse.importers.json.CrnJSONDecoder`.
    """
    PROTOCOL = 1

    def __init__(self, docstring=None, **kwargs):
        super(CrnJSONEncoder, self).__init__(**kwargs)
        self.docstring = docstring

    @classmethod
    def encode_terms(cls, terms):
        return [[t.coefficient, t.name] for t in terms]

    @classmethod
    def encode_reaction(cls, rxn):
        return {
            'type': 'reaction',
            'reactants': cls.encode_terms(rxn.reactants),
            'products': cls.encode_terms(rxn.products),
            'rate': rxn.rate
        }

    @classmethod
    def encode_species_count(cls, sc):
        return {
            'type': 'species_count',
            'name': sc.name,
            'count': sc.count
        }

    def encode_document(self, document):
        records = []
        for record in document:
            if isinstance(record, Reaction):
                records.append(self.encode_reaction(record))
            else:
                records.append(self.encode_species_count(record))
        return {
            'protocol': self.PROTOCOL,
            'name': document.name,
            'docstring': self.docstring,
            'records': records
        }

    def default(self, o):
        if isinstance(o, Document):
            return self.encode_document(o)

        return super(CrnJSONEncoder, self).default(o)
