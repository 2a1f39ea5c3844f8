"""
Tools for exporting parsed reaction network documents.

Export functionality is implemented by this module's top-level function
``export``. For example, to write a document back out as canonical reaction
network text, first parse it::

    from crnparse import parse
    document = parse(open('network.crn').read())

Then call ``export``, passing the document and a string indicating the
desired format::

    from crnparse.export import export
    crn_output = export(document, 'crn')

Supported formats:

- ``crn``: canonical reaction network text, see
  :py:mod:`crnparse.export.crn`
- ``json``: JSON, readable with :py:mod:`crnparse.importers.json`
"""

import importlib


class Exporter(object):
    """Base class for all document exporters.

    Export functionality is implemented by subclasses of this class. The
    pattern is the same for all exporter subclasses: a document is passed to
    the exporter constructor and the ``export`` method on the instance is
    called.

    Parameters
    ----------
    document : crnparse.core.Document
        The document to export.
    docstring : string (optional)
        The header comment to include at the top of the exported file.
    """

    def __init__(self, document, docstring=None):
        self.document = document
        """The document to export."""
        self.docstring = docstring
        """Header comment to include at the top of the exported file."""

    def export(self):
        """The export method, which must be implemented by any subclass.

        All implementations of this method are expected to return a single
        string containing the representation of the document in the desired
        format.
        """
        raise NotImplementedError()

# Define a dict listing supported formats and the names of the classes
# implementing their export procedures
formats = {
        'crn': 'CrnExporter',
        'json': 'JsonExporter',
        }


def export(document, format, docstring=None):
    """Top-level function for exporting a document to a given format.

    Parameters
    ----------
    document : crnparse.core.Document
        The document to export.
    format : string
        A string indicating the desired export format.
    docstring : string (optional)
        The header comment to include at the top of the exported file.
    """
    if format not in formats:
        raise ValueError('Unknown export format "%s". Supported formats: %s'
                         % (format, ', '.join(sorted(formats))))

    # Import the exporter module. This is done at export runtime to avoid
    # circular imports at module loading
    export_module = importlib.import_module('crnparse.export.' + format)
    export_class = getattr(export_module, formats[format])
    e = export_class(document, docstring)
    return e.export()
