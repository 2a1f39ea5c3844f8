from crnparse.parser import parse
from crnparse.export import export
from crnparse.importers.json import document_from_json


def check_document_against_record_list(document, record_list):
    """Check the records of the given document against the provided list
    of records, asserting that they are equal. Useful for testing a parse
    against a hand-written expected result.

    Compares the repr() of each record so a failure names both sides.
    """
    assert len(document) == len(record_list), \
           "Document %s does not have the same number of records as the " \
           "expected list. Expected %d records, document has %d." % \
           (document.name, len(record_list), len(document))

    for i, expected in enumerate(record_list):
        record_str = repr(document[i])
        expected_str = repr(expected)
        assert record_str == expected_str, \
               "Document %s does not match expected records: " \
               "Mismatch at record %d: %s expected, %s parsed." \
               % (document.name, i, expected_str, record_str)


def check_roundtrip(document, format='crn'):
    """Export a document and read it back, asserting nothing changed.

    Supports the ``crn`` and ``json`` formats. Returns the exported text.
    """
    exported = export(document, format)
    if format == 'crn':
        reread = parse(exported, name=document.name)
    elif format == 'json':
        reread = document_from_json(exported)
    else:
        raise ValueError('No reader for format "%s"' % format)
    check_document_against_record_list(reread, list(document))
    return exported
