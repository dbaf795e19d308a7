"""
Golden document tests.

Compares complete import documents against known-good output.
"""

import json

from asana_csv_import.converter import RecordMapper
from asana_csv_import.markup import identity_markup

from .fixtures import (
    GOLDEN_DOCUMENT_FULL,
    GOLDEN_DOCUMENT_MINIMAL,
    LINK_BASE,
    create_full_record,
    create_minimal_record,
)


class TestGoldenDocuments:
    def test_full_document(self):
        mapper = RecordMapper(link_base=LINK_BASE, markup_converter=identity_markup)

        result = mapper.map([create_full_record()])

        assert json.loads(result.to_json()) == GOLDEN_DOCUMENT_FULL

    def test_minimal_document(self):
        mapper = RecordMapper(markup_converter=identity_markup)

        result = mapper.map([create_minimal_record()])

        assert json.loads(result.to_json()) == GOLDEN_DOCUMENT_MINIMAL
