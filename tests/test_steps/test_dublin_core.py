"""Tests for Dublin Core mapping."""

from datetime import datetime, timezone

import pytest

from docmeta.model.metadata_bag import MetadataBag
from docmeta.steps.metadata.dublin_core import DublinCoreMapper


@pytest.fixture
def mapper():
    return DublinCoreMapper()


class TestDublinCoreMapper:
    """Test cases for DublinCoreMapper."""

    def test_all_elements(self, mapper):
        bag = MetadataBag({
            "dc:title": "Report",
            "dc:creator": ["Alice", "Bob"],
            "dc:subject": ["climate", "ocean"],
            "dc:description": "Annual report",
            "dc:publisher": "ESA",
            "dc:contributor": ["Carol"],
            "dc:date": "2021-03-04T05:06:07Z",
            "dc:type": "Text",
            "dc:format": "application/pdf",
            "dc:identifier": "doi:10.1/abc",
            "dc:source": "archive",
            "dc:language": "en",
            "dc:relation": "series-1",
            "dc:coverage": "Europe",
            "dc:rights": "CC BY",
        })

        dc = mapper.map(bag)

        assert dc.title == "Report"
        assert dc.creators == ["Alice", "Bob"]
        assert dc.subjects == ["climate", "ocean"]
        assert dc.contributors == ["Carol"]
        assert dc.publisher == "ESA"
        assert dc.date == datetime(2021, 3, 4, 5, 6, 7, tzinfo=timezone.utc)
        assert (dc.type, dc.format, dc.identifier) == ("Text", "application/pdf", "doi:10.1/abc")
        assert (dc.source, dc.language, dc.relation, dc.coverage, dc.rights) == ("archive", "en", "series-1", "Europe", "CC BY")

    def test_values_are_trimmed_and_blanks_absent(self, mapper):
        bag = MetadataBag({"dc:title": "  Spaced  ", "dc:description": "   ", "dc:creator": [" A ", " ", "B"]})

        dc = mapper.map(bag)

        assert dc.title == "Spaced"
        assert dc.description is None
        assert dc.creators == ["A", "B"]

    def test_malformed_date_is_omitted(self, mapper):
        dc = mapper.map(MetadataBag({"dc:title": "x", "dc:date": "sometime"}))

        assert dc.date is None
        assert dc.title == "x"

    @pytest.mark.parametrize("value,expected", [
        ("2021", datetime(2021, 1, 1, tzinfo=timezone.utc)),
        ("2021-06", datetime(2021, 6, 1, tzinfo=timezone.utc)),
    ])
    def test_reduced_precision_dates(self, mapper, value, expected):
        dc = mapper.map(MetadataBag({"dc:date": value}))

        assert dc.date == expected

    def test_short_number_date_is_omitted(self, mapper):
        assert mapper.map(MetadataBag({"dc:date": "12345"})).date is None

    def test_empty_bag(self, mapper):
        dc = mapper.map(MetadataBag())

        assert dc.title is None
        assert dc.creators == []

    def test_idempotent(self, mapper, pdf_bag):
        first = mapper.map(pdf_bag)
        second = mapper.map(pdf_bag)

        assert first == second
        assert first.model_dump_json() == second.model_dump_json()

    def test_rejects_none(self, mapper):
        with pytest.raises(TypeError):
            mapper.map(None)
