"""Tests for document type detection."""

import pytest

from docmeta.model.metadata_bag import MetadataBag
from docmeta.model.records import DocumentType
from docmeta.steps.metadata.detector import DocumentTypeDetector


@pytest.fixture
def detector():
    return DocumentTypeDetector()


class TestMimeRules:
    """Classification by Content-Type."""

    @pytest.mark.parametrize("mime_type,expected", [
        ("application/pdf", DocumentType.PDF),
        ("image/jpeg", DocumentType.IMAGE),
        ("image/png; charset=binary", DocumentType.IMAGE),
        ("message/rfc822", DocumentType.EMAIL),
        ("multipart/signed", DocumentType.EMAIL),
        ("application/vnd.ms-outlook", DocumentType.EMAIL),
        ("application/mbox", DocumentType.EMAIL),
        ("audio/mpeg", DocumentType.MEDIA),
        ("video/mp4", DocumentType.MEDIA),
        ("text/html; charset=UTF-8", DocumentType.HTML),
        ("application/xhtml+xml", DocumentType.HTML),
        ("application/rtf", DocumentType.RTF),
        ("application/x-sqlite3", DocumentType.DATABASE),
        ("application/x-msaccess", DocumentType.DATABASE),
        ("application/vnd.ms-access", DocumentType.DATABASE),
        ("application/x-dbf", DocumentType.DATABASE),
        ("application/vnd.openxmlformats-officedocument.wordprocessingml.document", DocumentType.OFFICE),
        ("application/msword", DocumentType.OFFICE),
        ("application/vnd.ms-excel", DocumentType.OFFICE),
        ("application/vnd.oasis.opendocument.text", DocumentType.OFFICE),
        ("font/ttf", DocumentType.FONT),
        ("application/x-font-ttf", DocumentType.FONT),
        ("application/epub+zip", DocumentType.EPUB),
        ("application/warc", DocumentType.WARC),
        ("application/x-netcdf", DocumentType.CLIMATE_FORECAST),
        ("APPLICATION/PDF", DocumentType.PDF),
    ])
    def test_mime_type(self, detector, mime_type, expected):
        assert detector.detect(MetadataBag({"Content-Type": mime_type})) == expected

    def test_mime_wins_over_resource_name(self, detector):
        bag = MetadataBag({"Content-Type": "application/pdf", "resourceName": "photo.jpg"})

        assert detector.detect(bag) == DocumentType.PDF

    def test_unknown_mime_falls_through(self, detector):
        bag = MetadataBag({"Content-Type": "application/octet-stream", "resourceName": "song.mp3"})

        assert detector.detect(bag) == DocumentType.MEDIA


class TestFallbackRules:
    """Classification without a usable MIME type."""

    @pytest.mark.parametrize("parser,expected", [
        ("org.apache.tika.parser.pdf.PDFParser", DocumentType.PDF),
        ("org.apache.tika.parser.microsoft.ooxml.OOXMLParser", DocumentType.OFFICE),
        ("org.apache.tika.parser.microsoft.JackcessParser", DocumentType.DATABASE),
        ("org.apache.tika.parser.microsoft.OutlookPSTParser", DocumentType.EMAIL),
        ("org.apache.tika.parser.mail.RFC822Parser", DocumentType.EMAIL),
        ("org.apache.tika.parser.image.ImageParser", DocumentType.IMAGE),
        ("org.apache.tika.parser.html.JSoupParser", DocumentType.HTML),
        ("org.apache.tika.parser.font.TrueTypeParser", DocumentType.FONT),
        ("org.apache.tika.parser.epub.EpubParser", DocumentType.EPUB),
        ("org.apache.tika.parser.warc.WARCParser", DocumentType.WARC),
        ("org.apache.tika.parser.netcdf.NetCDFParser", DocumentType.CLIMATE_FORECAST),
    ])
    def test_parser_identifier(self, detector, parser, expected):
        bag = MetadataBag({"X-TIKA:Parsed-By": ["org.apache.tika.parser.DefaultParser", parser]})

        assert detector.detect(bag) == expected

    def test_most_specific_parser_first(self, detector):
        bag = MetadataBag({"X-TIKA:Parsed-By": [
            "org.apache.tika.parser.pdf.PDFParser",
            "org.apache.tika.parser.image.ImageParser",
        ]})

        assert detector.detect(bag) == DocumentType.IMAGE

    def test_warc_header_marker(self, detector):
        assert detector.detect(MetadataBag({"warc:WARC-Type": "response"})) == DocumentType.WARC

    def test_epub_marker(self, detector):
        assert detector.detect(MetadataBag({"epub:version": "3.0"})) == DocumentType.EPUB

    def test_cf_conventions_marker(self, detector):
        assert detector.detect(MetadataBag({"Conventions": "CF-1.6"})) == DocumentType.CLIMATE_FORECAST
        assert detector.detect(MetadataBag({"Conventions": "COARDS"})) == DocumentType.GENERIC

    @pytest.mark.parametrize("name,expected", [
        ("report.PDF", DocumentType.PDF),
        ("slides.pptx", DocumentType.OFFICE),
        ("photo.jpeg", DocumentType.IMAGE),
        ("mail.eml", DocumentType.EMAIL),
        ("clip.mov", DocumentType.MEDIA),
        ("index.htm", DocumentType.HTML),
        ("letter.rtf", DocumentType.RTF),
        ("store.sqlite", DocumentType.DATABASE),
        ("Inter.woff2", DocumentType.FONT),
        ("book.epub", DocumentType.EPUB),
        ("crawl.warc", DocumentType.WARC),
        ("tas_day.nc", DocumentType.CLIMATE_FORECAST),
    ])
    def test_resource_name(self, detector, name, expected):
        assert detector.detect(MetadataBag({"resourceName": name})) == expected

    def test_creative_commons(self, detector):
        bag = MetadataBag({"cc:license": "Creative Commons Attribution 4.0"})

        assert detector.detect(bag) == DocumentType.CREATIVE_COMMONS

    def test_rights_field_without_creative_value(self, detector):
        assert detector.detect(MetadataBag({"dc:rights": "All rights reserved"})) == DocumentType.GENERIC

    def test_generic_default(self, detector, generic_bag):
        assert detector.detect(generic_bag) == DocumentType.GENERIC
        assert detector.detect(MetadataBag()) == DocumentType.GENERIC


class TestContract:
    """Totality and determinism."""

    def test_deterministic(self, detector, pdf_bag):
        assert {detector.detect(pdf_bag) for _ in range(5)} == {DocumentType.PDF}

    @pytest.mark.parametrize("bad", [None, {"Content-Type": "application/pdf"}])
    def test_rejects_non_bag(self, detector, bad):
        with pytest.raises(TypeError):
            detector.detect(bad)
