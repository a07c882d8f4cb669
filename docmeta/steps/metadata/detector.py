"""
Document type classification from upstream metadata.

Rules are evaluated by priority, first match wins:

1. MIME type (``Content-Type``)
2. parser identifiers (``X-TIKA:Parsed-By``), most specific parser first
3. format-specific field markers (WARC headers, EPUB fields, CF conventions)
4. resource name extension
5. Creative Commons license values
6. GENERIC
"""

from typing import NamedTuple, Optional, Tuple

from docmeta.logging import get_logger
from docmeta.model.metadata_bag import MetadataBag
from docmeta.model.records import DocumentType
from docmeta.steps.metadata import properties as P


class MimeRule(NamedTuple):
    document_type: DocumentType
    contains: Tuple[str, ...] = ()
    prefixes: Tuple[str, ...] = ()

    def matches(self, mime_type: str) -> bool:
        return mime_type.startswith(self.prefixes) or any(token in mime_type for token in self.contains)


# database and email come before the broad "vnd.ms-" office rule
MIME_RULES: Tuple[MimeRule, ...] = (
    MimeRule(DocumentType.PDF, contains=("pdf",)),
    MimeRule(DocumentType.IMAGE, prefixes=("image/",)),
    MimeRule(DocumentType.EMAIL, contains=("message/", "multipart/", "application/vnd.ms-outlook", "application/mbox")),
    MimeRule(DocumentType.MEDIA, prefixes=("audio/", "video/"), contains=("multimedia",)),
    MimeRule(DocumentType.HTML, contains=("text/html", "application/xhtml")),
    MimeRule(DocumentType.RTF, contains=("rtf",)),
    MimeRule(
        DocumentType.DATABASE,
        contains=(
            "application/vnd.ms-access",
            "application/x-msaccess",
            "application/x-sqlite3",
            "application/vnd.sqlite3",
            "application/dbf",
            "application/x-dbf",
            "database",
        ),
    ),
    MimeRule(
        DocumentType.OFFICE,
        contains=(
            "officedocument",
            "msword",
            "ms-excel",
            "ms-powerpoint",
            "opendocument",
            "vnd.ms-",
            "vnd.openxmlformats",
        ),
    ),
    MimeRule(DocumentType.FONT, contains=("font/", "application/font", "application/x-font")),
    MimeRule(DocumentType.EPUB, contains=("epub",)),
    MimeRule(DocumentType.WARC, contains=("warc",)),
    MimeRule(DocumentType.CLIMATE_FORECAST, contains=("netcdf",)),
)

# lower-cased substrings of upstream parser class names
PARSER_RULES: Tuple[Tuple[DocumentType, Tuple[str, ...]], ...] = (
    (DocumentType.PDF, ("pdfparser", ".pdf.")),
    (DocumentType.IMAGE, (".image.", "imageparser", "jpegparser", "tiffparser")),
    (DocumentType.EMAIL, (".mail.", ".mbox.", "outlook", "rfc822")),
    (DocumentType.MEDIA, (".mp3.", ".mp4.", ".audio.", ".video.", "flacparser", "oggparser")),
    (DocumentType.HTML, (".html.", "htmlparser")),
    (DocumentType.RTF, ("rtfparser", ".rtf.")),
    (DocumentType.DATABASE, ("jackcess", "sqlite", "jdbc", "dbfparser")),
    (DocumentType.OFFICE, (".microsoft.", ".odf.", "ooxml", "officeparser", "opendocument")),
    (DocumentType.FONT, (".font.", "truetypeparser", "adobefontmetric")),
    (DocumentType.EPUB, ("epubparser", ".epub.")),
    (DocumentType.WARC, ("warcparser", ".warc.")),
    (DocumentType.CLIMATE_FORECAST, ("netcdfparser", ".netcdf.", "hdfparser", ".hdf.")),
)

EXTENSION_RULES: Tuple[Tuple[DocumentType, Tuple[str, ...]], ...] = (
    (DocumentType.PDF, (".pdf",)),
    (DocumentType.OFFICE, (".doc", ".docx", ".xls", ".xlsx", ".ppt", ".pptx", ".odt", ".ods", ".odp")),
    (DocumentType.IMAGE, (".jpg", ".jpeg", ".png", ".gif", ".tiff", ".tif", ".bmp")),
    (DocumentType.EMAIL, (".eml", ".msg", ".mbox")),
    (DocumentType.MEDIA, (".mp3", ".mp4", ".avi", ".wav", ".flac", ".mov")),
    (DocumentType.HTML, (".html", ".htm", ".xhtml")),
    (DocumentType.RTF, (".rtf",)),
    (DocumentType.DATABASE, (".mdb", ".accdb", ".sqlite", ".db", ".dbf")),
    (DocumentType.FONT, (".ttf", ".ttc", ".otf", ".woff", ".woff2", ".afm", ".pfa", ".pfb")),
    (DocumentType.EPUB, (".epub",)),
    (DocumentType.WARC, (".warc", ".arc")),
    (DocumentType.CLIMATE_FORECAST, (".nc", ".netcdf")),
)


class DocumentTypeDetector:
    """Deterministic, side-effect free classifier over a fixed rule table."""

    def __init__(self):
        self.logger = get_logger(self.__class__.__name__)

    def detect(self, bag: MetadataBag) -> DocumentType:
        """
        Classify a bag into exactly one document type.

        Args:
            bag: Metadata produced by the upstream engine

        Returns:
            The first matching document type, GENERIC when nothing matches
        """
        if not isinstance(bag, MetadataBag):
            raise TypeError(f"expected MetadataBag, got {type(bag).__name__}")

        for source, document_type in (
            ("MIME type", self._by_mime_type(bag)),
            ("parser", self._by_parser(bag)),
            ("field markers", self._by_field_markers(bag)),
            ("resource name", self._by_resource_name(bag)),
        ):
            if document_type is not None:
                self.logger.debug(f"Detected {document_type.name} document by {source}")
                return document_type

        if self.has_creative_commons_license(bag):
            self.logger.debug("Detected Creative Commons metadata")
            return DocumentType.CREATIVE_COMMONS

        self.logger.debug("Using GENERIC document type")
        return DocumentType.GENERIC

    def _by_mime_type(self, bag: MetadataBag) -> Optional[DocumentType]:
        mime_type = bag.get_first(P.CONTENT_TYPE)
        if not mime_type or not mime_type.strip():
            return None
        mime_type = mime_type.strip().lower()
        for rule in MIME_RULES:
            if rule.matches(mime_type):
                return rule.document_type
        return None

    def _by_parser(self, bag: MetadataBag) -> Optional[DocumentType]:
        for parser in reversed(bag.get_values(P.PARSED_BY)):
            parser = parser.lower()
            for document_type, tokens in PARSER_RULES:
                if any(token in parser for token in tokens):
                    return document_type
        return None

    def _by_field_markers(self, bag: MetadataBag) -> Optional[DocumentType]:
        if any(name.startswith(P.WARC_PREFIX) for name in bag):
            return DocumentType.WARC
        if P.EPUB_VERSION in bag or P.EPUB_RENDITION_LAYOUT in bag:
            return DocumentType.EPUB
        conventions = bag.get_first(P.CF_CONVENTIONS)
        if conventions and conventions.strip().upper().startswith("CF"):
            return DocumentType.CLIMATE_FORECAST
        return None

    def _by_resource_name(self, bag: MetadataBag) -> Optional[DocumentType]:
        resource_name = bag.get_first(P.RESOURCE_NAME)
        if not resource_name:
            return None
        resource_name = resource_name.strip().lower()
        for document_type, extensions in EXTENSION_RULES:
            if resource_name.endswith(extensions):
                return document_type
        return None

    @staticmethod
    def has_creative_commons_license(bag: MetadataBag) -> bool:
        """A license-like field whose first value mentions Creative Commons."""
        for name in bag:
            lowered = name.lower()
            if not any(marker in lowered for marker in P.LICENSE_FIELD_MARKERS):
                continue
            value = bag.get_first(name)
            if value and "creative" in value.lower():
                return True
        return False
