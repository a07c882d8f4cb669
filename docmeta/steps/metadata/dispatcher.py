from typing import Mapping, Optional

from docmeta.logging import get_logger
from docmeta.model.metadata_bag import MetadataBag
from docmeta.model.records import (
    CreativeCommonsMetadata,
    DocumentContent,
    DocumentType,
    StructuredDocumentRecord,
)
from docmeta.steps.metadata import properties as P
from docmeta.steps.metadata.builders import BUILDERS, BaseMetadataBuilder
from docmeta.steps.metadata.detector import DocumentTypeDetector
from docmeta.steps.metadata.dublin_core import DublinCoreMapper
from docmeta.xmp.rights import RightsExtractor, XmpPacket, apply_rights


def has_rights_markers(bag: MetadataBag) -> bool:
    """True when any field name looks like an XMP rights property."""
    return any(marker in name.lower() for name in bag for marker in P.RIGHTS_MARKERS)


class ExtractionDispatcher:
    """
    Turns one metadata bag into one structured record.

    Detection runs once; the detected type selects the builder and guards the
    Creative Commons overlay. The overlay is best-effort: any failure while
    building it is logged and the record is returned without it.
    """

    def __init__(
        self,
        detector: Optional[DocumentTypeDetector] = None,
        dublin_core: Optional[DublinCoreMapper] = None,
        builders: Optional[Mapping[DocumentType, BaseMetadataBuilder]] = None,
        rights_extractor: Optional[RightsExtractor] = None,
    ):
        self.detector = detector or DocumentTypeDetector()
        self.dublin_core = dublin_core or DublinCoreMapper()
        self.builders = builders or BUILDERS
        self.rights_extractor = rights_extractor or RightsExtractor()
        self.logger = get_logger(self.__class__.__name__)

    def extract(
        self,
        bag: MetadataBag,
        body_text: Optional[str] = None,
        engine_version: str = "unknown",
        doc_id: Optional[str] = None,
        parser_id: Optional[str] = None,
        xmp_packet: Optional[XmpPacket] = None,
    ) -> StructuredDocumentRecord:
        """
        Build the structured record for one document.

        Args:
            bag: Metadata produced by the upstream engine
            body_text: Plain-text body produced by the upstream engine
            engine_version: Version string of the upstream engine
            doc_id: Caller's document identifier
            parser_id: Upstream parser identifier; defaults to the last ``X-TIKA:Parsed-By`` value
            xmp_packet: Embedded XMP packet whose rights properties are merged into the bag first

        Returns:
            StructuredDocumentRecord with exactly one primary metadata variant

        Raises:
            TypeError: If ``bag`` is not a MetadataBag
        """
        if not isinstance(bag, MetadataBag):
            raise TypeError(f"expected MetadataBag, got {type(bag).__name__}")

        if xmp_packet is not None:
            bag = self._merge_rights(bag, xmp_packet)

        document_type = self.detector.detect(bag)
        if parser_id is None:
            parsers = bag.get_values(P.PARSED_BY)
            parser_id = parsers[-1] if parsers else None

        content = DocumentContent(body=body_text, content_length=self._content_length(bag))
        dublin_core = self.dublin_core.map(bag)
        metadata = self.builders[document_type].build(bag, parser_id, engine_version)
        overlay = self._rights_overlay(bag, document_type, parser_id, engine_version)

        self.logger.debug(
            f"Extracted {document_type.name} record for {doc_id or 'document'}"
            f"{' with rights overlay' if overlay is not None else ''}"
        )
        return StructuredDocumentRecord(
            doc_id=doc_id,
            content=content,
            dublin_core=dublin_core,
            metadata=metadata,
            creative_commons=overlay,
        )

    def _content_length(self, bag: MetadataBag) -> Optional[int]:
        raw = bag.get_first(P.CONTENT_LENGTH)
        if raw is None or not raw.strip():
            return None
        try:
            return int(raw.strip())
        except ValueError:
            self.logger.warning(f"Ignoring malformed {P.CONTENT_LENGTH}: {raw!r}")
            return None

    def _merge_rights(self, bag: MetadataBag, xmp_packet: XmpPacket) -> MetadataBag:
        try:
            return apply_rights(bag, self.rights_extractor.extract(xmp_packet))
        except Exception as e:
            self.logger.warning(f"Skipping XMP rights extraction: {e}")
            return bag

    def _rights_overlay(
        self,
        bag: MetadataBag,
        document_type: DocumentType,
        parser_id: Optional[str],
        engine_version: str,
    ) -> Optional[CreativeCommonsMetadata]:
        if document_type == DocumentType.CREATIVE_COMMONS:
            return None
        try:
            if not has_rights_markers(bag):
                return None
            return self.builders[DocumentType.CREATIVE_COMMONS].build(bag, parser_id, engine_version)
        except Exception as e:
            self.logger.warning(f"Skipping Creative Commons overlay: {e}")
            return None
