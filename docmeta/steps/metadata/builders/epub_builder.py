from typing import Any, Dict

from docmeta.model.records import EpubMetadata
from docmeta.steps.metadata import properties as P
from docmeta.steps.metadata.builders.base_builder import BaseMetadataBuilder
from docmeta.steps.metadata.field_mapper import FieldMapper


class EpubMetadataBuilder(BaseMetadataBuilder):
    record_class = EpubMetadata

    def _map_fields(self, mapper: FieldMapper) -> Dict[str, Any]:
        return {
            "rendition_layout": mapper.string(P.EPUB_RENDITION_LAYOUT),
            "version": mapper.string(P.EPUB_VERSION),
            "content_language": mapper.string(P.DC_LANGUAGE),
            "unique_identifier": mapper.string(P.DC_IDENTIFIER),
        }
