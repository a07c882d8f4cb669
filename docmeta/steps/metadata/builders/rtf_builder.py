from typing import Any, Dict

from docmeta.model.records import RtfMetadata
from docmeta.steps.metadata import properties as P
from docmeta.steps.metadata.builders.base_builder import BaseMetadataBuilder
from docmeta.steps.metadata.field_mapper import FieldMapper

RTF = P.RTF_META_PREFIX


class RtfMetadataBuilder(BaseMetadataBuilder):
    record_class = RtfMetadata

    def _map_fields(self, mapper: FieldMapper) -> Dict[str, Any]:
        return {
            "emb_app_version": mapper.string(RTF + "emb_app_version"),
            "emb_class": mapper.string(RTF + "emb_class"),
            "emb_topic": mapper.string(RTF + "emb_topic"),
            "emb_item": mapper.string(RTF + "emb_item"),
            "contains_encapsulated_html": mapper.boolean(RTF + "contains_encapsulated_html"),
            "thumbnail": mapper.boolean(RTF + "thumbnail"),
            "picture_metadata": mapper.prefixed(P.RTF_PICT_PREFIX),
            "page_count": mapper.integer(P.META_PREFIX + "page-count"),
            "word_count": mapper.integer(P.META_PREFIX + "word-count"),
            "character_count": mapper.integer(P.META_PREFIX + "character-count"),
            "category": mapper.string(P.CP_PREFIX + "category"),
            "company": mapper.string(P.EXTENDED_PREFIX + "Company"),
            "template": mapper.string(P.EXTENDED_PREFIX + "Template"),
            "print_date": mapper.timestamp(P.META_PREFIX + "print-date"),
            "is_encrypted": mapper.boolean(P.ENCRYPTED),
            "content_encoding": mapper.string(P.CONTENT_ENCODING),
        }
