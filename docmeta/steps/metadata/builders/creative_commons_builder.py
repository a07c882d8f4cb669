from typing import Any, Dict

from docmeta.model.records import CreativeCommonsMetadata
from docmeta.steps.metadata import properties as P
from docmeta.steps.metadata.builders.base_builder import BaseMetadataBuilder
from docmeta.steps.metadata.field_mapper import FieldMapper


class CreativeCommonsMetadataBuilder(BaseMetadataBuilder):
    """XMP rights fields; also used for the rights overlay on any document type."""

    record_class = CreativeCommonsMetadata

    def _map_fields(self, mapper: FieldMapper) -> Dict[str, Any]:
        return {
            "rights_certificate": mapper.string(P.XMP_RIGHTS_CERTIFICATE),
            "rights_marked": mapper.marked(P.XMP_RIGHTS_MARKED),
            "usage_terms": mapper.string(P.XMP_RIGHTS_USAGE_TERMS),
            "web_statement": mapper.string(P.XMP_RIGHTS_WEB_STATEMENT),
            "rights_owners": mapper.strings(P.XMP_RIGHTS_OWNER),
        }
