from pathlib import PurePath
from typing import Any, Dict, Optional

from docmeta.model.records import FontMetadata
from docmeta.steps.metadata import properties as P
from docmeta.steps.metadata.builders.base_builder import BaseMetadataBuilder
from docmeta.steps.metadata.field_mapper import FieldMapper


def name_from_resource(resource_name: Optional[str]) -> Optional[str]:
    """File stem of a resource name ("fonts/Inter-Bold.ttf" -> "Inter-Bold")."""
    if not resource_name:
        return None
    stem = PurePath(resource_name.replace("\\", "/")).stem.strip()
    return stem or None


class FontMetadataBuilder(BaseMetadataBuilder):
    record_class = FontMetadata

    def _map_fields(self, mapper: FieldMapper) -> Dict[str, Any]:
        font_names = mapper.strings(P.FONT_NAME)
        font_name = font_names[0] if font_names else name_from_resource(mapper.first(P.RESOURCE_NAME))

        return {
            "font_name": font_name,
            "font_names": font_names,
            "family_name": mapper.string(P.FONT_FAMILY_NAME),
            "full_name": mapper.string(P.FONT_FULL_NAME),
            "sub_family_name": mapper.string(P.FONT_SUB_FAMILY_NAME),
            "version": mapper.string(P.FONT_VERSION),
            "original_filename": mapper.string(P.ORIGINAL_FILENAME),
        }
