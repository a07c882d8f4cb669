from typing import Any, Dict, Optional

from docmeta.model.records import GenericMetadata
from docmeta.steps.metadata import properties as P
from docmeta.steps.metadata.builders.base_builder import BaseMetadataBuilder
from docmeta.steps.metadata.field_mapper import FieldMapper


def file_extension(resource_name: Optional[str]) -> Optional[str]:
    """
    Text after the last dot of a resource name.

    None when there is no dot, or the dot is the first or last character
    (".bashrc", "archive.").
    """
    if not resource_name:
        return None
    last_dot = resource_name.rfind(".")
    if 0 < last_dot < len(resource_name) - 1:
        return resource_name[last_dot + 1:]
    return None


class GenericMetadataBuilder(BaseMetadataBuilder):
    """Fallback for unrecognised documents; every field stays in the fallback map."""

    record_class = GenericMetadata
    claims_base_fields = False

    def _map_fields(self, mapper: FieldMapper) -> Dict[str, Any]:
        return {"file_extension": file_extension(mapper.first(P.RESOURCE_NAME))}
