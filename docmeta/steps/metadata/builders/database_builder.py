from typing import Any, Dict

from docmeta.model.records import DatabaseMetadata
from docmeta.steps.metadata import properties as P
from docmeta.steps.metadata.builders.base_builder import BaseMetadataBuilder
from docmeta.steps.metadata.field_mapper import FieldMapper


class DatabaseMetadataBuilder(BaseMetadataBuilder):
    """SQLite, Access and dBASE files."""

    record_class = DatabaseMetadata

    def _map_fields(self, mapper: FieldMapper) -> Dict[str, Any]:
        return {
            "table_names": mapper.strings(P.DATABASE_TABLE_NAME),
            "column_names": mapper.strings(P.DATABASE_COLUMN_NAME),
            "column_count": mapper.integer(P.DATABASE_COLUMN_COUNT),
            "row_count": mapper.integer(P.DATABASE_ROW_COUNT),
            "title": mapper.string(P.DC_TITLE),
            "creator": mapper.string(P.DC_CREATOR),
            "description": mapper.string(P.DC_DESCRIPTION),
            "created": mapper.timestamp(P.DC_CREATED),
            "modified": mapper.timestamp(P.DC_MODIFIED),
            "content_length": mapper.integer(P.CONTENT_LENGTH),
        }
