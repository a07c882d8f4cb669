from typing import Any, Dict

from docmeta.model.records import ClimateForecastMetadata
from docmeta.steps.metadata import properties as P
from docmeta.steps.metadata.builders.base_builder import BaseMetadataBuilder
from docmeta.steps.metadata.field_mapper import FieldMapper

# record attribute -> NetCDF global attribute
GLOBAL_ATTRIBUTES = {
    "conventions": P.CF_CONVENTIONS,
    "institution": "institution",
    "source": "source",
    "history": "history",
    "references": "references",
    "comment": "comment",
    "contact": "contact",
    "project_id": "project_id",
    "experiment_id": "experiment_id",
    "realization": "realization",
    "table_id": "table_id",
    "model_name_english": "model_name_english",
    "program_id": "prg_ID",
    "command_line": "commandline",
    "acknowledgement": "acknowledgement",
}


class ClimateForecastMetadataBuilder(BaseMetadataBuilder):
    """NetCDF / HDF files following the CF conventions."""

    record_class = ClimateForecastMetadata

    def _map_fields(self, mapper: FieldMapper) -> Dict[str, Any]:
        return {attribute: mapper.string(name) for attribute, name in GLOBAL_ATTRIBUTES.items()}
