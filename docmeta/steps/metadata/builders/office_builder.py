from typing import Any, Dict

from docmeta.common.dates import parse_duration_seconds
from docmeta.model.records import OfficeMetadata
from docmeta.steps.metadata import properties as P
from docmeta.steps.metadata.builders.base_builder import BaseMetadataBuilder
from docmeta.steps.metadata.field_mapper import FieldMapper

META = P.META_PREFIX
CP = P.CP_PREFIX
EXT = P.EXTENDED_PREFIX

COUNTS = {
    "slide_count": "slide-count",
    "page_count": "page-count",
    "paragraph_count": "paragraph-count",
    "line_count": "line-count",
    "word_count": "word-count",
    "character_count": "character-count",
    "character_count_with_spaces": "character-count-with-spaces",
    "table_count": "table-count",
    "image_count": "image-count",
    "object_count": "object-count",
}


class OfficeMetadataBuilder(BaseMetadataBuilder):
    """OOXML, legacy OLE and OpenDocument files."""

    record_class = OfficeMetadata

    def _map_fields(self, mapper: FieldMapper) -> Dict[str, Any]:
        creation_date, creation_raw = mapper.timestamp_with_raw(META + "creation-date")
        save_date, save_raw = mapper.timestamp_with_raw(META + "save-date")
        print_date, print_raw = mapper.timestamp_with_raw(META + "print-date")
        last_printed, last_printed_raw = mapper.timestamp_with_raw(CP + "lastPrinted")

        total_time_raw = mapper.string(EXT + "TotalTime")
        total_time_seconds = parse_duration_seconds(total_time_raw)
        if total_time_raw is not None and total_time_seconds is None:
            self.logger.warning(f"Keeping unparsed editing time: {total_time_raw!r}")

        fields = {
            "keywords": mapper.strings(META + "keyword"),
            "initial_author": mapper.string(META + "initial-author"),
            "last_author": mapper.string(META + "last-author"),
            "authors": mapper.strings(META + "author"),
            "creation_date": creation_date,
            "creation_date_raw": creation_raw,
            "save_date": save_date,
            "save_date_raw": save_raw,
            "print_date": print_date,
            "print_date_raw": print_raw,
            "has_hidden_sheets": mapper.boolean(P.OFFICE_HIDDEN_SHEETS),
            "hidden_sheet_names": mapper.strings(P.OFFICE_HIDDEN_SHEET_NAMES),
            "protected_worksheet": mapper.boolean(P.OFFICE_PROTECTED_WORKSHEET),
            "has_comments": mapper.boolean(P.OFFICE_HAS_COMMENTS),
            "comment_persons": mapper.strings(P.OFFICE_COMMENT_PERSONS),
            "has_hidden_slides": mapper.boolean(P.OFFICE_HIDDEN_SLIDES),
            "has_hidden_text": mapper.boolean(P.OFFICE_HIDDEN_TEXT),
            "has_track_changes": mapper.boolean(P.OFFICE_TRACK_CHANGES),
            "category": mapper.string(CP + "category"),
            "content_status": mapper.string(CP + "contentStatus"),
            "last_modified_by": mapper.string(CP + "lastModifiedBy"),
            "last_printed": last_printed,
            "last_printed_raw": last_printed_raw,
            "revision": mapper.string(CP + "revision"),
            "version": mapper.string(CP + "version"),
            "template": mapper.string(EXT + "Template"),
            "managers": mapper.strings(EXT + "Manager"),
            "company": mapper.string(EXT + "Company"),
            "presentation_format": mapper.string(EXT + "PresentationFormat"),
            "notes": mapper.integer(EXT + "Notes"),
            "total_time_raw": total_time_raw,
            "total_time_seconds": total_time_seconds,
            "hidden_slides": mapper.integer(EXT + "HiddenSlides"),
            "application": mapper.string(EXT + "Application"),
            "app_version": mapper.string(EXT + "AppVersion"),
            "doc_security": mapper.integer(EXT + "DocSecurity"),
            "doc_security_string": mapper.string(EXT + "DocSecurityString"),
        }
        for attribute, suffix in COUNTS.items():
            fields[attribute] = mapper.integer(META + suffix)
        return fields
