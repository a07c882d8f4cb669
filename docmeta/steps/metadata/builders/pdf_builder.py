from typing import Any, Dict

from docmeta.model.records import PdfMetadata
from docmeta.steps.metadata import properties as P
from docmeta.steps.metadata.builders.base_builder import BaseMetadataBuilder
from docmeta.steps.metadata.field_mapper import FieldMapper

DOCINFO = P.PDF_DOCINFO_PREFIX
PERMISSIONS = {
    "can_assemble_document": "assemble_document",
    "can_extract_content": "extract_content",
    "can_extract_for_accessibility": "extract_for_accessibility",
    "can_fill_in_form": "fill_in_form",
    "can_modify_annotations": "modify_annotations",
    "can_modify_document": "can_modify",
    "can_print": "can_print",
    "can_print_faithful": "can_print_faithful",
}


class PdfMetadataBuilder(BaseMetadataBuilder):
    record_class = PdfMetadata

    def _map_fields(self, mapper: FieldMapper) -> Dict[str, Any]:
        created, created_raw = mapper.timestamp_with_raw(DOCINFO + "created")
        modified, modified_raw = mapper.timestamp_with_raw(DOCINFO + "modified")

        fields = {
            "doc_info_title": mapper.string(DOCINFO + "title"),
            "doc_info_creator": mapper.string(DOCINFO + "creator"),
            "doc_info_creator_tool": mapper.string(DOCINFO + "creator_tool"),
            "doc_info_keywords": mapper.string(DOCINFO + "keywords"),
            "doc_info_producer": mapper.string(DOCINFO + "producer"),
            "doc_info_subject": mapper.string(DOCINFO + "subject"),
            "doc_info_trapped": mapper.string(DOCINFO + "trapped"),
            "doc_info_created": created,
            "doc_info_created_raw": created_raw,
            "doc_info_modification_date": modified,
            "doc_info_modification_date_raw": modified_raw,
            "pdf_version": mapper.string(P.PDF_VERSION),
            "pdfa_version": mapper.string(P.PDFA_VERSION),
            "pdf_extension_version": mapper.string(P.PDF_EXTENSION_VERSION),
            "pdfaid_conformance": mapper.string(P.PDFAID_CONFORMANCE),
            "pdfaid_part": mapper.integer(P.PDFAID_PART),
            "pdfx_version": mapper.string(P.PDFX_VERSION),
            "page_count": mapper.integer(P.XMP_TPG_NPAGES),
            "is_encrypted": mapper.boolean(P.PDF_ENCRYPTED),
            "producer": mapper.string(P.PDF_PRODUCER),
            "xmp_keywords": mapper.string(P.PDF_KEYWORDS),
            "has_xfa": mapper.boolean(P.PDF_HAS_XFA),
            "has_xmp": mapper.boolean(P.PDF_HAS_XMP),
            "has_acroform_fields": mapper.boolean(P.PDF_HAS_ACROFORM_FIELDS),
            "has_marked_content": mapper.boolean(P.PDF_HAS_MARKED_CONTENT),
            "has_collection": mapper.boolean(P.PDF_HAS_COLLECTION),
            "has_3d": mapper.boolean(P.PDF_HAS_3D),
            "annotation_types": mapper.strings(P.PDF_ANNOTATION_TYPES),
            "annotation_subtypes": mapper.strings(P.PDF_ANNOTATION_SUBTYPES),
            "incremental_update_count": mapper.integer(P.PDF_INCREMENTAL_UPDATE_COUNT),
            "eof_offsets": mapper.floats(P.PDF_EOF_OFFSETS),
            "characters_per_page": mapper.integers(P.PDF_CHARS_PER_PAGE),
            "unmapped_unicode_chars_per_page": mapper.integers(P.PDF_UNMAPPED_PER_PAGE),
            "total_unmapped_unicode_chars": mapper.integer(P.PDF_TOTAL_UNMAPPED),
            "overall_percentage_unmapped_unicode_chars": mapper.floating(P.PDF_PERCENT_UNMAPPED),
            "contains_damaged_font": mapper.boolean(P.PDF_DAMAGED_FONT),
            "contains_non_embedded_font": mapper.boolean(P.PDF_NON_EMBEDDED_FONT),
            "ocr_page_count": mapper.integer(P.PDF_OCR_PAGE_COUNT),
            "has_signature": mapper.boolean(P.PDF_HAS_SIGNATURE),
            "signature_names": mapper.strings(P.PDF_SIGNATURE_NAME),
            "signature_reasons": mapper.strings(P.PDF_SIGNATURE_REASON),
            "xmp_parse_failed": mapper.strings(P.XMP_PARSE_FAILED),
            "detected_encoding": mapper.string(P.DETECTED_ENCODING),
        }
        for attribute, suffix in PERMISSIONS.items():
            fields[attribute] = mapper.boolean(P.ACCESS_PERMISSION_PREFIX + suffix)
        return fields
