from typing import Any, Dict, List

from docmeta.model.records import WarcHttpHeader, WarcMetadata
from docmeta.steps.metadata import properties as P
from docmeta.steps.metadata.builders.base_builder import BaseMetadataBuilder
from docmeta.steps.metadata.field_mapper import FieldMapper

WARC = P.WARC_PREFIX


class WarcMetadataBuilder(BaseMetadataBuilder):
    """Web archive records."""

    record_class = WarcMetadata

    def _map_fields(self, mapper: FieldMapper) -> Dict[str, Any]:
        return {
            "warc_type": mapper.string(WARC + "Type"),
            "record_id": mapper.string(WARC + "Record-ID"),
            "target_uri": mapper.string(WARC + "Target-URI"),
            "warc_date": mapper.timestamp(WARC + "Date"),
            "content_length": mapper.integer(P.CONTENT_LENGTH),
            "record_content_type": mapper.string(P.WARC_RECORD_CONTENT_TYPE),
            "payload_content_type": mapper.string(P.WARC_PAYLOAD_CONTENT_TYPE),
            "identified_payload_type": mapper.string(WARC + "Identified-Payload-Type"),
            "filename": mapper.string(WARC + "Filename"),
            "refers_to": mapper.string(WARC + "Refers-To"),
            "concurrent_to": mapper.string(WARC + "Concurrent-To"),
            "warcinfo_id": mapper.string(WARC + "Warcinfo-ID"),
            "ip_address": mapper.string(WARC + "IP-Address"),
            "block_digest": mapper.string(WARC + "Block-Digest"),
            "payload_digest": mapper.string(WARC + "Payload-Digest"),
            "truncated": mapper.string(WARC + "Truncated"),
            "warnings": mapper.strings(P.WARC_WARNING),
            "http_status_code": mapper.integer(P.WARC_HTTP_STATUS),
            "http_status_reason": mapper.string(P.WARC_HTTP_STATUS_REASON),
            "http_headers": self._http_headers(mapper),
            "content_language": mapper.string(P.CONTENT_LANGUAGE),
            "content_encoding": mapper.string(P.CONTENT_ENCODING),
            "created_by": mapper.string("warc:software"),
            "format_version": mapper.string("warc:format"),
            "collection": mapper.string("warc:collection"),
            "crawl_id": mapper.string("warc:crawl"),
            "robot_policy": mapper.string("warc:robots"),
        }

    def _http_headers(self, mapper: FieldMapper) -> List[WarcHttpHeader]:
        headers = []
        for name in mapper.names_with_prefix(P.WARC_HTTP_PREFIX):
            if name in (P.WARC_HTTP_STATUS, P.WARC_HTTP_STATUS_REASON):
                continue
            header = name[len(P.WARC_HTTP_PREFIX):]
            for value in mapper.strings(name):
                headers.append(WarcHttpHeader(name=header, value=value))
        return headers
