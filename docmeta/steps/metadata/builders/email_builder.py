from typing import Any, Dict

from docmeta.model.records import EmailMetadata
from docmeta.steps.metadata import properties as P
from docmeta.steps.metadata.builders.base_builder import BaseMetadataBuilder
from docmeta.steps.metadata.field_mapper import FieldMapper

MESSAGE = P.MESSAGE_PREFIX
MAPI = P.MAPI_PREFIX


class EmailMetadataBuilder(BaseMetadataBuilder):
    """RFC 822 messages, mbox files and Outlook items."""

    record_class = EmailMetadata

    def _map_fields(self, mapper: FieldMapper) -> Dict[str, Any]:
        fields = {
            "title": mapper.string(P.DC_TITLE),
            "creator": mapper.string(P.DC_CREATOR),
            "description": mapper.string(P.DC_DESCRIPTION),
            "created": mapper.timestamp(P.DC_CREATED),
            "modified": mapper.timestamp(P.DC_MODIFIED),
            "message_from": mapper.string(P.MESSAGE_FROM),
            "message_to": mapper.string(P.MESSAGE_TO),
            "message_cc": mapper.string(P.MESSAGE_CC),
            "message_bcc": mapper.string(P.MESSAGE_BCC),
            "multipart_subtype": mapper.string(P.MULTIPART_SUBTYPE),
            "multipart_boundary": mapper.string(P.MULTIPART_BOUNDARY),
            "message_class": mapper.string(MAPI + "message-class"),
            "internet_message_id": mapper.string(MAPI + "internet-message-id"),
            "in_reply_to_id": mapper.string(MAPI + "in-reply-to-id"),
            "internet_references": mapper.strings(MAPI + "internet-references"),
            "conversation_topic": mapper.string(MAPI + "conversation-topic"),
            "submission_id": mapper.string(MAPI + "submission-id"),
            "importance": mapper.integer(MAPI + "importance"),
            "priority": mapper.integer(MAPI + "priority"),
            "is_flagged": mapper.boolean(MAPI + "is-flagged"),
            "has_signature": mapper.boolean(P.HAS_SIGNATURE),
            "is_encrypted": mapper.boolean(P.ENCRYPTED),
            "signature_dates": mapper.timestamps(P.SIGNATURE_DATE),
            "detected_encoding": mapper.string(P.DETECTED_ENCODING),
        }
        for party in ("From", "To", "CC", "BCC"):
            key = party.lower()
            fields[f"{key}_names"] = mapper.strings(f"{MESSAGE}{party}-Name")
            fields[f"{key}_emails"] = mapper.strings(f"{MESSAGE}{party}-Email")
        return fields
