"""Unified document object for the docmeta pipeline."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from docmeta.model.metadata_bag import MetadataBag
from docmeta.model.records import StructuredDocumentRecord


@dataclass
class SourceDocument:
    """
    One upstream-parsed document travelling through the pipeline.

    Holds the engine output (metadata bag, body text, optional XMP packet) and,
    once the metadata step has run, the structured record or the error that
    prevented it.
    """

    doc_id: Optional[str]
    metadata: MetadataBag
    body: Optional[str] = None
    xmp: Optional[str] = None
    source_path: Optional[Path] = None
    record: Optional[StructuredDocumentRecord] = None
    extraction_error: Optional[str] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any], source_path: Optional[Path] = None) -> "SourceDocument":
        """Create a document from one JSONL entry: {"doc_id", "metadata", "body", "xmp"}."""
        doc_id = data.get("doc_id")
        return cls(
            doc_id=None if doc_id is None else str(doc_id),
            metadata=MetadataBag(data.get("metadata") or {}),
            body=data.get("body"),
            xmp=data.get("xmp"),
            source_path=source_path,
        )

    def to_json(self) -> Dict[str, Any]:
        """Export form: the record in JSON mode, or the extraction error."""
        result: Dict[str, Any] = {"doc_id": self.doc_id}
        if self.record is not None:
            result["record"] = self.record.model_dump(mode="json")
        if self.extraction_error is not None:
            result["extraction_error"] = self.extraction_error
        return result

    @property
    def label(self) -> str:
        """Name used in log messages."""
        if self.doc_id:
            return self.doc_id
        if self.source_path is not None:
            return self.source_path.name
        return "<unnamed>"

    def __str__(self) -> str:
        return f"SourceDocument({self.label}, {len(self.metadata)} fields)"
