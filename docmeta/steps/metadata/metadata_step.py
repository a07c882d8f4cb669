"""
Metadata extraction step for the docmeta pipeline.
"""

import asyncio
from pathlib import Path
from typing import List, Optional, Union

from docmeta.base_step import PipelineStep
from docmeta.config import MetadataStepConfig
from docmeta.model.document import SourceDocument
from docmeta.steps.metadata.dispatcher import ExtractionDispatcher
from docmeta.utils import append_jsonl


class MetadataStep(PipelineStep):
    """
    Builds a structured record for every document of a batch.

    Extractions run concurrently in worker threads, at most
    ``max_concurrency`` at a time. A document whose extraction fails keeps
    ``record=None`` and carries ``extraction_error``; the rest of the batch
    is unaffected.
    """

    def __init__(self, config: Union[MetadataStepConfig, dict, None] = None, dispatcher: Optional[ExtractionDispatcher] = None):
        """
        Initialize the metadata extraction step.

        Args:
            config: MetadataStepConfig or an equivalent dictionary with options:
                - engine_version: Version string of the upstream engine
                - export_records: Whether to append records to a JSONL file
                - destination: Directory to save the records file
                - filename: Name of the records JSONL file
                - max_concurrency: Maximum number of extractions in flight
                - debug: Enable debug logging
            dispatcher: Dispatcher to use; a default one is created when omitted
        """
        if config is None:
            config = MetadataStepConfig()
        elif isinstance(config, dict):
            config = MetadataStepConfig(**config)
        super().__init__(config)

        self.engine_version = config.engine_version
        self.export_records = config.export_records
        self.destination = Path(config.destination)
        self.filename = config.filename
        self.max_concurrency = config.max_concurrency
        self.dispatcher = dispatcher or ExtractionDispatcher()

    def _extract(self, document: SourceDocument) -> SourceDocument:
        try:
            document.record = self.dispatcher.extract(
                document.metadata,
                body_text=document.body,
                engine_version=self.engine_version,
                doc_id=document.doc_id,
                xmp_packet=document.xmp,
            )
            document.extraction_error = None
            if self.debug:
                self.logger.debug(f"{document.label}: {document.record.document_type.name}")
        except Exception as e:
            self.logger.error(f"Failed to extract metadata from {document.label}: {str(e)}")
            document.record = None
            document.extraction_error = str(e)
        return document

    async def execute(self, documents: List[SourceDocument]) -> List[SourceDocument]:
        """
        Execute metadata extraction on input documents.

        Args:
            documents: List of SourceDocument objects

        Returns:
            The same documents, in order, with ``record`` or ``extraction_error`` set
        """
        if not documents:
            self.logger.warning("No input documents provided to metadata step")
            return []

        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def _run(document: SourceDocument) -> SourceDocument:
            async with semaphore:
                return await asyncio.to_thread(self._extract, document)

        results = await asyncio.gather(*(_run(document) for document in documents))

        successful_count = sum(1 for doc in results if doc.record is not None)
        self.logger.info(f"Extracted records for {successful_count}/{len(results)} documents")

        if self.export_records:
            await self._export_records(results)

        return list(results)

    async def _export_records(self, documents: List[SourceDocument]) -> None:
        """
        Append one JSON line per document to the records file.

        Args:
            documents: Processed documents
        """
        if not self.destination.exists():
            self.logger.info(f"Creating records destination directory: {self.destination}")
            self.destination.mkdir(parents=True, exist_ok=True)

        records_file = self.destination / self.filename
        try:
            written = await append_jsonl(records_file, (document.to_json() for document in documents))
            self.logger.info(f"Exported {written} records to: {records_file}")
        except OSError as e:
            self.logger.error(f"Failed to export records to {records_file}: {str(e)}")
