import argparse
import asyncio
import time
from pathlib import Path
from typing import AsyncIterator, List, Optional

from tqdm import tqdm

from docmeta.config import PipelineConfig, load_config
from docmeta.logging import add_log_file, get_logger, set_log_level
from docmeta.model.document import SourceDocument
from docmeta.steps.metadata.metadata_step import MetadataStep
from docmeta.utils import count_lines, read_jsonl


def count_total_documents(input_files: List[Path]) -> int:
    """Count total number of documents to process (for progress bar).

    Args:
        input_files: List of JSONL files

    Returns:
        Total number of documents
    """
    total = 0
    for file_path in input_files:
        try:
            total += count_lines(file_path)
        except (OSError, UnicodeDecodeError):
            pass
    return total


async def create_batches(input_files: List[Path], batch_size: int) -> AsyncIterator[List[SourceDocument]]:
    """Create batches of SourceDocument objects from JSONL input files.

    Each line is an object of the form
    ``{"doc_id": ..., "metadata": {name: value | [values]}, "body": ..., "xmp": ...}``.

    Args:
        input_files: List of Path objects pointing to JSONL files
        batch_size: Number of documents per batch

    Yields:
        Batches of SourceDocument objects
    """
    batch = []
    logger = get_logger("pipeline.batching")

    for file_path in input_files:
        logger.info(f"Reading JSONL file for batching: {file_path}")
        try:
            async for line_num, data in read_jsonl(file_path):
                if not isinstance(data.get("metadata"), dict):
                    logger.warning(f"No metadata object found in {file_path} line {line_num}")
                    continue
                try:
                    document = SourceDocument.from_json(data, source_path=file_path)
                except (TypeError, ValueError) as e:
                    logger.error(f"Skipping unreadable entry in {file_path} line {line_num}: {e}")
                    continue
                batch.append(document)

                if len(batch) >= batch_size:
                    yield batch
                    batch = []
        except OSError as e:
            logger.error(f"Error reading JSONL file {file_path}: {e}")
            continue

    # Yield final batch if any documents remain
    if batch:
        yield batch


async def pipeline(cfg: PipelineConfig) -> int:
    """Run the metadata step over every input batch; returns the number of documents processed."""
    logger = get_logger("pipeline")
    logger.info("Starting pipeline execution")

    start_time = time.perf_counter()
    input_files = cfg.inputs.get_files()
    logger.info(f"Processing {len(input_files)} files with batch size {cfg.batch_size}")

    total_docs = count_total_documents(input_files)
    logger.info(f"Total documents to process: {total_docs}")

    step = MetadataStep(cfg.metadata)
    total_processed = 0
    total_failed = 0

    with tqdm(total=total_docs, desc="Processing batches", unit="doc") as pbar:
        async for batch in create_batches(input_files, cfg.batch_size):
            batch_docs = await step(batch)
            total_processed += len(batch_docs)
            total_failed += sum(1 for doc in batch_docs if doc.extraction_error is not None)
            pbar.update(len(batch))

    elapsed_time = time.perf_counter() - start_time
    logger.info(f"Pipeline completed in {elapsed_time:.2f} seconds")
    logger.info(f"Processed {total_processed} documents ({total_failed} failed)")
    return total_processed


def main(config_path: str = "config.yaml", log_level: Optional[str] = None, log_file: Optional[str] = None):
    """entry point for the pipeline"""
    if log_level:
        set_log_level(log_level)
    if log_file:
        add_log_file(log_file, level=log_level.upper() if log_level else "INFO")
    return asyncio.run(pipeline(load_config(config_path)))


def cli():
    parser = argparse.ArgumentParser(prog = "docmeta")
    subparsers = parser.add_subparsers(dest = "command")

    run_parser = subparsers.add_parser("run", help = "Extract structured records from JSONL metadata dumps")
    run_parser.add_argument("-c", "--config", default = "config.yaml", help = "Path to the pipeline YAML config")
    run_parser.add_argument("--log-level", default = None, help = "Override the stderr log level (e.g. DEBUG)")
    run_parser.add_argument("--log-file", default = None, help = "Also write the run log to this file")

    args = parser.parse_args()

    if args.command == "run":
        main(args.config, args.log_level, args.log_file)
    else:
        parser.print_help()
