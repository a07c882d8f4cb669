"""Tests for the batch pipeline runner."""

import json
from unittest.mock import patch

import pytest

from docmeta.config import PipelineConfig
from docmeta.model.document import SourceDocument
from docmeta.pipeline import count_total_documents, create_batches, main, pipeline


def write_jsonl(path, rows):
    path.write_text("\n".join(rows) + "\n", encoding="utf-8")


@pytest.fixture
def input_dir(tmp_path):
    data = tmp_path / "data"
    data.mkdir()
    write_jsonl(data / "a.jsonl", [
        json.dumps({"doc_id": "a1", "metadata": {"Content-Type": "application/pdf"}}),
        "",
        "{not json",
        json.dumps({"doc_id": "a2", "metadata": {"Content-Type": "text/html"}, "body": "<p>x</p>"}),
        json.dumps({"doc_id": "no-metadata"}),
    ])
    write_jsonl(data / "b.jsonl", [
        json.dumps({"doc_id": "b1", "metadata": {"resourceName": "x.epub"}}),
        json.dumps(["not", "an", "object"]),
    ])
    return data


@pytest.mark.asyncio
async def test_create_batches(input_dir):
    files = sorted(input_dir.glob("*.jsonl"))

    batches = [batch async for batch in create_batches(files, batch_size=2)]

    assert [[doc.doc_id for doc in batch] for batch in batches] == [["a1", "a2"], ["b1"]]
    assert batches[0][1].body == "<p>x</p>"
    assert batches[0][0].source_path == files[0]


@pytest.mark.asyncio
async def test_create_batches_missing_file(tmp_path):
    batches = [batch async for batch in create_batches([tmp_path / "missing.jsonl"], batch_size=2)]

    assert batches == []


def test_count_total_documents(input_dir):
    assert count_total_documents(sorted(input_dir.glob("*.jsonl"))) == 6


@pytest.mark.asyncio
async def test_pipeline_exports_records(input_dir, tmp_path):
    out = tmp_path / "out"
    cfg = PipelineConfig(
        inputs={"path": str(input_dir)},
        batch_size=2,
        metadata={"destination": str(out), "engine_version": "2.9"},
    )

    processed = await pipeline(cfg)

    rows = [json.loads(line) for line in (out / "records.jsonl").read_text(encoding="utf-8").splitlines()]
    assert processed == 3
    assert {row["doc_id"]: row["record"]["metadata"]["document_type"] for row in rows} == {
        "a1": "pdf",
        "a2": "html",
        "b1": "epub",
    }


def test_main_reads_yaml_config_and_writes_log_file(input_dir, tmp_path):
    out = tmp_path / "out"
    log_file = tmp_path / "run.log"
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        "pipeline:\n"
        f"  inputs:\n    path: {input_dir}\n"
        "  batch_size: 10\n"
        f"  metadata:\n    destination: {out}\n",
        encoding="utf-8",
    )

    processed = main(str(config_path), log_file=str(log_file))

    assert processed == 3
    assert (out / "records.jsonl").exists()
    assert "Pipeline completed" in log_file.read_text(encoding="utf-8")


@pytest.mark.asyncio
async def test_create_batches_accepts_json_scalars(tmp_path):
    path = tmp_path / "scalars.jsonl"
    write_jsonl(path, [
        json.dumps({"doc_id": 7, "metadata": {"Content-Type": "application/pdf", "Content-Length": 12345, "pdf:encrypted": False}}),
    ])

    batches = [batch async for batch in create_batches([path], batch_size=10)]

    document = batches[0][0]
    assert document.doc_id == "7"
    assert document.metadata.get_first("Content-Length") == "12345"
    assert document.metadata.get_first("pdf:encrypted") == "false"


@pytest.mark.asyncio
async def test_create_batches_skips_unreadable_entries(tmp_path):
    path = tmp_path / "rows.jsonl"
    write_jsonl(path, [
        json.dumps({"doc_id": "bad", "metadata": {}}),
        json.dumps({"doc_id": "good", "metadata": {}}),
    ])
    original = SourceDocument.from_json

    def from_json(data, source_path=None):
        if data["doc_id"] == "bad":
            raise TypeError("unreadable")
        return original(data, source_path=source_path)

    with patch.object(SourceDocument, "from_json", side_effect=from_json):
        batches = [batch async for batch in create_batches([path], batch_size=10)]

    assert [[doc.doc_id for doc in batch] for batch in batches] == [["good"]]


@pytest.mark.asyncio
async def test_pipeline_numeric_content_length(tmp_path):
    data = tmp_path / "data"
    data.mkdir()
    write_jsonl(data / "n.jsonl", [json.dumps({"doc_id": "n1", "metadata": {"Content-Type": "application/pdf", "Content-Length": 12345}})])
    out = tmp_path / "out"
    cfg = PipelineConfig(inputs={"path": str(data)}, metadata={"destination": str(out)})

    assert await pipeline(cfg) == 1

    row = json.loads((out / "records.jsonl").read_text(encoding="utf-8"))
    assert row["record"]["content"]["content_length"] == 12345
