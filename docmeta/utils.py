import json
from pathlib import Path
from typing import Any, AsyncGenerator, Dict, Tuple

import aiofiles

from docmeta.logging import get_logger

logger = get_logger("utils")


def find_format(file_path: Path):
    return file_path.suffix.lstrip('.').lower()


async def read_jsonl(file_path: Path) -> AsyncGenerator[Tuple[int, Dict[str, Any]], None]:
    """
    yield (line number, object) for every JSON object line of a file.

    Blank lines are skipped; lines that are not JSON objects are logged and skipped.
    """
    async with aiofiles.open(file_path, "r", encoding="utf-8") as f:
        line_num = 0
        async for line in f:
            line_num += 1
            if not line.strip():
                continue
            try:
                data = json.loads(line)
            except json.JSONDecodeError as e:
                logger.error(f"JSON decode error in {file_path} line {line_num}: {e}")
                continue
            if not isinstance(data, dict):
                logger.error(f"Expected a JSON object in {file_path} line {line_num}")
                continue
            yield line_num, data


async def append_jsonl(file_path: Path, rows) -> int:
    """append one JSON line per row; returns the number of rows written."""
    written = 0
    async with aiofiles.open(file_path, "a", encoding="utf-8") as f:
        for row in rows:
            await f.write(json.dumps(row, ensure_ascii=False))
            await f.write("\n")
            written += 1
    return written


def count_lines(file_path: Path) -> int:
    """Number of non-blank lines (for progress bars)."""
    with open(file_path, "r", encoding="utf-8") as f:
        return sum(1 for line in f if line.strip())
