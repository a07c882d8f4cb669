from pathlib import Path
from typing import Union

import yaml
from pydantic import BaseModel, Field, field_validator

from docmeta.utils import find_format


class Inputs(BaseModel):
    path: Union[str, list[str]]

    def get_files(self) -> list[Path]:
        paths = [self.path] if isinstance(self.path, str) else self.path
        files = []

        for p in paths:
            p = Path(p)

            if p.is_file():
                files.append(p)
            elif p.is_dir():
                files.extend(sorted(f for f in p.rglob("*") if f.is_file() and find_format(f) == "jsonl")) # recursive search across multiple levels
        return files


class MetadataStepConfig(BaseModel):
    engine_version: str = "unknown"
    export_records: bool = True
    destination: str = "./output"
    filename: str = "records.jsonl"
    debug: bool = False
    max_concurrency: int = Field(default=8, ge=1)

    @field_validator("filename")
    @classmethod
    def check_filename(cls, v):
        if not v.strip() or Path(v).name != v:
            raise ValueError(f"filename must be a bare file name, got {v!r}")
        return v


class PipelineConfig(BaseModel):
    inputs: Inputs
    batch_size: int = Field(default=100, ge=1)
    metadata: MetadataStepConfig = Field(default_factory=MetadataStepConfig)


def load_config(path: str) -> PipelineConfig:
    with open(path) as f:
        raw = yaml.safe_load(f)
    return PipelineConfig(**raw["pipeline"])  # unpack
