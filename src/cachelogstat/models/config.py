from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

OutputFormat = Literal["text", "json"]


class StatConfig(BaseModel):
    """Run options for cachelogstat, loadable from YAML."""

    model_config = ConfigDict(extra="forbid")

    version: Literal["0.1"] = Field(default="0.1")
    track_reuse_deltas: bool = Field(default=False)
    format: OutputFormat = Field(default="text")
    issue_banner: bool = Field(default=True)
    go_command: str = Field(default="go", min_length=1)
    log_name: str = Field(default="log.txt", min_length=1)

    @field_validator("log_name")
    @classmethod
    def log_name_must_be_bare(cls, v: str) -> str:
        if "/" in v or "\\" in v:
            raise ValueError("log_name must be a file name, not a path")
        return v
