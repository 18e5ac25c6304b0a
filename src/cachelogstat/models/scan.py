from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ScanResult(BaseModel):
    """Accumulators and latency samples produced by one full log scan."""

    model_config = ConfigDict(extra="forbid")

    total_action_bytes: int = Field(default=0)
    total_reused_action_bytes: int = Field(default=0)
    total_data_bytes: int = Field(default=0)
    total_reused_data_bytes: int = Field(default=0)

    # Seconds between creation and each reuse, in log order.
    action_reuse: List[int] = Field(default_factory=list)
    data_reuse: List[int] = Field(default_factory=list)

    # Seconds since the previous reuse; only filled when delta tracking is on.
    action_reuse_deltas: List[int] = Field(default_factory=list)
    data_reuse_deltas: List[int] = Field(default_factory=list)

    first_time: Optional[int] = None
    last_time: Optional[int] = None

    lines: int = Field(default=0, ge=0)
    events: int = Field(default=0, ge=0)
    entries: int = Field(default=0, ge=0)
    track_reuse_deltas: bool = Field(default=False)
