from __future__ import annotations

from typing import Literal, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field

Role = Literal["action", "data"]

# Bytes attributed to every action entry, a fixed figure from the go cache
# measurement methodology.
ACTION_ENTRY_SIZE = 154


class EntryKey(NamedTuple):
    """Composite registry key: raw log identifier plus role."""

    key: str
    role: Role


class Entry(BaseModel):
    """A single action record or data blob seen in the cache log."""

    model_config = ConfigDict(extra="forbid")

    created: int
    size: int
    reused: bool = Field(default=False)
    data_key: Optional[str] = None  # action entries only
    last_reused: Optional[int] = None  # delta mode only
