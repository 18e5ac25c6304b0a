from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict

EventKind = Literal["put", "get", "miss"]


class LogEvent(BaseModel):
    """One parsed, non-empty line of the cache log.

    ``kind`` keeps the raw token so unknown kinds can still be carried
    through for time-range tracking.
    """

    model_config = ConfigDict(extra="forbid")

    line_no: int
    time: int
    kind: str
    action_key: str
    data_key: Optional[str] = None
    size: Optional[int] = None
