from __future__ import annotations
from pydantic import BaseModel, Field
from typing import Optional

# ids are stored as signed 64-bit SQLite INTEGERs
TASK_ID_MIN = -(2**63)
TASK_ID_MAX = 2**63 - 1


class Task(BaseModel):
    id: Optional[int] = Field(default=None, ge=TASK_ID_MIN, le=TASK_ID_MAX)
    title: str
    description: Optional[str] = None
