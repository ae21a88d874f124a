from __future__ import annotations

from typing import NewType
from uuid import UUID

TaskId = NewType("TaskId", UUID)
