"""Domain models for bank branches."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(slots=True)
class Branch:
    branch_id: str
    branch_name: str
    location: str
    created_at: Optional[datetime] = None
