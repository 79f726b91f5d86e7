from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: a roster member who can be checked in at the gate.

    ``id`` is the internal key; ``employee_id`` is the institution's own identifier.
    """

    id: str
    employee_id: str
    name: str
    email: Optional[str] = None
    default_plate_number: Optional[str] = None
    created_at: Optional[datetime] = None
