from __future__ import annotations

import csv
import io
from dataclasses import dataclass, field
from typing import Iterator, Optional

from ..common.validators import normalize_plate

CSV_COLUMNS = ("employeeId", "name", "email", "plateNumber")


@dataclass(frozen=True)
class ImportRow:
    line_no: int
    employee_id: str
    name: str
    email: Optional[str]
    plate_number: Optional[str]


@dataclass(frozen=True)
class ImportResult:
    added: int = 0
    skipped: int = 0
    errors: list[str] = field(default_factory=list)


def iter_import_rows(text: str) -> Iterator[ImportRow | str]:
    """Yield parsed rows, or an error message for rows that cannot be used.

    The first non-blank line is a header and is skipped. Columns are read by
    position: identifier, name, email, plate.
    """

    reader = csv.reader(io.StringIO((text or "").lstrip("\ufeff")))
    header_seen = False
    for line_no, cells in enumerate(reader, start=1):
        cells = [c.strip() for c in cells]
        if not any(cells):
            continue
        if not header_seen:
            header_seen = True
            continue

        cells += [""] * (len(CSV_COLUMNS) - len(cells))
        employee_id, name, email, plate = cells[:4]
        if not employee_id or not name:
            yield f"Line {line_no}: employee ID and name are required"
            continue

        yield ImportRow(
            line_no=line_no,
            employee_id=employee_id,
            name=name,
            email=email or None,
            plate_number=normalize_plate(plate),
        )
