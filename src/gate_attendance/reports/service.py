from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..attendance.service import AttendanceService
from ..common.datetime_utils import format_clock
from ..core.exceptions import ValidationError
from .calculator.base import WorkedTimeCalculator
from .calculator.standard_calculator import StandardWorkedTimeCalculator

REPORT_COLUMNS = [
    "date",
    "name",
    "type",
    "time_in",
    "time_out",
    "plate_number",
    "worked_hours",
]


def _hhmm(minutes: int) -> str:
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    summary: list[dict]


class AttendanceReportService:
    def __init__(self, attendance: AttendanceService, *, calculator: Optional[WorkedTimeCalculator] = None):
        self._attendance = attendance
        self._calculator = calculator or StandardWorkedTimeCalculator()

    def build_report(self, *, start: date, end: date, include_guests: bool = True) -> ReportData:
        if end < start:
            raise ValidationError("End date cannot be before start date")

        records = self._attendance.records_between(start, end)
        summary_map: dict[str, dict] = {}
        out_rows: list[dict] = []

        for r in records:
            if r.is_guest and not include_guests:
                continue

            minutes = self._calculator.worked_minutes(r)
            out_rows.append(
                {
                    "record_id": r.record_id,
                    "date": r.work_date.strftime("%Y-%m-%d"),
                    "name": r.person_name,
                    "type": "Guest" if r.is_guest else "Employee",
                    "time_in": format_clock(r.time_in),
                    "time_out": format_clock(r.time_out),
                    "plate_number": r.plate_number or "-",
                    "worked_hours": _hhmm(minutes),
                    "is_open": r.is_open,
                }
            )

            if r.is_guest:
                continue
            s = summary_map.get(r.person_id)
            if not s:
                s = {"person_id": r.person_id, "name": r.person_name, "days": set(), "total_minutes": 0}
                summary_map[r.person_id] = s
            s["days"].add(r.work_date)
            s["total_minutes"] += minutes

        summary = [
            {
                "person_id": s["person_id"],
                "name": s["name"],
                "days_present": len(s["days"]),
                "total_minutes": s["total_minutes"],
                "total_hours": _hhmm(s["total_minutes"]),
            }
            for s in summary_map.values()
        ]
        summary.sort(key=lambda x: (-x["total_minutes"], x["name"]))
        return ReportData(rows=out_rows, summary=summary)

    def dashboard_stats(self, today: date) -> dict:
        state = self._attendance.snapshot()
        todays = state.for_date(today)
        parking = state.parking
        return {
            "present_today": len({r.person_id for r in todays if not r.is_guest}),
            "on_site": self._attendance.on_site_count(today),
            "guests_today": sum(1 for r in todays if r.is_guest),
            "guests_on_site": sum(1 for r in todays if r.is_guest and r.is_open),
            "vehicles_today": sum(1 for r in todays if r.is_plated),
            "total_spaces": parking.total_spaces,
            "occupied_spaces": parking.occupied_spaces,
            "available_spaces": parking.available_spaces,
            "occupancy_percent": parking.occupancy_percent,
        }
