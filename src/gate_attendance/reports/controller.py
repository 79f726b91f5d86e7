from __future__ import annotations

import csv
import io
from datetime import date, timedelta

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.web import arg_date, roles_required
from ..container import Container
from ..core.constants import DEFAULT_REPORT_DAYS
from ..core.enums import Role
from ..core.exceptions import ValidationError
from .service import REPORT_COLUMNS

REPORT_ROLES = (Role.HR, Role.DEAN, Role.SUPERADMIN)


def register(app: Flask, container: Container) -> None:
    def _range() -> tuple[date, date]:
        today = date.today()
        start = arg_date("start", today - timedelta(days=DEFAULT_REPORT_DAYS))
        end = arg_date("end", today)
        return start, end

    def _include_guests() -> bool:
        return request.args.get("guests", "1") != "0"

    def _write_report_csv(*, data, filename: str):
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=REPORT_COLUMNS, extrasaction="ignore")
        writer.writeheader()
        for row in data.rows:
            writer.writerow(row)

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/dean", endpoint="dean_dashboard")
    @roles_required(Role.DEAN)
    def dean_dashboard():
        today = date.today()
        data = container.report_service.build_report(start=today, end=today)
        return render_template(
            "dean/dashboard.html",
            stats=container.report_service.dashboard_stats(today),
            rows=data.rows,
            today=today,
            active_page="dean_dashboard",
        )

    @app.route("/reports", endpoint="reports")
    @roles_required(*REPORT_ROLES)
    def reports():
        start, end = _range()
        include_guests = _include_guests()
        try:
            data = container.report_service.build_report(start=start, end=end, include_guests=include_guests)
        except ValidationError as e:
            flash(str(e), "danger")
            return redirect(url_for("reports"))

        return render_template(
            "reports/report.html",
            start=start.strftime("%Y-%m-%d"),
            end=end.strftime("%Y-%m-%d"),
            include_guests=include_guests,
            rows=data.rows,
            summary=data.summary,
            active_page="reports",
        )

    @app.route("/reports.csv", endpoint="reports_csv")
    @roles_required(*REPORT_ROLES)
    def reports_csv():
        start, end = _range()
        try:
            data = container.report_service.build_report(start=start, end=end, include_guests=_include_guests())
        except ValidationError as e:
            flash(str(e), "danger")
            return redirect(url_for("reports"))

        filename = f"attendance_{start.strftime('%Y%m%d')}_{end.strftime('%Y%m%d')}.csv"
        return _write_report_csv(data=data, filename=filename)
