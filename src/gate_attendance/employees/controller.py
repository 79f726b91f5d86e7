from __future__ import annotations

from datetime import date

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.web import current_actor, roles_required
from ..container import Container
from ..core.enums import Role
from ..core.exceptions import ValidationError
from .csv_import import CSV_COLUMNS


def register(app: Flask, container: Container) -> None:
    @app.route("/hr", endpoint="hr_dashboard")
    @roles_required(Role.HR)
    def hr_dashboard():
        today = date.today()
        return render_template(
            "hr/dashboard.html",
            stats=container.report_service.dashboard_stats(today),
            records=container.attendance_service.today_records(today),
            employees_count=len(container.employee_service.list_all()),
            active_page="hr_dashboard",
        )

    @app.route("/hr/employees", methods=["GET", "POST"], endpoint="hr_employees")
    @roles_required(Role.HR)
    def hr_employees():
        if request.method == "POST":
            try:
                employee = container.employee_service.add_employee(
                    actor=current_actor(),
                    name=request.form.get("name", ""),
                    employee_id=request.form.get("employee_id", ""),
                    email=request.form.get("email", ""),
                    default_plate_number=request.form.get("default_plate_number", ""),
                )
                flash(f"Employee {employee.name} added", "success")
                return redirect(url_for("hr_employees"))
            except ValidationError as e:
                flash(str(e), "danger")
            except Exception:
                app.logger.exception("add employee failed")
                flash("System error while adding employee", "danger")

        q = request.args.get("q", "")
        return render_template(
            "hr/employees.html",
            employees=container.employee_service.search(q),
            q=q,
            csv_columns=",".join(CSV_COLUMNS),
            active_page="hr_employees",
        )

    @app.route("/hr/employees/<id>", endpoint="hr_employee_history")
    @roles_required(Role.HR)
    def hr_employee_history(id: str):
        employee = container.employee_service.get(id)
        if not employee:
            flash("Employee not found", "danger")
            return redirect(url_for("hr_employees"))

        return render_template(
            "hr/history.html",
            employee=employee,
            records=container.attendance_service.history(employee.id),
            active_page="hr_employees",
        )

    @app.route("/hr/employees/import", methods=["POST"], endpoint="hr_import_employees")
    @roles_required(Role.HR)
    def hr_import_employees():
        upload = request.files.get("file")
        if upload and upload.filename:
            text = upload.read().decode("utf-8-sig", errors="replace")
        else:
            text = request.form.get("csv_text", "")

        if not text.strip():
            flash("Please choose a CSV file or paste CSV text", "warning")
            return redirect(url_for("hr_employees"))

        try:
            result = container.employee_service.import_csv(actor=current_actor(), text=text)
            app.logger.info(
                "employee import by %s added=%s skipped=%s errors=%s",
                current_actor(),
                result.added,
                result.skipped,
                len(result.errors),
            )
            flash(f"Imported {result.added} employees, skipped {result.skipped} duplicates", "success")
            for err in result.errors[:10]:
                flash(err, "warning")
        except Exception:
            app.logger.exception("employee import failed")
            flash("System error while importing employees", "danger")

        return redirect(url_for("hr_employees"))
