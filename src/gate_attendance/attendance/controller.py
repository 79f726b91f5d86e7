from __future__ import annotations

from datetime import date

from flask import Flask, flash, jsonify, redirect, render_template, request, url_for

from ..common.datetime_utils import format_clock, parse_clock
from ..common.web import arg_date, current_actor, form_flag, login_required, roles_required
from ..container import Container
from ..core.enums import Role
from ..core.exceptions import ValidationError
from ..storage.codec import record_to_dict


def register(app: Flask, container: Container) -> None:
    svc = container.attendance_service

    def _run(action, success_message, error_message):
        """Run a gate action and flash its outcome. Returns the record or None."""

        try:
            record = action()
            flash(success_message(record), "success")
            return record
        except ValidationError as e:
            flash(str(e), "danger")
        except Exception:
            app.logger.exception(error_message)
            flash(f"System error: {error_message}", "danger")
        return None

    # ===== SECURITY GUARD =====

    @app.route("/security", endpoint="security_dashboard")
    @roles_required(Role.SECURITY)
    def security_dashboard():
        today = date.today()
        return render_template(
            "security/dashboard.html",
            employees=container.employee_service.list_all(),
            records=svc.today_records(today),
            active_guests=svc.active_guests(today),
            parking=svc.parking(),
            today=today,
            active_page="security_dashboard",
        )

    @app.route("/security/entry", methods=["POST"], endpoint="security_entry")
    @roles_required(Role.SECURITY)
    def security_entry():
        _run(
            lambda: svc.mark_entry(
                actor=current_actor(),
                employee_key=request.form.get("employee", ""),
                has_car=form_flag("has_car"),
                plate_number=request.form.get("plate_number", ""),
                override_plate=form_flag("override_plate"),
            ),
            lambda r: f"Entry marked for {r.person_name}",
            "marking entry",
        )
        return redirect(url_for("security_dashboard"))

    @app.route("/security/exit", methods=["POST"], endpoint="security_exit")
    @roles_required(Role.SECURITY)
    def security_exit():
        _run(
            lambda: svc.mark_exit(actor=current_actor(), employee_key=request.form.get("employee", "")),
            lambda r: f"Exit marked for {r.person_name}",
            "marking exit",
        )
        return redirect(url_for("security_dashboard"))

    @app.route("/security/guest", methods=["POST"], endpoint="security_guest_entry")
    @roles_required(Role.SECURITY)
    def security_guest_entry():
        _run(
            lambda: svc.register_guest(
                actor=current_actor(),
                guest_name=request.form.get("guest_name", ""),
                has_car=form_flag("has_car"),
                plate_number=request.form.get("plate_number", ""),
            ),
            lambda r: f"Guest entry marked for {r.person_name}",
            "registering guest",
        )
        return redirect(url_for("security_dashboard"))

    @app.route("/security/guest-exit", methods=["POST"], endpoint="security_guest_exit")
    @roles_required(Role.SECURITY)
    def security_guest_exit():
        _run(
            lambda: svc.mark_guest_exit(actor=current_actor(), record_id=request.form.get("record_id", "")),
            lambda r: f"Exit marked for {r.person_name}",
            "marking guest exit",
        )
        return redirect(url_for("security_dashboard"))

    @app.route("/security/parking", methods=["POST"], endpoint="security_parking")
    @roles_required(Role.SECURITY)
    def security_parking():
        try:
            total = int(request.form.get("total_spaces", ""))
        except ValueError:
            flash("Total parking spaces must be a number", "danger")
            return redirect(url_for("security_dashboard"))

        _run(
            lambda: svc.set_capacity(actor=current_actor(), total_spaces=total),
            lambda p: f"Parking capacity set to {p.total_spaces}",
            "updating parking capacity",
        )
        return redirect(url_for("security_dashboard"))

    # ===== HR: RECORD CORRECTIONS =====

    @app.route("/hr/attendance", endpoint="hr_attendance")
    @roles_required(Role.HR)
    def hr_attendance():
        day = arg_date("date", date.today())
        return render_template(
            "hr/attendance.html",
            day=day,
            records=svc.today_records(day),
            parking=svc.parking(),
            active_page="hr_attendance",
        )

    @app.route("/hr/attendance/<record_id>/edit", methods=["GET", "POST"], endpoint="hr_edit_record")
    @roles_required(Role.HR)
    def hr_edit_record(record_id: str):
        record = svc.get_record(record_id)
        if not record:
            flash("Attendance record not found", "danger")
            return redirect(url_for("hr_attendance"))

        if request.method == "POST":
            try:
                time_out_s = request.form.get("time_out", "").strip()
                try:
                    time_out = parse_clock(time_out_s) if time_out_s else None
                except ValueError:
                    raise ValidationError("Time out must be HH:MM or HH:MM:SS")

                updated = svc.edit_record(
                    actor=current_actor(),
                    record_id=record_id,
                    time_out=time_out,
                    plate_number=request.form.get("plate_number", ""),
                )
                flash(f"Record updated for {updated.person_name}", "success")
                return redirect(url_for("hr_attendance", date=updated.work_date.strftime("%Y-%m-%d")))
            except ValidationError as e:
                flash(str(e), "danger")
            except Exception:
                app.logger.exception("edit record failed")
                flash("System error while updating record", "danger")

        return render_template(
            "hr/edit_record.html",
            record=record,
            time_out=format_clock(record.time_out) if record.time_out else "",
            active_page="hr_attendance",
        )

    @app.route("/hr/attendance/<record_id>/delete", methods=["POST"], endpoint="hr_delete_record")
    @roles_required(Role.HR)
    def hr_delete_record(record_id: str):
        record = _run(
            lambda: svc.delete_record(actor=current_actor(), record_id=record_id),
            lambda r: f"Record deleted for {r.person_name}",
            "deleting record",
        )
        day = record.work_date.strftime("%Y-%m-%d") if record else None
        return redirect(url_for("hr_attendance", date=day) if day else url_for("hr_attendance"))

    # ===== JSON =====

    @app.route("/api/parking", endpoint="api_parking")
    @login_required
    def api_parking():
        p = svc.parking()
        return jsonify(
            {
                "totalSpaces": p.total_spaces,
                "occupiedSpaces": p.occupied_spaces,
                "availableSpaces": p.available_spaces,
                "occupancyPercent": p.occupancy_percent,
            }
        )

    @app.route("/api/attendance/today", endpoint="api_attendance_today")
    @login_required
    def api_attendance_today():
        return jsonify([record_to_dict(r) for r in svc.today_records(date.today())])
