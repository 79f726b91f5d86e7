from __future__ import annotations

from datetime import date
from functools import wraps

from flask import current_app, flash, redirect, render_template, request, session, url_for

from ..core.enums import Role
from .datetime_utils import parse_iso_date

DASHBOARD_BY_ROLE = {
    Role.SECURITY: "security_dashboard",
    Role.HR: "hr_dashboard",
    Role.DEAN: "dean_dashboard",
    Role.SUPERADMIN: "admin_dashboard",
}


def current_role() -> Role | None:
    try:
        return Role(session.get("role"))
    except ValueError:
        return None


def current_actor() -> str:
    return session.get("username") or "anonymous"


def render_forbidden():
    current_user = {"username": session.get("username"), "role": session.get("role")}
    return render_template("403.html", current_user=current_user), 403


def session_account_valid() -> bool:
    """The signed-in account still exists, is active and keeps the session's role.

    Clears the session otherwise, so deleted or demoted accounts lose access
    on their next request rather than when the cookie expires.
    """

    user_id = session.get("user_id")
    if not user_id:
        return False

    user = current_app.extensions["gate_attendance"].users_repo.get_by_id(user_id)
    if user and user.is_active and user.role.value == session.get("role"):
        return True

    current_app.logger.info("session dropped for user_id=%s: account removed or changed", user_id)
    session.clear()
    return False


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if not session_account_valid():
            flash("Please log in to continue", "warning")
            return redirect(url_for("login"))
        return view(*args, **kwargs)

    return wrapper


def roles_required(*roles: Role):
    """Allow only the given roles; anonymous users go to login, others get 403."""

    allowed = {r.value for r in roles}

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if not session_account_valid():
                return redirect(url_for("login"))
            if session.get("role") not in allowed:
                return render_forbidden()
            return view(*args, **kwargs)

        return wrapper

    return decorator


def arg_date(name: str, default: date) -> date:
    value = request.args.get(name)
    if not value:
        return default
    try:
        return parse_iso_date(value)
    except ValueError:
        flash(f"Invalid {name} date, showing {default:%Y-%m-%d}", "warning")
        return default


def form_flag(name: str) -> bool:
    return request.form.get(name) in {"1", "on", "true", "yes"}
