from __future__ import annotations

from datetime import date

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..common.web import (
    DASHBOARD_BY_ROLE,
    current_actor,
    current_role,
    login_required,
    roles_required,
    session_account_valid,
)
from ..container import Container
from ..core.constants import AUDIT_LOG_LIMIT
from ..core.enums import AuditAction, Role
from ..core.exceptions import AuthenticationError, AuthorizationError, ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/", methods=["GET", "POST"], endpoint="login")
    def login():
        if session_account_valid():
            return redirect(url_for("dashboard"))

        if request.method == "POST":
            username = request.form.get("username", "")
            password = request.form.get("password", "")
            remember = request.form.get("remember_me")

            try:
                s_user = container.auth_service.authenticate(username, password)

                session.clear()
                session.permanent = bool(remember)
                session["user_id"] = s_user.user_id
                session["username"] = s_user.username
                session["role"] = s_user.role.value

                container.audit_service.record(s_user.username, AuditAction.LOGIN, s_user.role.value)
                app.logger.info("login ok user=%s role=%s", s_user.username, s_user.role.value)
                return redirect(url_for("dashboard"))
            except AuthenticationError as e:
                app.logger.info("login failed user=%s", username)
                flash(str(e), "danger")
            except Exception as e:
                app.logger.exception("login error")
                if bool(app.config.get("DEBUG", False)):
                    flash(f"System error while logging in: {e}", "danger")
                else:
                    flash("System error while logging in", "danger")

        return render_template("login.html")

    @app.route("/logout", endpoint="logout")
    def logout():
        if "username" in session:
            container.audit_service.record(session["username"], AuditAction.LOGOUT)
        session.clear()
        flash("You have been logged out.", "info")
        return redirect(url_for("login"))

    @app.route("/dashboard", endpoint="dashboard")
    @login_required
    def dashboard():
        role = current_role()
        if role is None:
            session.clear()
            return redirect(url_for("login"))
        return redirect(url_for(DASHBOARD_BY_ROLE[role]))

    @app.route("/admin", endpoint="admin_dashboard")
    @roles_required(Role.SUPERADMIN)
    def admin_dashboard():
        return render_template(
            "admin/dashboard.html",
            stats=container.report_service.dashboard_stats(date.today()),
            users=container.user_service.list_users(),
            employees_count=len(container.employee_service.list_all()),
            audit=container.audit_service.recent(10),
            active_page="admin_dashboard",
        )

    @app.route("/admin/users", methods=["GET", "POST"], endpoint="admin_users")
    @roles_required(Role.SUPERADMIN)
    def admin_users():
        if request.method == "POST":
            try:
                role_s = request.form.get("role", "")
                try:
                    role = Role(role_s)
                except ValueError:
                    raise ValidationError("Invalid role")

                container.user_service.create_user(
                    current_role=current_role(),
                    actor=current_actor(),
                    username=request.form.get("username", ""),
                    password=request.form.get("password", ""),
                    role=role,
                )
                flash("User created", "success")
                return redirect(url_for("admin_users"))
            except (ValidationError, AuthorizationError) as e:
                flash(str(e), "danger")
            except Exception:
                app.logger.exception("create user failed")
                flash("System error while creating user", "danger")

        return render_template(
            "admin/users.html",
            users=container.user_service.list_users(),
            roles=list(Role),
            active_page="admin_users",
        )

    @app.route("/admin/users/<user_id>/password", methods=["POST"], endpoint="admin_user_password")
    @roles_required(Role.SUPERADMIN)
    def admin_user_password(user_id: str):
        try:
            container.user_service.change_password(
                current_role=current_role(),
                current_user_id=session["user_id"],
                actor=current_actor(),
                user_id=user_id,
                password=request.form.get("password", ""),
            )
            flash("Password updated", "success")
        except (ValidationError, AuthorizationError) as e:
            flash(str(e), "danger")
        except Exception:
            app.logger.exception("change password failed")
            flash("System error while updating password", "danger")
        return redirect(url_for("admin_users"))

    @app.route("/admin/users/<user_id>/delete", methods=["POST"], endpoint="admin_user_delete")
    @roles_required(Role.SUPERADMIN)
    def admin_user_delete(user_id: str):
        try:
            container.user_service.delete_user(
                current_role=current_role(),
                current_user_id=session["user_id"],
                actor=current_actor(),
                user_id=user_id,
            )
            flash("User deleted", "success")
        except (ValidationError, AuthorizationError) as e:
            flash(str(e), "danger")
        except Exception:
            app.logger.exception("delete user failed")
            flash("System error while deleting user", "danger")
        return redirect(url_for("admin_users"))

    @app.route("/admin/audit", endpoint="admin_audit")
    @roles_required(Role.SUPERADMIN)
    def admin_audit():
        limit = min(max(request.args.get("limit", default=200, type=int), 1), AUDIT_LOG_LIMIT)
        return render_template(
            "admin/audit.html",
            entries=container.audit_service.recent(limit),
            active_page="admin_audit",
        )

    @app.route("/account/password", methods=["GET", "POST"], endpoint="account_password")
    @login_required
    def account_password():
        if request.method == "POST":
            password = request.form.get("password", "")
            if password != request.form.get("confirm_password", ""):
                flash("Passwords do not match", "danger")
            else:
                try:
                    container.user_service.change_password(
                        current_role=current_role(),
                        current_user_id=session["user_id"],
                        actor=current_actor(),
                        user_id=session["user_id"],
                        password=password,
                    )
                    flash("Password updated", "success")
                    return redirect(url_for("dashboard"))
                except (ValidationError, AuthorizationError) as e:
                    flash(str(e), "danger")
                except Exception:
                    app.logger.exception("change own password failed")
                    flash("System error while updating password", "danger")

        return render_template("account/password.html", active_page="account_password")
