"""Login, sign-up and password recovery routes."""

from __future__ import annotations

from flask import current_app, flash, redirect, render_template, request, url_for

from ...access import current_user, login_user, logout_user
from ...extensions import get_backend
from ...services import auth
from . import bp
from .forms import ForgotPasswordForm, LoginForm, ResetPasswordForm, SignupForm


@bp.route("/login", methods=["GET", "POST"])
def login():
    form = LoginForm()
    if request.method == "GET":
        return render_template("auth/login.html", form=form, error=None)

    form = LoginForm.from_mapping(request.form)
    if not form.validate():
        return render_template("auth/login.html", form=form, error=form.first_error()), 400

    backend = get_backend()
    try:
        user = auth.sign_in(
            email=form.email,
            password=form.password,
            users=backend.users,
            events=backend.session_events,
        )
    except auth.AuthError as exc:
        return render_template("auth/login.html", form=form, error=str(exc)), 401

    login_user(user)
    return redirect(url_for("dashboard.index"))


@bp.route("/signup", methods=["GET", "POST"])
def signup():
    form = SignupForm()
    if request.method == "GET":
        return render_template("auth/signup.html", form=form, error=None)

    form = SignupForm.from_mapping(request.form)
    if not form.validate():
        return render_template("auth/signup.html", form=form, error=form.first_error()), 400

    try:
        auth.sign_up(
            email=form.email,
            password=form.password,
            name=form.name,
            users=get_backend().users,
        )
    except auth.AuthError as exc:
        return render_template("auth/signup.html", form=form, error=str(exc)), 400

    return redirect(url_for("auth.signup_success"))


@bp.get("/signup-success")
def signup_success():
    return render_template("auth/signup_success.html")


@bp.post("/logout")
def logout():
    auth.sign_out(current_user(), events=get_backend().session_events)
    logout_user()
    return redirect(url_for("home.landing_page"))


@bp.route("/forgot-password", methods=["GET", "POST"])
def forgot_password():
    """Issue a reset link; the response never reveals whether the email exists."""

    form = ForgotPasswordForm()
    if request.method == "GET":
        return render_template("auth/forgot_password.html", form=form, error=None, sent=False)

    form = ForgotPasswordForm.from_mapping(request.form)
    if not form.validate():
        return (
            render_template(
                "auth/forgot_password.html", form=form, error=form.first_error(), sent=False
            ),
            400,
        )

    config = current_app.config["BUDGETPULSE_CONFIG"]
    token = auth.request_password_reset(
        form.email,
        users=get_backend().users,
        ttl_minutes=config.RESET_TOKEN_TTL_MINUTES,
    )
    if token is not None:
        reset_url = url_for("auth.reset_password", token=token, _external=True)
        # No mail transport is configured; dev mode surfaces the link in the log.
        if config.DEV_MODE:
            current_app.logger.info("Password reset link: %s", reset_url)
    return render_template("auth/forgot_password.html", form=form, error=None, sent=True)


@bp.route("/reset-password", methods=["GET", "POST"])
def reset_password():
    backend = get_backend()
    if request.method == "GET":
        token = request.args.get("token", "")
        error = None
        try:
            auth.verify_reset_token(token, users=backend.users)
        except auth.AuthError as exc:
            error = str(exc)
        form = ResetPasswordForm.from_mapping({"token": token})
        return render_template("auth/reset_password.html", form=form, error=error)

    form = ResetPasswordForm.from_mapping(request.form)
    if not form.validate():
        return (
            render_template("auth/reset_password.html", form=form, error=form.first_error()),
            400,
        )

    try:
        auth.reset_password_with_token(
            form.token,
            form.password,
            users=backend.users,
            events=backend.session_events,
        )
    except auth.AuthError as exc:
        return render_template("auth/reset_password.html", form=form, error=str(exc)), 400

    flash("Your password has been reset successfully!", "success")
    return redirect(url_for("auth.login"))
