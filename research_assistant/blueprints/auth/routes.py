from flask import current_app, render_template, redirect, url_for, flash
from flask_login import login_user, logout_user, login_required, current_user
from . import bp
from .forms import LoginForm, SignupForm, ProfileForm
from ...models.profile import Profile
from ...policy import Identity, insert_owned, scoped, update_owned
from ...services.accounts import EmailTakenError, authenticate, register_user


@bp.route("/login", methods=["GET", "POST"])
def login():
    if current_user.is_authenticated:
        return redirect(url_for("index"))
    form = LoginForm()
    if form.validate_on_submit():
        user = authenticate(form.email.data, form.password.data)
        if user:
            login_user(user)
            return redirect(url_for("index"))
        flash("Invalid credentials", "danger")
    return render_template("auth/login.html", form=form)


@bp.route("/logout", methods=["POST"])
@login_required
def logout():
    logout_user()
    return redirect(url_for("auth.login"))


@bp.route("/signup", methods=["GET", "POST"])
def signup():
    if current_user.is_authenticated:
        return redirect(url_for("index"))
    form = SignupForm()
    if form.validate_on_submit():
        try:
            user = register_user(form.email.data, form.password.data, form.full_name.data)
        except EmailTakenError:
            flash("An account with this email already exists", "danger")
        else:
            current_app.logger.info('Registered user %s', user.id)
            flash("Account created. Please sign in.", "success")
            return redirect(url_for("auth.login"))
    return render_template("auth/signup.html", form=form)


@bp.route("/profile", methods=["GET", "POST"])
@login_required
def profile():
    identity = Identity.from_user(current_user)
    row = scoped(Profile, identity).first()
    form = ProfileForm(obj=row)
    if form.validate_on_submit():
        values = {
            'full_name': form.full_name.data or None,
            'company': form.company.data or None,
            'role': form.role.data or None,
        }
        if row is None:
            insert_owned(Profile, identity, **values)
        else:
            update_owned(row, identity, **values)
        flash("Profile updated", "success")
        return redirect(url_for("auth.profile"))
    return render_template("auth/profile.html", form=form)
