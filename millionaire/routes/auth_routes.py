from functools import wraps

from flask import (
    Blueprint, request, jsonify, session, redirect, url_for, flash, g
)

from extensions import db
from millionaire.models import User

auth_bp = Blueprint("auth", __name__)


def _form():
    return request.get_json(silent=True) or request.form


@auth_bp.before_app_request
def load_current_user():
    user_id = session.get("user_id")
    g.user = db.session.get(User, user_id) if user_id else None


# -------------------
# LOGIN REQUIRED
# -------------------
def login_required(f):
    @wraps(f)
    def wrapped(*args, **kwargs):
        if g.get("user") is None:
            flash("You need to sign in or sign up before continuing.", "alert")
            return redirect(url_for("auth.login"))
        return f(*args, **kwargs)
    return wrapped


# -------------------
# LOGIN / LOGOUT
# -------------------
@auth_bp.route("/login", methods=["GET", "POST"])
def login():
    if request.method == "POST":
        data = _form()
        email = (data.get("email") or "").strip().lower()
        user = User.query.filter_by(email=email).first()
        if user and user.check_password(data.get("password") or ""):
            session.clear()
            session["user_id"] = user.id
            flash("Signed in successfully.", "notice")
            return redirect(url_for("public.index"))
        flash("Invalid email or password.", "alert")
        return jsonify({"status": "error", "msg": "Invalid email or password."}), 401

    return jsonify({"status": "login_required"})


@auth_bp.route("/logout")
def logout():
    session.pop("user_id", None)
    flash("Signed out successfully.", "notice")
    return redirect(url_for("public.index"))


@auth_bp.route("/register", methods=["POST"])
def register():
    data = _form()
    name = (data.get("name") or "").strip()
    email = (data.get("email") or "").strip().lower()
    password = data.get("password") or ""

    if not name or not email or len(password) < 6:
        return jsonify({"status": "error", "msg": "Name, email and a password of 6+ characters are required."}), 400
    if User.query.filter_by(email=email).first():
        return jsonify({"status": "error", "msg": "Email is already taken."}), 409

    user = User(name=name, email=email)
    user.set_password(password)
    db.session.add(user)
    db.session.commit()

    session.clear()
    session["user_id"] = user.id
    flash("Welcome! You have signed up successfully.", "notice")
    return redirect(url_for("users.show", user_id=user.id))
