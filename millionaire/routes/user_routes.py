from flask import Blueprint, jsonify, abort, g, request, redirect, url_for, flash

from extensions import db
from millionaire.models import User
from millionaire.routes.auth_routes import login_required
from millionaire.services.game_service import get_user_games_display

user_bp = Blueprint("users", __name__)


def _load_user(user_id):
    user = db.session.get(User, user_id)
    if user is None:
        abort(404)
    return user


@user_bp.route("/<int:user_id>")
def show(user_id):
    user = _load_user(user_id)

    current = g.get("user")
    return jsonify({
        "id": user.id,
        "name": user.name,
        "balance": user.balance,
        "is_current_user": current is not None and current.id == user.id,
        "games": get_user_games_display(user),
    })


# -------------------
# CHANGE NAME AND PASSWORD
# -------------------
@user_bp.route("/<int:user_id>", methods=["PUT", "POST"])
@login_required
def update(user_id):
    user = _load_user(user_id)
    if user.id != g.user.id:
        flash("You can only edit your own profile.", "alert")
        return redirect(url_for("users.show", user_id=user.id))

    data = request.get_json(silent=True) or request.form
    name = (data.get("name") or "").strip()
    password = data.get("password") or ""

    if "name" in data and not name:
        return jsonify({"status": "error", "msg": "Name cannot be empty."}), 400
    if password:
        if len(password) < 6:
            return jsonify({"status": "error", "msg": "Password must be at least 6 characters."}), 400
        if password != (data.get("password_confirmation") or ""):
            return jsonify({"status": "error", "msg": "Passwords do not match."}), 400

    if name:
        user.name = name
    if password:
        user.set_password(password)
    db.session.commit()

    flash("Your profile was updated.", "notice")
    return redirect(url_for("users.show", user_id=user.id))
