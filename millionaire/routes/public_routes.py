from flask import Blueprint, jsonify

from millionaire.models import User

public_bp = Blueprint("public", __name__)

@public_bp.route("/")
def index():
    users = User.query.order_by(User.balance.desc(), User.id).all()
    return jsonify([
        {"id": u.id, "name": u.name, "balance": u.balance, "games": len(u.games)}
        for u in users
    ])
