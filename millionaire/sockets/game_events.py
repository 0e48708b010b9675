from flask import session
from flask_socketio import emit, join_room, leave_room

from extensions import db
from millionaire.errors import GameError
from millionaire.models import User
from millionaire.services import game_service


def game_room(game_id):
    return f"game:{game_id}"


def _current_user():
    user_id = session.get("user_id")
    return db.session.get(User, user_id) if user_id else None


def _game_id(data):
    try:
        return int((data or {}).get("game_id"))
    except (TypeError, ValueError):
        return None


def register_game_events(socketio):

    # ---------------------------
    # OWNER OPENS THE GAME PAGE
    # ---------------------------
    @socketio.on("join_game")
    def handle_join_game(data):
        user = _current_user()
        if user is None:
            emit("game_error", {"msg": "Sign in first."})
            return

        game_id = _game_id(data)
        if game_id is None:
            emit("game_error", {"msg": "Missing game id."})
            return

        try:
            game = game_service.get_game(game_id, user)
        except GameError as e:
            emit("game_error", {"msg": str(e)})
            return

        join_room(game_room(game.id))
        emit("game_state", game_service.get_game_display(game))

    # ---------------------------
    # OWNER LEAVES THE GAME PAGE
    # ---------------------------
    @socketio.on("leave_game")
    def handle_leave_game(data):
        game_id = _game_id(data)
        if game_id is not None:
            leave_room(game_room(game_id))
