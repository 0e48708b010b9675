import logging

from flask import (
    Blueprint, request, jsonify, redirect, url_for, flash, g
)

from extensions import socketio
from millionaire.errors import (
    AccessDenied,
    AlreadyFinished,
    ConcurrentUpdate,
    GameNotFound,
    HelpAlreadyUsed,
    InsufficientQuestions,
    NothingToCashOut,
    OutOfRangeLevel,
    UnknownHelp,
)
from millionaire.models import GameStatus
from millionaire.routes.auth_routes import login_required
from millionaire.services import game_service
from millionaire.sockets.game_events import game_room

logger = logging.getLogger(__name__)

game_bp = Blueprint("games", __name__)


def _param(name):
    data = request.get_json(silent=True) or {}
    return data.get(name) or request.form.get(name) or request.args.get(name)


def _to_game():
    game_id = (request.view_args or {}).get("game_id")
    if game_id is None:
        return _to_profile()
    return redirect(url_for("games.show", game_id=game_id))


def _to_profile():
    return redirect(url_for("users.show", user_id=g.user.id))


def _broadcast(game):
    socketio.emit("game_update", game_service.get_game_display(game), to=game_room(game.id))


# -------------------
# ERRORS
# -------------------
@game_bp.errorhandler(GameNotFound)
@game_bp.errorhandler(AccessDenied)
def handle_foreign_game(e):
    flash("This is not your game!", "alert")
    return redirect(url_for("public.index"))


@game_bp.errorhandler(AlreadyFinished)
@game_bp.errorhandler(OutOfRangeLevel)
def handle_closed_game(e):
    logger.warning("Action on a closed game rejected: %s", e)
    flash("This game is already over.", "alert")
    return _to_profile()


@game_bp.errorhandler(HelpAlreadyUsed)
@game_bp.errorhandler(UnknownHelp)
@game_bp.errorhandler(NothingToCashOut)
@game_bp.errorhandler(ConcurrentUpdate)
def handle_rejected_action(e):
    flash(str(e), "alert")
    return _to_game()


# -------------------
# GAME ACTIONS
# -------------------
@game_bp.route("/", methods=["POST"])
@login_required
def create():
    try:
        game, created = game_service.start_game(g.user)
    except InsufficientQuestions as e:
        logger.error("Game for user %s not created: %s", g.user.id, e)
        flash("There are not enough questions to start a game yet.", "alert")
        return _to_profile()

    if not created:
        flash("You have not finished your previous game yet.", "alert")
        return redirect(url_for("games.show", game_id=game.id))

    flash(f"Game started at {game.created_at:%Y-%m-%d %H:%M}. Good luck!", "notice")
    return redirect(url_for("games.show", game_id=game.id))


@game_bp.route("/<int:game_id>")
@login_required
def show(game_id):
    game = game_service.get_game(game_id, g.user)
    return jsonify(game_service.get_game_display(game))


@game_bp.route("/<int:game_id>/answer", methods=["PUT", "POST"])
@login_required
def answer(game_id):
    letter = _param("letter") or ""
    game, correct = game_service.submit_answer(game_id, g.user, letter)
    _broadcast(game)

    if correct and not game.finished:
        return redirect(url_for("games.show", game_id=game.id))

    status = game.status
    if status == GameStatus.WON:
        flash(f"Congratulations! You won {game.prize}!", "success")
    elif status == GameStatus.TIMEOUT:
        flash(f"Time is up. Your prize is {game.prize}.", "alert")
    else:
        right = game.current_game_question.correct_answer_key.upper()
        flash(f"Wrong answer, the right one was {right}. Your prize is {game.prize}.", "alert")
    return _to_profile()


@game_bp.route("/<int:game_id>/take_money", methods=["PUT", "POST"])
@login_required
def take_money(game_id):
    game, amount = game_service.cash_out(game_id, g.user)
    _broadcast(game)

    if game.status == GameStatus.TIMEOUT:
        flash(f"Time is up. Your prize is {game.prize}.", "alert")
    else:
        flash(f"You took the money: {amount}. Well played!", "warning")
    return _to_profile()


@game_bp.route("/<int:game_id>/help", methods=["PUT", "POST"])
@login_required
def request_help(game_id):
    help_type = _param("help_type") or ""
    game = game_service.request_help(game_id, g.user, help_type)
    _broadcast(game)

    flash("You used a help.", "info")
    return redirect(url_for("games.show", game_id=game.id))
