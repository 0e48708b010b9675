"""
Operations the web layer performs on games.

Every function loads the game, checks ownership, applies one transition
and commits once, so the game update and the balance credit of a finished
game are stored together or not at all.
"""

import logging
from functools import wraps

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm.exc import StaleDataError

from extensions import db
from millionaire.errors import (
    AccessDenied,
    AlreadyFinished,
    ConcurrentUpdate,
    GameError,
    GameNotFound,
)
from millionaire.models import Game, GameStatus, HelpKind
from millionaire.services.game_factory import create_game_for_user
from millionaire.services.log_service import log_event

logger = logging.getLogger(__name__)


def _commit():
    try:
        db.session.commit()
    except StaleDataError as e:
        db.session.rollback()
        logger.warning("Concurrent game update rejected: %s", e)
        raise ConcurrentUpdate(str(e)) from e


def _rollback_on_error(f):
    @wraps(f)
    def wrapped(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except GameError:
            db.session.rollback()
            raise
    return wrapped


def find_game_in_progress(user):
    return Game.query.filter_by(user_id=user.id, finished_at=None) \
        .order_by(Game.created_at.desc()) \
        .first()


def _load_game(game_id, user):
    game = db.session.get(Game, game_id)
    if game is None:
        raise GameNotFound(game_id)
    if game.user_id != user.id:
        raise AccessDenied(game_id)
    return game


def get_game(game_id, user):
    """Loads an owned game, finishing it first if it ran out of time."""
    game = _load_game(game_id, user)
    if game.time_out():
        log_event("game", f"Game {game.id} ran out of time", game=game)
        _commit()
    return game


@_rollback_on_error
def start_game(user, rng=None):
    """Returns (game, created). An unfinished game is returned instead of a new one."""
    existing = find_game_in_progress(user)
    if existing is not None:
        if not existing.time_out():
            return existing, False
        log_event("game", f"Game {existing.id} ran out of time", game=existing)
        _commit()

    try:
        game = create_game_for_user(user, rng=rng)
    except IntegrityError:
        # a parallel request stored its unfinished game first
        db.session.rollback()
        existing = find_game_in_progress(user)
        if existing is None:
            raise
        logger.info("User %s already started game %s", user.id, existing.id)
        return existing, False
    return game, True


@_rollback_on_error
def submit_answer(game_id, user, letter):
    game = _load_game(game_id, user)
    level = game.current_level
    correct = game.answer_current_question(letter)

    if game.finished:
        log_event(
            "game",
            f"Game {game.id} finished as {game.status.value} at level {level}, prize {game.prize}",
            game=game,
        )
    _commit()
    return game, correct


@_rollback_on_error
def cash_out(game_id, user):
    game = _load_game(game_id, user)
    amount = game.take_money()
    if game.status == GameStatus.TIMEOUT:
        log_event("game", f"Game {game.id} ran out of time", game=game)
    else:
        log_event("game", f"User {user.id} took {amount} in game {game.id}", game=game)
    _commit()
    return game, amount


@_rollback_on_error
def request_help(game_id, user, help_type, rng=None):
    game = get_game(game_id, user)
    if game.finished:
        raise AlreadyFinished(game.id)
    game.use_help(help_type, rng=rng)
    log_event("game", f"Game {game.id} used {HelpKind(help_type).value}", game=game)
    _commit()
    return game


def get_game_display(game):
    data = {
        "id": game.id,
        "user_id": game.user_id,
        "status": game.status.value,
        "finished": game.finished,
        "current_level": game.current_level,
        "prize": game.prize,
        "created_at": game.created_at.isoformat() if game.created_at else None,
        "finished_at": game.finished_at.isoformat() if game.finished_at else None,
        "prizes": list(game.prize_table.prizes),
        "fireproof_levels": list(game.prize_table.fireproof_levels),
        "helps": {kind.value: game.help_used(kind) for kind in HelpKind},
        "question": None,
    }

    if game.status == GameStatus.IN_PROGRESS:
        question = game.current_game_question
        variants = question.variants()
        keys = question.keys_to_use()
        data["question"] = {
            "level": question.level,
            "text": question.text,
            "variants": {letter: variants[letter] for letter in keys},
            "help": dict(question.help_hash),
        }

    return data


def get_user_games_display(user):
    return [
        {
            "id": g.id,
            "status": g.status.value,
            "current_level": g.current_level,
            "prize": g.prize,
            "created_at": g.created_at.isoformat() if g.created_at else None,
        }
        for g in user.games
    ]
