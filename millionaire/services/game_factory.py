import logging
import random

from extensions import db
from millionaire.constants import ANSWER_LETTERS, QUESTION_LEVELS
from millionaire.errors import InsufficientQuestions
from millionaire.models import Game, GameQuestion
from millionaire.services import question_bank
from millionaire.services.log_service import log_event

logger = logging.getLogger(__name__)


def shuffle_answer_slots(rng):
    """Maps every letter to one of the original slots 1..4, uniformly over all permutations."""
    slots = [1, 2, 3, 4]
    rng.shuffle(slots)
    return dict(zip(ANSWER_LETTERS, slots))


def create_game_for_user(user, rng=None):
    """
    Builds and stores a new game with one question per level.

    Raises InsufficientQuestions before anything is written when a level has
    no question left.
    """
    rng = rng or random.Random()

    picked = []
    for level in QUESTION_LEVELS:
        question = question_bank.fetch_one(level, exclude_ids=[q.id for q in picked], rng=rng)
        if question is None:
            logger.warning("Cannot build a game for user %s: level %s is empty", user.id, level)
            raise InsufficientQuestions(level)
        picked.append(question)

    game = Game(user=user)
    for question in picked:
        game.game_questions.append(GameQuestion(question=question, **shuffle_answer_slots(rng)))

    db.session.add(game)
    db.session.flush()
    log_event("game", f"User {user.id} started game {game.id}", game=game)
    db.session.commit()
    return game
