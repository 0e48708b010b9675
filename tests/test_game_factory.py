import random

import pytest

from extensions import db
from millionaire.errors import InsufficientQuestions
from millionaire.models import Game, GameQuestion
from millionaire.services import question_bank
from millionaire.services.game_factory import create_game_for_user, shuffle_answer_slots

from conftest import make_question


def test_shuffle_is_a_permutation_of_slots():
    mapping = shuffle_answer_slots(random.Random(1))
    assert set(mapping) == {"a", "b", "c", "d"}
    assert sorted(mapping.values()) == [1, 2, 3, 4]


def test_shuffle_is_reproducible_with_a_seed():
    assert shuffle_answer_slots(random.Random(42)) == shuffle_answer_slots(random.Random(42))


def test_correct_answer_lands_behind_every_letter():
    rng = random.Random(2026)
    letters = set()
    for _ in range(200):
        mapping = shuffle_answer_slots(rng)
        letters.add(next(letter for letter, slot in mapping.items() if slot == 1))
    assert letters == {"a", "b", "c", "d"}


def test_games_with_same_seed_get_same_shuffles(user, other_user, generate_questions):
    generate_questions(15)

    first = create_game_for_user(user, rng=random.Random(9))
    second = create_game_for_user(other_user, rng=random.Random(9))

    assert [gq.key_shuffle for gq in first.game_questions] == [gq.key_shuffle for gq in second.game_questions]
    assert [gq.question_id for gq in first.game_questions] == [gq.question_id for gq in second.game_questions]


def test_every_question_is_used_once(user, generate_questions):
    generate_questions(45)

    game = create_game_for_user(user)

    ids = [gq.question_id for gq in game.game_questions]
    assert len(set(ids)) == 15


def test_missing_level_stops_game_creation(user):
    for level in range(14):
        db.session.add(make_question(level, level))
    db.session.commit()

    with pytest.raises(InsufficientQuestions) as excinfo:
        create_game_for_user(user)

    assert excinfo.value.level == 14
    assert Game.query.count() == 0
    assert GameQuestion.query.count() == 0


def test_question_bank_skips_excluded_questions(app):
    first, second = make_question(2, 1), make_question(2, 2)
    db.session.add_all([first, second])
    db.session.commit()

    assert question_bank.fetch_one(2, exclude_ids=[first.id]) == second
    assert question_bank.fetch_one(2, exclude_ids=[first.id, second.id]) is None
    assert question_bank.fetch_one(7) is None
    assert question_bank.count_by_level() == {2: 2}
