import random

from millionaire.services import help_generator

LETTERS = ("a", "b", "c", "d")


def test_audience_votes_favour_correct_letter():
    for seed in range(200):
        votes = help_generator.audience_distribution(LETTERS, "c", LETTERS, rng=random.Random(seed))

        assert set(votes) == set(LETTERS)
        assert sum(votes.values()) == 100
        assert all(votes["c"] > v for letter, v in votes.items() if letter != "c")


def test_audience_ignores_removed_letters():
    votes = help_generator.audience_distribution(["a", "d"], "d", LETTERS, rng=random.Random(3))

    assert votes["b"] == votes["c"] == 0
    assert votes["a"] + votes["d"] == 100


def test_fifty_fifty_keeps_correct_letter():
    for seed in range(50):
        pair = help_generator.fifty_fifty(LETTERS, "a", rng=random.Random(seed))

        assert len(pair) == 2
        assert "a" in pair
        assert pair == sorted(pair)


def test_fifty_fifty_picks_every_wrong_letter_eventually():
    rng = random.Random(10)
    others = {help_generator.fifty_fifty(LETTERS, "a", rng=rng)[1] for _ in range(100)}
    assert others == {"b", "c", "d"}


def test_friend_is_mostly_right():
    rng = random.Random(2026)
    answers = [help_generator.friend_call(LETTERS, "b", rng=rng)[-1] for _ in range(1000)]

    right = answers.count("B") / len(answers)
    assert 0.7 < right < 0.9
    assert set(answers) == {"A", "B", "C", "D"}


def test_friend_only_names_letters_on_the_board():
    rng = random.Random(4)
    answers = {help_generator.friend_call(["b", "c"], "b", rng=rng)[-1] for _ in range(200)}
    assert answers <= {"B", "C"}
