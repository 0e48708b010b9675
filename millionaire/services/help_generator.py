"""
Data produced by the three helps. Every generator takes the letters still
on the board, the correct letter and a random source, so tests can pass a
seeded random.Random to get reproducible hints.
"""

import random

FRIENDS = [
    "Vasily Petrovich",
    "Aunt Masha",
    "Professor Lebedev",
    "Your neighbour Kolya",
    "Grandma Zina",
]

# How often the friend on the phone names the right answer
FRIEND_ACCURACY = 0.8


def audience_distribution(keys, correct_key, all_keys, rng=None):
    """
    Vote percentages for every letter in `all_keys`, summing to 100.

    Letters outside `keys` (removed by fifty-fifty) get no votes. The correct
    letter always gets strictly more votes than any other letter.
    """
    rng = rng or random.Random()

    weights = {key: 0 for key in all_keys}
    for key in keys:
        if key == correct_key:
            weights[key] = rng.randint(40, 80)
        else:
            weights[key] = rng.randint(0, 30)

    total = sum(weights.values())
    votes = {key: weight * 100 // total for key, weight in weights.items()}
    # rounding leftovers go to the favourite
    votes[correct_key] += 100 - sum(votes.values())
    return votes


def fifty_fifty(keys, correct_key, rng=None):
    rng = rng or random.Random()
    wrong = sorted(key for key in keys if key != correct_key)
    return sorted([correct_key, rng.choice(wrong)])


def friend_call(keys, correct_key, rng=None):
    rng = rng or random.Random()
    friend = rng.choice(FRIENDS)

    wrong = sorted(key for key in keys if key != correct_key)
    if wrong and rng.random() >= FRIEND_ACCURACY:
        guess = rng.choice(wrong)
    else:
        guess = correct_key

    return f"{friend} thinks the right answer is {guess.upper()}"
