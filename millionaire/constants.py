"""Game constants shared by the models and services."""

from datetime import timedelta

QUESTION_LEVELS = range(15)
ANSWER_LETTERS = ("a", "b", "c", "d")
GAME_TIME_LIMIT = timedelta(minutes=35)
