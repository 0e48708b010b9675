import random

from extensions import db
from millionaire.models import Question


def fetch_one(level, exclude_ids=(), rng=None):
    """Random question of `level`, skipping `exclude_ids`; None when the level is exhausted."""
    rng = rng or random.Random()

    query = db.session.query(Question.id).filter(Question.level == level)
    if exclude_ids:
        query = query.filter(Question.id.notin_(list(exclude_ids)))

    ids = sorted(row.id for row in query.all())
    if not ids:
        return None
    return db.session.get(Question, rng.choice(ids))


def count_by_level():
    rows = db.session.query(Question.level, db.func.count(Question.id)) \
        .group_by(Question.level) \
        .all()
    return {level: count for level, count in rows}
