from sqlalchemy.orm import validates

from extensions import db
from millionaire.constants import QUESTION_LEVELS


class Question(db.Model):
    """A quiz question; answer1 is always the correct one."""
    __tablename__ = "questions"

    id = db.Column(db.Integer, primary_key=True)
    level = db.Column(db.Integer, nullable=False)
    text = db.Column(db.String(500), nullable=False)
    answer1 = db.Column(db.String(200), nullable=False)
    answer2 = db.Column(db.String(200), nullable=False)
    answer3 = db.Column(db.String(200), nullable=False)
    answer4 = db.Column(db.String(200), nullable=False)
    created_at = db.Column(db.DateTime, server_default=db.func.now())

    __table_args__ = (
        db.Index("ix_question_level", "level"),
    )

    @validates("level")
    def validate_level(self, key, level):
        if level not in QUESTION_LEVELS:
            raise ValueError(f"Question level must be within 0..{QUESTION_LEVELS[-1]}, got {level}")
        return level

    def answer(self, slot):
        return getattr(self, f"answer{slot}")
