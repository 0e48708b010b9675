import enum

from sqlalchemy.ext.mutable import MutableDict

from extensions import db
from millionaire.constants import ANSWER_LETTERS as LETTERS
from millionaire.services import help_generator


class HelpKind(str, enum.Enum):
    AUDIENCE_HELP = "audience_help"
    FIFTY_FIFTY = "fifty_fifty"
    FRIEND_CALL = "friend_call"


class GameQuestion(db.Model):
    """
    A question as it is played inside one game.

    Columns a..d hold the original answer slot (1..4) shown behind each
    letter; slot 1 is the correct answer. help_hash collects what the used
    helps produced, e.g.

        {
            "fifty_fifty": ["a", "b"],
            "audience_help": {"a": 42, "b": 37, "c": 12, "d": 9},
            "friend_call": "Aunt Masha thinks the right answer is A",
        }
    """
    __tablename__ = "game_questions"

    id = db.Column(db.Integer, primary_key=True)
    game_id = db.Column(db.Integer, db.ForeignKey("games.id", ondelete="CASCADE"), nullable=False)
    question_id = db.Column(db.Integer, db.ForeignKey("questions.id"), nullable=False)

    a = db.Column(db.Integer, nullable=False)
    b = db.Column(db.Integer, nullable=False)
    c = db.Column(db.Integer, nullable=False)
    d = db.Column(db.Integer, nullable=False)

    help_hash = db.Column(MutableDict.as_mutable(db.JSON), nullable=False, default=dict)

    game = db.relationship("Game", back_populates="game_questions")
    question = db.relationship("Question")

    __table_args__ = (
        db.Index("ix_game_question_game", "game_id"),
    )

    def __init__(self, **kwargs):
        kwargs.setdefault("help_hash", {})
        super().__init__(**kwargs)

    @property
    def key_shuffle(self):
        return {letter: getattr(self, letter) for letter in LETTERS}

    @property
    def level(self):
        return self.question.level

    @property
    def text(self):
        return self.question.text

    def variants(self):
        return {letter: self.question.answer(slot) for letter, slot in self.key_shuffle.items()}

    @property
    def correct_answer_key(self):
        return next(letter for letter, slot in self.key_shuffle.items() if slot == 1)

    def answer_correct(self, letter):
        return str(letter).strip().lower() == self.correct_answer_key

    def keys_to_use(self):
        """Letters still on the board after a possible fifty-fifty."""
        return list(self.help_hash.get(HelpKind.FIFTY_FIFTY.value) or LETTERS)

    def help_for(self, help_type):
        return self.help_hash.get(HelpKind(help_type).value)

    # --- helps ---

    def add_audience_help(self, rng=None):
        if HelpKind.AUDIENCE_HELP.value in self.help_hash:
            return
        self.help_hash[HelpKind.AUDIENCE_HELP.value] = help_generator.audience_distribution(
            self.keys_to_use(), self.correct_answer_key, LETTERS, rng=rng
        )

    def add_fifty_fifty(self, rng=None):
        if HelpKind.FIFTY_FIFTY.value in self.help_hash:
            return
        self.help_hash[HelpKind.FIFTY_FIFTY.value] = help_generator.fifty_fifty(
            LETTERS, self.correct_answer_key, rng=rng
        )

    def add_friend_call(self, rng=None):
        if HelpKind.FRIEND_CALL.value in self.help_hash:
            return
        self.help_hash[HelpKind.FRIEND_CALL.value] = help_generator.friend_call(
            self.keys_to_use(), self.correct_answer_key, rng=rng
        )

    def add_help(self, help_type, rng=None):
        adders = {
            HelpKind.AUDIENCE_HELP: self.add_audience_help,
            HelpKind.FIFTY_FIFTY: self.add_fifty_fifty,
            HelpKind.FRIEND_CALL: self.add_friend_call,
        }
        adders[HelpKind(help_type)](rng=rng)
