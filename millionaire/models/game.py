import datetime
import enum

from extensions import db
from millionaire.constants import GAME_TIME_LIMIT, QUESTION_LEVELS
from millionaire.errors import (
    AlreadyFinished,
    HelpAlreadyUsed,
    NothingToCashOut,
    OutOfRangeLevel,
    UnknownHelp,
)
from millionaire.models.game_question import HelpKind
from millionaire.services.prize_table import ConfiguredPrizes, get_prize_table


class GameStatus(str, enum.Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    FAIL = "fail"
    TIMEOUT = "timeout"
    MONEY = "money"


class Game(db.Model):
    """
    One play-through of a user.

    The status is never stored: it is derived from finished_at, is_failed
    and current_level (see `status`). A finished game accepts no further
    answers, helps or cash-outs.
    """
    __tablename__ = "games"

    TIME_LIMIT = GAME_TIME_LIMIT
    PRIZES = ConfiguredPrizes("prizes")
    FIREPROOF_LEVELS = ConfiguredPrizes("fireproof_levels")

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False)

    current_level = db.Column(db.Integer, default=0, nullable=False)
    is_failed = db.Column(db.Boolean, default=False, nullable=False)
    prize = db.Column(db.Integer, default=0, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.datetime.utcnow, nullable=False)
    finished_at = db.Column(db.DateTime, nullable=True)

    audience_help_used = db.Column(db.Boolean, default=False, nullable=False)
    fifty_fifty_used = db.Column(db.Boolean, default=False, nullable=False)
    friend_call_used = db.Column(db.Boolean, default=False, nullable=False)

    version_id = db.Column(db.Integer, nullable=False)

    user = db.relationship("User", back_populates="games")
    game_questions = db.relationship(
        "GameQuestion",
        back_populates="game",
        order_by="GameQuestion.id",
        cascade="all, delete-orphan",
    )

    __table_args__ = (
        db.Index("ix_games_user", "user_id"),
        db.Index("ix_games_finished_at", "finished_at"),
        # at most one unfinished game per user
        db.Index(
            "ux_games_user_unfinished",
            "user_id",
            unique=True,
            sqlite_where=finished_at.is_(None),
            postgresql_where=finished_at.is_(None),
        ),
    )
    __mapper_args__ = {"version_id_col": version_id}

    def __init__(self, **kwargs):
        kwargs.setdefault("current_level", 0)
        kwargs.setdefault("is_failed", False)
        kwargs.setdefault("prize", 0)
        kwargs.setdefault("created_at", datetime.datetime.utcnow())
        for kind in HelpKind:
            kwargs.setdefault(f"{kind.value}_used", False)
        super().__init__(**kwargs)

    @property
    def prize_table(self):
        return get_prize_table()

    @property
    def max_level(self):
        return QUESTION_LEVELS[-1]

    @property
    def finished(self):
        return self.finished_at is not None

    @property
    def status(self):
        if not self.finished:
            return GameStatus.IN_PROGRESS

        if self.is_failed:
            # a failed game that ran past the limit was lost on time
            if self.finished_at - self.created_at > self.TIME_LIMIT:
                return GameStatus.TIMEOUT
            return GameStatus.FAIL

        if self.current_level > self.max_level:
            return GameStatus.WON

        return GameStatus.MONEY

    # --- questions ---

    @property
    def current_game_question(self):
        if not 0 <= self.current_level < len(self.game_questions):
            raise OutOfRangeLevel(self.current_level)
        return self.game_questions[self.current_level]

    @property
    def previous_level(self):
        return self.current_level - 1

    @property
    def previous_game_question(self):
        if self.previous_level < 0:
            return None
        return self.game_questions[self.previous_level]

    # --- transitions ---

    def time_out(self, now=None):
        """Finishes an unfinished game that ran out of time. Returns True if it did."""
        now = now or datetime.datetime.utcnow()
        if self.finished or now - self.created_at <= self.TIME_LIMIT:
            return False

        self._finish(self.prize_table.fireproof_prize(self.previous_level), failed=True, now=now)
        return True

    def answer_current_question(self, letter, now=None):
        """
        Checks `letter` against the current question and moves the game on.

        Returns True when the answer was right and in time. A wrong answer
        or an answer after TIME_LIMIT finishes the game as failed, with the
        prize of the last fireproof level passed.
        """
        if self.finished:
            raise AlreadyFinished(self.id)

        now = now or datetime.datetime.utcnow()
        if self.time_out(now):
            return False

        if not self.current_game_question.answer_correct(letter):
            self._finish(self.prize_table.fireproof_prize(self.previous_level), failed=True, now=now)
            return False

        if self.current_level == self.max_level:
            self.current_level += 1
            self._finish(self.prize_table.top_prize, failed=False, now=now)
        else:
            self.current_level += 1
        return True

    def take_money(self, now=None):
        """
        Ends the game with the prize of the last answered level and returns
        the amount credited. Past TIME_LIMIT the game times out instead and
        keeps the fireproof floor.
        """
        if self.finished:
            raise AlreadyFinished(self.id)

        now = now or datetime.datetime.utcnow()
        if self.time_out(now):
            return self.prize

        if self.current_level == 0:
            raise NothingToCashOut()

        prize = self.prize_table[self.previous_level]
        self._finish(prize, failed=False, now=now)
        return prize

    def _finish(self, prize, failed, now):
        self.finished_at = now
        self.is_failed = failed
        self.prize = prize
        if self.user is not None:
            self.user.credit(prize)

    # --- helps ---

    def help_used(self, help_type):
        return bool(getattr(self, f"{HelpKind(help_type).value}_used"))

    def use_help(self, help_type, rng=None):
        try:
            kind = HelpKind(help_type)
        except ValueError:
            raise UnknownHelp(help_type) from None

        if self.finished:
            raise AlreadyFinished(self.id)
        if self.help_used(kind):
            raise HelpAlreadyUsed(kind.value)

        question = self.current_game_question
        setattr(self, f"{kind.value}_used", True)
        question.add_help(kind, rng=rng)

    def use_audience_help(self, rng=None):
        self.use_help(HelpKind.AUDIENCE_HELP, rng=rng)

    def use_fifty_fifty(self, rng=None):
        self.use_help(HelpKind.FIFTY_FIFTY, rng=rng)

    def use_friend_call(self, rng=None):
        self.use_help(HelpKind.FRIEND_CALL, rng=rng)
