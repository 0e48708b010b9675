from .user import User
from .question import Question, QUESTION_LEVELS
from .game_question import GameQuestion, HelpKind
from .game import Game, GameStatus
from .log_entry import LogEntry

__all__ = [
	"User",
	"Question",
	"QUESTION_LEVELS",
	"GameQuestion",
	"HelpKind",
	"Game",
	"GameStatus",
	"LogEntry",
]
