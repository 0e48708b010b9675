"""Errors raised by the game core and the game service."""


class GameError(Exception):
    """Base class for every game-related failure."""


class InsufficientQuestions(GameError):
    def __init__(self, level):
        super().__init__(f"No question available for level {level}")
        self.level = level


class AlreadyFinished(GameError):
    def __init__(self, game_id=None):
        super().__init__(f"Game {game_id} is already finished")
        self.game_id = game_id


class OutOfRangeLevel(GameError):
    def __init__(self, level):
        super().__init__(f"Game has no question for level {level}")
        self.level = level


class HelpAlreadyUsed(GameError):
    def __init__(self, help_type):
        super().__init__(f"Help {help_type} was already used in this game")
        self.help_type = help_type


class UnknownHelp(GameError):
    def __init__(self, help_type):
        super().__init__(f"Unknown help type: {help_type}")
        self.help_type = help_type


class NothingToCashOut(GameError):
    def __init__(self):
        super().__init__("No question has been answered yet, nothing to take")


class GameNotFound(GameError):
    def __init__(self, game_id):
        super().__init__(f"Game {game_id} not found")
        self.game_id = game_id


class AccessDenied(GameError):
    def __init__(self, game_id):
        super().__init__(f"Game {game_id} belongs to another user")
        self.game_id = game_id


class ConcurrentUpdate(GameError):
    """The game row was changed by another request in the meantime."""
