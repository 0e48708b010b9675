"""Prize schedule: the amount won per level and the fireproof floors."""

from dataclasses import dataclass

from flask import current_app, has_app_context

from config import Config
from millionaire.constants import QUESTION_LEVELS


@dataclass(frozen=True)
class PrizeTable:
    prizes: tuple
    fireproof_levels: tuple = ()

    def __post_init__(self):
        if len(self.prizes) != len(QUESTION_LEVELS):
            raise ValueError(
                f"Prize table needs {len(QUESTION_LEVELS)} entries, got {len(self.prizes)}"
            )
        if any(b <= a for a, b in zip(self.prizes, self.prizes[1:])):
            raise ValueError("Prizes must be strictly increasing")
        for level in self.fireproof_levels:
            if level not in QUESTION_LEVELS:
                raise ValueError(f"Fireproof level {level} is out of range")

    def __getitem__(self, level):
        return self.prizes[level]

    def __len__(self):
        return len(self.prizes)

    @property
    def max_level(self):
        return len(self.prizes) - 1

    @property
    def top_prize(self):
        return self.prizes[-1]

    def fireproof_prize(self, answered_level):
        """Prize kept after a failure when `answered_level` was the last level passed."""
        passed = [level for level in self.fireproof_levels if level <= answered_level]
        return self.prizes[max(passed)] if passed else 0

    @classmethod
    def from_config(cls, config):
        return cls(
            prizes=tuple(config.get("PRIZES", Config.PRIZES)),
            fireproof_levels=tuple(sorted(config.get("FIREPROOF_LEVELS", Config.FIREPROOF_LEVELS))),
        )


DEFAULT_PRIZE_TABLE = PrizeTable(
    prizes=tuple(Config.PRIZES),
    fireproof_levels=tuple(sorted(Config.FIREPROOF_LEVELS)),
)


def get_prize_table():
    if has_app_context():
        return PrizeTable.from_config(current_app.config)
    return DEFAULT_PRIZE_TABLE


class ConfiguredPrizes:
    """Read-only attribute mirroring one field of the configured prize table."""

    def __init__(self, field):
        self.field = field

    def __get__(self, obj, owner=None):
        return getattr(get_prize_table(), self.field)
