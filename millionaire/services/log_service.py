import logging

from extensions import db
from millionaire.models import LogEntry

logger = logging.getLogger(__name__)


def log_event(source, message, game=None):
    """Writes a journal entry into the current session; the caller commits."""
    logger.info("[%s] %s", source, message)
    entry = LogEntry(source=source, message=message, game_id=game.id if game is not None else None)
    db.session.add(entry)
    return entry


def recent_events(game_id=None, limit=100):
    query = LogEntry.query
    if game_id is not None:
        query = query.filter_by(game_id=game_id)
    return query.order_by(LogEntry.created_at.desc(), LogEntry.id.desc()).limit(limit).all()
