from datetime import datetime

from extensions import db


class LogEntry(db.Model):
    __tablename__ = "log_entries"

    id = db.Column(db.Integer, primary_key=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    source = db.Column(db.String(50), nullable=False)
    message = db.Column(db.Text, nullable=False)
    game_id = db.Column(db.Integer, db.ForeignKey("games.id", ondelete="SET NULL"), nullable=True)

    __table_args__ = (
        db.Index("ix_log_entries_game", "game_id"),
    )
