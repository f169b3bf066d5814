"""Operation history."""

from app.services.history.store import HistoryStore

__all__ = ["HistoryStore"]
