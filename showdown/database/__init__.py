"""
Place Value Showdown Database Layer.

Supabase integration for completed-match high scores.
"""

from showdown.database.client import get_supabase_client
from showdown.database.high_scores import HighScoreManager
from showdown.database.models import HighScore

__all__ = [
    "get_supabase_client",
    "HighScore",
    "HighScoreManager",
]
