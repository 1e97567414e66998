"""
Place Value Showdown - High Score Manager

Persists completed-match records to the `high_scores` table.
"""

import logging

from supabase import Client

from showdown.database.models import HighScore
from showdown.engine.base import MatchResult

logger = logging.getLogger(__name__)


class HighScoreManager:
    """Manages high score records in Supabase."""

    def __init__(self, client: Client, table_name: str = "high_scores") -> None:
        self.client = client
        self.table = client.table(table_name)

    def record(
        self,
        player_name: str,
        score: int,
        config_id: str,
        user_id: str | None = None,
    ) -> HighScore:
        """Insert a completed-game score."""
        entry = HighScore(
            player_name=player_name,
            score=score,
            config_id=config_id,
            user_id=user_id,
        )
        data = (
            self.table
            .insert(entry.model_dump(exclude_none=True, mode="json"))
            .execute()
        )
        logger.info("Recorded score %d for %s on %s", score, player_name, config_id)
        return HighScore.model_validate(data.data[0])

    def record_result(
        self,
        result: MatchResult,
        player_name: str,
        config_id: str,
        user_id: str | None = None,
    ) -> HighScore:
        """Insert the student's final score from a match result."""
        return self.record(player_name, result.final_student_score, config_id, user_id)

    def top_scores(self, config_id: str, limit: int = 10) -> list[HighScore]:
        """Best scores for a configuration, highest first."""
        data = (
            self.table
            .select("*")
            .eq("config_id", config_id)
            .order("score", desc=True)
            .limit(limit)
            .execute()
        )
        return [HighScore.model_validate(row) for row in data.data]

    def qualifies(self, config_id: str, score: int, limit: int = 10) -> bool:
        """Whether a score would make the top-``limit`` board."""
        if score <= 0:
            return False
        scores = self.top_scores(config_id, limit)
        if len(scores) < limit:
            return True
        return score > scores[-1].score
