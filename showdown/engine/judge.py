"""
Place Value Showdown - Round Judge

Compares the two revealed values under the match objective.
Comparison is exact; values come from Decimal arithmetic.
"""

from decimal import Decimal

from showdown.engine.base import Objective, RoundWinner


class RoundJudge:
    """Stateless round and match adjudication."""

    @classmethod
    def decide_winner(
        cls,
        student_value: Decimal | int,
        ai_value: Decimal | int,
        objective: Objective,
    ) -> RoundWinner:
        """
        Determine the winner of a round.

        Args:
            student_value: Value built by the student
            ai_value: Value built by the AI
            objective: Largest or smallest number wins

        Returns:
            STUDENT or AI for a strict win, TIE for equal values
        """
        if student_value == ai_value:
            return RoundWinner.TIE

        student_better = student_value > ai_value
        if objective == Objective.SMALLEST:
            student_better = not student_better

        return RoundWinner.STUDENT if student_better else RoundWinner.AI

    @classmethod
    def match_winner(cls, student_score: int, ai_score: int) -> RoundWinner:
        """
        Determine the match winner from final scores.

        The strictly higher score wins; equal scores are a TIE.
        """
        if student_score > ai_score:
            return RoundWinner.STUDENT
        elif ai_score > student_score:
            return RoundWinner.AI
        else:
            return RoundWinner.TIE
