import logging
from typing import List, Optional, Dict, Any
from sqlalchemy import select, func, case

from database.models import Contestant, Prediction, Match
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


def _accuracy(correct: int, scored: int) -> float:
    """Percentage with one decimal; 0.0 when nothing is scored yet."""
    if not scored:
        return 0.0
    return round(100.0 * correct / scored, 1)


class LeaderboardRepository(BaseRepository):
    """
    Aggregations over scored predictions.

    A correct tendency is counted as tendency_points > 0. A wrong tendency
    is scored with 0 tendency points, so "IS NOT NULL" would count misses.
    """

    def _aggregate_columns(self):
        return (
            func.count(Prediction.id).label('scored_predictions'),
            func.coalesce(func.sum(Prediction.total_points), 0).label('total_points'),
            func.coalesce(func.sum(case((Prediction.tendency_points > 0, 1), else_=0)), 0).label('correct_tendencies'),
            func.coalesce(func.sum(case((Prediction.exact_score_bonus == 3, 1), else_=0)), 0).label('exact_scores'),
            func.coalesce(func.sum(case((Prediction.goal_diff_bonus == 1, 1), else_=0)), 0).label('correct_goal_diffs'),
        )

    def get_leaderboard(
        self,
        competition_id: Optional[str] = None,
        min_scored: int = 0,
        limit: Optional[int] = None
    ) -> List[Dict[str, Any]]:
        """Rank contestants by total points, then average points.

        Args:
            competition_id: Restrict to matches of one competition
            min_scored: Hide contestants with fewer scored predictions
            limit: Maximum number of entries

        Returns:
            List of leaderboard entry dicts with a 1-based rank
        """
        stmt = (
            select(
                Contestant.id,
                Contestant.display_name,
                Contestant.provider,
                *self._aggregate_columns()
            )
            .join(Prediction, Prediction.contestant_id == Contestant.id)
            .where(Prediction.status == 'scored')
        )
        if competition_id:
            stmt = stmt.join(Match, Match.id == Prediction.match_id).where(Match.competition_id == competition_id)

        stmt = stmt.group_by(Contestant.id, Contestant.display_name, Contestant.provider)
        if min_scored > 0:
            stmt = stmt.having(func.count(Prediction.id) >= min_scored)

        entries = []
        for row in self.db.execute(stmt).all():
            scored = int(row.scored_predictions or 0)
            total = int(row.total_points or 0)
            correct = int(row.correct_tendencies or 0)
            entries.append({
                'contestant_id': row.id,
                'display_name': row.display_name,
                'provider': row.provider,
                'scored_predictions': scored,
                'total_points': total,
                'avg_points': round(total / scored, 2) if scored else 0.0,
                'correct_tendencies': correct,
                'exact_scores': int(row.exact_scores or 0),
                'correct_goal_diffs': int(row.correct_goal_diffs or 0),
                'accuracy': _accuracy(correct, scored),
            })

        entries.sort(key=lambda e: (-e['total_points'], -e['avg_points'], e['display_name']))
        if limit:
            entries = entries[:limit]

        for rank, entry in enumerate(entries, start=1):
            entry['rank'] = rank

        return entries

    def get_contestant_stats(self, contestant_id: str) -> Optional[Dict[str, Any]]:
        contestant = self._one_or_none(select(Contestant).where(Contestant.id == contestant_id))
        if contestant is None:
            return None

        total_predictions = self.db.execute(
            select(func.count(Prediction.id)).where(Prediction.contestant_id == contestant_id)
        ).scalar_one()

        row = self.db.execute(
            select(*self._aggregate_columns()).where(
                Prediction.contestant_id == contestant_id,
                Prediction.status == 'scored'
            )
        ).one()

        scored = int(row.scored_predictions or 0)
        total = int(row.total_points or 0)
        correct = int(row.correct_tendencies or 0)
        return {
            'contestant_id': contestant.id,
            'display_name': contestant.display_name,
            'provider': contestant.provider,
            'total_predictions': int(total_predictions or 0),
            'scored_predictions': scored,
            'total_points': total,
            'avg_points': round(total / scored, 2) if scored else 0.0,
            'correct_tendencies': correct,
            'exact_scores': int(row.exact_scores or 0),
            'correct_goal_diffs': int(row.correct_goal_diffs or 0),
            'accuracy': _accuracy(correct, scored),
            'current_streak': contestant.current_streak,
            'current_streak_type': contestant.current_streak_type,
            'best_streak': contestant.best_streak,
            'worst_streak': contestant.worst_streak,
            'best_exact_streak': contestant.best_exact_streak,
            'best_tendency_streak': contestant.best_tendency_streak,
        }
