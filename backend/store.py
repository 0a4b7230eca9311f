import logging
import threading
from datetime import datetime, timezone
from typing import Dict, List

from models import Edge, GameResult, LeaderboardEntry

logger = logging.getLogger(__name__)


class ResultStore:
    """Quiz attempts kept in process memory, one instance per app."""

    def __init__(self):
        self._lock = threading.Lock()
        self._results: List[GameResult] = []
        self._next_id = 1

    def add(self, player_id: int, player_name: str, network: List[Edge], player_answer: int,
            correct_answer: int, is_correct: bool, ford_fulkerson_time: float,
            edmonds_karp_time: float, time_taken: int = 0) -> GameResult:
        with self._lock:
            result = GameResult(
                id=self._next_id,
                player_id=player_id,
                player_name=player_name,
                network=network,
                player_answer=player_answer,
                correct_answer=correct_answer,
                is_correct=is_correct,
                algorithm1_time=ford_fulkerson_time,
                algorithm2_time=edmonds_karp_time,
                time_taken=time_taken or 0,
                created_at=datetime.now(timezone.utc),
            )
            self._results.append(result)
            self._next_id += 1
        logger.info("saved attempt %d for player %d (correct=%s)", result.id, player_id, is_correct)
        return result

    def _newest_first(self) -> List[GameResult]:
        with self._lock:
            return sorted(self._results, key=lambda r: (r.created_at, r.id), reverse=True)

    def history(self, player_id: int) -> List[GameResult]:
        return [r for r in self._newest_first() if r.player_id == player_id]

    def results(self, limit: int = 100) -> List[GameResult]:
        return self._newest_first()[:limit]

    def leaderboard(self, limit: int = 10) -> List[LeaderboardEntry]:
        with self._lock:
            snapshot = list(self._results)

        groups: Dict[tuple, List[GameResult]] = {}
        for r in snapshot:
            groups.setdefault((r.player_id, r.player_name), []).append(r)

        entries = []
        for (player_id, player_name), games in groups.items():
            n = len(games)
            entries.append(LeaderboardEntry(
                player_id=player_id,
                player_name=player_name,
                total_games=n,
                correct_answers=sum(1 for g in games if g.is_correct),
                avg_ford_fulkerson_time=sum(g.algorithm1_time for g in games) / n,
                avg_edmonds_karp_time=sum(g.algorithm2_time for g in games) / n,
            ))
        entries.sort(key=lambda e: (-e.correct_answers, e.player_id))
        return entries[:limit]

    def __len__(self):
        with self._lock:
            return len(self._results)
