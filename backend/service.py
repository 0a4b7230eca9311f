import logging
from typing import Any, Dict, List

from algorithms import compare_strategies
from models import Edge, SubmitRequest
from network import SINK, SOURCE
from store import ResultStore

logger = logging.getLogger(__name__)


class InvalidAnswerError(ValueError):
    pass


def calculate_max_flow(network: List[Edge]) -> Dict[str, Any]:
    result = compare_strategies([e.as_tuple() for e in network], SOURCE, SINK)
    logger.info("max flow %d over %d edges (ff %.3f ms, ek %.3f ms)", result["max_flow"],
                len(network), result["ford_fulkerson_time"], result["edmonds_karp_time"])
    return result


def validate_answer(network: List[Edge], player_answer: Any) -> Dict[str, Any]:
    # bool is an int subclass but never a valid answer
    if isinstance(player_answer, bool) or not isinstance(player_answer, int) or player_answer < 0:
        raise InvalidAnswerError("Invalid answer. Please provide a non-negative integer.")

    result = calculate_max_flow(network)
    return {
        "is_correct": player_answer == result["max_flow"],
        "correct_answer": result["max_flow"],
        "player_answer": player_answer,
        "ford_fulkerson_time": result["ford_fulkerson_time"],
        "edmonds_karp_time": result["edmonds_karp_time"],
    }


def submit_answer(store: ResultStore, submission: SubmitRequest) -> Dict[str, Any]:
    validation = validate_answer(submission.network, submission.player_answer)
    saved = store.add(
        player_id=submission.player_id,
        player_name=submission.player_name,
        network=submission.network,
        player_answer=validation["player_answer"],
        correct_answer=validation["correct_answer"],
        is_correct=validation["is_correct"],
        ford_fulkerson_time=validation["ford_fulkerson_time"],
        edmonds_karp_time=validation["edmonds_karp_time"],
        time_taken=submission.time_taken,
    )
    return {**validation, "saved": True, "game_result": saved}
