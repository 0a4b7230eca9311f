from datetime import datetime
from typing import List, Literal, Tuple

from pydantic import BaseModel, ConfigDict, Field

from network import SINK, SOURCE


class Edge(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_: str = Field(..., alias="from", min_length=1)
    to: str = Field(..., min_length=1)
    capacity: int = Field(..., ge=0)

    def as_tuple(self) -> Tuple[str, str, int]:
        return (self.from_, self.to, self.capacity)


class GraphInput(BaseModel):
    edges: List[Edge]
    source: str
    sink: str
    strategy: Literal["dfs", "bfs"] = "bfs"


class GenerateRequest(BaseModel):
    min_capacity: int = 5
    max_capacity: int = 15


class GeneratedNetwork(BaseModel):
    source: str = SOURCE
    sink: str = SINK
    edges: List[Edge]


class CalculateRequest(BaseModel):
    network: List[Edge] = Field(..., min_length=1)


class SubmitRequest(BaseModel):
    player_id: int
    player_name: str = Field(..., min_length=3, max_length=100)
    network: List[Edge] = Field(..., min_length=1)
    player_answer: int = Field(..., ge=0)
    time_taken: int = Field(0, ge=0)


class GameResult(BaseModel):
    id: int
    player_id: int
    player_name: str
    network: List[Edge]
    player_answer: int
    correct_answer: int
    is_correct: bool
    algorithm1_name: str = "Ford-Fulkerson"
    algorithm1_time: float
    algorithm2_name: str = "Edmonds-Karp"
    algorithm2_time: float
    time_taken: int = 0
    created_at: datetime


class LeaderboardEntry(BaseModel):
    player_id: int
    player_name: str
    total_games: int
    correct_answers: int
    avg_ford_fulkerson_time: float
    avg_edmonds_karp_time: float
