import logging
from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from algorithms import max_flow
from models import (CalculateRequest, GameResult, GeneratedNetwork, GenerateRequest,
                    GraphInput, LeaderboardEntry, SubmitRequest)
from network import generate_network
from service import InvalidAnswerError, calculate_max_flow, submit_answer
from settings import Settings
from store import ResultStore

logger = logging.getLogger(__name__)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> ResultStore:
    return request.app.state.store


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    logging.basicConfig(level=settings.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    app = FastAPI(title="Traffic MaxFlow API")
    app.state.settings = settings
    app.state.store = ResultStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins, allow_credentials=True,
        allow_methods=["*"], allow_headers=["*"]
    )

    @app.exception_handler(InvalidAnswerError)
    def invalid_answer(request: Request, exc: InvalidAnswerError):
        logger.warning("rejected answer on %s: %s", request.url.path, exc)
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.post("/api/maxflow")
    def compute_maxflow(payload: GraphInput):
        edges_tuples = [e.as_tuple() for e in payload.edges]
        return max_flow(edges_tuples, payload.source, payload.sink, payload.strategy)

    @app.post("/api/traffic/generate", response_model=GeneratedNetwork)
    def generate(payload: GenerateRequest = GenerateRequest(), settings: Settings = Depends(get_settings)):
        lo, hi = payload.min_capacity, payload.max_capacity
        if lo < settings.min_capacity_floor or hi > settings.max_capacity_ceiling or lo >= hi:
            logger.warning("rejected capacity range [%d, %d]", lo, hi)
            raise HTTPException(
                status_code=400,
                detail=(f"Invalid capacity range. Min should be less than Max and within "
                        f"{settings.min_capacity_floor}-{settings.max_capacity_ceiling}."),
            )
        return {"edges": generate_network(lo, hi)}

    @app.post("/api/traffic/calculate")
    def calculate(payload: CalculateRequest):
        return calculate_max_flow(payload.network)

    @app.post("/api/traffic/submit")
    def submit(payload: SubmitRequest, store: ResultStore = Depends(get_store)):
        return submit_answer(store, payload)

    @app.get("/api/traffic/history/{player_id}", response_model=List[GameResult])
    def history(player_id: int, store: ResultStore = Depends(get_store)):
        return store.history(player_id)

    @app.get("/api/traffic/leaderboard", response_model=List[LeaderboardEntry])
    def leaderboard(store: ResultStore = Depends(get_store), settings: Settings = Depends(get_settings)):
        return store.leaderboard(settings.leaderboard_size)

    @app.get("/api/traffic/results", response_model=List[GameResult])
    def results(store: ResultStore = Depends(get_store), settings: Settings = Depends(get_settings)):
        return store.results(settings.results_limit)

    return app


app = create_app()
