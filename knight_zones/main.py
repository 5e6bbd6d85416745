"""
Knight Zones AI Service - FastAPI Application
Provides move legality, state transitions, AI move selection and evaluation
endpoints for the presentation layer.

The service is stateless: every request carries the full game state and
every state-changing endpoint returns the next one.
"""

import logging
import random
import time
from typing import Dict, List, Optional

from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from pydantic import BaseModel, Field

from .ai.evaluation import evaluate_breakdown
from .ai.factory import AIFactory
from .config.difficulty import get_difficulty_description
from .config.settings import load_settings
from .core.logging_config import configure_third_party_loggers, setup_logging
from .errors import AIError, KnightZonesError
from .game_engine import GameEngine
from .metrics import record_ai_move
from .models import Difficulty, GameState, GameStatusSummary, Player, Position

settings = load_settings()

# Configure logging
setup_logging(
    "knight_zones",
    level=settings.log_level,
    format_style=settings.log_format,
    propagate=True,
)
configure_third_party_loggers(quiet=True)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Knight Zones AI Service",
    description="Rules and AI move selection service for Knight Zones",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(KnightZonesError)
async def knight_zones_error_handler(request: Request, exc: KnightZonesError):
    logger.warning(f"{request.url.path}: {exc}")
    return JSONResponse(status_code=400, content={"detail": exc.to_dict()})


class NewGameRequest(BaseModel):
    """Request model for starting a game"""
    seed: Optional[int] = Field(None, ge=0, le=0x7FFFFFFF)


class GameStateResponse(BaseModel):
    """Game state plus derived score/termination summary"""
    game_state: GameState = Field(alias="gameState")
    status: GameStatusSummary

    class Config:
        populate_by_name = True


class LegalMovesRequest(BaseModel):
    """Request model for legal move queries"""
    game_state: GameState = Field(alias="gameState")
    player: Optional[Player] = None

    class Config:
        populate_by_name = True


class LegalMovesResponse(BaseModel):
    player: Player
    moves: List[Position]


class ApplyMoveRequest(BaseModel):
    """Request model for applying a move for the side to move"""
    game_state: GameState = Field(alias="gameState")
    move: Position

    class Config:
        populate_by_name = True


class PassRequest(BaseModel):
    game_state: GameState = Field(alias="gameState")

    class Config:
        populate_by_name = True


class MoveRequest(BaseModel):
    """Request model for AI move selection"""
    game_state: GameState = Field(alias="gameState")
    difficulty: Difficulty = settings.default_difficulty
    seed: Optional[int] = Field(
        None,
        ge=0,
        le=0x7FFFFFFF,
        description="Optional RNG seed for deterministic AI behavior"
    )

    class Config:
        populate_by_name = True


class MoveResponse(BaseModel):
    """Response model for AI move selection"""
    move: Position
    evaluation: Optional[float] = None
    passed: bool = False
    random_move: bool = Field(False, alias="randomMove")
    nodes_visited: int = Field(0, alias="nodesVisited")
    thinking_time_ms: int = Field(alias="thinkingTimeMs")
    difficulty: Difficulty

    class Config:
        populate_by_name = True


class EvaluationRequest(BaseModel):
    """Request model for position evaluation"""
    game_state: GameState = Field(alias="gameState")

    class Config:
        populate_by_name = True


class EvaluationResponse(BaseModel):
    """Green-perspective score and its weighted terms"""
    score: float
    breakdown: Dict[str, float]


def _state_response(node) -> GameStateResponse:
    return GameStateResponse(
        gameState=GameState.from_node(node),
        status=GameEngine.get_status(node),
    )


@app.get("/")
async def root():
    """Health check endpoint"""
    return {
        "service": "Knight Zones AI Service",
        "status": "running",
        "version": "1.0.0"
    }


@app.get("/health")
async def health_check():
    """Health check for container orchestration"""
    return {"status": "healthy"}


@app.get("/metrics")
async def metrics():
    """Prometheus metrics endpoint."""
    data = generate_latest()
    return Response(content=data, media_type=CONTENT_TYPE_LATEST)


@app.get("/ai/difficulties")
async def list_difficulties():
    return {d.value: get_difficulty_description(d) for d in Difficulty}


@app.post("/game/new", response_model=GameStateResponse)
async def new_game(request: NewGameRequest):
    rng = random.Random(request.seed) if request.seed is not None else None
    node = GameEngine.new_game(rng)
    return _state_response(node)


@app.post("/rules/legal_moves", response_model=LegalMovesResponse)
async def legal_moves(request: LegalMovesRequest):
    node = request.game_state.to_node()
    player = request.player or node.turn
    moves = GameEngine.get_valid_moves(node, player)
    return LegalMovesResponse(
        player=player,
        moves=[Position.from_tuple(m) for m in moves],
    )


@app.post("/rules/apply_move", response_model=GameStateResponse)
async def apply_move(request: ApplyMoveRequest):
    node = request.game_state.to_node()
    next_node = GameEngine.apply_move(node, request.move.to_tuple())
    return _state_response(next_node)


@app.post("/rules/pass", response_model=GameStateResponse)
async def pass_turn(request: PassRequest):
    node = request.game_state.to_node()
    return _state_response(GameEngine.apply_pass(node))


@app.post("/ai/move", response_model=MoveResponse)
def get_ai_move(request: MoveRequest):
    """
    Get the AI-selected move for the side to move.

    Declared as a plain function so FastAPI runs the (CPU-bound) search in
    its threadpool instead of on the event loop.
    """
    start_time = time.time()
    node = request.game_state.to_node()
    difficulty = request.difficulty.value

    if GameEngine.is_game_over(node):
        record_ai_move(difficulty, "game_over", time.time() - start_time)
        raise HTTPException(status_code=409, detail="Game is already over")

    try:
        ai = AIFactory.create_from_difficulty(
            request.difficulty, node.turn, rng_seed=request.seed
        )
        result = ai.choose_move(node)
    except AIError as e:
        logger.error(f"AI move selection failed: {e}", exc_info=True)
        record_ai_move(difficulty, "error", time.time() - start_time)
        raise HTTPException(status_code=500, detail=e.to_dict())
    except KnightZonesError:
        raise
    except Exception as e:
        logger.error(f"AI move selection failed: {e}", exc_info=True)
        record_ai_move(difficulty, "error", time.time() - start_time)
        raise HTTPException(status_code=500, detail=f"AI failed: {e}")

    elapsed = time.time() - start_time
    outcome = "pass" if result.passed else ("random" if result.random_move else "search")
    record_ai_move(difficulty, outcome, elapsed, result.nodes_visited)
    logger.info(
        f"AI move: {node.turn.value} {difficulty} -> {result.move} "
        f"({outcome}, score={result.score}, nodes={result.nodes_visited}, "
        f"{elapsed * 1000:.0f}ms)"
    )

    return MoveResponse(
        move=Position.from_tuple(result.move),
        evaluation=result.score,
        passed=result.passed,
        randomMove=result.random_move,
        nodesVisited=result.nodes_visited,
        thinkingTimeMs=int(elapsed * 1000),
        difficulty=request.difficulty,
    )


@app.post("/ai/evaluate", response_model=EvaluationResponse)
async def evaluate_position(request: EvaluationRequest):
    node = request.game_state.to_node()
    breakdown = evaluate_breakdown(node)
    return EvaluationResponse(score=breakdown["total"], breakdown=breakdown)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8001)
