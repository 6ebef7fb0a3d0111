from __future__ import annotations

from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from checkers.board import BOARD_SIZE

from .schemas import InteractionRequest
from .session import GameSession


def create_app(session: Optional[GameSession] = None) -> FastAPI:
    app = FastAPI(title="Checkers Rule Engine", version="1.0.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
        allow_credentials=True,
    )

    game_session = session if session is not None else GameSession()

    def get_session() -> GameSession:
        return game_session

    @app.get("/health")
    def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/board")
    def read_board(session: GameSession = Depends(get_session)):
        return session.serialize()

    @app.get("/legal-destinations")
    def read_legal_destinations(
        row: int = Query(..., ge=0, lt=BOARD_SIZE),
        col: int = Query(..., ge=0, lt=BOARD_SIZE),
        session: GameSession = Depends(get_session),
    ):
        try:
            return session.get_legal_destinations(row, col)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

    @app.post("/interaction")
    def interact(payload: InteractionRequest, session: GameSession = Depends(get_session)):
        return session.interact(payload)

    @app.post("/transition-complete")
    def complete_transition(session: GameSession = Depends(get_session)):
        return session.complete_transition()

    @app.post("/reset")
    def reset_game(session: GameSession = Depends(get_session)):
        return session.reset()

    return app


app = create_app()
