from __future__ import annotations

import sys
import unittest
from pathlib import Path


REPO_DIR = Path(__file__).resolve().parents[1]
if str(REPO_DIR) not in sys.path:
    sys.path.insert(0, str(REPO_DIR))


from fastapi.testclient import TestClient  # noqa: E402

from checkers.board import Board  # noqa: E402
from checkers.game import Game  # noqa: E402
from server.app import create_app  # noqa: E402
from server.schemas import InteractionRequest  # noqa: E402
from server.session import GameSession  # noqa: E402


class GameSessionTests(unittest.TestCase):
    def setUp(self) -> None:
        self.session = GameSession()

    def test_initial_snapshot(self) -> None:
        snapshot = self.session.serialize()

        self.assertEqual(snapshot["boardSize"], 8)
        self.assertEqual(snapshot["state"], "idle")
        self.assertEqual(snapshot["turn"], "white")
        self.assertEqual(snapshot["pieceCounts"], {"white": 12, "black": 12})
        self.assertEqual(len(snapshot["pieces"]), 24)
        self.assertIsNone(snapshot["selected"])
        self.assertEqual(snapshot["legalDestinations"], [])
        self.assertIsNone(snapshot["lastMove"])

    def test_selection_reports_destinations(self) -> None:
        payload = self.session.interact(InteractionRequest(row=5, col=2))

        self.assertTrue(payload["result"]["accepted"])
        self.assertEqual(payload["game"]["state"], "selected")
        self.assertEqual(payload["game"]["selected"], {"row": 5, "col": 2})
        self.assertEqual(
            payload["game"]["legalDestinations"],
            [{"row": 4, "col": 1}, {"row": 4, "col": 3}],
        )

    def test_move_then_transition_complete(self) -> None:
        self.session.interact(InteractionRequest(row=5, col=0))
        moved = self.session.interact(InteractionRequest(row=4, col=1, target="cell"))

        self.assertTrue(moved["result"]["accepted"])
        self.assertTrue(moved["result"]["turnSwitched"])
        self.assertEqual(
            moved["result"]["move"],
            {"start": {"row": 5, "col": 0}, "end": {"row": 4, "col": 1}, "captured": None, "isCapture": False},
        )
        self.assertTrue(moved["game"]["isMoving"])

        blocked = self.session.interact(InteractionRequest(row=2, col=1))
        self.assertFalse(blocked["result"]["accepted"])
        self.assertEqual(blocked["result"]["reason"], "transition_in_flight")

        settled = self.session.complete_transition()
        self.assertFalse(settled["isMoving"])
        self.assertEqual(settled["turn"], "black")
        self.assertEqual(settled["moveCount"], 1)

    def test_capture_reports_removed_piece(self) -> None:
        board = Board.from_diagram([
            ".b......",
            "........",
            "........",
            "........",
            "...b....",
            "..w.....",
            "........",
            "........",
        ])
        jumped_id = board.getPiece(4, 3).id
        session = GameSession(Game(board))
        session.interact(InteractionRequest(row=5, col=2))
        payload = session.interact(InteractionRequest(row=3, col=4))

        self.assertEqual(payload["result"]["capturedPiece"]["id"], jumped_id)
        self.assertEqual(payload["result"]["move"]["captured"], {"row": 4, "col": 3})
        self.assertEqual(payload["game"]["pieceCounts"], {"white": 1, "black": 1})

    def test_legal_destinations_requires_piece(self) -> None:
        with self.assertRaises(ValueError):
            self.session.get_legal_destinations(4, 1)

        payload = self.session.get_legal_destinations(5, 0)
        self.assertEqual(payload["destinations"], [{"row": 4, "col": 1}])

    def test_reset_starts_new_game(self) -> None:
        self.session.interact(InteractionRequest(row=5, col=0))
        self.session.interact(InteractionRequest(row=4, col=1))
        snapshot = self.session.reset()

        self.assertEqual(snapshot["moveCount"], 0)
        self.assertEqual(snapshot["turn"], "white")
        self.assertFalse(snapshot["isMoving"])


class AppRoutesTests(unittest.TestCase):
    def setUp(self) -> None:
        self.client = TestClient(create_app(GameSession()))

    def test_health(self) -> None:
        response = self.client.get("/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "ok"})

    def test_board(self) -> None:
        response = self.client.get("/board")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["turn"], "white")

    def test_legal_destinations_errors(self) -> None:
        self.assertEqual(self.client.get("/legal-destinations", params={"row": 4, "col": 1}).status_code, 400)
        self.assertEqual(self.client.get("/legal-destinations", params={"row": 9, "col": 0}).status_code, 422)

    def test_interaction_flow(self) -> None:
        selected = self.client.post("/interaction", json={"row": 5, "col": 0, "target": "piece"})
        self.assertEqual(selected.status_code, 200)
        self.assertTrue(selected.json()["result"]["accepted"])

        moved = self.client.post("/interaction", json={"row": 4, "col": 1})
        self.assertTrue(moved.json()["game"]["isMoving"])

        settled = self.client.post("/transition-complete")
        self.assertEqual(settled.status_code, 200)
        self.assertEqual(settled.json()["turn"], "black")

    def test_rejected_interaction_is_not_an_http_error(self) -> None:
        response = self.client.post("/interaction", json={"row": 2, "col": 1})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["result"]["reason"], "not_your_turn")

    def test_invalid_target(self) -> None:
        response = self.client.post("/interaction", json={"row": 5, "col": 0, "target": "corner"})
        self.assertEqual(response.status_code, 422)


if __name__ == "__main__":
    unittest.main()
