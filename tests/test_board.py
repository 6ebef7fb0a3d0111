from __future__ import annotations

import sys
import unittest
from pathlib import Path


REPO_DIR = Path(__file__).resolve().parents[1]
if str(REPO_DIR) not in sys.path:
    sys.path.insert(0, str(REPO_DIR))


from checkers.board import Board  # noqa: E402
from checkers.pieces import Color, Piece  # noqa: E402


class StartingPositionTests(unittest.TestCase):
    def test_twelve_pieces_per_side_on_dark_squares(self) -> None:
        board = Board()
        pieces = board.getAllPieces()

        self.assertEqual(board.countPieces(Color.WHITE), 12)
        self.assertEqual(board.countPieces(Color.BLACK), 12)
        self.assertTrue(all((piece.row + piece.col) % 2 == 1 for piece in pieces))
        self.assertTrue(all(piece.row <= 2 for piece in pieces if piece.color == Color.BLACK))
        self.assertTrue(all(piece.row >= 5 for piece in pieces if piece.color == Color.WHITE))

    def test_piece_identities_are_unique(self) -> None:
        ids = [piece.id for piece in Board().getAllPieces()]
        self.assertEqual(len(ids), len(set(ids)))


class BoardQueryTests(unittest.TestCase):
    def setUp(self) -> None:
        self.board = Board()

    def test_get_piece_out_of_bounds_returns_none(self) -> None:
        for row, col in ((-1, 0), (0, -1), (8, 1), (1, 8), (100, 100)):
            self.assertIsNone(self.board.getPiece(row, col))

    def test_is_within_board(self) -> None:
        self.assertTrue(self.board.isWithinBoard(0, 0))
        self.assertTrue(self.board.isWithinBoard(7, 7))
        self.assertFalse(self.board.isWithinBoard(8, 0))
        self.assertFalse(self.board.isWithinBoard(0, -1))

    def test_is_empty(self) -> None:
        self.assertFalse(self.board.isEmpty(5, 0))
        self.assertTrue(self.board.isEmpty(4, 1))
        self.assertTrue(self.board.isEmpty(-1, -1))

    def test_piece_knows_its_cell(self) -> None:
        piece = self.board.getPiece(2, 1)
        self.assertIsNotNone(piece)
        self.assertEqual(piece.position, (2, 1))
        self.assertEqual(piece.color, Color.BLACK)


class BoardConstructionTests(unittest.TestCase):
    DIAGRAM = [
        ".b......",
        "........",
        "........",
        "........",
        "...b....",
        "..w.....",
        "........",
        ".w......",
    ]

    def test_from_diagram_places_pieces(self) -> None:
        rows = list(self.DIAGRAM)
        rows[7] = "........"
        board = Board.from_diagram(rows)

        self.assertEqual(board.getPiece(0, 1).color, Color.BLACK)
        self.assertEqual(board.getPiece(4, 3).color, Color.BLACK)
        self.assertEqual(board.getPiece(5, 2).color, Color.WHITE)
        self.assertEqual(str(board), "\n".join(rows))

    def test_from_diagram_rejects_light_square(self) -> None:
        with self.assertRaises(ValueError):
            Board.from_diagram(self.DIAGRAM)

    def test_from_diagram_rejects_unknown_symbol(self) -> None:
        rows = ["........"] * 8
        rows[0] = ".x......"
        with self.assertRaises(ValueError):
            Board.from_diagram(rows)

    def test_from_pieces_rejects_shared_cell(self) -> None:
        with self.assertRaises(ValueError):
            Board.from_pieces([Piece(Color.WHITE, 5, 2), Piece(Color.BLACK, 5, 2)])

    def test_state_snapshot_keeps_identity(self) -> None:
        board = Board()
        restored = Board.from_state(board.to_state())

        self.assertEqual(restored.to_state(), board.to_state())
        self.assertEqual(restored.getPiece(5, 0).id, board.getPiece(5, 0).id)
        self.assertIsNot(restored.getPiece(5, 0), board.getPiece(5, 0))


if __name__ == "__main__":
    unittest.main()
