from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import pygame
from pygame import gfxdraw

from checkers.game import Game, TransitionResult
from checkers.move import Coordinate, Move
from checkers.pieces import Color, Piece


logger = logging.getLogger(__name__)

DEFAULT_ANIMATION_MS = 300


@dataclass
class MoveAnimation:
    piece: Piece
    move: Move
    captured: Optional[Piece]
    started_at: int
    duration: int

    def progress(self, now: int) -> float:
        if self.duration <= 0:
            return 1.0
        return min(1.0, (now - self.started_at) / self.duration)


class CheckersGUI:
    def __init__(
        self,
        game: Game,
        square_size: int = 80,
        info_height: int = 120,
        animation_ms: int = DEFAULT_ANIMATION_MS,
    ) -> None:
        self.game = game
        self.square_size = square_size
        self.board_size = self.game.board.boardSize
        self.board_pixels = self.square_size * self.board_size
        self.info_height = info_height
        self.animation_ms = animation_ms

        self.margin = 40
        self.window_width = self.board_pixels + self.margin * 2
        self.window_height = self.board_pixels + self.info_height + self.margin * 2

        self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption("Checkers")

        self.font = pygame.font.SysFont("arial", 24)
        self.small_font = pygame.font.SysFont("arial", 16)
        self.title_font = pygame.font.SysFont("arial", 36, bold=True)
        self.clock = pygame.time.Clock()

        self.hover_cell: Coordinate | None = None
        self.destinations: set[Coordinate] = set()
        self.animation: MoveAnimation | None = None
        self.piece_surfaces: dict[Color, pygame.Surface] = {}

        self.colors = {
            "light": (233, 210, 173),
            "dark": (145, 104, 66),
            "highlight": (246, 227, 90),
            "selected": (252, 142, 80),
            "white_piece": (245, 245, 245),
            "black_piece": (35, 35, 35),
            "outline": (25, 25, 25),
            "background": (30, 34, 45),
            "board_frame": (82, 54, 29),
            "text": (230, 230, 230),
            "banner": (20, 20, 20),
        }

    def run(self) -> None:
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key in (pygame.K_ESCAPE, pygame.K_q):
                        running = False
                    elif event.key == pygame.K_r:
                        self._new_game()
                elif event.type == pygame.MOUSEMOTION:
                    self.hover_cell = self._board_coords_from_pos(event.pos)
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    self._handle_click(event.pos)

            self._advance_animation(pygame.time.get_ticks())
            self._draw()
            pygame.display.flip()
            self.clock.tick(60)

    def _new_game(self) -> None:
        self.game = Game()
        self.animation = None
        self.destinations.clear()
        logger.info("New game started")

    def _handle_click(self, pos: tuple[int, int]) -> None:
        cell = self._board_coords_from_pos(pos)
        if cell is None:
            return
        row, col = cell
        result = self.game.attemptInteraction(row, col, on_piece=self._hits_piece(pos, cell))
        if not result.accepted:
            return
        if result.move is not None:
            self._start_animation(result)
        self._refresh_destinations()

    def _hits_piece(self, pos: tuple[int, int], cell: Coordinate) -> bool:
        if self.game.board.isEmpty(*cell):
            return False
        cx, cy = self._center_for_cell(*cell)
        radius = (self.square_size - 14) // 2
        return (pos[0] - cx) ** 2 + (pos[1] - cy) ** 2 <= radius ** 2

    def _refresh_destinations(self) -> None:
        selected = self.game.selected_piece
        self.destinations = self.game.legalDestinations(selected) if selected else set()

    def _start_animation(self, result: TransitionResult) -> None:
        piece = self.game.board.getPiece(*result.move.end)
        self.animation = MoveAnimation(
            piece=piece,
            move=result.move,
            captured=result.captured_piece,
            started_at=pygame.time.get_ticks(),
            duration=self.animation_ms,
        )

    def _advance_animation(self, now: int) -> None:
        if self.animation is None:
            return
        if self.animation.progress(now) >= 1.0:
            self.animation = None
            self.game.completeTransition()
            self._refresh_destinations()

    def _board_coords_from_pos(self, pos: tuple[int, int]) -> Coordinate | None:
        x, y = pos
        x -= self.margin
        y -= self.margin
        if x < 0 or y < 0 or x >= self.board_pixels or y >= self.board_pixels:
            return None
        return (y // self.square_size, x // self.square_size)

    def _draw(self) -> None:
        self.screen.fill(self.colors["background"])
        self._draw_board()
        self._draw_selection()
        self._draw_pieces()
        self._draw_info_panel()
        if self.game.game_over and self.animation is None:
            self._draw_winner_banner()

    def _draw_board(self) -> None:
        board_rect = pygame.Rect(self.margin, self.margin, self.board_pixels, self.board_pixels)
        pygame.draw.rect(self.screen, self.colors["board_frame"], board_rect.inflate(20, 20), border_radius=16)

        for row in range(self.board_size):
            for col in range(self.board_size):
                color = self.colors["dark"] if self.game.board.isDarkSquare(row, col) else self.colors["light"]
                pygame.draw.rect(self.screen, color, self._cell_rect(row, col))

    def _draw_selection(self) -> None:
        selected = self.game.selected_piece
        if selected and self.animation is None:
            pygame.draw.rect(
                self.screen,
                self.colors["selected"],
                self._cell_rect(selected.row, selected.col),
                4,
                border_radius=8,
            )

        for dest in self.destinations:
            center = self._center_for_cell(*dest)
            radius = 16 if dest == self.hover_cell else 12
            gfxdraw.filled_circle(self.screen, center[0], center[1], radius, (*self.colors["highlight"], 140))
            gfxdraw.aacircle(self.screen, center[0], center[1], radius, self.colors["outline"])

    def _draw_pieces(self) -> None:
        moving = self.animation.piece if self.animation else None
        for piece in self.game.board.getAllPieces():
            if piece is moving:
                continue
            surface = self._get_piece_surface(piece.color)
            self.screen.blit(surface, surface.get_rect(center=self._center_for_cell(piece.row, piece.col)))

        if self.animation is None:
            return

        t = self.animation.progress(pygame.time.get_ticks())
        captured = self.animation.captured
        if captured is not None:
            fading = self._get_piece_surface(captured.color).copy()
            fading.set_alpha(int(255 * (1.0 - t)))
            row, col = self.animation.move.captured
            self.screen.blit(fading, fading.get_rect(center=self._center_for_cell(row, col)))

        sx, sy = self._center_for_cell(*self.animation.move.start)
        ex, ey = self._center_for_cell(*self.animation.move.end)
        center = (int(sx + (ex - sx) * t), int(sy + (ey - sy) * t))
        surface = self._get_piece_surface(self.animation.piece.color)
        self.screen.blit(surface, surface.get_rect(center=center))

    def _draw_info_panel(self) -> None:
        top = self.margin + self.board_pixels + 24
        board = self.game.board
        lines = [
            f"Current player: {self.game.current_player.value.capitalize()}",
            f"White: {board.countPieces(Color.WHITE)}  |  Black: {board.countPieces(Color.BLACK)}",
            "Keep capturing with the same piece" if self.game.pending_capture else "",
            "R: New game  |  Esc/Q: Quit",
        ]
        for line in lines:
            if not line:
                continue
            text_surface = self.small_font.render(line, True, self.colors["text"])
            self.screen.blit(text_surface, (self.margin, top))
            top += 22

    def _draw_winner_banner(self) -> None:
        label = f"{self.game.winner.value.capitalize()} wins!"
        text = self.title_font.render(label, True, self.colors["text"])
        rect = text.get_rect(center=(self.window_width // 2, self.margin + self.board_pixels // 2))
        backdrop = pygame.Surface(rect.inflate(40, 24).size, pygame.SRCALPHA)
        backdrop.fill((*self.colors["banner"], 200))
        self.screen.blit(backdrop, rect.inflate(40, 24).topleft)
        self.screen.blit(text, rect)

    def _cell_rect(self, row: int, col: int) -> pygame.Rect:
        return pygame.Rect(
            self.margin + col * self.square_size,
            self.margin + row * self.square_size,
            self.square_size,
            self.square_size,
        )

    def _center_for_cell(self, row: int, col: int) -> tuple[int, int]:
        return (
            self.margin + col * self.square_size + self.square_size // 2,
            self.margin + row * self.square_size + self.square_size // 2,
        )

    def _get_piece_surface(self, color: Color) -> pygame.Surface:
        if color in self.piece_surfaces:
            return self.piece_surfaces[color]

        diameter = self.square_size - 14
        radius = diameter // 2
        surface = pygame.Surface((diameter, diameter), pygame.SRCALPHA)
        cx, cy = surface.get_width() // 2, surface.get_height() // 2

        base = self.colors["white_piece"] if color == Color.WHITE else self.colors["black_piece"]
        pygame.draw.circle(surface, base, (cx, cy), radius)
        pygame.draw.circle(surface, self.colors["outline"], (cx, cy), radius, 2)

        self.piece_surfaces[color] = surface
        return surface
