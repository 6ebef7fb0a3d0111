from __future__ import annotations

import argparse
import logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	parser = argparse.ArgumentParser(description="Two-player checkers with forced chain captures.")
	parser.add_argument("--log-level", default="info", help="Logging level for the engine and server.")
	commands = parser.add_subparsers(dest="command", required=True)

	serve = commands.add_parser("serve", help="Run the FastAPI backend for a browser front end.")
	serve.add_argument("--host", default="127.0.0.1", help="Bind host for the API server.")
	serve.add_argument("--port", type=int, default=8000, help="Port for the API server.")
	serve.add_argument("--reload", action="store_true", help="Enable autoreload (development only).")

	play = commands.add_parser("play", help="Play locally in a pygame window.")
	play.add_argument("--square-size", type=int, default=80, help="Cell size in pixels.")
	play.add_argument("--animation-ms", type=int, default=300, help="Duration of a move animation.")
	return parser.parse_args(argv)


def serve(args: argparse.Namespace) -> None:
	import uvicorn

	uvicorn.run(
		"server.app:app",
		host=args.host,
		port=args.port,
		reload=args.reload,
		log_level=args.log_level.lower(),
	)


def play(args: argparse.Namespace) -> None:
	import pygame

	from checkers.game import Game
	from ui.pygame_gui import CheckersGUI

	pygame.init()
	try:
		gui = CheckersGUI(Game(), square_size=args.square_size, animation_ms=args.animation_ms)
		gui.run()
	finally:
		pygame.quit()


def main(argv: list[str] | None = None) -> None:
	args = parse_args(argv)
	logging.basicConfig(
		level=args.log_level.upper(),
		format="%(asctime)s %(levelname)s %(name)s: %(message)s",
	)
	if args.command == "serve":
		serve(args)
	else:
		play(args)


if __name__ == "__main__":
	main()
