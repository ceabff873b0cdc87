"""Entry point for the Grid Snake game."""

from __future__ import annotations

from grid_snake.config import configure_logging
from grid_snake.game import GridSnake


def main() -> None:
    configure_logging()
    game = GridSnake()
    game.start()


if __name__ == "__main__":
    main()
