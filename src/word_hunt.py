#!/usr/bin/env python3
# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Word Hunt

Terminal front end for the word hunt puzzle:
1. Generate a grid with the configured words hidden in 8 directions
2. Read drags as "row col row col" lines and check them against the words
3. Count down and show the final message once every word is found

Usage:
    # Default puzzle
    python word_hunt.py

    # With YAML configuration:
    python word_hunt.py --config puzzle.yaml

    # Custom words, reproducible grid, SVG snapshot:
    python word_hunt.py --words "cat,dog,bird" --size 8 --seed 7 --svg grid.svg
"""

import logging
import os
import random
import sys
import time
from typing import Callable, IO, Optional

# Add src to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from config import (
    PuzzleConfig, create_argument_parser, load_config, ConfigValidationError
)
from logging_config import setup_logging
from session import Countdown, GameSession
from svg_renderer import SVGRenderer


WIN_MESSAGE = "Congrats, you found them all!"
FINAL_MESSAGE = "Thanks for playing!"
HELP_TEXT = (
    "Enter a drag as 'row col row col' (0-based), "
    "'restart' for a new grid or 'quit' to exit."
)


class WordHuntApp:
    """
    Line-oriented shell around a GameSession.

    Workflow:
    1. Build the session from config
    2. Print the grid and remaining count
    3. Play each input line as a drag
    4. On a win, celebrate and count down
    """

    def __init__(
        self,
        config: PuzzleConfig,
        stdin: Optional[IO[str]] = None,
        stdout: Optional[IO[str]] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.config = config
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.sleep = sleep
        self.logger = logging.getLogger(__name__)

        rng = random.Random(config.seed) if config.seed is not None else None
        self.session = GameSession(
            words=config.words,
            size=config.size,
            retry_budget=config.retry_budget,
            rng=rng,
            win_delay=config.timing.win_delay_seconds,
        )

    def write(self, text: str = "") -> None:
        self.stdout.write(text + "\n")
        self.stdout.flush()

    def show_board(self) -> None:
        self.write(self.session.grid.to_string())
        self.write(f"Words left: {self.session.remaining_count}")

    def export_svg(self) -> Optional[str]:
        """Write the current grid as SVG if an svg file is configured."""
        if not self.config.output.svg_file:
            return None

        os.makedirs(self.config.output.directory, exist_ok=True)
        path = os.path.join(self.config.output.directory, self.config.output.svg_file)
        renderer = SVGRenderer()
        renderer.save(renderer.render(self.session.grid), path)
        self.logger.info(f"Grid written to {path}")
        return path

    def play_move(self, line: str) -> Optional[str]:
        """Play one 'r1 c1 r2 c2' line as a drag. Returns the found word."""
        parts = line.split()
        if len(parts) != 4:
            raise ValueError("expected four numbers")
        r1, c1, r2, c2 = (int(p) for p in parts)

        session = self.session
        session.start_drag(r1, c1)
        session.continue_drag(r2, c2)
        if not session.grid.is_valid_position(r2, c2):
            # Pointer off the grid ends the drag
            return session.leave_grid()
        return session.end_drag()

    def finish(self) -> None:
        """Win sequence: delay, message, countdown, final message."""
        self.session.celebrate(self.sleep)
        self.write(WIN_MESSAGE)

        timing = self.config.timing
        if timing.countdown_ticks > 0:
            self.write(str(timing.countdown_ticks))
            Countdown(
                ticks=timing.countdown_ticks,
                interval=timing.tick_interval_seconds,
                sleep=self.sleep,
            ).run(lambda value: self.write(str(value)))
        self.write(FINAL_MESSAGE)

    def run(self) -> int:
        """Run until won, quit or end of input. Returns an exit code."""
        self.export_svg()
        self.write(HELP_TEXT)
        self.show_board()
        if self.session.is_won:
            self.finish()
            return 0

        for raw in self.stdin:
            line = raw.strip()
            if not line:
                continue
            command = line.lower()
            if command in ("quit", "exit"):
                return 0
            if command == "restart":
                self.session.restart()
                self.export_svg()
                self.show_board()
                if self.session.is_won:
                    self.finish()
                    return 0
                continue

            found_before = len(self.session.found_words)
            try:
                word = self.play_move(line)
            except ValueError as e:
                self.write(f"Invalid move '{line}': {e}")
                continue

            if word is None:
                self.write("No word there.")
                continue
            if len(self.session.found_words) == found_before:
                self.write(f"Already found: {word}")
                continue

            self.write(f"Found: {word}")
            if self.session.is_won:
                self.finish()
                return 0
            self.show_board()

        return 0


def main():
    """Main entry point."""
    parser = create_argument_parser()
    args = parser.parse_args()

    try:
        config = load_config(args)

        if args.dry_run:
            print("Configuration valid:")
            print(f"  Size: {config.size}")
            print(f"  Words: {', '.join(config.words)}")
            print(f"  Retry Budget: {config.retry_budget}")
            print(f"  Output Directory: {config.output.directory}")
            return

        setup_logging(
            output_dir=config.output.directory,
            log_level=config.output.log_level,
            log_file_prefix=config.output.log_file_prefix,
            enable_console=config.output.enable_console_logging,
        )
        sys.exit(WordHuntApp(config).run())

    except ConfigValidationError as e:
        print(f"Configuration error: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nGame cancelled.")
        sys.exit(0)
    except Exception:
        logging.getLogger(__name__).exception("Unexpected error")
        print("Something went wrong. Please retry.")
        sys.exit(1)


if __name__ == "__main__":
    main()
