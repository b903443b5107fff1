"""Terminal front end: the game loop, key handling and screen drawing."""

from __future__ import annotations

import argparse
import curses
import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Sequence, Union

from .level import Level
from .world import Ongoing

log = logging.getLogger(__name__)

TITLE = "Air Traffic Controller"
DEFAULT_LOG_FILE = "/tmp/atc.log"
STATUS_ROWS = 3

KEY_ESC = 27
KEY_CTRL_C = 3
ENTER_KEYS = frozenset({10, 13, curses.KEY_ENTER})


class GameState(Enum):
    STARTUP = "startup"
    ONGOING = "ongoing"
    RESULTS = "results"
    EXIT = "exit"


@dataclass
class AppFlags:
    """Input flags collected between steps."""

    accept: bool = False


def _fit(text: str, width: int) -> str:
    return text[:width].ljust(width)


def _box(lines: Sequence[str], width: int, height: int, title: str = "") -> list[str]:
    """Draw ``lines`` inside a bordered box of the given outer size."""
    inner_w = max(width - 2, 0)
    inner_h = max(height - 2, 0)
    top = "┌" + title.center(inner_w, "─")[:inner_w] + "┐"
    body = [_fit(line, inner_w) for line in lines[:inner_h]]
    body += [" " * inner_w] * (inner_h - len(body))
    return [top, *("│" + line + "│" for line in body), "└" + "─" * inner_w + "┘"]


class App:
    """The game: a level and the state machine around it."""

    def __init__(self, level: Optional[Level] = None) -> None:
        self.state = GameState.STARTUP
        self.level = level if level is not None else Level.builtin()
        self.status_info: Optional[str] = None
        self.flags = AppFlags()

    def step(self) -> GameState:
        """Advance the state machine once and return the new state."""
        if self.state is GameState.STARTUP:
            self.state = GameState.ONGOING
        elif self.state is GameState.ONGOING:
            outcome = self.level.tick()
            if not isinstance(outcome, Ongoing):
                self.status_info = str(outcome)
                log.info("Game over: %s", self.status_info)
                self.state = GameState.RESULTS
        elif self.state is GameState.RESULTS:
            if self.flags.accept:
                self.state = GameState.EXIT
                self.flags.accept = False
        return self.state

    def on_key(self, key: Union[int, str]) -> None:
        """React to a key press given as a curses key code or a character."""
        if isinstance(key, str):
            if len(key) != 1:
                return
            key = ord(key)
        if key in (KEY_ESC, KEY_CTRL_C):
            self.quit()
        elif key in ENTER_KEYS:
            self.flags.accept = True

    def quit(self) -> None:
        self.state = GameState.EXIT

    def _frame_lines(self, width: int, height: int) -> list[str]:
        map_height = max(height - STATUS_ROWS, 2)
        lines = _box(self.level.render().split("\n"), width, map_height, TITLE)
        if self.status_info is not None:
            lines += _box([self.status_info], width, STATUS_ROWS)
        return lines

    def render(self, screen) -> None:
        """Draw the map and, once the game is over, the status box."""
        screen.erase()
        height, width = screen.getmaxyx()
        for row, line in enumerate(self._frame_lines(width, height)[:height]):
            try:
                screen.addstr(row, 0, line[:width])
            except curses.error:
                # Writing the bottom-right cell moves the cursor off screen.
                pass
        screen.refresh()

    def run(self, screen) -> None:
        """Run the main loop until the game is left."""
        while self.state is not GameState.EXIT:
            self.render(screen)
            key = screen.getch()
            if key != curses.KEY_RESIZE:
                self.on_key(key)
            self.step()


def setup_logging(path: Union[str, Path] = DEFAULT_LOG_FILE) -> logging.Handler:
    """Send log records to a freshly truncated file and return its handler."""
    handler = logging.FileHandler(path, mode="w", encoding="utf-8")
    handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(logging.DEBUG)
    log.debug("Setup logging")
    return handler


def _session(screen) -> None:
    curses.raw()
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    App().run(screen)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="airtraffic", description=TITLE)
    parser.add_argument("--log-file", default=DEFAULT_LOG_FILE, help="where to write the log")
    args = parser.parse_args(argv)
    setup_logging(args.log_file)
    curses.wrapper(_session)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())