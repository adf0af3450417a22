"""Console session driving a :class:`~gridsweep.engine.Grid`.

Reads ``cmd x y`` lines (1-based coordinates), applies them to the grid and
prints the board after every move until the player wins, hits a hazard or
quits. The elapsed time is reported when the session ends.
"""

from __future__ import annotations
import enum
import logging
import sys
import time
from dataclasses import dataclass
from typing import Callable, Optional, TextIO, Tuple

from .engine import Grid

logger = logging.getLogger(__name__)

CMD_REVEAL = 'reveal'
CMD_FLAG = 'flag'
CMD_QUIT = 'quit'


class CommandError(ValueError):
    """Raised for input lines that cannot be turned into a move."""


class GameState(enum.Enum):
    Active = 0
    Won = 1
    Lost = 2
    Quit = 3


@dataclass
class SessionConfig:
    width: int = 3
    height: int = 3
    hazards: int = 5
    seed: Optional[int] = None


@dataclass
class Command:
    name: str
    x: int = -1
    y: int = -1


def parse_command(line: str) -> Optional[Command]:
    """Turn an input line into a :class:`Command` with 0-based coordinates.

    Returns None for a blank line. Raises :class:`CommandError` for anything
    else that is not ``quit`` or ``NAME X Y``; the name is checked against
    the known commands only after the coordinates are bounds-checked.
    """
    parts = line.split()
    if not parts:
        return None
    name = parts[0]
    if name == CMD_QUIT:
        return Command(name)
    if len(parts) != 3:
        raise CommandError("Invalid input. Please enter a command followed by two integers.")
    try:
        x = int(parts[1])
    except ValueError:
        raise CommandError("Invalid x coordinate. Please enter an integer.") from None
    try:
        y = int(parts[2])
    except ValueError:
        raise CommandError("Invalid y coordinate. Please enter an integer.") from None
    return Command(name, x - 1, y - 1)


class Session:
    def __init__(self, grid: Grid, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None,
                 clock: Callable[[], float] = time.monotonic):
        self.grid = grid
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.clock = clock
        self.state = GameState.Active
        self.duration = 0.0

    @classmethod
    def from_config(cls, config: SessionConfig, **kwargs) -> 'Session':
        return cls(Grid(config.width, config.height, config.hazards, seed=config.seed), **kwargs)

    def _print(self, text: str = '') -> None:
        print(text, file=self.stdout)

    def validate(self, cmd: Command) -> None:
        if not self.grid.in_bounds(cmd.x, cmd.y):
            raise CommandError("Invalid coordinates. Please try again.")

    def apply(self, cmd: Command) -> GameState:
        if cmd.name == CMD_QUIT:
            self._print(self.grid.render_ascii(show_hazards=True))
            self._print("Quit game.")
            return GameState.Quit
        self.validate(cmd)
        if cmd.name not in (CMD_REVEAL, CMD_FLAG):
            raise CommandError("Invalid command. Please use 'reveal' or 'flag'.")
        if cmd.name == CMD_FLAG:
            self.grid.flag(cmd.x, cmd.y)
            return GameState.Active
        if self.grid.reveal(cmd.x, cmd.y):
            self._print(self.grid.render_ascii(show_hazards=True))
            self._print("You hit a hazard! Game over!")
            return GameState.Lost
        if self.grid.check_win():
            self._print(self.grid.render_ascii(show_hazards=True))
            self._print("Congratulations, you won!")
            return GameState.Won
        return GameState.Active

    def run(self) -> Tuple[GameState, float]:
        start = self.clock()
        while self.state is GameState.Active:
            self._print(self.grid.render_ascii())
            self._print("Coordinates are a 1-based index. (1, 1) is the top-left corner.")
            self._print("Enter your move in the format 'cmd x y' (cmd: reveal, flag), or type 'quit' to exit:")
            line = self.stdin.readline()
            if not line:
                # end of input
                line = CMD_QUIT
            try:
                cmd = parse_command(line)
                if cmd is None:
                    continue
                self.state = self.apply(cmd)
            except CommandError as exc:
                self._print(str(exc))
        self.duration = self.clock() - start
        logger.info(f"Session ended: {self.state.name} after {self.duration:.2f}s, "
                    f"{self.grid.revealed_count} cell(s) revealed")
        self._print(f"Game duration: {self.duration:.2f} seconds")
        return self.state, self.duration
