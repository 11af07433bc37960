from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from .grid import Coord, Grid


class Phase(Enum):
    ACTIVE = 'active'
    TERMINAL_PENDING = 'terminal_pending'  # game over, waiting for undo or accept
    ENDED = 'ended'


class Command(Enum):
    MOVE_UP = 'up'
    MOVE_DOWN = 'down'
    MOVE_LEFT = 'left'
    MOVE_RIGHT = 'right'
    UNDO = 'undo'
    REVERT = 'revert'  # game-over undo: always replays the saved seed
    RESTART = 'restart'
    QUIT = 'quit'
    ACCEPT = 'accept'
    NOOP = 'noop'


@dataclass(frozen=True)
class Snapshot:
    """The single retained (grid, score, seed) triple used for undo."""
    grid: Grid
    score: int
    seed: int


@dataclass(frozen=True)
class Session:
    """Everything a running game needs between two inputs."""
    grid: Grid
    score: int
    seed: int
    backup: Snapshot
    phase: Phase = Phase.ACTIVE
    seed_hacking: bool = False

    def snapshot(self) -> Snapshot:
        return Snapshot(self.grid, self.score, self.seed)

    def with_phase(self, phase: Phase) -> 'Session':
        return replace(self, phase=phase)

    @property
    def terminal(self) -> bool:
        return self.phase == Phase.TERMINAL_PENDING


@dataclass(frozen=True)
class StepResult:
    """
    What the caller gets back after every input: the next session, whether the
    board moved, where a tile spawned, and the final score when a game finished
    (quit, accept or restart) so the caller can append it to the score log.
    """
    session: Session
    changed: bool = False
    spawned: Optional[Coord] = None
    final_score: Optional[int] = None

    @property
    def terminal(self) -> bool:
        return self.session.terminal
