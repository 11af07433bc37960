from __future__ import annotations

from typing import Callable, Dict, Optional

from .grid import SIZE
from .moves import Direction, apply_move
from .spawn import add_random_tile, advance_seed, clock_seed, new_grid
from .state import Command, Phase, Session, Snapshot, StepResult
from .terminal import is_terminal

MOVE_COMMANDS: Dict[Command, Direction] = {
    Command.MOVE_UP: Direction.UP,
    Command.MOVE_DOWN: Direction.DOWN,
    Command.MOVE_LEFT: Direction.LEFT,
    Command.MOVE_RIGHT: Direction.RIGHT,
}

# Letters follow wasd and vi keys; A-D are the final bytes of the arrow key escapes.
KEY_BINDINGS: Dict[str, Command] = {
    'w': Command.MOVE_UP, 'k': Command.MOVE_UP, 'A': Command.MOVE_UP,
    's': Command.MOVE_DOWN, 'j': Command.MOVE_DOWN, 'B': Command.MOVE_DOWN,
    'a': Command.MOVE_LEFT, 'h': Command.MOVE_LEFT, 'D': Command.MOVE_LEFT,
    'd': Command.MOVE_RIGHT, 'l': Command.MOVE_RIGHT, 'C': Command.MOVE_RIGHT,
    'u': Command.UNDO,
    'r': Command.RESTART,
    'q': Command.QUIT,
}


def new_session(seed: Optional[int] = None, seed_hacking: bool = False, size: int = SIZE) -> Session:
    """Starts a game with two tiles. Without a seed, one is taken from the clock."""
    start = clock_seed() if seed is None else seed
    grid, next_seed = new_grid(start, size)
    return Session(
        grid=grid,
        score=0,
        seed=next_seed,
        backup=Snapshot(grid, 0, next_seed),
        phase=Phase.ACTIVE,
        seed_hacking=seed_hacking,
    )


def resume_session(saved: Snapshot, seed_hacking: bool = False) -> Session:
    """Rebuilds a session from a loaded save; the undo slot starts at the loaded state."""
    phase = Phase.TERMINAL_PENDING if is_terminal(saved.grid) else Phase.ACTIVE
    return Session(
        grid=saved.grid,
        score=saved.score,
        seed=saved.seed,
        backup=saved,
        phase=phase,
        seed_hacking=seed_hacking,
    )


def attempt_move(session: Session, direction: Direction) -> StepResult:
    """
    Applies a move. A move that changes nothing leaves the session untouched:
    no score, no spawn, no snapshot. Otherwise the pre-move state becomes the
    undo slot, a tile spawns from the current seed and the seed advances.
    """
    if session.phase != Phase.ACTIVE:
        return StepResult(session)
    moved = apply_move(session.grid, direction)
    if not moved.changed:
        return StepResult(session)
    grid, spawned = add_random_tile(moved.grid, session.seed)
    phase = Phase.TERMINAL_PENDING if is_terminal(grid) else Phase.ACTIVE
    next_session = Session(
        grid=grid,
        score=session.score + moved.score_delta,
        seed=advance_seed(session.seed),
        backup=session.snapshot(),
        phase=phase,
        seed_hacking=session.seed_hacking,
    )
    return StepResult(next_session, changed=True, spawned=spawned)


def undo(session: Session, clock: Callable[[], int] = clock_seed, reroll: bool = True) -> StepResult:
    """
    Restores the undo slot. With seed hacking on and `reroll` set, the seed comes
    from `clock` instead of the slot, so the next spawn is rerolled rather than
    replayed. A restored grid that is itself terminal stays at the game-over prompt.
    """
    if session.phase == Phase.ENDED:
        return StepResult(session)
    backup = session.backup
    seed = clock() if session.seed_hacking and reroll else backup.seed
    restored = Session(
        grid=backup.grid,
        score=backup.score,
        seed=seed,
        backup=backup,
        phase=Phase.TERMINAL_PENDING if is_terminal(backup.grid) else Phase.ACTIVE,
        seed_hacking=session.seed_hacking,
    )
    return StepResult(restored, changed=backup.grid != session.grid)


def accept(session: Session) -> StepResult:
    """Accepts game over; only meaningful while a terminal grid awaits a decision."""
    if session.phase != Phase.TERMINAL_PENDING:
        return StepResult(session)
    return StepResult(session.with_phase(Phase.ENDED), final_score=session.score)


def quit_session(session: Session) -> StepResult:
    if session.phase == Phase.ENDED:
        return StepResult(session)
    return StepResult(session.with_phase(Phase.ENDED), final_score=session.score)


def restart(session: Session, seed: Optional[int] = None) -> StepResult:
    """Deals a new game; the finished game's score is reported for the score log."""
    if session.phase == Phase.ENDED:
        return StepResult(session)
    start = advance_seed(session.seed) if seed is None else seed
    fresh = new_session(seed=start, seed_hacking=session.seed_hacking, size=session.grid.size)
    return StepResult(fresh, changed=True, final_score=session.score)


def handle_command(session: Session, command: Command, clock: Callable[[], int] = clock_seed) -> StepResult:
    """Dispatches one input. Unknown input (NOOP) is an ignored move attempt."""
    direction = MOVE_COMMANDS.get(command)
    if direction is not None:
        return attempt_move(session, direction)
    if command == Command.UNDO:
        return undo(session, clock=clock)
    if command == Command.REVERT:
        return undo(session, reroll=False)
    if command == Command.ACCEPT:
        return accept(session)
    if command == Command.RESTART:
        return restart(session)
    if command == Command.QUIT:
        return quit_session(session)
    return StepResult(session)


def command_for_key(key: str, phase: Phase = Phase.ACTIVE) -> Command:
    """Maps a key to a command; the game-over prompt only understands y/n."""
    if phase == Phase.TERMINAL_PENDING:
        if key == 'y':
            return Command.REVERT
        if key in ('n', ''):
            return Command.ACCEPT
        return Command.NOOP
    return KEY_BINDINGS.get(key, Command.NOOP)
