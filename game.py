from __future__ import annotations

# Facade module that re-exports the 2048 core.
# The Flask app and the tests import from here; single-responsibility modules
# live under game2048_core/*.

from game2048_core.grid import (
    SIZE,
    MAX_EXPONENT,
    Coord,
    Exponent,
    Grid,
    count_empty,
    empty_cells,
    empty_grid,
    grid_from_columns,
    grid_from_rows,
)
from game2048_core.collapse import SLIDE_CASES, find_target, slide_line
from game2048_core.rotation import rotate_grid, rotate_times
from game2048_core.moves import (
    ROTATIONS,
    Direction,
    MoveResult,
    apply_move,
    legal_directions,
    move_down,
    move_left,
    move_right,
    move_up,
)
from game2048_core.terminal import has_vertical_pair, is_terminal
from game2048_core.spawn import add_random_tile, advance_seed, clock_seed, new_grid
from game2048_core.state import Command, Phase, Session, Snapshot, StepResult
from game2048_core.session import (
    KEY_BINDINGS,
    accept,
    attempt_move,
    command_for_key,
    handle_command,
    new_session,
    quit_session,
    restart,
    resume_session,
    undo,
)
from game2048_core.persist import (
    STATE_FORMAT,
    STATE_SIZE,
    decode_state,
    encode_state,
    game_dir,
    load_state,
    score_path,
    state_path,
    write_score,
    write_state,
)
from game2048_core.selftest import run_slide_cases


def main() -> int:
    # CLI driver delegated to game2048_core.cli
    from game2048_core.cli import main as _main
    return _main()


if __name__ == '__main__':
    raise SystemExit(main())
