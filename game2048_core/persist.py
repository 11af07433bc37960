from __future__ import annotations

import os
import struct
import time
from typing import List, Optional

from .grid import SIZE, Grid
from .state import Snapshot

# Native byte order, no padding: SIZE*SIZE exponent bytes (column by column),
# uint32 score, then the seed at time_t width.
STATE_FORMAT = f"={SIZE * SIZE}BIq"
STATE_SIZE = struct.calcsize(STATE_FORMAT)

STATE_FILE = 'state'
SCORE_FILE = 'score.txt'


def _debug() -> bool:
    return os.getenv('GAME2048_DEBUG', '0').lower() in ('1', 'true', 'yes', 'on')


def game_dir() -> str:
    """
    Resolves the directory holding the save file and score log, creating it if needed.
    Order:
    1) GAME2048_DIR
    2) $XDG_CONFIG_HOME/2048
    3) ~/.config/2048
    """
    explicit = os.getenv('GAME2048_DIR')
    if explicit:
        directory = explicit
    elif os.getenv('XDG_CONFIG_HOME'):
        directory = os.path.join(os.environ['XDG_CONFIG_HOME'], '2048')
    else:
        directory = os.path.join(os.path.expanduser('~'), '.config', '2048')
    os.makedirs(directory, exist_ok=True)
    return directory


def encode_state(saved: Snapshot) -> bytes:
    grid = saved.grid
    if grid.size != SIZE:
        raise ValueError(f'Save format supports {SIZE}x{SIZE} only')
    if not 0 <= saved.score <= 0xFFFFFFFF:
        raise ValueError(f'Score does not fit in 32 bits: {saved.score}')
    if not -(1 << 63) <= saved.seed < (1 << 63):
        raise ValueError(f'Seed does not fit in 64 bits: {saved.seed}')
    cells = [grid.at(x, y) for (x, y) in grid.coords()]
    return struct.pack(STATE_FORMAT, *cells, saved.score, saved.seed)


def decode_state(data: bytes) -> Snapshot:
    if len(data) != STATE_SIZE:
        raise ValueError(f'Corrupt state: expected {STATE_SIZE} bytes, got {len(data)}')
    fields = struct.unpack(STATE_FORMAT, data)
    column_major = fields[:SIZE * SIZE]
    score, seed = fields[SIZE * SIZE], fields[SIZE * SIZE + 1]
    cells: List[int] = [0] * (SIZE * SIZE)
    for i, value in enumerate(column_major):
        x, y = divmod(i, SIZE)
        cells[y * SIZE + x] = value
    return Snapshot(Grid(SIZE, tuple(cells)), int(score), int(seed))


def state_path(directory: Optional[str] = None) -> str:
    return os.path.join(directory or game_dir(), STATE_FILE)


def score_path(directory: Optional[str] = None) -> str:
    return os.path.join(directory or game_dir(), SCORE_FILE)


def load_state(path: str) -> Optional[Snapshot]:
    """
    Reads a save file and removes it, so a save is resumed at most once.
    Returns None when there is nothing to load; raises ValueError for a file of
    the wrong size (the file is removed in that case too).
    """
    if not os.path.exists(path):
        if _debug():
            print(f"[state] no save at {path}")
        return None
    with open(path, 'rb') as f:
        data = f.read()
    os.remove(path)
    if _debug():
        print(f"[state] read {len(data)} bytes from {path}")
    return decode_state(data)


def write_state(path: str, saved: Snapshot) -> None:
    data = encode_state(saved)
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, 'wb') as f:
        f.write(data)
    if _debug():
        print(f"[state] wrote {len(data)} bytes to {path}")


def write_score(path: str, score: int, when: Optional[int] = None) -> None:
    """Appends one "unix_time<TAB>score" line to the score log."""
    stamp = int(time.time()) if when is None else int(when)
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, 'a', encoding='utf-8') as f:
        f.write(f"{stamp}\t{score}\n")
    if _debug():
        print(f"[score] {stamp}\t{score} -> {path}")
