#!/usr/bin/env python3
"""
Quick inspector for a 2048 save file.
Decodes the grid, score and seed without removing the file, so a save can be
checked before resuming it with --load.
"""
import os, struct, sys

from game2048_core.persist import STATE_FORMAT, STATE_SIZE, decode_state, state_path

PATH = sys.argv[1] if len(sys.argv) > 1 else state_path()

if not os.path.exists(PATH):
    print(f"No save file at {PATH}")
    sys.exit(1)

size = os.path.getsize(PATH)
print(f"File: {PATH} size={size} expected={STATE_SIZE} ({STATE_FORMAT})")

with open(PATH, "rb") as f:
    buf = f.read()

try:
    saved = decode_state(buf)
except (ValueError, struct.error) as e:
    print(f"ERR: {e}")
    sys.exit(1)

print(f"score={saved.score} seed={saved.seed}")
print(saved.grid.pretty())
