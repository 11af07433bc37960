"""
2048 rules engine.

Pure-logic helpers for the sliding-tile merge puzzle, kept apart from the
CLI and the Flask app so they can be tested on their own.
Modules:
- grid.py: Grid, Coord and cell helpers
- collapse.py: single-line slide and merge
- rotation.py: quarter-turn rotation
- moves.py: Direction and the move engine
- terminal.py: game-over detection
- spawn.py: seeded tile placement
- state.py / session.py: session values and their transitions
- persist.py: save file and score log
"""
