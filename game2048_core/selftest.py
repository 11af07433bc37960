from __future__ import annotations

from typing import List

from .collapse import SLIDE_CASES, slide_line


def run_slide_cases() -> List[str]:
    """Runs the built-in collapse table; returns one message per failing row."""
    failures: List[str] = []
    for line_in, expected, points in SLIDE_CASES:
        line_out, score, _changed = slide_line(line_in)
        if line_out != expected or score != points:
            failures.append(
                f"{' '.join(map(str, line_in))} => {' '.join(map(str, line_out))} ({score} points) "
                f"expected {' '.join(map(str, expected))} ({points} points)"
            )
    return failures


def main() -> int:
    failures = run_slide_cases()
    for msg in failures:
        print(msg)
    if not failures:
        print(f"All {len(SLIDE_CASES)} tests executed successfully")
    return 1 if failures else 0
