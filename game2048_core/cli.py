from __future__ import annotations

import argparse
from typing import Optional

from .persist import load_state, score_path, state_path, write_score, write_state
from .selftest import main as run_self_test
from .session import command_for_key, handle_command, new_session, resume_session
from .state import Command, Phase, Session, StepResult


def _show(session: Session) -> None:
    print(f"\n2048 {session.score:>17} pts\n")
    print(session.grid.pretty())
    print()


def _record_score(result: StepResult) -> None:
    if result.final_score is None:
        return
    try:
        write_score(score_path(), result.final_score)
    except OSError as e:
        print(f"error: could not write score log: {e}")


def _read(prompt: str) -> Optional[str]:
    """One line of input, or None once stdin is closed."""
    try:
        return input(prompt).strip()
    except EOFError:
        return None


def _input_closed(session: Session) -> int:
    print('\nError! Cannot read keyboard input!')
    _record_score(handle_command(session, Command.QUIT))
    return 1


def _start(args: argparse.Namespace) -> Session:
    if args.load:
        try:
            saved = load_state(state_path())
        except ValueError as e:
            print(f"Saved state is corrupt ({e}); starting a new game.")
            saved = None
        if saved is not None:
            print('State loaded.')
            return resume_session(saved, seed_hacking=args.seed_hacking)
    return new_session(seed=args.seed, seed_hacking=args.seed_hacking)


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description='Console 2048')
    parser.add_argument('-t', '--self-test', action='store_true', help='Run the built-in collapse table and exit')
    parser.add_argument('-l', '--load', action='store_true', help='Resume the saved game, if any')
    parser.add_argument('-s', '--seed-hacking', action='store_true', help='Undo rerolls the next tile from the clock')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for the first deal')
    args = parser.parse_args(argv)

    if args.self_test:
        return run_self_test()

    session = _start(args)
    _show(session)
    while session.phase != Phase.ENDED:
        if session.phase == Phase.TERMINAL_PENDING:
            prompt = 'GAME OVER, UNDO? (y/N) '
        else:
            prompt = 'w/a/s/d to move, u undo, r restart, x save and exit, q quit: '
        key = _read(prompt)
        if key is None:
            return _input_closed(session)
        if key.startswith('\x1b['):
            key = key[-1:]
        if key == 'x' and session.phase == Phase.ACTIVE:
            try:
                write_state(state_path(), session.snapshot())
            except (OSError, ValueError) as e:
                print(f"Error writing state file: {e}")
                continue
            print('State written.')
            return 0
        if key in ('q', 'r') and session.phase == Phase.ACTIVE:
            answer = _read('QUIT? (y/N) ' if key == 'q' else 'RESTART? (y/N) ')
            if answer is None:
                return _input_closed(session)
            if answer != 'y':
                _show(session)
                continue
        result = handle_command(session, command_for_key(key, session.phase))
        _record_score(result)
        session = result.session
        if result.changed:
            _show(session)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
