from __future__ import annotations

import os
from typing import Any, Dict, Optional

from flask import Flask, jsonify, request

from game import (
    Direction,
    Grid,
    Phase,
    Session,
    Snapshot,
    StepResult,
    accept,
    attempt_move,
    command_for_key,
    grid_from_rows,
    handle_command,
    legal_directions,
    new_session,
    restart,
    undo,
)

app = Flask(__name__)


class BadPayload(ValueError):
    pass


# ---------- JSON codec ----------

def grid_to_json(g: Grid) -> list:
    return g.rows()


def grid_from_json(rows: Any) -> Grid:
    if not isinstance(rows, list) or not all(isinstance(r, list) for r in rows):
        raise BadPayload('grid must be a list of rows')
    for row in rows:
        for v in row:
            if not isinstance(v, int) or isinstance(v, bool):
                raise BadPayload(f'grid cells must be integers, got {v!r}')
    return grid_from_rows(rows)


def snapshot_to_json(s: Snapshot) -> Dict[str, Any]:
    return {"grid": grid_to_json(s.grid), "score": int(s.score), "seed": int(s.seed)}


def snapshot_from_json(obj: Dict[str, Any]) -> Snapshot:
    return Snapshot(grid=grid_from_json(obj["grid"]), score=int(obj["score"]), seed=int(obj["seed"]))


def session_to_json(s: Session) -> Dict[str, Any]:
    return {
        "grid": grid_to_json(s.grid),
        "score": int(s.score),
        "seed": int(s.seed),
        "backup": snapshot_to_json(s.backup),
        "phase": s.phase.value,
        "seedHacking": bool(s.seed_hacking),
    }


def json_to_session(obj: Dict[str, Any]) -> Session:
    if not isinstance(obj, dict):
        raise BadPayload('state required')
    score = int(obj["score"])
    if score < 0:
        raise BadPayload('score must be non-negative')
    return Session(
        grid=grid_from_json(obj["grid"]),
        score=score,
        seed=int(obj["seed"]),
        backup=snapshot_from_json(obj["backup"]),
        phase=Phase(obj.get("phase", Phase.ACTIVE.value)),
        seed_hacking=bool(obj.get("seedHacking", False)),
    )


def _result_json(res: StepResult) -> Dict[str, Any]:
    s = res.session
    return {
        "ok": True,
        "state": session_to_json(s),
        "changed": bool(res.changed),
        "terminal": bool(res.terminal),
        "spawned": list(res.spawned) if res.spawned is not None else None,
        "finalScore": res.final_score,
        "legalMoves": [d.value for d in legal_directions(s.grid)] if s.phase == Phase.ACTIVE else [],
    }


def _bad(msg: str) -> Any:
    return jsonify({"ok": False, "error": msg}), 400


def _body() -> Dict[str, Any]:
    body = request.get_json(force=True, silent=True)
    return body if isinstance(body, dict) else {}


def _session_from_body(body: Dict[str, Any]) -> Session:
    return json_to_session(body.get("state"))


def _optional_int(value: Any) -> Optional[int]:
    return None if value is None else int(value)


# ---------- Game API ----------

@app.post("/api/new")
def api_new() -> Any:
    body = _body()
    try:
        seed = _optional_int(body.get("seed"))
    except (TypeError, ValueError):
        return _bad("seed must be an integer")
    session = new_session(seed=seed, seed_hacking=bool(body.get("seedHacking", False)))
    return jsonify(_result_json(StepResult(session, changed=True)))


@app.post("/api/move")
def api_move() -> Any:
    body = _body()
    try:
        session = _session_from_body(body)
        direction = Direction(str(body.get("direction", "")).lower())
    except (KeyError, TypeError, ValueError) as e:
        return _bad(f"bad request: {e}")
    return jsonify(_result_json(attempt_move(session, direction)))


@app.post("/api/undo")
def api_undo() -> Any:
    body = _body()
    try:
        session = _session_from_body(body)
    except (KeyError, TypeError, ValueError) as e:
        return _bad(f"bad state: {e}")
    return jsonify(_result_json(undo(session)))


@app.post("/api/restart")
def api_restart() -> Any:
    body = _body()
    try:
        session = _session_from_body(body)
        seed = _optional_int(body.get("seed"))
    except (KeyError, TypeError, ValueError) as e:
        return _bad(f"bad request: {e}")
    return jsonify(_result_json(restart(session, seed=seed)))


@app.post("/api/accept")
def api_accept() -> Any:
    body = _body()
    try:
        session = _session_from_body(body)
    except (KeyError, TypeError, ValueError) as e:
        return _bad(f"bad state: {e}")
    return jsonify(_result_json(accept(session)))


@app.post("/api/command")
def api_command() -> Any:
    body = _body()
    try:
        session = _session_from_body(body)
    except (KeyError, TypeError, ValueError) as e:
        return _bad(f"bad state: {e}")
    key = str(body.get("key", ""))
    return jsonify(_result_json(handle_command(session, command_for_key(key, session.phase))))


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
