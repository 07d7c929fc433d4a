from __future__ import annotations

import os
import sys
from typing import Any, Dict, List, Optional

from flask import Flask, jsonify, request

# Ensure package imports work when executed directly from repo root
if __package__ in (None, ""):
    sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from flow_core.board import Board  # noqa: E402
from flow_core.errors import FlowError  # noqa: E402
from flow_core.level import LevelFormatError, build_board, load_level, parse_level  # noqa: E402
from flow_core.moves import Direction  # noqa: E402
from flow_core.render import render  # noqa: E402
from flow_core.tiles import Color, Tile, TileKind  # noqa: E402

LEVEL_DIR = os.getenv("FLOW_LEVEL_DIR", "levels")

app = Flask(__name__)


def tile_to_json(t: Tile) -> Dict[str, Any]:
    return {"kind": t.kind.value, "color": t.color.value if t.color is not None else None}


def tile_from_json(obj: Dict[str, Any]) -> Tile:
    if not isinstance(obj, dict):
        raise ValueError(f"tile must be an object, got {obj!r}")
    kind = TileKind(str(obj.get("kind", "empty")))
    color = obj.get("color")
    return Tile(kind, Color(str(color)) if color is not None else None)


def board_to_json(b: Board) -> Dict[str, Any]:
    return {
        "width": int(b.width),
        "height": int(b.height),
        "grid": [[tile_to_json(t) for t in row] for row in b.grid.rows()],
        "cursor": [int(b.cursor[0]), int(b.cursor[1])],
        "grabbed": bool(b.grabbed),
        "nextColor": b.next_color.value if b.next_color is not None else None,
        "solved": b.is_solved(),
    }


def board_from_json(obj: Dict[str, Any]) -> Board:
    grid = obj["grid"]
    if not isinstance(grid, list) or not all(isinstance(row, list) for row in grid):
        raise ValueError("grid must be a list of rows")
    rows = [[tile_from_json(t) for t in row] for row in grid]
    if len(rows) != int(obj.get("height", len(rows))):
        raise ValueError("height does not match grid")
    if rows and len(rows[0]) != int(obj.get("width", len(rows[0]))):
        raise ValueError("width does not match grid")
    cr, cc = obj.get("cursor", [0, 0])
    nxt = obj.get("nextColor", Color.RED.value)
    return Board.from_rows(
        rows,
        cursor=(int(cr), int(cc)),
        grabbed=bool(obj.get("grabbed", False)),
        next_color=Color(str(nxt)) if nxt is not None else None,
    )


def _level_path(name: str) -> Optional[str]:
    # Only paths inside LEVEL_DIR are served
    base = os.path.abspath(LEVEL_DIR)
    p = os.path.abspath(os.path.join(base, name))
    if os.path.commonpath([base, p]) != base:
        return None
    return p


def _state_or_400(body: Dict[str, Any]):
    s_in = body.get("state")
    if not isinstance(s_in, dict):
        return None, (jsonify({"ok": False, "error": "state required"}), 400)
    try:
        return board_from_json(s_in), None
    except (KeyError, TypeError, ValueError, FlowError) as e:
        return None, (jsonify({"ok": False, "error": f"bad state: {e}"}), 400)


@app.get("/api/health")
def api_health() -> Any:
    return jsonify({"ok": True})


@app.get("/api/levels")
def api_levels() -> Any:
    names: List[str] = []
    if os.path.isdir(LEVEL_DIR):
        names = sorted(n for n in os.listdir(LEVEL_DIR) if n.endswith(".txt"))
    return jsonify({"ok": True, "levels": names})


@app.post("/api/new")
def api_new() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        if isinstance(body.get("level"), str):
            level = parse_level(body["level"])
        elif isinstance(body.get("path"), str):
            p = _level_path(body["path"])
            if p is None:
                return jsonify({"ok": False, "error": "path outside level directory"}), 400
            if not os.path.isfile(p):
                return jsonify({"ok": False, "error": f"level not found: {body['path']}"}), 404
            level = load_level(p)
        else:
            return jsonify({"ok": False, "error": "level or path required"}), 400
        board = build_board(level)
    except LevelFormatError as e:
        return jsonify({"ok": False, "error": f"invalid level: {e}"}), 400
    except FlowError as e:
        return jsonify({"ok": False, "error": f"cannot build board: {e}"}), 400
    state = board_to_json(board)
    return jsonify({"ok": True, "state": state, "solved": state["solved"]})


@app.post("/api/move")
def api_move() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    board, err = _state_or_400(body)
    if err:
        return err
    try:
        direction = Direction.parse(str(body.get("direction", "")))
    except ValueError as e:
        return jsonify({"ok": False, "error": str(e)}), 400
    error: Optional[str] = None
    try:
        board.move(direction)
    except FlowError as e:
        # Same recovery as the terminal host: drop drag mode and carry on
        board.release()
        error = str(e)
    state = board_to_json(board)
    return jsonify({"ok": True, "state": state, "solved": state["solved"], "error": error})


@app.post("/api/grab")
def api_grab() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    board, err = _state_or_400(body)
    if err:
        return err
    board.grab()
    state = board_to_json(board)
    return jsonify({"ok": True, "state": state, "solved": state["solved"]})


@app.post("/api/render")
def api_render() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    board, err = _state_or_400(body)
    if err:
        return err
    return jsonify({"ok": True, "text": render(board, color=False)})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    port = int(os.getenv("PORT", "5000"))
    print(f"[flow] serving levels from {os.path.abspath(LEVEL_DIR)}")
    app.run(host="127.0.0.1", port=port, debug=debug)
