from __future__ import annotations

import json
import pathlib
import time

# Default location when no log_file is passed
LOG_PATH = pathlib.Path("logs") / "events.log"


def log_event(op: str, board: str | None, status: str, *, log_file: pathlib.Path = LOG_PATH, **extra) -> None:
    """Append a record of one registry operation to the log file.

    Each line is a JSON object with the keys:
      - ts: ISO timestamp (UTC)
      - op: operation name, e.g. "advance_n"
      - board: board id (None when the operation failed before one existed)
      - status: "ok" or the error class name
    followed by any operation-specific extras (generations, rows, columns, message).
    """
    log_file.parent.mkdir(parents=True, exist_ok=True)
    entry = {
        "ts": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
        "op": op,
        "board": board,
        "status": status,
    }
    entry.update(extra)
    with log_file.open("a", encoding="utf-8") as fp:
        fp.write(json.dumps(entry, ensure_ascii=False) + "\n")
