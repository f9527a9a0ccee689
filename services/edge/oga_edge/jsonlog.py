from __future__ import annotations

import json


def log_json(payload: dict[str, object]) -> None:
    try:
        line = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError):
        line = json.dumps({k: str(v) for k, v in payload.items()}, ensure_ascii=False)
    print(line, flush=True)
