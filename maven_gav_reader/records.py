"""Reading emitted records back, as an IDE integration does."""

from __future__ import annotations

import json
from typing import Dict, Tuple

from maven_gav_reader.errors import RecordError

_RECORD_KEYS = ("gav", "parentGav", "pomPath")


def parse_record(line: str, *, line_num: int = 1) -> Dict[str, str]:
    try:
        payload = json.loads(line)
    except json.JSONDecodeError as exc:
        raise RecordError(f"Invalid JSON on line {line_num}: {exc}") from exc
    if not isinstance(payload, dict):
        raise RecordError(f"Record on line {line_num} is not an object")
    missing = [key for key in _RECORD_KEYS if not isinstance(payload.get(key), str)]
    if missing:
        raise RecordError(
            f"Record on line {line_num} lacks {', '.join(missing)}"
        )
    return {key: payload[key] for key in _RECORD_KEYS}


def index_records(text: str) -> Dict[str, Tuple[str, str]]:
    """Map each ``pomPath`` to its ``(gav, parentGav)`` pair.

    Blank lines are ignored; a later record for the same path wins.
    """
    index: Dict[str, Tuple[str, str]] = {}
    for line_num, raw in enumerate(text.splitlines(), 1):
        raw = raw.strip()
        if not raw:
            continue
        record = parse_record(raw, line_num=line_num)
        index[record["pomPath"]] = (record["gav"], record["parentGav"])
    return index
