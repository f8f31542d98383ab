"""Shared helpers for protocol handlers."""

import json
from typing import Any


def to_json(payload: Any) -> str:
    # allow_nan=False keeps non-finite floats off the wire
    return json.dumps(payload, ensure_ascii=False, indent=2, allow_nan=False)
