"""Test fixture helpers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

from requests import Response

_FIXTURE_ROOT = Path(__file__).parent

BASE_URL = "https://shapeshift.io"


def load_json(name: str) -> Any:
    """Load a JSON fixture by filename."""

    return json.loads((_FIXTURE_ROOT / name).read_text())


def make_response(status_code: int, json_data: Any = None, *, text: str = "error") -> Response:
    """Build a ``Response`` double; without ``json_data`` decoding fails."""

    resp = MagicMock(spec=Response)
    resp.status_code = status_code
    resp.text = text
    if json_data is None:
        resp.json.side_effect = ValueError("no json")  # type: ignore[attr-defined]
    else:
        resp.json.return_value = json_data  # type: ignore[attr-defined]
    return resp
