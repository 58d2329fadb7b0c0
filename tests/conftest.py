"""Common test fixtures."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture
def write_dump(tmp_path: Path) -> Callable[[Any], Path]:
    """Write decoded PHP-Parser JSON data to a file and return its path."""

    def _write(data: Any, name: str = "dump.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
