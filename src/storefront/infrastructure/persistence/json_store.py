"""Shared file handling for the JSON repositories.

Each repository owns one file holding a JSON array.  Missing files are
created on first use, optionally pre-filled with seed records.
"""

from __future__ import annotations

import copy
import json
from pathlib import Path


class JsonFile:

    def __init__(self, file_path: Path, seed: list[dict] | None = None) -> None:
        self._file_path = file_path
        self._ensure_file(seed or [])

    @property
    def path(self) -> Path:
        return self._file_path

    def load(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def persist(self, records: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self, seed: list[dict]) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self.persist(copy.deepcopy(seed))
