# minidrive/stores/document.py
import json
from pathlib import Path
from typing import Any


class JsonDocument:
    """A single JSON object on disk, always read and written whole.

    There is no locking: two writers that loaded the same version race and
    the last ``save`` wins.
    """

    def __init__(self, path: Path):
        self.path = path

    def load(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            return json.load(f)

    def save(self, data: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
