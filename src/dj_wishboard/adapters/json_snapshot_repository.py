"""JSON file implementation of the snapshot repository."""

import json
from dataclasses import dataclass
from pathlib import Path

from dj_wishboard.services.persistence import SnapshotRepository


@dataclass
class JsonSnapshotRepository(SnapshotRepository):
    """Stores the snapshot as pretty-printed JSON in a single file."""

    path: Path

    def read(self) -> dict[str, object] | None:
        """Return the parsed file, or None when it is missing or blank."""
        if not self.path.exists():
            return None
        raw = self.path.read_text(encoding="utf-8")
        if not raw.strip():
            return None
        return json.loads(raw)

    def write(self, payload: dict[str, object]) -> None:
        """Write to a sibling temp file, then swap it into place."""
        content = json.dumps(payload, indent=2, ensure_ascii=False)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = self.path.with_name(f".{self.path.name}.tmp")
        temp_path.write_text(content, encoding="utf-8")
        temp_path.replace(self.path)
