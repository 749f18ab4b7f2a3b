"""JSON document store for pass drafts.

One draft lives in one JSON file. A document is written whole, and only
after a mutation has completed, so a failed or cancelled edit never
leaves a partially updated draft on disk.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class DraftFileError(Exception):
    """Raised when a stored draft cannot be read as a JSON object."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read draft {path}: {reason}")
        self.path = path
        self.reason = reason


class DraftStore:
    """Reads and writes the draft document at *path*."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def exists(self) -> bool:
        return self.path.is_file()

    def read(self) -> dict[str, Any] | None:
        """Return the stored document, or None if no draft exists.

        Raises:
            DraftFileError: The file exists but is not a JSON object.
        """
        if not self.exists():
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise DraftFileError(self.path, str(exc)) from exc
        if not isinstance(data, dict):
            raise DraftFileError(self.path, "top-level value is not an object")
        return data

    def write(self, document: dict[str, Any]) -> Path:
        """Write *document*, replacing the previous file in one step."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_name(f".{self.path.name}.tmp")
        tmp.write_text(json.dumps(document, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
        os.replace(tmp, self.path)
        logger.debug("Wrote draft to %s", self.path)
        return self.path
