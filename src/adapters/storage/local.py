"""
Local file storage adapter - Implements UserStore protocol.

Stores the registered user as JSON under a single key of a JSON file,
the same shape a browser's local storage would hold. Saving replaces
the previous record.
"""

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class LocalFileUserStore:
    """
    Implements UserStore protocol via a JSON file.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Other keys already present in the file are preserved.
    """

    def __init__(self, path: Path | str, key: str = "user") -> None:
        """
        Initialize store with its backing file.

        Args:
            path: JSON file holding key -> record entries (created on first save)
            key: Entry name the user record is stored under
        """
        self._path = Path(path)
        self._key = key

    def save_user(self, record: dict[str, str]) -> None:
        """Write the record under the configured key, replacing any previous one."""
        entries = self._read_entries()
        entries[self._key] = dict(record)

        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(entries, ensure_ascii=False, indent=2), encoding="utf-8")
        tmp_path.replace(self._path)

        logger.info("Stored user record under key %r in %s", self._key, self._path)

    def load_user(self) -> dict[str, str] | None:
        """Return the stored record, or None if none was saved."""
        return self._read_entries().get(self._key)

    def _read_entries(self) -> dict[str, dict[str, str]]:
        """
        Read all entries of the backing file.

        A missing or blank file holds no entries.

        Raises:
            ValueError: If the file is not a JSON object
        """
        if not self._path.exists():
            return {}
        content = self._path.read_text(encoding="utf-8")
        if not content.strip():
            return {}
        entries = json.loads(content)
        if not isinstance(entries, dict):
            raise ValueError(f"Storage file {self._path} must hold a JSON object")
        return entries
