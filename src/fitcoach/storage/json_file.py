"""JSON file key-value backend.

Persists all keys as one JSON object in a single file so progress survives
restarts. The file is re-read on every ``get`` so values written by another
process are picked up; writes go through a temporary file and an atomic
replace.
"""

import json
import os
import tempfile
from pathlib import Path

from .base import KeyValueStore

DEFAULT_STORE_PATH = Path.home() / ".fitcoach" / "store.json"


class JsonFileKeyValueStore(KeyValueStore):
    """Key-value store backed by a JSON object file.

    An unreadable or malformed file is treated as empty; the next ``set``
    rewrites it.
    """

    def __init__(self, path: str | Path = DEFAULT_STORE_PATH):
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> dict[str, str]:
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def get(self, key: str) -> str | None:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value

        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, prefix=".store-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    @property
    def backend_type(self) -> str:
        return "json"
