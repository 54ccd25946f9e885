# storage.py
import json
import logging
import os

log = logging.getLogger(__name__)


class JSONStorage:
    """A single JSON object on disk used as a small key-value store."""

    def __init__(self, path: str):
        self.path = path
        folder = os.path.dirname(path)
        if folder:
            os.makedirs(folder, exist_ok=True)

    def _read(self) -> dict:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            log.warning("Could not read %s, starting empty: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            log.warning("Ignoring %s: top level is not an object", self.path)
            return {}
        return data

    def _write(self, obj: dict):
        tmp = self.path + ".tmp"
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(obj, f, indent=2, ensure_ascii=False)
        os.replace(tmp, self.path)

    def get_item(self, key: str):
        return self._read().get(key)

    def set_item(self, key: str, value):
        data = self._read()
        data[key] = value
        self._write(data)

    def remove_item(self, key: str):
        data = self._read()
        if data.pop(key, None) is not None:
            self._write(data)


class MemoryStorage:
    """In-process stand-in for JSONStorage."""

    def __init__(self, initial: dict = None):
        self.items = dict(initial or {})
        self.writes = 0

    def get_item(self, key: str):
        return self.items.get(key)

    def set_item(self, key: str, value):
        # copy through JSON so callers can't share mutable state with the store
        self.items[key] = json.loads(json.dumps(value))
        self.writes += 1

    def remove_item(self, key: str):
        self.items.pop(key, None)


class SnapshotSlot:
    """One named slot holding the whole habit list."""

    def __init__(self, storage, key: str = "habits"):
        self.storage = storage
        self.key = key

    def load(self):
        return self.storage.get_item(self.key)

    def save(self, snapshot):
        self.storage.set_item(self.key, snapshot)
