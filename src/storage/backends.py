from __future__ import annotations

import copy
import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict

logger = logging.getLogger(__name__)


def _empty() -> Dict[str, Any]:
    return {"entries": [], "items": []}


class StorageBackend(ABC):
    @abstractmethod
    def load(self) -> Dict[str, Any]:
        """Return the stored document: ``{"entries": [...], "items": [...]}``."""
        raise NotImplementedError

    @abstractmethod
    def save(self, data: Dict[str, Any]) -> None:
        raise NotImplementedError


class InMemoryBackend(StorageBackend):
    def __init__(self):
        self._data = _empty()

    def load(self) -> Dict[str, Any]:
        return copy.deepcopy(self._data)

    def save(self, data: Dict[str, Any]) -> None:
        self._data = copy.deepcopy(data)


class JsonFileBackend(StorageBackend):
    def __init__(self, path: str = "data/entries.json"):
        self.path = Path(path)

    def load(self) -> Dict[str, Any]:
        """
        Load the document from disk. Returns an empty document if the file is missing or invalid.
        """
        try:
            if not self.path.exists():
                return _empty()

            data = json.loads(self.path.read_text(encoding="utf-8"))
            if not isinstance(data, dict):
                raise ValueError("top-level JSON value is not an object")

            out = _empty()
            out["entries"] = list(data.get("entries") or [])
            out["items"] = list(data.get("items") or [])
            return out
        except Exception as e:
            logger.warning(f"Could not read entry store at {self.path}, starting empty: {e}")
            return _empty()

    def save(self, data: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps(data, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )
