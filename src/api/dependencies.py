import os
from typing import Optional

from genie_notes.pipeline import CapturePipeline
from resolvers.factory import get_resolver
from storage.backends import InMemoryBackend, JsonFileBackend, StorageBackend
from storage.entry_store import EntryStore

# Configuration
STORE_BACKEND = os.getenv("GENIE_STORE_BACKEND", "json").strip().lower()
STORE_PATH = os.getenv("GENIE_STORE_PATH", "data/entries.json")
DATE_RESOLVER = os.getenv("GENIE_DATE_RESOLVER", "parsedatetime")

_pipeline: Optional[CapturePipeline] = None
_store: Optional[EntryStore] = None


def build_backend(kind: str = STORE_BACKEND, path: str = STORE_PATH) -> StorageBackend:
    if kind == "memory":
        return InMemoryBackend()
    return JsonFileBackend(path=path)


def get_pipeline() -> CapturePipeline:
    global _pipeline
    if _pipeline is None:
        _pipeline = CapturePipeline(resolver=get_resolver(DATE_RESOLVER))
    return _pipeline


def get_entry_store() -> EntryStore:
    global _store
    if _store is None:
        _store = EntryStore(build_backend())
    return _store
