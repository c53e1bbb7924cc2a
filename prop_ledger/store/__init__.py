"""Persistent storage for ledger collections."""

from prop_ledger.store.backends import InMemoryBackend, JsonDirectoryBackend, KeyValueBackend
from prop_ledger.store.gateway import STORAGE_KEYS, Collection, MutableCollection, StorageGateway

__all__ = [
    "STORAGE_KEYS",
    "Collection",
    "InMemoryBackend",
    "JsonDirectoryBackend",
    "KeyValueBackend",
    "MutableCollection",
    "StorageGateway",
]
