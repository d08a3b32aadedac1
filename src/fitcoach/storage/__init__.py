from .base import KeyValueStore
from .factory import create_key_value_store
from .in_memory import InMemoryKeyValueStore
from .json_file import JsonFileKeyValueStore
from .repository import PROGRESS_KEY, SESSION_KEY, ProgressRepository

__all__ = [
    "PROGRESS_KEY",
    "SESSION_KEY",
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "KeyValueStore",
    "ProgressRepository",
    "create_key_value_store",
]
