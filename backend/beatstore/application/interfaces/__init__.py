from .key_value_store import KeyValueStore

__all__ = [
    "KeyValueStore",
]
