"""Key-value storage backends."""

from tripcore.storage.dynamo import DynamoKeyValueStore
from tripcore.storage.interface import KeyValueStore
from tripcore.storage.memory import InMemoryKeyValueStore

_memory_stores: dict[str, InMemoryKeyValueStore] = {}


def _reset_memory_stores() -> None:
    """Drop all in-memory data — for testing only."""
    _memory_stores.clear()


def get_key_value_store(owner_id: str) -> KeyValueStore:
    """Backend for one owner's records.

    ``STORAGE_BACKEND=memory`` keeps one process-local store per owner that is
    never evicted; it is for tests and local runs, not deployed use.
    """
    from tripcore.config import get_config

    config = get_config()
    if config.storage_backend == "memory":
        return _memory_stores.setdefault(owner_id, InMemoryKeyValueStore())

    from tripcore.clients import get_dynamo_client

    return DynamoKeyValueStore(get_dynamo_client(), config.schedule_table, owner_id)


__all__ = ["DynamoKeyValueStore", "InMemoryKeyValueStore", "KeyValueStore", "get_key_value_store"]
