from abc import ABC, abstractmethod


class KeyValueStore(ABC):
    """Asynchronous string key-value backend.

    Implementations raise StorageReadError from ``get`` and StorageWriteError
    from the mutating methods when the backend fails. ``delete`` of a missing
    key is not an error.
    """

    @abstractmethod
    async def get(self, key: str) -> str | None: ...

    @abstractmethod
    async def set(self, key: str, value: str) -> None: ...

    @abstractmethod
    async def set_many(self, items: dict[str, str]) -> None:
        """Write all items or none of them."""

    @abstractmethod
    async def delete(self, key: str) -> None: ...
