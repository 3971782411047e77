"""DynamoDB key-value backend — one item per (owner, storage key)."""

import asyncio
import logging
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from tripcore.errors import StorageReadError, StorageWriteError
from tripcore.storage.interface import KeyValueStore

logger = logging.getLogger(__name__)


class DynamoKeyValueStore(KeyValueStore):
    """Stores each value as ``{ownerId, storageKey, payload}``.

    boto3 is synchronous, so every call runs in a worker thread to keep the
    event loop free.
    """

    def __init__(self, dynamo_client: Any, table_name: str, owner_id: str) -> None:
        self._client = dynamo_client
        self._table = table_name
        self._owner_id = owner_id

    def _key(self, key: str) -> dict[str, dict[str, str]]:
        return {"ownerId": {"S": self._owner_id}, "storageKey": {"S": key}}

    def _item(self, key: str, value: str) -> dict[str, dict[str, str]]:
        return {**self._key(key), "payload": {"S": value}}

    async def get(self, key: str) -> str | None:
        try:
            response = await asyncio.to_thread(
                self._client.get_item,
                TableName=self._table,
                Key=self._key(key),
                ConsistentRead=True,
            )
        except (BotoCoreError, ClientError) as e:
            raise StorageReadError(f"get_item failed for {key}: {e}") from e

        item = response.get("Item")
        if not item:
            return None
        try:
            return item["payload"]["S"]
        except (KeyError, TypeError) as e:
            raise StorageReadError(f"Item for {key} has no string payload") from e

    async def set(self, key: str, value: str) -> None:
        try:
            await asyncio.to_thread(self._client.put_item, TableName=self._table, Item=self._item(key, value))
        except (BotoCoreError, ClientError) as e:
            raise StorageWriteError(f"put_item failed for {key}: {e}") from e

    async def set_many(self, items: dict[str, str]) -> None:
        transact_items = [{"Put": {"TableName": self._table, "Item": self._item(k, v)}} for k, v in items.items()]
        try:
            await asyncio.to_thread(self._client.transact_write_items, TransactItems=transact_items)
        except (BotoCoreError, ClientError) as e:
            raise StorageWriteError(f"transact_write_items failed for {', '.join(items)}: {e}") from e
        logger.debug("Wrote %d keys for owner %s", len(items), self._owner_id)

    async def delete(self, key: str) -> None:
        try:
            await asyncio.to_thread(self._client.delete_item, TableName=self._table, Key=self._key(key))
        except (BotoCoreError, ClientError) as e:
            raise StorageWriteError(f"delete_item failed for {key}: {e}") from e
