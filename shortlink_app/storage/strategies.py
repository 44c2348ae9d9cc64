"""
Mapping store strategies using Strategy Pattern.

Allows switching between key-value backends without touching handlers:
- DynamoDB: Production (durable, managed)
- In-Memory: Development/testing
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional

from botocore.exceptions import BotoCoreError, ClientError
from pydantic import ValidationError as PydanticValidationError

from shortlink_app.core.exceptions import StoreError
from shortlink_app.models.mapping import URLMapping


class MappingStore(ABC):
    """
    Abstract base class for mapping stores.

    This interface is the only gateway to persisted mappings. Each call is
    a single blocking round-trip to the backend: no transactions, no
    batching, no caching, no retries.

    Methods are sync because the backend clients are sync; the service
    layer runs them in a worker thread.
    """

    @abstractmethod
    def put(self, mapping: URLMapping) -> None:
        """
        Write a mapping, overwriting any record with the same short code.

        Raises:
            StoreError: if the backend is unreachable or rejects the write
        """
        pass

    @abstractmethod
    def get(self, short_code: str) -> Optional[URLMapping]:
        """
        Read a mapping by short code.

        Returns:
            The mapping, or None if no record exists

        Raises:
            StoreError: if the backend call fails or the stored item
                cannot be decoded
        """
        pass


class DynamoDBMappingStore(MappingStore):
    """
    DynamoDB implementation.

    Table layout:
    - Partition key: ShortCode (S)
    - Attribute:     LongURL (S)

    Uses the boto3 resource API (Table.put_item / Table.get_item), which
    handles attribute (de)serialization.
    """

    def __init__(self, table):
        """
        Initialize DynamoDB store.

        Args:
            table: boto3 DynamoDB Table resource
        """
        self.table = table

    def put(self, mapping: URLMapping) -> None:
        """Unconditional PutItem (no ConditionExpression, overwrites)"""
        try:
            self.table.put_item(Item=mapping.to_item())
        except (ClientError, BotoCoreError) as e:
            raise StoreError(f"Failed to put item to DynamoDB: {e}", original_error=e) from e

    def get(self, short_code: str) -> Optional[URLMapping]:
        """GetItem by ShortCode; a response without Item means not found"""
        try:
            result = self.table.get_item(Key={"ShortCode": short_code})
        except (ClientError, BotoCoreError) as e:
            raise StoreError(f"Failed to get item from DynamoDB: {e}", original_error=e) from e

        item = result.get("Item")
        if item is None:
            return None

        try:
            return URLMapping.from_item(item)
        except PydanticValidationError as e:
            raise StoreError(f"Failed to unmarshal item {short_code!r}: {e}", original_error=e) from e


class InMemoryMappingStore(MappingStore):
    """
    In-memory store using a Python dict.

    Pros:
    - No external services
    - Good for development and testing

    Cons:
    - Not durable (lost on restart)
    - Not shared between processes
    """

    def __init__(self):
        """Initialize empty store"""
        self._items: Dict[str, dict] = {}

    def put(self, mapping: URLMapping) -> None:
        self._items[mapping.short_code] = mapping.to_item()

    def get(self, short_code: str) -> Optional[URLMapping]:
        item = self._items.get(short_code)
        if item is None:
            return None
        return URLMapping.from_item(item)

    def __len__(self) -> int:
        return len(self._items)
