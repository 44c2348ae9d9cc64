"""
Factory for creating mapping store instances.
"""

import logging
from enum import Enum

import boto3

from .strategies import MappingStore, DynamoDBMappingStore, InMemoryMappingStore
from shortlink_app.config import Settings

logger = logging.getLogger("shortlink.storage")


class StoreBackend(Enum):
    """Available mapping store backends"""
    DYNAMODB = "dynamodb"
    MEMORY = "memory"


class MappingStoreFactory:
    """
    Simple factory for creating mapping stores.

    No instance is cached here: the store is built once at startup and
    held by the application context.
    """

    @classmethod
    def create(cls, backend: StoreBackend, settings: Settings) -> MappingStore:
        """
        Create a mapping store.

        Args:
            backend: Type of store backend (from enum)
            settings: Settings carrying table name, region and endpoint

        Returns:
            MappingStore instance

        Raises:
            ValueError: If backend is unknown
        """
        if backend == StoreBackend.DYNAMODB:
            dynamodb = boto3.resource(
                "dynamodb",
                region_name=settings.aws_region,
                endpoint_url=settings.dynamodb_endpoint_url,
            )
            store = DynamoDBMappingStore(dynamodb.Table(settings.dynamodb_table_name))
            logger.info(
                "DynamoDB mapping store initialized (table=%s, region=%s)",
                settings.dynamodb_table_name,
                settings.aws_region,
            )

        elif backend == StoreBackend.MEMORY:
            store = InMemoryMappingStore()
            logger.info("In-memory mapping store initialized")

        else:
            raise ValueError(f"Unknown store backend: {backend}")

        return store
