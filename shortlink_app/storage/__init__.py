"""
Mapping storage module.

Implements the Strategy Pattern for pluggable key-value backends.
Handlers only ever see the MappingStore interface.
"""

from .strategies import MappingStore, DynamoDBMappingStore, InMemoryMappingStore
from .factory import MappingStoreFactory, StoreBackend

__all__ = [
    "MappingStore",
    "DynamoDBMappingStore",
    "InMemoryMappingStore",
    "MappingStoreFactory",
    "StoreBackend",
]
