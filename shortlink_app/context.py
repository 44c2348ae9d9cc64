"""
Application context: everything a request handler needs, built once.

Replaces module-level globals (store handle, table name, domain name).
The context is created at startup, attached to ``app.state.context`` and
handed to handlers through FastAPI dependencies (see dependencies.py).
It is read-only after construction, so concurrent requests share it
without locking.
"""

from dataclasses import dataclass

from shortlink_app.config import Settings
from shortlink_app.storage import MappingStore, MappingStoreFactory, StoreBackend


@dataclass(frozen=True)
class AppContext:
    settings: Settings
    store: MappingStore

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppContext":
        """Build the store selected by settings and wrap both in a context"""
        store = MappingStoreFactory.create(StoreBackend(settings.store_backend), settings)
        return cls(settings=settings, store=store)
