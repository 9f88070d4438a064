"""
Application state store.

One ``InMemoryStore`` holds every collection the views work on, so inventory,
production, quality and master data read the same records. Nothing is
written to disk; the store is seeded at startup and lost on restart.
"""
import logging
from threading import RLock
from typing import Dict, Iterable, Optional

from pydantic import BaseModel

from app import seed_data

logger = logging.getLogger(__name__)

COLLECTIONS = (
    "inventory",
    "products",
    "purchase_orders",
    "batches",
    "inspections",
    "production_lines",
    "schedule_tasks",
    "users",
    "roles",
    "permissions",
)


class InMemoryStore:
    def __init__(self):
        self._collections: Dict[str, Dict[str, BaseModel]] = {name: {} for name in COLLECTIONS}
        # Open master-data edit sessions, keyed by session id.
        self.edit_sessions: Dict[str, object] = {}
        # Held by services across read-validate-write sequences.
        self.lock = RLock()
        self.initialized = False

    def collection(self, name: str) -> Dict[str, BaseModel]:
        try:
            return self._collections[name]
        except KeyError:
            raise KeyError(f"Unknown collection '{name}'") from None

    def load(self, name: str, rows: Iterable[BaseModel]) -> None:
        self._collections[name] = {row.id: row for row in rows}

    def clear(self) -> None:
        for name in COLLECTIONS:
            self._collections[name] = {}
        self.edit_sessions.clear()
        self.initialized = False

    def counts(self) -> Dict[str, int]:
        return {name: len(rows) for name, rows in self._collections.items()}


def seed_store(store: InMemoryStore) -> InMemoryStore:
    store.load("inventory", seed_data.inventory_items())
    store.load("products", seed_data.products())
    store.load("purchase_orders", seed_data.purchase_orders())
    store.load("batches", seed_data.production_batches())
    store.load("inspections", seed_data.inspections())
    store.load("production_lines", seed_data.production_lines())
    store.load("schedule_tasks", seed_data.schedule_tasks())
    store.load("users", seed_data.users())
    store.load("roles", seed_data.roles())
    store.load("permissions", seed_data.permissions())
    logger.info("store_seeded counts=%s", store.counts())
    return store


_store: Optional[InMemoryStore] = None


def init_store(seed: bool = True) -> InMemoryStore:
    global _store
    store = InMemoryStore()
    if seed:
        seed_store(store)
    store.initialized = True
    _store = store
    return store


def get_store() -> InMemoryStore:
    """FastAPI dependency: the process-wide store, created on first use."""
    if _store is None:
        return init_store()
    return _store
