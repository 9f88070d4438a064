"""
Base Repository: Repository Pattern (GoF), backed by the in-memory store.
"""
from typing import Any, Dict, Generic, Iterable, List, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel

from app.core.exceptions import DuplicateEntityException, EntityNotFoundException
from app.database import InMemoryStore

ModelType = TypeVar("ModelType", bound=BaseModel)


class BaseRepository(Generic[ModelType]):
    def __init__(self, model: Type[ModelType], store: InMemoryStore, collection: str):
        self.model = model
        self.store = store
        self.collection = collection

    @property
    def _rows(self) -> Dict[str, ModelType]:
        return self.store.collection(self.collection)

    def get_by_id(self, id: str) -> Optional[ModelType]:
        return self._rows.get(id)

    def exists(self, id: str) -> bool:
        return id in self._rows

    def list_all(self) -> List[ModelType]:
        return list(self._rows.values())

    def count(self) -> int:
        return len(self._rows)

    def create(self, obj: ModelType, prepend: bool = False) -> ModelType:
        if obj.id in self._rows:
            raise DuplicateEntityException(self.model.__name__, "id", obj.id)
        if prepend:
            rows = {obj.id: obj, **self._rows}
            self._rows.clear()
            self._rows.update(rows)
        else:
            self._rows[obj.id] = obj
        return obj

    def update(self, obj: ModelType, updates: Dict[str, Any]) -> ModelType:
        """Validate ``obj`` merged with ``updates`` and store it in place of ``obj``."""
        data = obj.model_dump()
        data.update(updates)
        return self.replace(self.model.model_validate(data))

    def replace(self, obj: ModelType) -> ModelType:
        if obj.id not in self._rows:
            raise EntityNotFoundException(self.model.__name__, obj.id)
        self._rows[obj.id] = obj
        return obj

    def replace_all(self, objs: Iterable[ModelType]) -> List[ModelType]:
        """Swap in a whole new collection at once, keeping the given order."""
        objs = list(objs)
        self.store.load(self.collection, objs)
        return objs

    def delete(self, id: str) -> bool:
        return self._rows.pop(id, None) is not None

    def paginate(self, items: List[ModelType], page: int = 1, page_size: int = 20) -> Tuple[List[ModelType], int]:
        offset = (page - 1) * page_size
        return items[offset:offset + page_size], len(items)
