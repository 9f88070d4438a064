from typing import List, Optional

from app.database import InMemoryStore
from app.models.user import Permission, Role, User
from app.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    def __init__(self, store: InMemoryStore):
        super().__init__(User, store, "users")

    def get_by_email(self, email: str) -> Optional[User]:
        email = email.strip().lower()
        return next((u for u in self.list_all() if u.email.lower() == email), None)

    def list_by_role(self, role_name: str) -> List[User]:
        return [u for u in self.list_all() if u.role == role_name]


class RoleRepository(BaseRepository[Role]):
    def __init__(self, store: InMemoryStore):
        super().__init__(Role, store, "roles")

    def get_by_name(self, name: str) -> Optional[Role]:
        return next((r for r in self.list_all() if r.name == name), None)


class PermissionRepository(BaseRepository[Permission]):
    def __init__(self, store: InMemoryStore):
        super().__init__(Permission, store, "permissions")
