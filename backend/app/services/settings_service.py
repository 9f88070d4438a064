"""
Settings Service: team members, roles and the permission catalogue.

Users reference their role by name; role user counts are derived from the
user list on every read.
"""
from typing import List, Optional

from app.core.exceptions import (
    BusinessRuleViolationException,
    DuplicateEntityException,
    EntityNotFoundException,
    ValidationException,
)
from app.database import InMemoryStore
from app.models.enums import UserStatus
from app.models.user import Permission, Role, User
from app.repositories.user_repository import PermissionRepository, RoleRepository, UserRepository
from app.schemas.settings import (
    RoleCreateRequest,
    RoleResponse,
    RoleUpdateRequest,
    UserInviteRequest,
    UserRoleUpdateRequest,
)
from app.utils.events import (
    EntityCreatedEvent,
    EntityDeletedEvent,
    EntityUpdatedEvent,
    StatusChangedEvent,
    get_event_bus,
)
from app.utils.ids import new_id


class SettingsService:

    def __init__(self, store: InMemoryStore):
        self._store = store
        self._user_repo = UserRepository(store)
        self._role_repo = RoleRepository(store)
        self._permission_repo = PermissionRepository(store)
        self._bus = get_event_bus()

    # ── Users ────────────────────────────────────────────────────────────

    def list_users(self, role: Optional[str] = None) -> List[User]:
        if role:
            return self._user_repo.list_by_role(role)
        return self._user_repo.list_all()

    def get_user(self, user_id: str) -> User:
        user = self._user_repo.get_by_id(user_id)
        if not user:
            raise EntityNotFoundException("User", user_id)
        return user

    def invite_user(self, body: UserInviteRequest) -> User:
        email = body.email.strip()
        with self._store.lock:
            if self._user_repo.get_by_email(email):
                raise DuplicateEntityException("User", "email", email)
            self._ensure_role_exists(body.role)
            user = self._user_repo.create(User(
                id=new_id("u"),
                name="",
                email=email,
                role=body.role,
                status=UserStatus.INVITED,
                last_active="-",
                avatar=email[:2].upper(),
            ))
        self._bus.publish(EntityCreatedEvent(entity_type="user", entity_id=user.id))
        return user

    def toggle_suspension(self, user_id: str) -> User:
        """Suspend a user, or lift the suspension back to Active (Invited if they never joined)."""
        with self._store.lock:
            user = self.get_user(user_id)
            if user.status == UserStatus.SUSPENDED:
                new_status = UserStatus.ACTIVE if user.name else UserStatus.INVITED
            else:
                new_status = UserStatus.SUSPENDED
            result = self._user_repo.update(user, {"status": new_status})
        self._bus.publish(StatusChangedEvent(
            entity_type="user",
            entity_id=user_id,
            old_status=user.status.value,
            new_status=new_status.value,
        ))
        return result

    def update_user_role(self, user_id: str, body: UserRoleUpdateRequest) -> User:
        with self._store.lock:
            user = self.get_user(user_id)
            self._ensure_role_exists(body.role)
            result = self._user_repo.update(user, {"role": body.role})
        self._bus.publish(EntityUpdatedEvent(
            entity_type="user",
            entity_id=user_id,
            old_values={"role": user.role},
            new_values={"role": body.role},
        ))
        return result

    # ── Roles ────────────────────────────────────────────────────────────

    def list_roles(self) -> List[RoleResponse]:
        return [self.role_response(r) for r in self._role_repo.list_all()]

    def get_role(self, role_id: str) -> Role:
        role = self._role_repo.get_by_id(role_id)
        if not role:
            raise EntityNotFoundException("Role", role_id)
        return role

    def create_role(self, body: RoleCreateRequest) -> Role:
        with self._store.lock:
            if self._role_repo.get_by_name(body.name):
                raise DuplicateEntityException("Role", "name", body.name)
            self._validate_permissions(body.permissions)
            role = self._role_repo.create(Role(id=new_id("r"), **body.model_dump()))
        self._bus.publish(EntityCreatedEvent(entity_type="role", entity_id=role.id))
        return role

    def update_role(self, role_id: str, body: RoleUpdateRequest) -> Role:
        data = body.model_dump(exclude_unset=True)
        with self._store.lock:
            role = self.get_role(role_id)
            new_name = data.get("name")
            if new_name and new_name != role.name:
                if self._role_repo.get_by_name(new_name):
                    raise DuplicateEntityException("Role", "name", new_name)
                # Members follow the rename.
                for user in self._user_repo.list_by_role(role.name):
                    self._user_repo.update(user, {"role": new_name})
            if "permissions" in data:
                self._validate_permissions(data["permissions"])
            result = self._role_repo.update(role, data)
        self._bus.publish(EntityUpdatedEvent(
            entity_type="role",
            entity_id=role_id,
            old_values={k: getattr(role, k) for k in data},
            new_values=data,
        ))
        return result

    def toggle_permission(self, role_id: str, permission_id: str) -> Role:
        with self._store.lock:
            role = self.get_role(role_id)
            self._validate_permissions([permission_id])
            if permission_id in role.permissions:
                permissions = [p for p in role.permissions if p != permission_id]
            else:
                permissions = [*role.permissions, permission_id]
            return self._role_repo.update(role, {"permissions": permissions})

    def delete_role(self, role_id: str) -> None:
        with self._store.lock:
            role = self.get_role(role_id)
            members = self._user_repo.list_by_role(role.name)
            if members:
                raise BusinessRuleViolationException(
                    f"Role '{role.name}' is still assigned to {len(members)} user(s).",
                    details={"user_ids": [u.id for u in members]},
                )
            self._role_repo.delete(role_id)
        self._bus.publish(EntityDeletedEvent(entity_type="role", entity_id=role_id))

    def role_response(self, role: Role) -> RoleResponse:
        return RoleResponse(
            **role.model_dump(),
            users_count=len(self._user_repo.list_by_role(role.name)),
        )

    def list_permissions(self) -> List[Permission]:
        return self._permission_repo.list_all()

    def _ensure_role_exists(self, role_name: str) -> None:
        if not self._role_repo.get_by_name(role_name):
            raise ValidationException(f"Unknown role '{role_name}'.")

    def _validate_permissions(self, permission_ids: List[str]) -> None:
        unknown = [p for p in permission_ids if not self._permission_repo.exists(p)]
        if unknown:
            raise ValidationException("Unknown permissions.", details={"permission_ids": unknown})
