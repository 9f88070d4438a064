"""
Settings Router: team members, roles and permissions.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Response

from app.database import InMemoryStore, get_store
from app.schemas.settings import (
    PermissionResponse,
    RoleCreateRequest,
    RoleResponse,
    RoleUpdateRequest,
    UserInviteRequest,
    UserResponse,
    UserRoleUpdateRequest,
)
from app.services.settings_service import SettingsService

router = APIRouter(prefix="/settings", tags=["Settings"])


def get_settings_service(store: InMemoryStore = Depends(get_store)) -> SettingsService:
    return SettingsService(store)


@router.get("/users", response_model=List[UserResponse])
def list_users(role: Optional[str] = None, service: SettingsService = Depends(get_settings_service)):
    return service.list_users(role=role)


@router.post("/users/invite", response_model=UserResponse, status_code=201)
def invite_user(body: UserInviteRequest, service: SettingsService = Depends(get_settings_service)):
    return service.invite_user(body)


@router.post("/users/{user_id}/suspension", response_model=UserResponse)
def toggle_user_suspension(user_id: str, service: SettingsService = Depends(get_settings_service)):
    return service.toggle_suspension(user_id)


@router.patch("/users/{user_id}/role", response_model=UserResponse)
def update_user_role(
    user_id: str,
    body: UserRoleUpdateRequest,
    service: SettingsService = Depends(get_settings_service),
):
    return service.update_user_role(user_id, body)


@router.get("/roles", response_model=List[RoleResponse])
def list_roles(service: SettingsService = Depends(get_settings_service)):
    return service.list_roles()


@router.post("/roles", response_model=RoleResponse, status_code=201)
def create_role(body: RoleCreateRequest, service: SettingsService = Depends(get_settings_service)):
    return service.role_response(service.create_role(body))


@router.put("/roles/{role_id}", response_model=RoleResponse)
def update_role(
    role_id: str,
    body: RoleUpdateRequest,
    service: SettingsService = Depends(get_settings_service),
):
    return service.role_response(service.update_role(role_id, body))


@router.post("/roles/{role_id}/permissions/{permission_id}", response_model=RoleResponse)
def toggle_role_permission(
    role_id: str,
    permission_id: str,
    service: SettingsService = Depends(get_settings_service),
):
    return service.role_response(service.toggle_permission(role_id, permission_id))


@router.delete("/roles/{role_id}", status_code=204)
def delete_role(role_id: str, service: SettingsService = Depends(get_settings_service)):
    service.delete_role(role_id)
    return Response(status_code=204)


@router.get("/permissions", response_model=List[PermissionResponse])
def list_permissions(service: SettingsService = Depends(get_settings_service)):
    return service.list_permissions()
