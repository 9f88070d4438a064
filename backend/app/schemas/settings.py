from typing import Optional, List

from pydantic import BaseModel, Field

from app.models.enums import PermissionGroup, UserStatus


class UserInviteRequest(BaseModel):
    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    role: str = "Operator"


class UserRoleUpdateRequest(BaseModel):
    role: str


class UserResponse(BaseModel):
    id: str
    name: str
    email: str
    role: str
    status: UserStatus
    last_active: str
    avatar: Optional[str] = None

    class Config:
        from_attributes = True


class RoleCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: str = ""
    permissions: List[str] = Field(default_factory=list)


class RoleUpdateRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None
    permissions: Optional[List[str]] = None


class RoleResponse(BaseModel):
    id: str
    name: str
    description: str
    permissions: List[str]
    users_count: int


class PermissionResponse(BaseModel):
    id: str
    group: PermissionGroup
    label: str

    class Config:
        from_attributes = True
