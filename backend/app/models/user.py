from typing import List, Optional

from pydantic import BaseModel, Field

from app.models.enums import PermissionGroup, UserStatus


class User(BaseModel):
    id: str
    name: str = ""
    email: str
    role: str
    status: UserStatus = UserStatus.INVITED
    last_active: str = "-"
    avatar: Optional[str] = None


class Role(BaseModel):
    id: str
    name: str
    description: str = ""
    permissions: List[str] = Field(default_factory=list)


class Permission(BaseModel):
    id: str
    group: PermissionGroup
    label: str
