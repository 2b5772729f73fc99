from enum import Enum
from typing import List, Optional

from pydantic import Field

from classroom_types.base import ClassroomModel, ResourceInterface


class Permission(str, Enum):
    PERMISSION_UNSPECIFIED = "PERMISSION_UNSPECIFIED"
    CREATE_COURSE = "CREATE_COURSE"


class GlobalPermission(ClassroomModel):
    """Permission granted to a user independently of any course."""
    permission: Permission


class Name(ClassroomModel):
    given_name: Optional[str] = None
    family_name: Optional[str] = None
    full_name: Optional[str] = None


class UserProfile(ClassroomModel):
    """Global information for a user."""
    id: str
    name: Optional[Name] = None
    email_address: Optional[str] = None
    photo_url: Optional[str] = None
    permissions: List[GlobalPermission] = Field(default_factory=list)
    verified_teacher: Optional[bool] = None

    def can_create_courses(self) -> bool:
        return any(p.permission == Permission.CREATE_COURSE for p in self.permissions)


class UserProfileInterface(ResourceInterface):
    get = UserProfile
    endpoint = "userProfiles"
