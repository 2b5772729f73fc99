from enum import Enum

from classroom_types.base import ClassroomModel, ResourceCreate, ResourceInterface
from classroom_types.custom_types import OwnerId


class CourseRole(str, Enum):
    COURSE_ROLE_UNSPECIFIED = "COURSE_ROLE_UNSPECIFIED"
    STUDENT = "STUDENT"
    TEACHER = "TEACHER"
    OWNER = "OWNER"


class InvitationCreate(ResourceCreate):
    user_id: OwnerId
    course_id: str
    role: CourseRole


class Invitation(ClassroomModel):
    """An invitation to join a course."""
    id: str
    user_id: str
    course_id: str
    role: CourseRole


class InvitationInterface(ResourceInterface):
    get = Invitation
    create = InvitationCreate
    endpoint = "invitations"
