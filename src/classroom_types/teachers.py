from typing import Optional

from classroom_types.base import ClassroomModel, ResourceCreate, ResourceInterface
from classroom_types.custom_types import OwnerId
from classroom_types.user_profiles import UserProfile


class TeacherCreate(ResourceCreate):
    user_id: OwnerId


class Teacher(ClassroomModel):
    """Teacher of a course."""
    course_id: Optional[str] = None
    user_id: str
    profile: Optional[UserProfile] = None


class TeacherInterface(ResourceInterface):
    get = Teacher
    create = TeacherCreate
    endpoint = "courses/{course_id}/teachers"
