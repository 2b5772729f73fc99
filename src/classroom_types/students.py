from typing import Optional

from classroom_types.base import ClassroomModel, ResourceCreate, ResourceInterface
from classroom_types.custom_types import OwnerId
from classroom_types.materials import DriveFolder
from classroom_types.user_profiles import UserProfile


class StudentCreate(ResourceCreate):
    # Numeric id, email address or "me"
    user_id: OwnerId


class Student(ClassroomModel):
    """Student in a course."""
    course_id: Optional[str] = None
    user_id: str
    profile: Optional[UserProfile] = None
    # Only visible to the student and teachers of the course
    student_work_folder: Optional[DriveFolder] = None


class StudentInterface(ResourceInterface):
    get = Student
    create = StudentCreate
    endpoint = "courses/{course_id}/students"
