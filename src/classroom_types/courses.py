from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import Field

from classroom_types.base import ClassroomModel, ResourceCreate, ResourceInterface, ResourceModify
from classroom_types.custom_types import OwnerId
from classroom_types.grading import GradebookSettings
from classroom_types.materials import DriveFolder


class CourseState(str, Enum):
    """
    Possible states a course can be in.

    The service creates courses as PROVISIONED when no state is given.
    """
    COURSE_STATE_UNSPECIFIED = "COURSE_STATE_UNSPECIFIED"
    ACTIVE = "ACTIVE"
    ARCHIVED = "ARCHIVED"
    PROVISIONED = "PROVISIONED"
    DECLINED = "DECLINED"
    SUSPENDED = "SUSPENDED"


class CourseCreate(ResourceCreate):
    # Optional alias ("d:..." or "p:...") that the service registers for the new course;
    # the real id is still assigned by Classroom
    id: Optional[str] = None
    name: str = Field(..., min_length=1, max_length=750, description="e.g. '10th Grade Biology'")
    section: Optional[str] = Field(None, max_length=2800, description="e.g. 'Period 2'")
    description_heading: Optional[str] = Field(None, max_length=3600)
    description: Optional[str] = Field(None, max_length=30000)
    room: Optional[str] = Field(None, max_length=650, description="e.g. '301'")
    owner_id: OwnerId
    course_state: Optional[CourseState] = None


class CourseModify(ResourceModify):
    name: Optional[str] = Field(None, min_length=1, max_length=750)
    section: Optional[str] = Field(None, max_length=2800)
    description_heading: Optional[str] = Field(None, max_length=3600)
    description: Optional[str] = Field(None, max_length=30000)
    room: Optional[str] = Field(None, max_length=650)
    owner_id: Optional[OwnerId] = None
    course_state: Optional[CourseState] = None


class Course(ClassroomModel):
    """A Course in Classroom."""
    id: str
    name: str
    section: Optional[str] = None
    description_heading: Optional[str] = None
    description: Optional[str] = None
    room: Optional[str] = None
    owner_id: OwnerId
    creation_time: datetime
    update_time: datetime
    enrollment_code: str
    course_state: Optional[CourseState] = None
    alternate_link: str
    teacher_group_email: str
    course_group_email: str
    # Only returned to teachers of the course and domain administrators
    teacher_folder: Optional[DriveFolder] = None
    guardians_enabled: bool
    calendar_id: str
    gradebook_settings: GradebookSettings


class CourseInterface(ResourceInterface):
    get = Course
    create = CourseCreate
    modify = CourseModify
    endpoint = "courses"
