from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import Field

from classroom_types.assignees import (
    AssigneeMode,
    IndividualStudentsOptions,
    ModifyIndividualStudentsOptions,
)
from classroom_types.base import ClassroomModel, ResourceCreate, ResourceInterface, ResourceModify
from classroom_types.errors import ShareModeError
from classroom_types.grading import GradeCategory
from classroom_types.materials import DriveFileShareMode, DriveFolder, Material


class CourseWorkType(str, Enum):
    """Possible types of work."""
    COURSE_WORK_TYPE_UNSPECIFIED = "COURSE_WORK_TYPE_UNSPECIFIED"
    ASSIGNMENT = "ASSIGNMENT"
    SHORT_ANSWER_QUESTION = "SHORT_ANSWER_QUESTION"
    MULTIPLE_CHOICE_QUESTION = "MULTIPLE_CHOICE_QUESTION"


class CourseWorkState(str, Enum):
    COURSE_WORK_STATE_UNSPECIFIED = "COURSE_WORK_STATE_UNSPECIFIED"
    PUBLISHED = "PUBLISHED"
    DRAFT = "DRAFT"
    DELETED = "DELETED"


class SubmissionModificationMode(str, Enum):
    """Whether students may change a submission after turning it in."""
    SUBMISSION_MODIFICATION_MODE_UNSPECIFIED = "SUBMISSION_MODIFICATION_MODE_UNSPECIFIED"
    MODIFIABLE_UNTIL_TURNED_IN = "MODIFIABLE_UNTIL_TURNED_IN"
    MODIFIABLE = "MODIFIABLE"


class Date(ClassroomModel):
    """Calendar date in UTC. A zero day or month is allowed by the service for partial dates."""
    year: Optional[int] = Field(None, ge=0, le=9999)
    month: Optional[int] = Field(None, ge=0, le=12)
    day: Optional[int] = Field(None, ge=0, le=31)


class TimeOfDay(ClassroomModel):
    """Time of day in UTC."""
    hours: Optional[int] = Field(None, ge=0, le=24)
    minutes: Optional[int] = Field(None, ge=0, le=59)
    seconds: Optional[int] = Field(None, ge=0, le=60)
    nanos: Optional[int] = Field(None, ge=0, le=999_999_999)


class Assignment(ClassroomModel):
    # Only visible to teachers and domain administrators
    student_work_folder: Optional[DriveFolder] = None


class MultipleChoiceQuestion(ClassroomModel):
    choices: List[str] = Field(default_factory=list)


class CourseWorkCreate(ResourceCreate):
    title: str = Field(..., min_length=1, max_length=3000)
    description: Optional[str] = Field(None, max_length=30000)
    materials: Optional[List[Material]] = Field(None, max_length=20)
    state: Optional[CourseWorkState] = None
    due_date: Optional[Date] = None
    due_time: Optional[TimeOfDay] = None
    scheduled_time: Optional[datetime] = None
    max_points: Optional[float] = Field(None, ge=0)
    work_type: CourseWorkType
    assignee_mode: Optional[AssigneeMode] = None
    individual_students_options: Optional[IndividualStudentsOptions] = None
    submission_modification_mode: Optional[SubmissionModificationMode] = None
    topic_id: Optional[str] = None
    grade_category: Optional[GradeCategory] = None
    multiple_choice_question: Optional[MultipleChoiceQuestion] = None


class CourseWorkModify(ResourceModify):
    title: Optional[str] = Field(None, min_length=1, max_length=3000)
    description: Optional[str] = Field(None, max_length=30000)
    state: Optional[CourseWorkState] = None
    due_date: Optional[Date] = None
    due_time: Optional[TimeOfDay] = None
    max_points: Optional[float] = Field(None, ge=0)
    scheduled_time: Optional[datetime] = None
    submission_modification_mode: Optional[SubmissionModificationMode] = None
    topic_id: Optional[str] = None
    grade_category: Optional[GradeCategory] = None


class CourseWork(ClassroomModel):
    """Course work created by a teacher for students of the course."""
    course_id: str
    id: str
    title: str
    description: Optional[str] = None
    materials: List[Material] = Field(default_factory=list)
    state: Optional[CourseWorkState] = None
    alternate_link: Optional[str] = None
    creation_time: Optional[datetime] = None
    update_time: Optional[datetime] = None
    due_date: Optional[Date] = None
    due_time: Optional[TimeOfDay] = None
    scheduled_time: Optional[datetime] = None
    max_points: Optional[float] = None
    work_type: CourseWorkType
    associated_with_developer: Optional[bool] = None
    assignee_mode: Optional[AssigneeMode] = None
    individual_students_options: Optional[IndividualStudentsOptions] = None
    submission_modification_mode: Optional[SubmissionModificationMode] = None
    creator_user_id: Optional[str] = None
    topic_id: Optional[str] = None
    grade_category: Optional[GradeCategory] = None
    assignment: Optional[Assignment] = None
    multiple_choice_question: Optional[MultipleChoiceQuestion] = None


class ModifyCourseWorkAssignees(ClassroomModel):
    """Body of the courseWork.modifyAssignees call."""
    assignee_mode: AssigneeMode
    modify_individual_students_options: Optional[ModifyIndividualStudentsOptions] = None


def validate_share_mode(
    share_mode: Optional[DriveFileShareMode],
    work_type: Optional[CourseWorkType],
) -> None:
    """
    Raises:
        ShareModeError: If EDIT or STUDENT_COPY is used outside an ASSIGNMENT
    """
    if share_mode not in (DriveFileShareMode.EDIT, DriveFileShareMode.STUDENT_COPY):
        return
    if work_type != CourseWorkType.ASSIGNMENT:
        raise ShareModeError(
            f"Share mode {share_mode.value} is only allowed for ASSIGNMENT course work",
            details={
                "share_mode": share_mode.value,
                "work_type": work_type.value if work_type is not None else None,
            },
        )


class CourseWorkInterface(ResourceInterface):
    get = CourseWork
    create = CourseWorkCreate
    modify = CourseWorkModify
    endpoint = "courses/{course_id}/courseWork"
