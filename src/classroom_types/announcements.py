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
from classroom_types.materials import Material


class AnnouncementState(str, Enum):
    ANNOUNCEMENT_STATE_UNSPECIFIED = "ANNOUNCEMENT_STATE_UNSPECIFIED"
    PUBLISHED = "PUBLISHED"
    DRAFT = "DRAFT"
    DELETED = "DELETED"


class AnnouncementCreate(ResourceCreate):
    text: str = Field(..., min_length=1, max_length=30000)
    materials: Optional[List[Material]] = None
    state: Optional[AnnouncementState] = None
    scheduled_time: Optional[datetime] = None
    assignee_mode: Optional[AssigneeMode] = None
    individual_students_options: Optional[IndividualStudentsOptions] = None


class AnnouncementModify(ResourceModify):
    text: Optional[str] = Field(None, min_length=1, max_length=30000)
    state: Optional[AnnouncementState] = None
    scheduled_time: Optional[datetime] = None


class Announcement(ClassroomModel):
    """Announcement created by a teacher for students of the course."""
    course_id: str
    id: str
    text: Optional[str] = None
    materials: List[Material] = Field(default_factory=list)
    state: Optional[AnnouncementState] = None
    alternate_link: Optional[str] = None
    creation_time: Optional[datetime] = None
    update_time: Optional[datetime] = None
    scheduled_time: Optional[datetime] = None
    assignee_mode: Optional[AssigneeMode] = None
    individual_students_options: Optional[IndividualStudentsOptions] = None
    creator_user_id: Optional[str] = None


class ModifyAnnouncementAssignees(ClassroomModel):
    """Body of the announcements.modifyAssignees call."""
    assignee_mode: AssigneeMode
    modify_individual_students_options: Optional[ModifyIndividualStudentsOptions] = None


class AnnouncementInterface(ResourceInterface):
    get = Announcement
    create = AnnouncementCreate
    modify = AnnouncementModify
    endpoint = "courses/{course_id}/announcements"
