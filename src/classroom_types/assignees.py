"""
Who can see a piece of coursework or an announcement.

The service requires individual_students_options to be present if and only
if the assignee mode is INDIVIDUAL_STUDENTS. The resources keep the two as
independent optional fields and decoding does not check the pairing;
validate_assignees does, for callers preparing a request.
"""

from enum import Enum
from typing import List, Optional

from pydantic import Field

from classroom_types.base import ClassroomModel
from classroom_types.errors import AssigneeOptionsError


class AssigneeMode(str, Enum):
    """Possible modes of assigning coursework/announcements."""
    ASSIGNEE_MODE_UNSPECIFIED = "ASSIGNEE_MODE_UNSPECIFIED"
    ALL_STUDENTS = "ALL_STUDENTS"
    INDIVIDUAL_STUDENTS = "INDIVIDUAL_STUDENTS"


class IndividualStudentsOptions(ClassroomModel):
    """Students that can see an item assigned to INDIVIDUAL_STUDENTS."""
    student_ids: List[str] = Field(default_factory=list)


class ModifyIndividualStudentsOptions(ClassroomModel):
    """Students to add to or remove from an INDIVIDUAL_STUDENTS item."""
    add_student_ids: Optional[List[str]] = None
    remove_student_ids: Optional[List[str]] = None


def validate_assignees(
    mode: Optional[AssigneeMode],
    options: Optional[object],
) -> None:
    """
    Check the mode/options pairing.

    options is an IndividualStudentsOptions or ModifyIndividualStudentsOptions.
    An unset mode means ALL_STUDENTS on the service side.

    Raises:
        AssigneeOptionsError: If options are given without INDIVIDUAL_STUDENTS
            or INDIVIDUAL_STUDENTS is given without options
    """
    individual = mode == AssigneeMode.INDIVIDUAL_STUDENTS
    if individual and options is None:
        raise AssigneeOptionsError(
            "INDIVIDUAL_STUDENTS requires individual students options",
            details={"assignee_mode": mode.value},
        )
    if not individual and options is not None:
        raise AssigneeOptionsError(
            "Individual students options are only allowed with INDIVIDUAL_STUDENTS",
            details={"assignee_mode": mode.value if mode is not None else None},
        )
