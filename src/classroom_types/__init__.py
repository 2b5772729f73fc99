"""Classroom Types - Pydantic DTOs for the Google Classroom REST API."""

__version__ = "0.1.0"

# Base classes
from .base import (
    ClassroomModel,
    ResourceCreate,
    ResourceModify,
    ResourceInterface,
)

# Errors
from .errors import (
    ClassroomTypesError,
    SchemaDecodeError,
    ErrorDetail,
    AssigneeOptionsError,
    ShareModeError,
)

# Wire codec
from .codec import (
    decode,
    decode_json,
    encode,
    encode_json,
)

# Owner / user identifiers
from .custom_types import (
    OwnerId,
    Email,
    Id,
    Me,
    parse_owner_id,
    format_owner_id,
)

# Attachments
from .materials import (
    DriveFile,
    DriveFolder,
    Form,
    Link,
    YouTubeVideo,
    Material,
    DriveFileMaterial,
    YouTubeVideoMaterial,
    LinkMaterial,
    FormMaterial,
    MATERIAL_KINDS,
    material_kind,
    attachment_of,
    SharedDriveFile,
    DriveFileShareMode,
)

# Grading
from .grading import (
    GradeCategory,
    GradebookSettings,
    CalculationType,
    DisplaySetting,
)

# Assignees
from .assignees import (
    AssigneeMode,
    IndividualStudentsOptions,
    ModifyIndividualStudentsOptions,
    validate_assignees,
)

# Courses
from .courses import (
    CourseInterface,
    Course,
    CourseCreate,
    CourseModify,
    CourseState,
)

# Course aliases
from .aliases import (
    CourseAliasInterface,
    CourseAlias,
    AliasScope,
)

# Announcements
from .announcements import (
    AnnouncementInterface,
    Announcement,
    AnnouncementCreate,
    AnnouncementModify,
    AnnouncementState,
    ModifyAnnouncementAssignees,
)

# Course work
from .course_work import (
    CourseWorkInterface,
    CourseWork,
    CourseWorkCreate,
    CourseWorkModify,
    CourseWorkType,
    CourseWorkState,
    SubmissionModificationMode,
    Date,
    TimeOfDay,
    Assignment,
    MultipleChoiceQuestion,
    ModifyCourseWorkAssignees,
    validate_share_mode,
)

# Roster
from .students import (
    StudentInterface,
    Student,
    StudentCreate,
)
from .teachers import (
    TeacherInterface,
    Teacher,
    TeacherCreate,
)

# Topics
from .topics import (
    TopicInterface,
    Topic,
    TopicCreate,
    TopicModify,
)

# User profiles
from .user_profiles import (
    UserProfileInterface,
    UserProfile,
    Name,
    GlobalPermission,
    Permission,
)

# Invitations
from .invitations import (
    InvitationInterface,
    Invitation,
    InvitationCreate,
    CourseRole,
)

# Registrations
from .registrations import (
    RegistrationInterface,
    Registration,
    RegistrationCreate,
    Feed,
    FeedType,
    CourseRosterChangesInfo,
    CourseWorkChangesInfo,
    CloudPubsubTopic,
)

# Client placeholder
from .config import API_VERSION, SERVICE_ENDPOINT, ClientConfig
from .client import Client


def get_all_interfaces():
    """
    Get all ResourceInterface subclasses exported by this package.

    Returns:
        List of ResourceInterface subclasses
    """
    return [
        obj for obj in globals().values()
        if isinstance(obj, type)
        and issubclass(obj, ResourceInterface)
        and obj is not ResourceInterface
    ]
