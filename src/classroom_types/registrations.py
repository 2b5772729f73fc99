"""
Push-notification registrations.

Only the resource schema lives here; receiving and dispatching the
notifications is left to the application.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from classroom_types.base import ClassroomModel, ResourceCreate, ResourceInterface


class FeedType(str, Enum):
    FEED_TYPE_UNSPECIFIED = "FEED_TYPE_UNSPECIFIED"
    DOMAIN_ROSTER_CHANGES = "DOMAIN_ROSTER_CHANGES"
    COURSE_ROSTER_CHANGES = "COURSE_ROSTER_CHANGES"
    COURSE_WORK_CHANGES = "COURSE_WORK_CHANGES"


class CourseRosterChangesInfo(ClassroomModel):
    course_id: str


class CourseWorkChangesInfo(ClassroomModel):
    course_id: str


class Feed(ClassroomModel):
    """
    A class of notifications to receive.

    course_roster_changes_info is set for COURSE_ROSTER_CHANGES and
    course_work_changes_info for COURSE_WORK_CHANGES.
    """
    feed_type: FeedType
    course_roster_changes_info: Optional[CourseRosterChangesInfo] = None
    course_work_changes_info: Optional[CourseWorkChangesInfo] = None


class CloudPubsubTopic(ClassroomModel):
    # e.g. "projects/my-project/topics/classroom"
    topic_name: str


class RegistrationCreate(ResourceCreate):
    feed: Feed
    cloud_pubsub_topic: CloudPubsubTopic


class Registration(ClassroomModel):
    registration_id: str
    feed: Feed
    cloud_pubsub_topic: CloudPubsubTopic
    expiry_time: Optional[datetime] = None


class RegistrationInterface(ResourceInterface):
    get = Registration
    create = RegistrationCreate
    endpoint = "registrations"
