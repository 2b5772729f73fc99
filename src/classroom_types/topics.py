from datetime import datetime
from typing import Optional

from pydantic import Field

from classroom_types.base import ClassroomModel, ResourceCreate, ResourceInterface, ResourceModify


class TopicCreate(ResourceCreate):
    name: str = Field(..., min_length=1, max_length=100)


class TopicModify(ResourceModify):
    name: Optional[str] = Field(None, min_length=1, max_length=100)


class Topic(ClassroomModel):
    """Topic created by a teacher for the course."""
    course_id: Optional[str] = None
    topic_id: str
    name: str
    update_time: Optional[datetime] = None


class TopicInterface(ResourceInterface):
    get = Topic
    create = TopicCreate
    modify = TopicModify
    endpoint = "courses/{course_id}/topics"
