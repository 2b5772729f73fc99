from enum import Enum
from typing import Optional

from classroom_types.base import ClassroomModel, ResourceInterface


class AliasScope(str, Enum):
    """Namespace of a course alias, given by its prefix."""
    DOMAIN = "d"
    PROJECT = "p"


class CourseAlias(ClassroomModel):
    """
    Alternative identifier for a course.

    "d:math_101" is visible domain-wide, "p:abc123" only to the
    Developer Console project that created it.
    """
    alias: str

    @property
    def scope(self) -> Optional[AliasScope]:
        prefix, sep, _ = self.alias.partition(":")
        if not sep:
            return None
        try:
            return AliasScope(prefix)
        except ValueError:
            return None

    @property
    def name(self) -> str:
        """The alias without its scope prefix."""
        if self.scope is None:
            return self.alias
        return self.alias.partition(":")[2]


class CourseAliasInterface(ResourceInterface):
    get = CourseAlias
    create = CourseAlias
    endpoint = "courses/{course_id}/aliases"
