from abc import ABC
from typing import Any, Dict, List, Optional, Type

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# Keyword arguments every wire serialization uses: camelCase keys, unset fields omitted
DUMP_OPTIONS: Dict[str, Any] = {
    "mode": "json",
    "by_alias": True,
    "exclude_none": True,
}


class ClassroomModel(BaseModel):
    """
    Base for every Classroom resource.

    Attributes are snake_case in Python and camelCase on the wire.
    Either spelling is accepted on construction.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_wire(self) -> Dict[str, Any]:
        """Serialize to a JSON-compatible dict, omitting unset fields."""
        return self.model_dump(**DUMP_OPTIONS)


class ResourceCreate(ClassroomModel):
    """Request body of a create (POST) call."""


class ResourceModify(ClassroomModel):
    """Request body of a partial update (PATCH) call."""

    def set_fields(self) -> List[str]:
        """Wire names of the fields carrying a value, in declaration order."""
        names = []
        for name, field in type(self).model_fields.items():
            if getattr(self, name) is None:
                continue
            names.append(field.alias or name)
        return names

    def update_mask(self) -> str:
        return ",".join(self.set_fields())


class ResourceInterface(ABC):
    """
    Registry of the shapes of one remote resource.

    endpoint is a path template relative to the versioned service root,
    e.g. "courses/{course_id}/topics".
    """
    get: Type[BaseModel] = None
    create: Optional[Type[BaseModel]] = None
    modify: Optional[Type[BaseModel]] = None
    endpoint: str = None
