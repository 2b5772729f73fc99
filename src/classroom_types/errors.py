"""
Exception hierarchy for the Classroom types package.

Decoding has a single failure category, SchemaDecodeError, raised whenever
a payload does not match the expected shape. The remaining exceptions are
raised by the explicit call-boundary checks (assignee options, share modes)
and by URL composition in the client placeholder.
"""

from typing import Any, Dict, List, Optional, Sequence, Union

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """One offending location in a decoded payload."""
    path: str = Field(..., description="Dotted wire path, e.g. 'gradebookSettings.gradeCategories[0].weight'")
    message: str = Field(..., description="Human-readable reason")
    type: str = Field(..., description="Validation error type, e.g. 'enum' or 'missing'")


class ClassroomTypesError(Exception):
    """
    Base exception for all errors raised by this package.

    Attributes:
        message: Human-readable error message
        details: Additional context
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r})"


def format_location(loc: Sequence[Union[str, int]]) -> str:
    """Render a pydantic error location as a dotted path with [index] items."""
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        elif path:
            path += f".{part}"
        else:
            path = str(part)
    return path


class SchemaDecodeError(ClassroomTypesError):
    """
    Input did not match the expected wire shape.

    Raised for a missing required field, an enum text outside the closed set,
    a malformed nested structure, an unknown Material kind or malformed JSON.
    """

    def __init__(
        self,
        target: str,
        errors: List[ErrorDetail],
        *,
        message: Optional[str] = None,
    ):
        if message is None:
            summary = "; ".join(f"{e.path or '<root>'}: {e.message}" for e in errors)
            message = f"Failed to decode {target}: {summary}"
        super().__init__(message, details={"target": target})
        self.target = target
        self.errors = errors

    @property
    def paths(self) -> List[str]:
        return [error.path for error in self.errors]

    @classmethod
    def from_validation_error(cls, target: str, exc) -> "SchemaDecodeError":
        errors = [
            ErrorDetail(
                path=format_location(item["loc"]),
                message=item["msg"],
                type=item["type"],
            )
            for item in exc.errors()
        ]
        return cls(target, errors)


class AssigneeOptionsError(ClassroomTypesError):
    """Assignee mode and individual-students options disagree."""


class ShareModeError(ClassroomTypesError):
    """A drive file share mode is not allowed for the coursework type."""
