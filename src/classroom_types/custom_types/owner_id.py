"""
Identifier of a Classroom user as it appears in owner and user id fields.

The wire form is a single string that is either a Google numeric user id,
an email address or the alias "me" for the requesting user. Nothing is
validated beyond the ordered match in parse_owner_id:

    "me"                      -> Me()
    non-empty ASCII digits    -> Id(text)
    anything else             -> Email(text)

Formatting is the reverse and never re-checks the variant, so an Id built
directly from non-digit text formats fine but parses back as an Email.
"""

from dataclasses import dataclass
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

ME_ALIAS = "me"


class OwnerId:
    """Base of the Email / Id / Me variants."""

    __slots__ = ()

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                format_owner_id,
                when_used="always",
            ),
        )

    @classmethod
    def _validate(cls, value: Any) -> "OwnerId":
        if isinstance(value, OwnerId):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Owner id must be a string, got {type(value).__name__}")
        return parse_owner_id(value)

    def __str__(self) -> str:
        return format_owner_id(self)


@dataclass(frozen=True)
class Email(OwnerId):
    """Email address, unchecked."""
    value: str


@dataclass(frozen=True)
class Id(OwnerId):
    """Numeric user id. Only parse_owner_id guarantees the digits."""
    value: str


@dataclass(frozen=True)
class Me(OwnerId):
    """The requesting user."""


def parse_owner_id(text: str) -> OwnerId:
    if text == ME_ALIAS:
        return Me()
    if text.isascii() and text.isdigit():
        return Id(text)
    return Email(text)


def format_owner_id(owner: OwnerId) -> str:
    if isinstance(owner, Me):
        return ME_ALIAS
    if isinstance(owner, (Email, Id)):
        return owner.value
    raise TypeError(f"Not an owner id: {owner!r}")
