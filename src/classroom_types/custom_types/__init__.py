from .owner_id import (
    ME_ALIAS,
    Email,
    Id,
    Me,
    OwnerId,
    format_owner_id,
    parse_owner_id,
)

__all__ = [
    "ME_ALIAS",
    "Email",
    "Id",
    "Me",
    "OwnerId",
    "format_owner_id",
    "parse_owner_id",
]
