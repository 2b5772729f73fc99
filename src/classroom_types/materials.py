"""
Attachment resources: Drive items, forms, links, YouTube videos.

Material is a tagged union over the attachment kinds. On the wire it is an
object with exactly one key naming the kind:

    {"driveFile": {...}} | {"youtubeVideo": {...}} | {"link": {...}} | {"form": {...}}

Each kind is its own model with a single field, so only one attachment can be
populated at a time. The kind is resolved through MATERIAL_KINDS; any other
key, no key or several keys fail validation.
"""

from enum import Enum
from typing import Annotated, Any, Dict, Optional, Type, Union

from pydantic import Discriminator, Tag

from classroom_types.base import ClassroomModel


class DriveFile(ClassroomModel):
    """Representation of a Google Drive file."""
    id: str
    title: Optional[str] = None
    alternate_link: Optional[str] = None
    thumbnail_url: Optional[str] = None


class DriveFolder(ClassroomModel):
    """Representation of a Google Drive folder."""
    id: str
    title: Optional[str] = None
    alternate_link: Optional[str] = None


class Form(ClassroomModel):
    """
    Google Forms item.

    response_url is only set once responses have been recorded and only for
    editors of the form.
    """
    form_url: str
    response_url: Optional[str] = None
    title: Optional[str] = None
    thumbnail_url: Optional[str] = None


class Link(ClassroomModel):
    """URL item. url must be 1 to 2024 characters."""
    url: str
    title: Optional[str] = None
    thumbnail_url: Optional[str] = None


class YouTubeVideo(ClassroomModel):
    """YouTube video item."""
    id: str
    title: Optional[str] = None
    alternate_link: Optional[str] = None
    thumbnail_url: Optional[str] = None


class DriveFileShareMode(str, Enum):
    """
    How students access a shared Drive file.

    VIEW is the server default. EDIT and STUDENT_COPY are only accepted on
    coursework of type ASSIGNMENT.
    """
    UNKNOWN_SHARE_MODE = "UNKNOWN_SHARE_MODE"
    VIEW = "VIEW"
    EDIT = "EDIT"
    STUDENT_COPY = "STUDENT_COPY"


class SharedDriveFile(ClassroomModel):
    """Drive file that is used as material for course work."""
    drive_file: DriveFile
    share_mode: DriveFileShareMode


class DriveFileMaterial(ClassroomModel):
    drive_file: DriveFile


class YouTubeVideoMaterial(ClassroomModel):
    youtube_video: YouTubeVideo


class LinkMaterial(ClassroomModel):
    link: Link


class FormMaterial(ClassroomModel):
    """Form attachment. Creating form attachments is not supported by the service."""
    form: Form


MATERIAL_KINDS: Dict[str, Type[ClassroomModel]] = {
    "driveFile": DriveFileMaterial,
    "youtubeVideo": YouTubeVideoMaterial,
    "link": LinkMaterial,
    "form": FormMaterial,
}

_KIND_BY_CLASS = {cls: kind for kind, cls in MATERIAL_KINDS.items()}


def material_kind(value: Any) -> Optional[str]:
    """
    Wire key of a material, from a payload dict or a variant instance.

    Returns None when a payload has no key or more than one key; an unknown
    single key is returned as-is and rejected by the union.
    """
    if isinstance(value, dict):
        if len(value) != 1:
            return None
        return next(iter(value))
    return _KIND_BY_CLASS.get(type(value))


Material = Annotated[
    Union[
        Annotated[DriveFileMaterial, Tag("driveFile")],
        Annotated[YouTubeVideoMaterial, Tag("youtubeVideo")],
        Annotated[LinkMaterial, Tag("link")],
        Annotated[FormMaterial, Tag("form")],
    ],
    Discriminator(
        material_kind,
        custom_error_type="invalid_material",
        custom_error_message="Material must have exactly one of the keys driveFile, youtubeVideo, link, form",
    ),
]


def attachment_of(material) -> ClassroomModel:
    """The attachment carried by a material variant."""
    if type(material) not in _KIND_BY_CLASS:
        raise TypeError(f"Not a material: {material!r}")
    return getattr(material, next(iter(type(material).model_fields)))
