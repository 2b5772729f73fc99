"""
Wire (de)serialization entry points.

decode / decode_json turn a parsed JSON value or raw JSON text into the
requested type and raise SchemaDecodeError on any mismatch. encode /
encode_json produce camelCase JSON with unset fields omitted, as the
service expects for create and partial-update bodies.
"""

import json
import logging
from typing import Any, Type, TypeVar, Union

from pydantic import BaseModel, TypeAdapter, ValidationError

from classroom_types.base import DUMP_OPTIONS
from classroom_types.errors import SchemaDecodeError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _target_name(target: Any) -> str:
    return getattr(target, "__name__", None) or repr(target)


def _is_model(target: Any) -> bool:
    return isinstance(target, type) and issubclass(target, BaseModel)


def decode(target: Type[T], data: Any) -> T:
    """
    Validate a parsed JSON value (dict, list, str, ...) as target.

    target is a model class or any type pydantic accepts, e.g. Material,
    OwnerId, an enum or List[Course].

    Raises:
        SchemaDecodeError: If data does not match target
    """
    name = _target_name(target)
    try:
        if _is_model(target):
            return target.model_validate(data)
        return TypeAdapter(target).validate_python(data)
    except ValidationError as e:
        error = SchemaDecodeError.from_validation_error(name, e)
        logger.debug("Decoding %s failed at %s", name, error.paths)
        raise error from e


def decode_json(target: Type[T], raw: Union[str, bytes, bytearray]) -> T:
    """
    Validate raw JSON text as target. Malformed JSON is a SchemaDecodeError too.
    """
    name = _target_name(target)
    try:
        if _is_model(target):
            return target.model_validate_json(raw)
        return TypeAdapter(target).validate_json(raw)
    except ValidationError as e:
        error = SchemaDecodeError.from_validation_error(name, e)
        logger.debug("Decoding %s from JSON failed at %s", name, error.paths)
        raise error from e


def encode(value: Any) -> Any:
    """JSON-compatible form of value with camelCase keys and None fields omitted."""
    if isinstance(value, BaseModel):
        return value.model_dump(**DUMP_OPTIONS)
    return TypeAdapter(type(value)).dump_python(value, **DUMP_OPTIONS)


def encode_json(value: Any) -> str:
    return json.dumps(encode(value), separators=(",", ":"), ensure_ascii=False)
