import json
import logging
from typing import List

import pytest
from pydantic import ValidationError

from classroom_types import (
    ClassroomTypesError,
    Course,
    CourseCreate,
    CourseState,
    ErrorDetail,
    Me,
    SchemaDecodeError,
    decode,
    decode_json,
    encode,
    encode_json,
)
from classroom_types.errors import format_location
from classroom_types.tests.test_courses import COURSE_PAYLOAD


class TestDecodeJson:
    """Tests for decoding raw JSON text."""

    def test_decode_bytes(self):
        course = decode_json(Course, json.dumps(COURSE_PAYLOAD).encode("utf-8"))
        assert course.id == "10001"

    def test_decode_str(self):
        assert decode_json(CourseState, '"SUSPENDED"') is CourseState.SUSPENDED

    def test_malformed_json_is_decode_error(self):
        with pytest.raises(SchemaDecodeError) as exc_info:
            decode_json(Course, b"{not json")

        assert exc_info.value.errors[0].type == "json_invalid"

    def test_list_target(self):
        second = dict(COURSE_PAYLOAD)
        del second["id"]

        with pytest.raises(SchemaDecodeError) as exc_info:
            decode_json(List[Course], json.dumps([COURSE_PAYLOAD, second]))

        assert exc_info.value.paths == ["[1].id"]


class TestSchemaDecodeError:
    """Tests for the decode error itself."""

    def test_wrong_top_level_type(self):
        with pytest.raises(SchemaDecodeError) as exc_info:
            decode(Course, "not an object")

        error = exc_info.value
        assert error.paths == [""]
        assert "<root>" in str(error)
        assert str(error).startswith("Failed to decode Course")

    def test_is_package_error_and_chained(self):
        with pytest.raises(SchemaDecodeError) as exc_info:
            decode(CourseCreate, {})

        assert isinstance(exc_info.value, ClassroomTypesError)
        assert isinstance(exc_info.value.__cause__, ValidationError)
        assert exc_info.value.target == "CourseCreate"
        assert exc_info.value.details == {"target": "CourseCreate"}

    def test_error_details(self):
        with pytest.raises(SchemaDecodeError) as exc_info:
            decode(CourseCreate, {"name": "Bio"})

        assert exc_info.value.errors == [
            ErrorDetail(path="ownerId", message="Field required", type="missing"),
        ]

    @pytest.mark.parametrize(
        "loc, path",
        [
            ((), ""),
            (("name",), "name"),
            (("gradebookSettings", "gradeCategories", 0, "weight"), "gradebookSettings.gradeCategories[0].weight"),
            ((2, "id"), "[2].id"),
        ],
    )
    def test_format_location(self, loc, path):
        assert format_location(loc) == path

    def test_failure_is_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="classroom_types.codec")

        with pytest.raises(SchemaDecodeError):
            decode(Course, {})

        assert "Decoding Course failed" in caplog.text


class TestEncode:

    def test_encode_json_is_compact(self):
        assert encode_json(CourseCreate(name="Bio", owner_id=Me())) == '{"name":"Bio","ownerId":"me"}'

    def test_encode_json_keeps_unicode(self):
        assert encode_json(CourseCreate(name="Biología", owner_id=Me())) == '{"name":"Biología","ownerId":"me"}'

    def test_encode_enum(self):
        assert encode(CourseState.DECLINED) == "DECLINED"

    def test_decode_encode_round_trip(self):
        course = decode(Course, COURSE_PAYLOAD)
        assert decode(Course, encode(course)) == course
