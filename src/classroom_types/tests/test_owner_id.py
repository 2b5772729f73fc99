"""
Tests for owner id parsing and formatting.

Test coverage:
- Ordered resolution: "me", digits, everything else
- Formatting and the round trip
- Known asymmetry for directly constructed variants
- Use as a model field
"""

import pytest

from classroom_types import (
    CourseCreate,
    Email,
    Id,
    Me,
    OwnerId,
    SchemaDecodeError,
    decode,
    encode,
    format_owner_id,
    parse_owner_id,
)


class TestParseOwnerId:
    """Tests for the text -> variant rule."""

    def test_me_literal(self):
        assert parse_owner_id("me") == Me()

    def test_numeric_id(self):
        assert parse_owner_id("108987654321098765432") == Id("108987654321098765432")

    def test_email(self):
        assert parse_owner_id("teacher@school.edu") == Email("teacher@school.edu")

    def test_me_only_matches_exactly(self):
        """Test that 'me' is an exact match, not a substring or case-insensitive match."""
        assert parse_owner_id("me@school.edu") == Email("me@school.edu")
        assert parse_owner_id("ME") == Email("ME")
        assert parse_owner_id(" me") == Email(" me")

    @pytest.mark.parametrize("text", ["0", "42", "000123"])
    def test_digits_give_id(self, text):
        assert parse_owner_id(text) == Id(text)

    @pytest.mark.parametrize("text", ["12a", "1.5", "-1", "١٢٣", "²", "not an email"])
    def test_non_ascii_digit_text_gives_email(self, text):
        """Test that anything other than plain ASCII digits falls back to Email."""
        assert parse_owner_id(text) == Email(text)

    def test_empty_text_gives_email(self):
        assert parse_owner_id("") == Email("")

    def test_variants_are_distinct(self):
        assert Email("123") != Id("123")
        assert Me() == Me()
        assert len({Me(), Me(), Id("1"), Id("1")}) == 2
        assert isinstance(Me(), OwnerId)


class TestFormatOwnerId:
    """Tests for the variant -> text rule."""

    def test_format_each_variant(self):
        assert format_owner_id(Me()) == "me"
        assert format_owner_id(Id("123")) == "123"
        assert format_owner_id(Email("a@b.c")) == "a@b.c"

    def test_str_uses_wire_text(self):
        assert str(Me()) == "me"
        assert str(Email("a@b.c")) == "a@b.c"

    @pytest.mark.parametrize(
        "text",
        ["me", "108987654321098765432", "teacher@school.edu", "me@school.edu", "ME", ""],
    )
    def test_round_trip(self, text):
        assert format_owner_id(parse_owner_id(text)) == text

    def test_id_with_non_digits_is_not_round_trip_stable(self):
        """Test that an Id built directly is not re-checked and parses back as Email."""
        owner = Id("abc")
        text = format_owner_id(owner)

        assert text == "abc"
        assert parse_owner_id(text) == Email("abc")

    def test_email_that_looks_like_another_variant(self):
        assert parse_owner_id(format_owner_id(Email("12345"))) == Id("12345")
        assert parse_owner_id(format_owner_id(Email("me"))) == Me()


class TestOwnerIdField:
    """Tests for OwnerId inside models and the codec."""

    def test_decode_from_payload(self):
        course = decode(CourseCreate, {"name": "Biology", "ownerId": "me"})
        assert course.owner_id == Me()

    def test_decode_standalone(self):
        assert decode(OwnerId, "123") == Id("123")
        assert decode(OwnerId, "x@y.z") == Email("x@y.z")

    def test_non_string_is_decode_error(self):
        with pytest.raises(SchemaDecodeError):
            decode(OwnerId, 123)

    def test_accepts_variant_instances(self):
        course = CourseCreate(name="Biology", owner_id=Id("42"))
        assert course.owner_id == Id("42")

    def test_encode(self):
        assert encode(Me()) == "me"
        assert encode(CourseCreate(name="Biology", owner_id=Email("t@s.edu")))["ownerId"] == "t@s.edu"
