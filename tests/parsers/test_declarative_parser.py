"""Tests for the marker-driven segment parser."""

import pytest

from versionkit.components import Postfix
from versionkit.exceptions import InvalidSchemeError, InvalidVersionError, ParseError
from versionkit.parsers import DeclarativeParser

THREE_PART = [
    {"name": "major", "type": "integer", "separator": "."},
    {"name": "minor", "type": "integer", "separator": "."},
    {"name": "patch", "type": "integer"},
]


@pytest.mark.short
class TestDeclarativeParser:
    def test_parse_three_part(self):
        parser = DeclarativeParser(THREE_PART)

        assert parser.parse("1.2.3") == {"major": 1, "minor": 2, "patch": 3}

    def test_missing_required_segment(self):
        parser = DeclarativeParser(THREE_PART)

        with pytest.raises(ParseError, match="Required segment 'patch' is missing or empty"):
            parser.parse("1.2")

    def test_trailing_content(self):
        parser = DeclarativeParser(
            [
                {"name": "major", "type": "integer", "separator": "."},
                {"name": "build", "type": "string", "optional": True, "prefix": "+"},
            ]
        )

        with pytest.raises(ParseError, match="Unexpected trailing content after parsing: '5'"):
            parser.parse("1.5")

    def test_empty_input(self):
        with pytest.raises(ParseError, match="Version string cannot be empty"):
            DeclarativeParser(THREE_PART).parse("")

    def test_optional_prefixed_segment(self):
        parser = DeclarativeParser(
            [
                {"name": "major", "type": "integer", "separator": "."},
                {"name": "minor", "type": "integer"},
                {"name": "prerelease", "type": "string", "optional": True, "prefix": "-"},
            ]
        )

        assert parser.parse("1.2-alpha.1") == {"major": 1, "minor": 2, "prerelease": "alpha.1"}
        assert parser.parse("1.2") == {"major": 1, "minor": 2, "prerelease": None}

    def test_enum_segment_rejects_unknown_symbol(self):
        parser = DeclarativeParser(
            [
                {"name": "major", "type": "integer", "separator": "."},
                {"name": "minor", "type": "integer"},
                {
                    "name": "stage",
                    "type": "enum",
                    "optional": True,
                    "prefix": "-",
                    "values": ["alpha", "beta"],
                },
            ]
        )

        assert parser.parse("1.2-beta")["stage"] == "beta"
        with pytest.raises(ParseError, match="Invalid enum value 'gamma'"):
            parser.parse("1.2-gamma")

    def test_semver_like_with_build(self, semver_like_definitions):
        parser = DeclarativeParser(semver_like_definitions)

        assert parser.parse("1.2.3+build.123") == {
            "major": 1,
            "minor": 2,
            "patch": 3,
            "prerelease": None,
            "build": "build.123",
        }
        assert parser.parse("1.2.3-rc.1+exp")["prerelease"] == ("rc", 1)

    def test_prefix_kept_in_value(self):
        parser = DeclarativeParser(
            [
                {"name": "number", "type": "integer"},
                {
                    "name": "postfix",
                    "type": "postfix",
                    "optional": True,
                    "prefix": "+",
                    "include_prefix_in_value": True,
                },
            ]
        )

        assert parser.parse("5+hotfix")["postfix"] == Postfix("+", "hotfix")
        assert parser.parse("5-beta")["postfix"] == Postfix("-", "beta")
        assert parser.parse("5")["postfix"] is None

    def test_optional_segment_after_own_separator(self):
        parser = DeclarativeParser(
            [
                {"name": "major", "type": "integer", "separator": "-"},
                {"name": "stage", "type": "string", "optional": True, "prefix": "-"},
            ]
        )

        assert parser.parse("1-beta") == {"major": 1, "stage": "beta"}
        assert parser.parse("1") == {"major": 1, "stage": None}

    @pytest.mark.parametrize("value", [5, 1.5, ["1.2.3"]])
    def test_non_string_input(self, value):
        parser = DeclarativeParser(THREE_PART)

        with pytest.raises(InvalidVersionError, match="Version must be a string"):
            parser.parse(value)
        assert not parser.matches(value)

    def test_matches(self):
        parser = DeclarativeParser(THREE_PART)

        assert parser.matches("1.2.3")
        assert not parser.matches("1.2")
        assert not parser.matches(None)


@pytest.mark.short
class TestDefinitionValidation:
    def test_optional_segment_needs_prefix(self):
        with pytest.raises(
            InvalidSchemeError, match="Optional segment 'minor' must have prefix or separator"
        ):
            DeclarativeParser(
                [
                    {"name": "major", "type": "integer", "separator": "."},
                    {"name": "minor", "type": "integer", "optional": True},
                ]
            )

    def test_first_segment_may_be_optional_without_prefix(self):
        parser = DeclarativeParser([{"name": "number", "type": "integer", "optional": True}])

        assert parser.parse("4") == {"number": 4}

    def test_unknown_component_type(self):
        with pytest.raises(InvalidSchemeError, match="Unknown component type: roman"):
            DeclarativeParser([{"name": "major", "type": "roman"}])
