"""Tests for the regular-expression backed scheme."""

import math

import pytest

from versionkit.exceptions import InvalidSchemeError, InvalidVersionError, ParseError
from versionkit.range import VersionRange
from versionkit.schemes import PatternScheme
from versionkit.schemes._template import render_template

MAJOR_MINOR = [
    {"name": "major", "type": "integer"},
    {"name": "minor", "type": "integer"},
]


@pytest.mark.short
class TestPatternParsing:
    def test_parse(self, extensible_pattern_scheme):
        version = extensible_pattern_scheme.parse("1.2.3.4-beta-2")

        assert version.values == {
            "major": 1,
            "minor": 2,
            "patch": 3,
            "patchlevel": 4,
            "stage": "beta",
            "iteration": 2,
        }

    def test_unmatched_optional_groups_are_left_out(self, extensible_pattern_scheme):
        version = extensible_pattern_scheme.parse("1.2.3")

        assert [c.name for c in version.components] == ["major", "minor", "patch"]
        assert version.component("stage") is None
        # absent segments still hold their place in the key
        assert version.comparable_key == (1, 2, 3, 0, math.inf, 0)

    def test_no_match(self, extensible_pattern_scheme):
        with pytest.raises(ParseError, match="does not match pattern"):
            extensible_pattern_scheme.parse("1.2")

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_unusable_input(self, extensible_pattern_scheme, value):
        with pytest.raises(InvalidVersionError):
            extensible_pattern_scheme.parse(value)
        assert not extensible_pattern_scheme.is_valid(value)

    def test_typed_value_errors_surface_as_parse_errors(self, extensible_pattern_scheme):
        with pytest.raises(ParseError, match="Invalid enum value 'dev'"):
            extensible_pattern_scheme.parse("1.2.3-dev-1")

    def test_required_group_missing(self):
        scheme = PatternScheme(
            name="strict",
            pattern=r"^(\d+)(?:\.(\d+))?$",
            component_definitions=MAJOR_MINOR,
        )

        with pytest.raises(ParseError, match="Required component 'minor' is missing"):
            scheme.parse("1")


@pytest.mark.short
class TestPatternComparison:
    def test_compare(self, extensible_pattern_scheme):
        assert extensible_pattern_scheme.compare("1.2.3", "1.2.3.4") == -1
        assert extensible_pattern_scheme.compare("1.2.3.4", "1.2.3") == 1
        assert extensible_pattern_scheme.compare("1.10.0", "1.9.9") == 1
        assert extensible_pattern_scheme.compare("1.2.3-alpha-1", "1.2.3-beta-1") == -1
        assert extensible_pattern_scheme.compare("1.2.3", "1.2.3") == 0

    def test_release_outranks_optional_prerelease(self):
        scheme = PatternScheme(
            name="short_semver",
            pattern=r"^(\d+)\.(\d+)(?:-([0-9A-Za-z.]+))?$",
            component_definitions=[
                *MAJOR_MINOR,
                {"name": "prerelease", "type": "prerelease", "optional": True},
            ],
        )

        assert scheme.compare("1.0-alpha", "1.0") == -1
        assert scheme.compare("1.0", "1.0-alpha") == 1
        assert scheme.compare("1.0-alpha", "1.0-alpha.1") == -1

    def test_release_outranks_optional_stage(self, extensible_pattern_scheme):
        assert extensible_pattern_scheme.compare("1.2.3-rc-1", "1.2.3") == -1
        assert extensible_pattern_scheme.compare("1.2.3", "1.2.3.0") == 0

    def test_ignored_component_does_not_affect_order(self):
        scheme = PatternScheme(
            name="with_build",
            pattern=r"^(\d+)\.(\d+)\+(\w+)$",
            component_definitions=[
                *MAJOR_MINOR,
                {"name": "build", "type": "string", "ignore_in_comparison": True},
            ],
        )

        assert scheme.compare("1.2+aaa", "1.2+zzz") == 0
        assert scheme.parse("1.2+aaa").component("build").value == "aaa"

    def test_matches_range(self, extensible_pattern_scheme):
        scheme = extensible_pattern_scheme
        between = VersionRange.between(scheme, "1.2.0", "1.3.0")

        assert scheme.matches_range("1.2.0", between)
        assert scheme.matches_range("1.3.0", between)
        assert not scheme.matches_range("1.3.0.1", between)
        assert scheme.matches_range("1.0.0", VersionRange.before(scheme, "1.2.0"))
        assert scheme.matches_range("1.2.0", VersionRange.after(scheme, "1.2.0"))
        assert scheme.matches_range("1.2.0", VersionRange.equals(scheme, "1.2.0"))


@pytest.mark.short
class TestPatternRendering:
    def test_render_with_template(self, extensible_pattern_scheme):
        scheme = extensible_pattern_scheme

        assert str(scheme.parse("1.2.3")) == "1.2.3"
        assert str(scheme.parse("1.2.3.4")) == "1.2.3.4"
        assert str(scheme.parse("01.2.3-rc-1")) == "1.2.3-rc-1"

    def test_render_without_template_returns_raw(self):
        scheme = PatternScheme(name="raw", pattern=r"^(\d+)\.(\d+)$", component_definitions=MAJOR_MINOR)

        assert scheme.render(scheme.parse("01.02")) == "01.02"

    def test_build(self, extensible_pattern_scheme):
        version = extensible_pattern_scheme.build(
            major=1, minor=2, patch=3, stage="alpha", iteration=1
        )

        assert version.raw_string == "1.2.3-alpha-1"
        assert version == extensible_pattern_scheme.parse("1.2.3-alpha-1")

    def test_build_joins_values_without_template(self):
        scheme = PatternScheme(name="raw", pattern=r"^(\d+)\.(\d+)$", component_definitions=MAJOR_MINOR)

        assert scheme.build(minor=4, major=3).raw_string == "3.4"

    def test_build_unknown_component(self, extensible_pattern_scheme):
        with pytest.raises(ParseError, match="Unknown component 'epoch'"):
            extensible_pattern_scheme.build(epoch=1)


@pytest.mark.short
class TestPatternValidation:
    def test_group_count_must_match_definitions(self):
        with pytest.raises(InvalidSchemeError, match="2 capture groups but 1 components"):
            PatternScheme(name="bad", pattern=r"^(\d+)\.(\d+)$", component_definitions=MAJOR_MINOR[:1])

    def test_definitions_required(self):
        with pytest.raises(InvalidSchemeError, match="No component definitions provided"):
            PatternScheme(name="bad", pattern=r"^(\d+)$", component_definitions=[])

    def test_invalid_regex(self):
        with pytest.raises(InvalidSchemeError, match="Invalid pattern"):
            PatternScheme(name="bad", pattern=r"^(\d+$", component_definitions=MAJOR_MINOR[:1])

    @pytest.mark.parametrize(
        "pattern",
        [
            r"^(\d+*)$",
            r"^(a+)+$",
            r"^((a*)b*)$",
            r"^(\d{1})\.(\d{1})\.(\d{1})\.(\d{1})\.(\d{1})\.(\d{1})$",
        ],
    )
    def test_backtracking_guard(self, pattern):
        with pytest.raises(InvalidSchemeError, match="Invalid scheme 'bad'"):
            PatternScheme(name="bad", pattern=pattern, component_definitions=MAJOR_MINOR[:1])


@pytest.mark.short
class TestTemplate:
    def test_span_dropped_when_all_placeholders_unset(self):
        assert render_template("{a}[-{b}]", {"a": "1"}) == "1"

    def test_span_kept_when_any_placeholder_set(self):
        assert render_template("{a}[-{b}.{c}]", {"a": "1", "c": "3"}) == "1-.3"

    def test_nested_spans(self):
        template = "{a}[.{b}[.{c}]]"
        assert render_template(template, {"a": "1", "b": "2"}) == "1.2"
        assert render_template(template, {"a": "1", "b": "2", "c": "3"}) == "1.2.3"
