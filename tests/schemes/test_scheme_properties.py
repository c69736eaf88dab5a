"""Ordering and rendering properties every scheme has to keep."""

import itertools

import pytest

from versionkit.schemes import CalVerScheme, SemanticScheme, SoloVerScheme, WendtVerScheme

ROUND_TRIP_SAMPLES = [
    (SemanticScheme(), "01.2.3-rc.1+b"),
    (SemanticScheme(), "1.2"),
    (SemanticScheme(), "1.0.0-alpha.beta"),
    (CalVerScheme(), "2024.01.17"),
    (CalVerScheme(format="YY.0M"), "24.03"),
    (SoloVerScheme(), "007-rc1"),
    (SoloVerScheme(), "12+hotfix"),
    (WendtVerScheme(), "01.02.03.004"),
]

ORDER_SAMPLES = [
    (
        SemanticScheme(),
        ["1.0.0-alpha", "1.0.0-alpha.1", "1.0.0-beta", "1.0.0", "1.0", "1.2.0+b", "1.2", "2.0.0"],
    ),
    (CalVerScheme(), ["2023.12.31", "2024.01.01", "2024.01.17", "2025.06.01"]),
    (SoloVerScheme(), ["1-beta", "1", "1+hotfix", "2-rc1", "2", "10"]),
    (WendtVerScheme(), ["1.0.0.0", "1.0.0.999", "1.0.1.0", "1.99.99.999", "2.0.0.0"]),
]


def _assert_total_order(scheme, versions):
    for a in versions:
        assert scheme.compare(a, a) == 0

    for a, b in itertools.permutations(versions, 2):
        assert scheme.compare(a, b) == -scheme.compare(b, a)

    for a, b, c in itertools.permutations(versions, 3):
        if scheme.compare(a, b) <= 0 and scheme.compare(b, c) <= 0:
            assert scheme.compare(a, c) <= 0


@pytest.mark.short
class TestRoundTrip:
    @pytest.mark.parametrize(
        "scheme, version", ROUND_TRIP_SAMPLES, ids=[v for _, v in ROUND_TRIP_SAMPLES]
    )
    def test_rendered_text_parses_to_same_key(self, scheme, version):
        parsed = scheme.parse(version)

        assert scheme.parse(str(parsed)).comparable_key == parsed.comparable_key

    @pytest.mark.parametrize("version", ["1.2.3", "1.2.3.4", "01.2.3-rc-1", "1.2.3.4-alpha-2"])
    def test_pattern_scheme(self, extensible_pattern_scheme, version):
        parsed = extensible_pattern_scheme.parse(version)

        assert extensible_pattern_scheme.parse(str(parsed)).comparable_key == parsed.comparable_key

    @pytest.mark.parametrize("version", ["1.2.3", "01.2.3-rc.1", "1.2.3+build.5", "1.2.3-a.b+c"])
    def test_declarative_scheme(self, declarative_scheme, version):
        parsed = declarative_scheme.parse(version)

        assert declarative_scheme.parse(str(parsed)).comparable_key == parsed.comparable_key


@pytest.mark.short
class TestTotalOrder:
    @pytest.mark.parametrize(
        "scheme, versions", ORDER_SAMPLES, ids=[s.name for s, _ in ORDER_SAMPLES]
    )
    def test_builtin_schemes(self, scheme, versions):
        _assert_total_order(scheme, versions)

    def test_pattern_scheme(self, extensible_pattern_scheme):
        _assert_total_order(
            extensible_pattern_scheme,
            ["1.2.3-alpha-1", "1.2.3-rc-2", "1.2.3", "1.2.3.0", "1.2.3.1-beta-1", "1.2.3.1", "1.3.0"],
        )

    def test_declarative_scheme(self, declarative_scheme):
        _assert_total_order(
            declarative_scheme,
            ["1.0.0-1", "1.0.0-alpha", "1.0.0-alpha.1", "1.0.0", "1.0.0+x", "1.0.1", "2.0.0"],
        )
