import pytest

from versionkit.exceptions import InvalidSchemeError
from versionkit.loader import SchemeLoader
from versionkit.model import SchemeConfig
from versionkit.schemes import (
    CalVerScheme,
    CompositeScheme,
    DeclarativeScheme,
    PatternScheme,
    SemanticScheme,
    SoloVerScheme,
    WendtVerScheme,
)

DECLARATIVE_YAML = """
type: declarative
name: release_train
description: Release trains with an optional channel
formatTemplate: "{train}.{iteration}[-{channel}]"
components:
  - name: train
    type: integer
    separator: "."
  - name: iteration
    type: integer
  - name: channel
    type: enum
    optional: true
    prefix: "-"
    values: [alpha, beta]
    order: [alpha, beta]
"""

PATTERN_YAML = """
type: pattern
name: build_number
pattern: '^build-(\\d+)$'
components:
  - name: build
    type: integer
"""


@pytest.fixture
def loader():
    return SchemeLoader()


@pytest.mark.short
class TestFromYaml:
    def test_declarative(self, loader):
        scheme = loader.from_yaml_string(DECLARATIVE_YAML)

        assert isinstance(scheme, DeclarativeScheme)
        assert scheme.name == "release_train"
        assert scheme.description == "Release trains with an optional channel"
        assert scheme.parse("12.3-beta").values == {
            "train": 12,
            "iteration": 3,
            "channel": "beta",
        }
        assert scheme.compare("12.3-alpha", "12.3-beta") == -1
        assert str(scheme.parse("012.3")) == "12.3"

    def test_pattern(self, loader):
        scheme = loader.from_yaml_string(PATTERN_YAML)

        assert isinstance(scheme, PatternScheme)
        assert scheme.parse("build-42").values == {"build": 42}
        assert scheme.compare("build-9", "build-10") == -1

    def test_calver_format(self, loader):
        scheme = loader.from_yaml_string("type: calver\nformat: YYYY.0M\n")

        assert isinstance(scheme, CalVerScheme)
        assert scheme.name == "calver"
        assert scheme.is_valid("2024.05")

    @pytest.mark.parametrize(
        "scheme_type, cls",
        [
            ("semantic", SemanticScheme),
            ("solover", SoloVerScheme),
            ("wendtver", WendtVerScheme),
        ],
    )
    def test_fixed_schemes(self, loader, scheme_type, cls):
        scheme = loader.from_dict({"type": scheme_type})

        assert isinstance(scheme, cls)
        assert scheme.name == scheme_type

    def test_fixed_scheme_can_be_renamed(self, loader):
        scheme = loader.from_dict({"type": "semantic", "name": "semver2"})

        assert scheme.name == "semver2"

    def test_composite(self, loader):
        scheme = loader.from_yaml_string(
            """
type: composite
name: mixed
schemes:
  - type: semantic
  - type: wendtver
fallbackScheme:
  type: calver
"""
        )

        assert isinstance(scheme, CompositeScheme)
        assert [s.name for s in scheme.schemes] == ["semantic", "wendtver"]
        assert scheme.parse("1.2.3.4").origin.scheme.name == "wendtver"
        assert scheme.parse("2024.01.17").origin.scheme.name == "calver"

    def test_accepts_validated_config(self, loader):
        config = SchemeConfig.from_dict({"type": "solover", "name": "solo"})

        assert loader.from_dict(config).name == "solo"


@pytest.mark.short
class TestLoaderErrors:
    def test_invalid_yaml(self, loader):
        with pytest.raises(InvalidSchemeError, match="Invalid YAML"):
            loader.from_yaml_string("type: [declarative")

    def test_non_mapping(self, loader):
        with pytest.raises(InvalidSchemeError, match="must be a mapping, got list"):
            loader.from_yaml_string("- type: semantic")

    def test_unknown_type(self, loader):
        with pytest.raises(InvalidSchemeError, match="Unknown scheme type: romver"):
            loader.from_dict({"type": "romver", "name": "x"})

    def test_pattern_without_pattern(self, loader):
        with pytest.raises(InvalidSchemeError, match="pattern scheme requires a pattern"):
            loader.from_dict(
                {"type": "pattern", "name": "p", "components": [{"name": "a", "type": "integer"}]}
            )

    def test_unsafe_pattern(self, loader):
        with pytest.raises(InvalidSchemeError, match="catastrophic backtracking"):
            loader.from_dict(
                {
                    "type": "pattern",
                    "name": "slow",
                    "pattern": r"^(\d+)+$",
                    "components": [{"name": "a", "type": "integer"}],
                }
            )

    def test_missing_file(self, loader, tmp_path):
        with pytest.raises(InvalidSchemeError, match="Cannot read scheme file"):
            loader.from_yaml_file(tmp_path / "absent.yaml")


@pytest.mark.short
class TestLoadDirectory:
    def test_loads_yaml_files_sorted(self, loader, tmp_path, capture_logs):
        (tmp_path / "b.yml").write_text(PATTERN_YAML)
        (tmp_path / "a.yaml").write_text(DECLARATIVE_YAML)
        (tmp_path / "notes.txt").write_text("not a scheme")

        schemes = loader.load_directory(tmp_path)

        assert [s.name for s in schemes] == ["release_train", "build_number"]
        assert "Loading scheme from" in capture_logs.getvalue()

    def test_missing_directory(self, loader, tmp_path):
        with pytest.raises(InvalidSchemeError, match="Scheme directory not found"):
            loader.load_directory(tmp_path / "absent")
