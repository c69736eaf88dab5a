import io
import logging

import pytest

from versionkit.registry import default_registry
from versionkit.schemes import DeclarativeScheme, PatternScheme


@pytest.fixture
def capture_logs():
    """Fixture to capture log output during tests."""
    log_stream = io.StringIO()
    handler = logging.StreamHandler(log_stream)
    logger = logging.getLogger("versionkit")
    previous_level = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)

    yield log_stream  # Yield the stream to the test function

    # Cleanup after the test
    logger.removeHandler(handler)
    logger.setLevel(previous_level)
    log_stream.close()


@pytest.fixture
def registry():
    """A fresh registry with the built-in schemes."""
    return default_registry()


@pytest.fixture
def semver_like_definitions():
    return [
        {"name": "major", "type": "integer", "separator": "."},
        {"name": "minor", "type": "integer", "separator": "."},
        {"name": "patch", "type": "integer"},
        {"name": "prerelease", "type": "prerelease", "optional": True, "prefix": "-"},
        {
            "name": "build",
            "type": "string",
            "optional": True,
            "prefix": "+",
            "ignore_in_comparison": True,
        },
    ]


@pytest.fixture
def declarative_scheme(semver_like_definitions):
    return DeclarativeScheme(
        name="semver_like",
        component_definitions=semver_like_definitions,
        format_template="{major}.{minor}.{patch}[-{prerelease}][+{build}]",
    )


@pytest.fixture
def extensible_pattern_scheme():
    """Pattern scheme with an optional patch level and an optional stage pair."""
    return PatternScheme(
        name="extensible",
        pattern=r"^(\d+)\.(\d+)\.(\d+)(?:\.(\d+))?(?:-([a-z]+)-(\d+))?$",
        component_definitions=[
            {"name": "major", "type": "integer"},
            {"name": "minor", "type": "integer"},
            {"name": "patch", "type": "integer"},
            {"name": "patchlevel", "type": "integer", "optional": True},
            {
                "name": "stage",
                "type": "enum",
                "optional": True,
                "values": ["alpha", "beta", "rc"],
                "order": ["alpha", "beta", "rc"],
            },
            {"name": "iteration", "type": "integer", "optional": True},
        ],
        format_template="{major}.{minor}.{patch}[.{patchlevel}][-{stage}-{iteration}]",
    )
