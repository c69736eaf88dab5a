"""
Exception classes for versionkit.
"""

from typing import Optional


class VersioningError(Exception):
    """Base exception for all versioning-related errors."""

    pass


class InvalidVersionError(VersioningError):
    """Raised when the input cannot be used as a version at all (None or empty)."""

    def __init__(self, message: str, version_string: Optional[str] = None):
        self.version_string = version_string
        super().__init__(message)


class ParseError(VersioningError):
    """Raised when a version string does not satisfy a scheme's grammar."""

    def __init__(self, message: str, version_string: Optional[str] = None):
        self.version_string = version_string
        super().__init__(message)


class InvalidSchemeError(VersioningError):
    """Raised when a scheme or component definition is malformed."""

    def __init__(self, message: str, scheme_name: Optional[str] = None):
        self.scheme_name = scheme_name
        if scheme_name:
            super().__init__(f"Invalid scheme '{scheme_name}': {message}")
        else:
            super().__init__(message)


class SchemeMismatchError(ValueError):
    """Raised when comparing versions that belong to different schemes."""

    def __init__(self, left: str, right: str):
        self.left = left
        self.right = right
        super().__init__(
            f"Cannot compare versions from different schemes: '{left}' and '{right}'"
        )
