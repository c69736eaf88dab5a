"""Parsers turning version strings into segment values."""

from versionkit.parsers.declarative import ALTERNATE_PREFIXES, DeclarativeParser

__all__ = ["ALTERNATE_PREFIXES", "DeclarativeParser"]
