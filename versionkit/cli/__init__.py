"""Command line interface for versionkit."""
