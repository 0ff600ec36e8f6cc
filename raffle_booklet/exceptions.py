"""
Error types raised by the booklet generator.

Every error carries a message naming the resource or constraint that
triggered it, so the CLI can show it to the user unchanged.
"""


class BookletError(Exception):
    """Base class for all booklet generation failures."""


class ConfigurationError(BookletError, ValueError):
    """Invalid configuration detected before any rendering begins."""


class ResourceError(BookletError, RuntimeError):
    """A requested input resource (background image) is missing or corrupt."""


class OutputError(BookletError, OSError):
    """The output folder cannot be created or a page cannot be written."""
