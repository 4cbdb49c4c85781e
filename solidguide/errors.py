"""
Exceptions raised by the SOLID guide tooling.

Validation findings are reported as data (see StructureIssue), not raised.
"""


class GuideError(Exception):
    """Base class for guide tooling errors."""


class GuideContentError(GuideError):
    """Raised when guide content cannot be loaded or is malformed."""


class SnippetError(GuideError):
    """Raised when a snippet cannot be extracted from an example module."""
