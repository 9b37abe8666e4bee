"""Load error taxonomy.

Raised by the domain and infrastructure layers; the service layer turns
them into a ``ServiceError`` carrying the same ``code``.
"""

from __future__ import annotations


class LoadError(Exception):
    """Base class for failures while loading a friendship graph."""

    code = "LOAD_FAILED"


class LoadIOError(LoadError):
    """The source could not be opened or read."""

    code = "IO_FAILURE"


class MalformedDataError(LoadError):
    """A token was not a valid integer, or the source ran out early."""

    code = "MALFORMED_DATA"
