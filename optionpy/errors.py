from __future__ import annotations


class OptionError(Exception):
    pass


class EmptyAccess(OptionError, LookupError):
    """Raised when the value of an absent option is requested."""


class InvalidArgument(OptionError, ValueError):
    """Raised when a present option would be built around ``None``."""
