from __future__ import annotations


class ByteFlagsError(Exception):
    """Base class for all byteflags errors."""


class FlagDefinitionError(ByteFlagsError, ValueError):
    """
    Raised when a flag layout cannot be defined: too many flags for the width,
    duplicate or empty names, or an unsupported width.

    Layouts are built at import time, so this surfaces when the defining
    module is loaded rather than from a flag operation.
    """


class UnknownFlagError(ByteFlagsError, LookupError):
    """Raised when a flag name is not part of a layout."""


class InvalidFlagValueError(ByteFlagsError, ValueError):
    """Raised when a raw value does not fit in the integer width of a layout."""
