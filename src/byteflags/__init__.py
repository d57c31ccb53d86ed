# ruff: noqa: RUF022
"""
Compact flag sets packed into the bits of a small unsigned integer.

Public entrypoints:
- :class:`byteflags.layout.FlagLayout`
- :class:`byteflags.models.FlagSet` and its concrete sets
  :class:`~byteflags.models.Keys` and :class:`~byteflags.models.DocumentPermissions`
- :mod:`byteflags.bitops` for raw integer operations

A flag set holds up to ``width`` named flags (8 by default) in one integer,
instead of a collection of strings or a map of booleans.
"""

from __future__ import annotations

from . import bitmasks, bitops, constants, flags
from .errors import (
    ByteFlagsError,
    FlagDefinitionError,
    InvalidFlagValueError,
    UnknownFlagError,
)
from .layout import KEY_LAYOUT, PERMISSION_LAYOUT, FlagLayout
from .models import (
    Document,
    DocumentPermissionFields,
    DocumentPermissions,
    FlagSet,
    Keys,
    Player,
)

__all__ = [
    # Layouts
    "FlagLayout",
    "KEY_LAYOUT",
    "PERMISSION_LAYOUT",
    # Errors
    "ByteFlagsError",
    "FlagDefinitionError",
    "InvalidFlagValueError",
    "UnknownFlagError",
    # Models
    "FlagSet",
    "Keys",
    "DocumentPermissions",
    "DocumentPermissionFields",
    # Entities
    "Player",
    "Document",
    # Bitmasks
    "bitmasks",
    # Bit operations
    "bitops",
    # Constants
    "constants",
    # Flags
    "flags",
]
