"""Bit positions of the declared flags."""

from typing import Final

# ---------------------------------------------------------------------------
# Flags
# ---------------------------------------------------------------------------
# Bits in big-endian order (0 = LSB, 7 = MSB)

# Keys byte (held by a Player)
KEY_COPPER: Final[int] = 0
KEY_JADE: Final[int] = 1
KEY_CRYSTAL: Final[int] = 2

KEY_COUNT: Final[int] = 3

# Document Permissions byte (held by a Document)
PERM_LOCKED: Final[int] = 0
PERM_GROUP_READABLE: Final[int] = 1
PERM_GROUP_WRITABLE: Final[int] = 2
PERM_ALL_READABLE: Final[int] = 3
PERM_ALL_WRITABLE: Final[int] = 4

PERM_COUNT: Final[int] = 5
