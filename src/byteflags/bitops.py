"""
Pure operations on raw flag integers.

Every function here is total: any in-width integer is accepted and the result
is truncated back to the width, the way a fixed-size unsigned integer would
wrap. Nothing validates that the result stays below a layout's limit; that is
reported by :meth:`byteflags.layout.FlagLayout.render` instead.
"""

from __future__ import annotations

from .constants import DEFAULT_WIDTH


def width_mask(width: int = DEFAULT_WIDTH) -> int:
    """All-ones mask for an unsigned integer of ``width`` bits."""
    return (1 << width) - 1


def truncate(value: int, *, width: int = DEFAULT_WIDTH) -> int:
    return value & width_mask(width)


def add(bits: int, flag: int, *, width: int = DEFAULT_WIDTH) -> int:
    """Return ``bits`` with every bit of ``flag`` set. Idempotent."""
    return truncate(bits | flag, width=width)


def has(bits: int, flag: int) -> bool:
    """
    True if ``bits`` and ``flag`` share at least one set bit.

    With a composite ``flag`` this answers "any of", not "all of": callers
    that need every bit present must test each flag on its own.
    """
    return (bits & flag) != 0


def remove(bits: int, flag: int, *, width: int = DEFAULT_WIDTH) -> int:
    """Return ``bits`` with every bit of ``flag`` cleared. Removing an absent flag is a no-op."""
    return bits & ~flag & width_mask(width)


def union(*flags: int, width: int = DEFAULT_WIDTH) -> int:
    value = 0
    for flag in flags:
        value |= flag
    return truncate(value, width=width)


def set_bit(*, bits: int, mask: int, value: bool, width: int = DEFAULT_WIDTH) -> int:
    """Set/clear `mask` within a `width`-bit integer."""
    return add(bits, mask, width=width) if value else remove(bits, mask, width=width)
