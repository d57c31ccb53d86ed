"""byteflags constants."""

from typing import Final

# ---------------------------------------------------------------------------
# Integer widths
# ---------------------------------------------------------------------------
BITS_PER_BYTE: Final[int] = 8

UINT8_BITS: Final[int] = 8
UINT16_BITS: Final[int] = 16
UINT32_BITS: Final[int] = 32
UINT64_BITS: Final[int] = 64

SUPPORTED_WIDTHS: Final[tuple[int, ...]] = (
    UINT8_BITS,
    UINT16_BITS,
    UINT32_BITS,
    UINT64_BITS,
)

DEFAULT_WIDTH: Final[int] = UINT8_BITS

MAX_UINT8: Final[int] = (1 << UINT8_BITS) - 1


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------
FLAG_SEPARATOR: Final[str] = "|"

# Placeholder for values with bits set at or beyond the layout limit
UNKNOWN_VALUE_TEMPLATE: Final[str] = "<unknown {kind}: {value}>"


# ---------------------------------------------------------------------------
# Layout kinds
# ---------------------------------------------------------------------------
KIND_KEY: Final[str] = "key"
KIND_PERMISSION: Final[str] = "permission"
