from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from . import bitmasks, bitops
from . import constants as const
from .errors import FlagDefinitionError, UnknownFlagError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FlagLayout:
    """
    Ordered, fixed set of named flags packed into an unsigned integer.

    The k-th name occupies bit k (mask ``1 << k``). ``limit`` is ``1 << count``:
    one past the last single-flag value, used for validity checks only.

    Example:
        KEY_LAYOUT = FlagLayout(kind="key", names=("copper", "jade", "crystal"))
    """

    kind: str
    names: tuple[str, ...]
    width: int = const.DEFAULT_WIDTH
    _positions: dict[str, int] = field(
        init=False, repr=False, compare=False, hash=False
    )
    _by_mask: dict[int, str] = field(init=False, repr=False, compare=False, hash=False)

    def __post_init__(self) -> None:
        names = tuple(self.names)
        object.__setattr__(self, "names", names)

        if self.width not in const.SUPPORTED_WIDTHS:
            raise FlagDefinitionError(
                f"{self.kind}: width must be one of {const.SUPPORTED_WIDTHS}, got {self.width}"
            )
        if len(names) > self.width:
            raise FlagDefinitionError(
                f"{self.kind}: {len(names)} flags do not fit in {self.width} bits"
            )
        for name in names:
            if not isinstance(name, str) or not name:
                raise FlagDefinitionError(
                    f"{self.kind}: flag names must be non-empty strings, got {name!r}"
                )
        if len(set(names)) != len(names):
            duplicates = sorted({n for n in names if names.count(n) > 1})
            raise FlagDefinitionError(
                f"{self.kind}: duplicate flag names {duplicates}"
            )

        positions = {name: i for i, name in enumerate(names)}
        object.__setattr__(self, "_positions", positions)
        object.__setattr__(self, "_by_mask", {1 << i: n for n, i in positions.items()})
        logger.debug(
            "Defined %s layout: %d flags in %d bits", self.kind, len(names), self.width
        )

    @property
    def count(self) -> int:
        return len(self.names)

    @property
    def limit(self) -> int:
        return 1 << self.count

    @property
    def max_value(self) -> int:
        return bitops.width_mask(self.width)

    @property
    def byte_size(self) -> int:
        return self.width // const.BITS_PER_BYTE

    def position(self, name: str) -> int:
        try:
            return self._positions[name]
        except KeyError:
            raise UnknownFlagError(f"Unknown {self.kind}: {name!r}") from None

    def mask(self, name: str) -> int:
        return 1 << self.position(name)

    def masks(self) -> tuple[int, ...]:
        return tuple(1 << i for i in range(self.count))

    def is_valid(self, bits: int) -> bool:
        return 0 <= bits < self.limit

    def names_of(self, bits: int) -> list[str]:
        """Names of the flags present in `bits`, in declaration order."""
        return [
            name
            for name, mask in zip(self.names, self.masks(), strict=True)
            if bitops.has(bits, mask)
        ]

    def from_names(self, names: Iterable[str]) -> int:
        return bitops.union(*(self.mask(n) for n in names), width=self.width)

    def render(self, bits: int) -> str:
        """
        Canonical string for a flag value.

        - out of range (any bit at or past ``limit``): ``"<unknown {kind}: {bits}>"``,
          even when valid low bits are also set
        - exactly one flag: its name
        - otherwise: present names joined with ``"|"`` (empty set -> ``""``)
        """
        if not self.is_valid(bits):
            logger.debug("Rendering out-of-range %s value %d", self.kind, bits)
            return const.UNKNOWN_VALUE_TEMPLATE.format(kind=self.kind, value=bits)

        name = self._by_mask.get(bits)
        if name is not None:
            return name

        return const.FLAG_SEPARATOR.join(self.names_of(bits))


def _layout(kind: str, names: Sequence[str], masks: Sequence[int]) -> FlagLayout:
    layout = FlagLayout(kind=kind, names=tuple(names))
    if layout.masks() != tuple(masks):
        raise FlagDefinitionError(
            f"{kind}: declared masks {tuple(masks)} do not follow declaration order"
        )
    return layout


# ---------------------------------------------------------------------------
# Layouts
# ---------------------------------------------------------------------------
# Names are listed in bit order and checked against `bitmasks`.
KEY_LAYOUT = _layout(
    const.KIND_KEY,
    ("copper", "jade", "crystal"),
    (bitmasks.MASK_KEY_COPPER, bitmasks.MASK_KEY_JADE, bitmasks.MASK_KEY_CRYSTAL),
)

PERMISSION_LAYOUT = _layout(
    const.KIND_PERMISSION,
    (
        "locked",
        "group_readable",
        "group_writable",
        "all_readable",
        "all_writable",
    ),
    (
        bitmasks.MASK_PERM_LOCKED,
        bitmasks.MASK_PERM_GROUP_READABLE,
        bitmasks.MASK_PERM_GROUP_WRITABLE,
        bitmasks.MASK_PERM_ALL_READABLE,
        bitmasks.MASK_PERM_ALL_WRITABLE,
    ),
)
