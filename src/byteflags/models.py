from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Self

from . import bitmasks, bitops
from . import constants as const
from .errors import InvalidFlagValueError
from .layout import KEY_LAYOUT, PERMISSION_LAYOUT, FlagLayout


@dataclass(frozen=True, slots=True)
class FlagSet:
    """
    Immutable set of flags stored as the bits of one unsigned integer.

    Subclasses bind a :class:`FlagLayout` through ``LAYOUT``. ``add`` and
    ``remove`` return new sets; ``str()`` gives the canonical rendering.

    The stored value may carry bits past ``LAYOUT.limit`` (a foreign value),
    but must fit the layout width.
    """

    LAYOUT: ClassVar[FlagLayout]

    value: int = 0

    def __post_init__(self) -> None:
        layout = getattr(type(self), "LAYOUT", None)
        if layout is None:
            raise TypeError(f"{type(self).__name__} does not define a LAYOUT")
        if not isinstance(self.value, int):
            raise TypeError(
                f"{type(self).__name__} value must be an int, got {type(self.value).__name__}"
            )
        if not 0 <= self.value <= layout.max_value:
            raise InvalidFlagValueError(
                f"{type(self).__name__} value must be 0-{layout.max_value}, got {self.value}"
            )

    def _bits(self, flag: FlagSet | int) -> int:
        if isinstance(flag, FlagSet):
            if type(flag) is not type(self):
                raise TypeError(
                    f"Cannot combine {type(self).__name__} with {type(flag).__name__}"
                )
            return flag.value
        if isinstance(flag, int):
            return flag
        raise TypeError(f"Expected {type(self).__name__} or int, got {type(flag).__name__}")

    def add(self, flag: FlagSet | int) -> Self:
        return type(self)(
            bitops.add(self.value, self._bits(flag), width=self.LAYOUT.width)
        )

    def remove(self, flag: FlagSet | int) -> Self:
        return type(self)(
            bitops.remove(self.value, self._bits(flag), width=self.LAYOUT.width)
        )

    def has(self, flag: FlagSet | int) -> bool:
        """True if any bit of `flag` is present (see :func:`byteflags.bitops.has`)."""
        return bitops.has(self.value, self._bits(flag))

    def union(self, *others: FlagSet | int) -> Self:
        return type(self)(
            bitops.union(
                self.value,
                *(self._bits(o) for o in others),
                width=self.LAYOUT.width,
            )
        )

    def __or__(self, other: object) -> Self:
        if not isinstance(other, FlagSet | int):
            return NotImplemented
        return self.union(other)

    __ror__ = __or__

    def __contains__(self, flag: object) -> bool:
        if not isinstance(flag, FlagSet | int):
            return False
        return self.has(flag)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return self.LAYOUT.render(self.value)

    @property
    def is_empty(self) -> bool:
        return self.value == 0

    @property
    def is_valid(self) -> bool:
        return self.LAYOUT.is_valid(self.value)

    @property
    def names(self) -> list[str]:
        return self.LAYOUT.names_of(self.value)

    def members(self) -> list[Self]:
        """Single-flag sets present in this set, in declaration order."""
        return [
            type(self)(mask)
            for mask in self.LAYOUT.masks()
            if bitops.has(self.value, mask)
        ]

    @classmethod
    def from_names(cls, *names: str) -> Self:
        return cls(cls.LAYOUT.from_names(names))

    @classmethod
    def empty(cls) -> Self:
        return cls()


@dataclass(frozen=True, slots=True)
class Keys(FlagSet):
    """
    Keys held by a player, one bit per key.

    >>> str(Keys.COPPER | Keys.JADE)
    'copper|jade'
    """

    LAYOUT: ClassVar[FlagLayout] = KEY_LAYOUT

    COPPER: ClassVar[Keys]
    JADE: ClassVar[Keys]
    CRYSTAL: ClassVar[Keys]


Keys.COPPER = Keys(bitmasks.MASK_KEY_COPPER)
Keys.JADE = Keys(bitmasks.MASK_KEY_JADE)
Keys.CRYSTAL = Keys(bitmasks.MASK_KEY_CRYSTAL)


@dataclass(frozen=True, slots=True)
class DocumentPermissions(FlagSet):
    """Permissions set on a document, packed in one byte."""

    LAYOUT: ClassVar[FlagLayout] = PERMISSION_LAYOUT

    LOCKED: ClassVar[DocumentPermissions]
    GROUP_READABLE: ClassVar[DocumentPermissions]
    GROUP_WRITABLE: ClassVar[DocumentPermissions]
    ALL_READABLE: ClassVar[DocumentPermissions]
    ALL_WRITABLE: ClassVar[DocumentPermissions]


DocumentPermissions.LOCKED = DocumentPermissions(bitmasks.MASK_PERM_LOCKED)
DocumentPermissions.GROUP_READABLE = DocumentPermissions(
    bitmasks.MASK_PERM_GROUP_READABLE
)
DocumentPermissions.GROUP_WRITABLE = DocumentPermissions(
    bitmasks.MASK_PERM_GROUP_WRITABLE
)
DocumentPermissions.ALL_READABLE = DocumentPermissions(bitmasks.MASK_PERM_ALL_READABLE)
DocumentPermissions.ALL_WRITABLE = DocumentPermissions(bitmasks.MASK_PERM_ALL_WRITABLE)


@dataclass(frozen=True, slots=True)
class DocumentPermissionFields:
    """
    Document permissions as one boolean per permission.

    Same information as :class:`DocumentPermissions`, spread over separate
    fields instead of one byte.

    Can be constructed from:
    - A raw byte value: DocumentPermissionFields.from_byte(0b00001001)
    - Individual flags: DocumentPermissionFields(locked=True, all_readable=True)
    """

    locked: bool = False
    group_readable: bool = False
    group_writable: bool = False
    all_readable: bool = False
    all_writable: bool = False

    @property
    def byte_value(self) -> int:
        value = 0
        value = bitops.set_bit(
            bits=value, mask=bitmasks.MASK_PERM_LOCKED, value=self.locked
        )
        value = bitops.set_bit(
            bits=value,
            mask=bitmasks.MASK_PERM_GROUP_READABLE,
            value=self.group_readable,
        )
        value = bitops.set_bit(
            bits=value,
            mask=bitmasks.MASK_PERM_GROUP_WRITABLE,
            value=self.group_writable,
        )
        value = bitops.set_bit(
            bits=value, mask=bitmasks.MASK_PERM_ALL_READABLE, value=self.all_readable
        )
        value = bitops.set_bit(
            bits=value, mask=bitmasks.MASK_PERM_ALL_WRITABLE, value=self.all_writable
        )
        return value

    def to_permissions(self) -> DocumentPermissions:
        return DocumentPermissions(self.byte_value)

    @staticmethod
    def from_byte(value: int) -> DocumentPermissionFields:
        if not 0 <= value <= const.MAX_UINT8:
            raise InvalidFlagValueError(f"Byte value must be 0-255, got {value}")
        if value >= bitmasks.MASK_PERM_LIMIT:
            raise InvalidFlagValueError(
                f"Byte value {value} has bits outside the declared permissions"
            )
        return DocumentPermissionFields(
            locked=bool(value & bitmasks.MASK_PERM_LOCKED),
            group_readable=bool(value & bitmasks.MASK_PERM_GROUP_READABLE),
            group_writable=bool(value & bitmasks.MASK_PERM_GROUP_WRITABLE),
            all_readable=bool(value & bitmasks.MASK_PERM_ALL_READABLE),
            all_writable=bool(value & bitmasks.MASK_PERM_ALL_WRITABLE),
        )

    @staticmethod
    def from_permissions(perms: DocumentPermissions) -> DocumentPermissionFields:
        return DocumentPermissionFields.from_byte(perms.value)

    @staticmethod
    def empty() -> DocumentPermissionFields:
        return DocumentPermissionFields()


# ---------------------------------------------------------------------------
# Entities owning a flag set
# ---------------------------------------------------------------------------
# Not thread-safe; callers sharing an entity across threads must lock it.


@dataclass(slots=True)
class Player:
    name: str
    keys: Keys = field(default_factory=Keys.empty)

    def add_key(self, key: Keys | int) -> None:
        self.keys = self.keys.add(key)

    def has_key(self, key: Keys | int) -> bool:
        return self.keys.has(key)

    def remove_key(self, key: Keys | int) -> None:
        self.keys = self.keys.remove(key)


@dataclass(slots=True)
class Document:
    name: str
    permissions: DocumentPermissions = field(
        default_factory=DocumentPermissions.empty
    )

    def set_permission(self, perm: DocumentPermissions | int) -> None:
        self.permissions = self.permissions.add(perm)

    def clear_permission(self, perm: DocumentPermissions | int) -> None:
        self.permissions = self.permissions.remove(perm)

    def is_permitted(self, perm: DocumentPermissions | int) -> bool:
        return self.permissions.has(perm)
