"""
Unit tests for byteflags.layout.

Tests cover:
- FlagLayout definition checks
- lookups (position, mask, from_names, names_of)
- render(): single flags, unions, empty set, out-of-range values
"""

import logging

import pytest

from byteflags import (
    KEY_LAYOUT,
    PERMISSION_LAYOUT,
    FlagDefinitionError,
    FlagLayout,
    UnknownFlagError,
)


class TestFlagLayoutDefinition:
    """Tests for FlagLayout construction."""

    def test_key_layout(self) -> None:
        """Test the key layout properties."""
        assert KEY_LAYOUT.kind == "key"
        assert KEY_LAYOUT.names == ("copper", "jade", "crystal")
        assert KEY_LAYOUT.count == 3
        assert KEY_LAYOUT.limit == 8
        assert KEY_LAYOUT.width == 8
        assert KEY_LAYOUT.max_value == 0xFF
        assert KEY_LAYOUT.byte_size == 1
        assert KEY_LAYOUT.masks() == (1, 2, 4)

    def test_permission_layout(self) -> None:
        """Test the permission layout properties."""
        assert PERMISSION_LAYOUT.count == 5
        assert PERMISSION_LAYOUT.limit == 32
        assert PERMISSION_LAYOUT.masks() == (1, 2, 4, 8, 16)

    def test_full_byte(self) -> None:
        """Test eight flags fit in eight bits."""
        layout = FlagLayout(kind="bit", names=tuple(f"b{i}" for i in range(8)))
        assert layout.limit == 256
        assert layout.render(0xFF) == "|".join(f"b{i}" for i in range(8))

    def test_too_many_flags(self) -> None:
        """Test nine flags do not fit in a byte."""
        with pytest.raises(FlagDefinitionError, match="do not fit in 8 bits"):
            FlagLayout(kind="bit", names=tuple(f"b{i}" for i in range(9)))

    def test_wider_layout(self) -> None:
        """Test a wider integer accepts more flags."""
        layout = FlagLayout(
            kind="bit", names=tuple(f"b{i}" for i in range(9)), width=16
        )
        assert layout.count == 9
        assert layout.byte_size == 2
        assert layout.max_value == 0xFFFF

    def test_unsupported_width(self) -> None:
        with pytest.raises(FlagDefinitionError, match="width must be one of"):
            FlagLayout(kind="bit", names=("a",), width=12)

    def test_duplicate_names(self) -> None:
        """Test two flags cannot share a name."""
        with pytest.raises(FlagDefinitionError, match="duplicate flag names"):
            FlagLayout(kind="key", names=("copper", "jade", "copper"))

    def test_empty_name(self) -> None:
        with pytest.raises(FlagDefinitionError, match="non-empty strings"):
            FlagLayout(kind="key", names=("copper", ""))

    def test_definition_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            FlagLayout(kind="key", names=("a", "a"))

    def test_names_coerced_to_tuple(self) -> None:
        layout = FlagLayout(kind="key", names=["a", "b"])  # type: ignore[arg-type]
        assert layout.names == ("a", "b")
        assert hash(layout) == hash(FlagLayout(kind="key", names=("a", "b")))

    def test_no_flags(self) -> None:
        """Test an empty layout renders only the empty set as valid."""
        layout = FlagLayout(kind="none", names=())
        assert layout.limit == 1
        assert layout.render(0) == ""
        assert layout.render(1) == "<unknown none: 1>"


class TestFlagLayoutLookups:
    """Tests for name and mask lookups."""

    def test_position_and_mask(self) -> None:
        assert KEY_LAYOUT.position("crystal") == 2
        assert KEY_LAYOUT.mask("crystal") == 4

    def test_unknown_name(self) -> None:
        with pytest.raises(UnknownFlagError, match="Unknown key: 'gold'"):
            KEY_LAYOUT.mask("gold")

    def test_unknown_name_is_lookup_error(self) -> None:
        with pytest.raises(LookupError):
            PERMISSION_LAYOUT.position("executable")

    def test_from_names(self) -> None:
        assert KEY_LAYOUT.from_names([]) == 0
        assert KEY_LAYOUT.from_names(["crystal", "copper"]) == 5

    def test_names_of_follows_declaration_order(self) -> None:
        assert KEY_LAYOUT.names_of(6) == ["jade", "crystal"]
        assert KEY_LAYOUT.names_of(0) == []

    @pytest.mark.parametrize(
        ("bits", "expected"), [(0, True), (7, True), (8, False), (-1, False)]
    )
    def test_is_valid(self, bits: int, expected: bool) -> None:
        assert KEY_LAYOUT.is_valid(bits) is expected


class TestRender:
    """Tests for FlagLayout.render."""

    def test_empty_set(self) -> None:
        """Test the empty set renders as the empty string."""
        assert KEY_LAYOUT.render(0) == ""

    @pytest.mark.parametrize(
        ("bits", "name"), [(1, "copper"), (2, "jade"), (4, "crystal")]
    )
    def test_single_flag(self, bits: int, name: str) -> None:
        assert KEY_LAYOUT.render(bits) == name

    @pytest.mark.parametrize(
        ("bits", "expected"),
        [
            (3, "copper|jade"),
            (5, "copper|crystal"),
            (6, "jade|crystal"),
            (7, "copper|jade|crystal"),
        ],
    )
    def test_union(self, bits: int, expected: str) -> None:
        """Test unions render in declaration order."""
        assert KEY_LAYOUT.render(bits) == expected

    def test_limit_is_unknown(self) -> None:
        """Test the limit sentinel is not a flag name."""
        assert KEY_LAYOUT.render(8) == "<unknown key: 8>"

    @pytest.mark.parametrize("bits", [8, 9, 15, 0x80, 0xFF])
    def test_out_of_range_takes_precedence(self, bits: int) -> None:
        """Test out-of-range values are reported even with valid low bits set."""
        assert KEY_LAYOUT.render(bits) == f"<unknown key: {bits}>"

    def test_permission_render(self) -> None:
        assert PERMISSION_LAYOUT.render(9) == "locked|all_readable"
        assert PERMISSION_LAYOUT.render(32) == "<unknown permission: 32>"

    def test_out_of_range_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test rendering an unknown value emits a debug record instead of raising."""
        with caplog.at_level(logging.DEBUG, logger="byteflags.layout"):
            KEY_LAYOUT.render(12)
        assert "out-of-range key value 12" in caplog.text
