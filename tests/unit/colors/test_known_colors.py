"""Tests for the named color table."""

from __future__ import annotations

from monoui.colors import KNOWN_COLORS, ColorRgb, get_known_color, get_known_color_name


class TestKnownColors:
    """Tests for name lookup in both directions."""

    def test_table_size(self) -> None:
        """Test the table holds every standard name, Transparent included."""
        assert len(KNOWN_COLORS) == 141
        assert KNOWN_COLORS["Transparent"] == 0x00FFFFFF

    def test_lookup_ignores_case(self) -> None:
        """Test names match case-insensitively."""
        expected = ColorRgb(255, 255, 0, 0)
        assert get_known_color("Red") == expected
        assert get_known_color("RED") == expected
        assert get_known_color("red") == expected

    def test_unknown_name(self) -> None:
        """Test unknown names return None."""
        assert get_known_color("NotAColor") is None
        assert get_known_color("") is None

    def test_reverse_lookup(self) -> None:
        """Test packed values map back to names."""
        assert get_known_color_name(0xFF6495ED) == "CornflowerBlue"
        assert get_known_color_name(0x12345678) is None

    def test_shared_values_prefer_first_name(self) -> None:
        """Test aliases resolve to the alphabetically first name."""
        assert get_known_color_name(0xFF00FFFF) == "Aqua"
        assert get_known_color_name(0xFFFF00FF) == "Fuchsia"

    def test_every_name_round_trips_to_a_name_with_same_value(self) -> None:
        """Test reverse lookup of every entry gives a name with that value."""
        for value in KNOWN_COLORS.values():
            name = get_known_color_name(value)
            assert name is not None
            assert KNOWN_COLORS[name] == value
