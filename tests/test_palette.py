"""Unit tests for the palette and color selection."""

import pytest
from core.errors import PaletteError
from simulation.palette import Color, ColorSelection, PALETTE


class TestColor:
    """Tests for the fixed palette."""

    def test_palette_order(self):
        """Five colors in a fixed order, white first."""
        assert PALETTE == (Color.WHITE, Color.RED, Color.BLUE, Color.GREEN, Color.PINK)

    def test_from_name_case_insensitive(self):
        assert Color.from_name("pink") is Color.PINK
        assert Color.from_name("Blue") is Color.BLUE

    def test_from_name_unknown(self):
        """Unknown names raise PaletteError with the name in context."""
        with pytest.raises(PaletteError) as info:
            Color.from_name("purple")
        assert info.value.context["color"] == "purple"
        assert len(info.value.error_id) == 27


class TestColorSelection:
    """Tests for ColorSelection."""

    def test_initial_selection(self, selection):
        """Exactly the first palette color is selected at start."""
        assert selection.snapshot() == (Color.WHITE,)

    def test_toggle_adds_and_removes(self, selection):
        selection.toggle(Color.RED)
        assert selection.snapshot() == (Color.WHITE, Color.RED)
        selection.toggle(Color.WHITE)
        assert selection.snapshot() == (Color.RED,)
        selection.toggle(Color.RED)
        assert selection.snapshot() == ()

    def test_toggle_preserves_insertion_order(self, selection):
        """Re-added colors go to the end."""
        selection.toggle(Color.PINK)
        selection.toggle(Color.BLUE)
        selection.toggle(Color.WHITE)
        selection.toggle(Color.WHITE)
        assert selection.snapshot() == (Color.PINK, Color.BLUE, Color.WHITE)

    def test_snapshot_not_affected_by_later_toggles(self, selection):
        """A snapshot taken before a toggle keeps its contents."""
        before = selection.snapshot()
        selection.toggle(Color.GREEN)
        assert before == (Color.WHITE,)
        assert selection.is_selected(Color.GREEN)

    def test_listeners_see_new_selection(self, selection):
        """Listeners are called after the swap with the new selection."""
        calls = []

        def listener(selected):
            calls.append((selected, selection.snapshot()))

        selection.subscribe(listener)
        selection.toggle(Color.RED)
        assert calls == [((Color.WHITE, Color.RED), (Color.WHITE, Color.RED))]

    def test_unsubscribe(self, selection):
        calls = []
        selection.subscribe(calls.append)
        assert selection.unsubscribe(calls.append) is True
        assert selection.unsubscribe(calls.append) is False
        selection.toggle(Color.RED)
        assert calls == []

    def test_toggle_outside_palette(self):
        """Only palette colors can be toggled."""
        selection = ColorSelection(palette=(Color.WHITE, Color.RED))
        with pytest.raises(PaletteError):
            selection.toggle(Color.PINK)
        assert selection.snapshot() == (Color.WHITE,)

    def test_to_list(self, selection):
        listed = selection.to_list()
        assert [entry["name"] for entry in listed] == ["white", "red", "blue", "green", "pink"]
        assert listed[0] == {"name": "white", "hex": "#ffffff", "selected": True}
        assert not any(entry["selected"] for entry in listed[1:])
