"""Fixed color palette and the observable color selection."""

from enum import Enum

from core.errors import PaletteError
from internal.logging import get_logger


class Color(Enum):
    WHITE = "#ffffff"
    RED = "#f44336"
    BLUE = "#2196f3"
    GREEN = "#4caf50"
    PINK = "#e91e63"

    @property
    def hex(self):
        return self.value

    @classmethod
    def from_name(cls, name):
        try:
            return cls[name.upper()]
        except KeyError:
            raise PaletteError(f"unknown color {name!r}", color=name) from None


PALETTE = tuple(Color)


class ColorSelection:
    """Ordered set of enabled colors. Copy-on-write: readers always get a whole selection."""

    def __init__(self, palette=PALETTE):
        self.palette = tuple(palette)
        self._selected = (self.palette[0],)
        self._listeners = []
        self._log = get_logger()

    def snapshot(self):
        return self._selected

    def is_selected(self, color):
        return color in self._selected

    def toggle(self, color):
        if color not in self.palette:
            raise PaletteError(f"{color!r} is not in the palette", color=color)
        if color in self._selected:
            selected = tuple(c for c in self._selected if c is not color)
        else:
            selected = self._selected + (color,)
        self._selected = selected
        self._log.debug("palette toggle", color=color.name, selected=[c.name for c in selected])
        for callback in list(self._listeners):
            callback(selected)
        return selected

    def subscribe(self, callback):
        self._listeners.append(callback)

    def unsubscribe(self, callback):
        if callback not in self._listeners:
            return False
        self._listeners.remove(callback)
        return True

    def to_list(self):
        return [{"name": color.name.lower(), "hex": color.hex, "selected": color in self._selected}
                for color in self.palette]
