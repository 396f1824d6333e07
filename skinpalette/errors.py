"""
SkinPalette Errors
Exception types raised by color parsing, sampling and palette matching.
"""


class PaletteError(Exception):
    """Base class for all palette engine errors."""
    pass


class InvalidColorFormat(PaletteError, ValueError):
    """Raised when a color is not a valid 6-digit hex triplet."""

    def __init__(self, value, reason: str = "expected #RRGGBB"):
        self.value = value
        super().__init__(f"Invalid hex color format: {value!r} ({reason})")


class EmptyCatalog(PaletteError, ValueError):
    """Raised when palette selection is asked to run over zero colors."""

    def __init__(self):
        super().__init__("Brand catalog is empty")


class InvalidCatalog(PaletteError, ValueError):
    """Raised when a catalog violates its structural invariants."""
    pass


class InsufficientSamples(PaletteError, ValueError):
    """Raised when too few usable skin samples remain after filtering."""

    def __init__(self, usable: int, required: int):
        self.usable = usable
        self.required = required
        super().__init__(f"Not enough usable skin samples: {usable} < {required}")
