class GenerationError(ValueError):
    """Raised when a generator receives input it cannot work with."""


class NoValidPositionError(GenerationError):
    """No cell of the area qualifies for the requested placement."""


class UnrenderableTileError(ValueError):
    """Tile composite has no character in the text board format."""
