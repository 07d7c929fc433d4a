from __future__ import annotations


class FlowError(Exception):
    """Base class for every error raised by the board state machine."""
    message = "Flow error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class InvalidCoords(FlowError):
    message = "Invalid coordinates"


class EmptyTile(FlowError):
    message = "Can't drag empty square"


class NoMoreColors(FlowError):
    message = "No more available colors"


class TileNotEmpty(FlowError):
    message = "Tile is already taken"
