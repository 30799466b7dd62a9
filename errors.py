"""
Hex error hierarchy.

Every fatal condition is a HexError subclass carrying the process exit code
it maps to. Errors propagate up the call chain and are only turned into a
message and an exit status by main.main().
"""

from typing import Any, Dict, Optional

__all__ = [
    "DimensionsError",
    "GameOverError",
    "HexError",
    "IllegalMoveError",
    "InvalidSaveFileError",
    "PlayerTypeError",
    "SaveFileReadError",
    "SaveFileWriteError",
    "UnexpectedEOFError",
    "UsageError",
]


class HexError(Exception):
    """Base exception for all Hex errors.

    Attributes:
        code: Machine-readable error code
        message: Human-readable description, printed on stderr by main
        context: Additional context for debugging
        exit_code: Process exit status this error maps to
    """
    code = "HEX_ERROR"
    default_message = "Hex error"
    exit_code = 1

    def __init__(self, message: Optional[str] = None, context: Optional[Dict[str, Any]] = None):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"[{self.code}] {self.message} ({ctx})"
        return f"[{self.code}] {self.message}"


# =============================================================================
# Startup errors
# =============================================================================


class UsageError(HexError):
    """Wrong number of command line arguments."""
    code = "USAGE"
    default_message = "Usage: hex p1type p2type [height width | filename]"
    exit_code = 1


class PlayerTypeError(HexError):
    """A player type argument is not exactly 'm' or 'a'."""
    code = "PLAYER_TYPE"
    default_message = "Invalid type"
    exit_code = 2


class DimensionsError(HexError):
    """Board height or width is not an integer in (0, 1000]."""
    code = "GRID_DIMENSIONS"
    default_message = "Sensible board dimensions please!"
    exit_code = 3


class SaveFileReadError(HexError):
    """The save file could not be opened."""
    code = "FILE_READ"
    default_message = "Could not start reading from savefile"
    exit_code = 4


class InvalidSaveFileError(HexError):
    """The save file was opened but its contents are malformed."""
    code = "INVALID_FILE"
    default_message = "Incorrect file contents"
    exit_code = 5


class UnexpectedEOFError(HexError):
    """Input ended while a manual player was being asked for a move."""
    code = "EOF_ERROR"
    default_message = "EOF from user"
    exit_code = 6


# =============================================================================
# In-game errors (not fatal)
# =============================================================================


class SaveFileWriteError(HexError):
    """Saving an in-progress game failed. Reported, the turn is retried."""
    code = "FILE_WRITE"
    default_message = "Unable to save game"


class IllegalMoveError(HexError, ValueError):
    """A move outside the board or onto an occupied cell was applied."""
    code = "ILLEGAL_MOVE"
    default_message = "Illegal move"


class GameOverError(HexError):
    """A move was applied after the game already has a winner."""
    code = "GAME_OVER"
    default_message = "Game is already over"
