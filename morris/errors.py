"""
Error types for the morris rules engine.

Every rejected action is reported as a subclass of MorrisError. The three board
operations each have a closed set of failure codes; the game adds errors for
actions attempted in the wrong state. All of them leave the game untouched, so
the caller may simply ask for another action.

MorrisError derives from ValueError, so code that only cares whether an action
was legal can catch ValueError.
"""

from enum import Enum

__all__ = [
    "InvalidActionError",
    "InvalidStateError",
    "MorrisError",
    "MovingError",
    "MovingErrorCode",
    "PlacingError",
    "PlacingErrorCode",
    "RemovingError",
    "RemovingErrorCode",
]


class PlacingErrorCode(Enum):
    INVALID_POSITION = "INVALID_POSITION"
    PLACE_AT_OCCUPIED = "PLACE_AT_OCCUPIED"


# declaration order is the order in which Board.move checks them
class MovingErrorCode(Enum):
    INVALID_MOVE_FROM = "INVALID_MOVE_FROM"
    MOVE_TO_SAME = "MOVE_TO_SAME"
    INVALID_MOVE_TO = "INVALID_MOVE_TO"
    MOVE_FROM_EMPTY = "MOVE_FROM_EMPTY"
    MOVE_FROM_WRONG_COLOR = "MOVE_FROM_WRONG_COLOR"
    MOVE_TO_OCCUPIED = "MOVE_TO_OCCUPIED"
    NOT_ADJACENT = "NOT_ADJACENT"


class RemovingErrorCode(Enum):
    INVALID_POSITION = "INVALID_POSITION"
    REMOVE_FROM_EMPTY = "REMOVE_FROM_EMPTY"
    REMOVE_FROM_WRONG_COLOR = "REMOVE_FROM_WRONG_COLOR"
    REMOVE_FROM_MILL = "REMOVE_FROM_MILL"


class MorrisError(ValueError):
    """Base exception. `code` is an error code enum or a string, `context` names
    the positions and colors involved."""

    code = "MORRIS_ERROR"

    def __init__(self, message, code=None, context=None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        self.context = context or {}

    @property
    def code_name(self):
        return self.code.value if isinstance(self.code, Enum) else str(self.code)

    def __str__(self):
        if self.context:
            ctx = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"[{self.code_name}] {self.message} ({ctx})"
        return f"[{self.code_name}] {self.message}"

    def to_dict(self):
        return {
            "code": self.code_name,
            "message": self.message,
            "context": dict(self.context),
        }


class PlacingError(MorrisError):
    """A piece could not be placed. `code` is a PlacingErrorCode."""


class MovingError(MorrisError):
    """A piece could not be moved. `code` is a MovingErrorCode."""


class RemovingError(MorrisError):
    """A piece could not be removed. `code` is a RemovingErrorCode."""


class InvalidActionError(MorrisError):
    """Placing while moving (or vice versa), acting while a removal is pending,
    removing without a mill, or acting after the game ended."""

    code = "INVALID_ACTION"


class InvalidStateError(MorrisError):
    """The game ended in a configuration no rule accounts for."""

    code = "INVALID_STATE"
