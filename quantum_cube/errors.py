"""
Quantum Cube Error Hierarchy

Unified exception hierarchy for the rules engine and its drivers. All custom
exceptions inherit from QuantumCubeError for easy catching and filtering.

Usage:
    from quantum_cube.errors import RulesViolationError

    try:
        engine.play_move(coordinate)
    except RulesViolationError as e:
        logger.warning(f"Invalid move: {e.message}, rule: {e.rule_ref}")
"""

from typing import Any

__all__ = [
    "ConfigurationError",
    "InvalidCoordinateError",
    "InvalidMoveError",
    "InvalidStateError",
    # Base error
    "QuantumCubeError",
    # Game rules errors
    "RulesViolationError",
]


class QuantumCubeError(Exception):
    """Base exception for all Quantum Cube errors.

    Attributes:
        code: Machine-readable error code for categorization
        message: Human-readable error description
        context: Additional context for debugging
    """
    code: str = "QUANTUM_CUBE_ERROR"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"[{self.code}] {self.message} ({ctx})"
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context,
        }


# =============================================================================
# Game Rules Errors
# =============================================================================


class RulesViolationError(QuantumCubeError):
    """Move request rejected by the placement rules.

    Raised by the game engine when a player targets a cell the move
    validator refuses (own tentative marker, entangled or collapsed cell).

    Attributes:
        rule_ref: Short identifier of the rule that was violated
            (e.g. "own-tentative", "entangled", "collapsed")
    """
    code: str = "RULES_VIOLATION"

    def __init__(
        self,
        message: str,
        rule_ref: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context=context)
        self.rule_ref = rule_ref
        if rule_ref:
            self.context["rule_ref"] = rule_ref


class InvalidStateError(QuantumCubeError):
    """Corrupted or unexpected board state.

    Raised when the board or marker registry is in a configuration that
    should not be possible through normal gameplay.
    """
    code: str = "INVALID_STATE"


class InvalidMoveError(QuantumCubeError):
    """Move that cannot be applied to the current state.

    Raised when a move reaches the board without having been gated by the
    move validator, or when the game is no longer active. This is a caller
    contract violation, not a recoverable condition.
    """
    code: str = "INVALID_MOVE"


class InvalidCoordinateError(QuantumCubeError):
    """Coordinate outside the 3x3x3 cube."""
    code: str = "INVALID_COORDINATE"

    def __init__(
        self,
        message: str,
        coordinate: Any = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context=context)
        if coordinate is not None:
            self.context["coordinate"] = coordinate


class ConfigurationError(QuantumCubeError):
    """Invalid configuration value.

    Raised when an environment variable or explicit setting cannot be
    parsed or is outside the supported range.
    """
    code: str = "CONFIGURATION_ERROR"

    def __init__(
        self,
        message: str,
        setting: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context=context)
        if setting:
            self.context["setting"] = setting
