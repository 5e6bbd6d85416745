"""
Knight Zones Error Hierarchy

Unified exception hierarchy for the session and service layers. The board,
move generator, evaluator and minimax recursion never raise these; they
surface where caller-supplied input is validated, and as AIError when a
move search fails.

Usage:
    from knight_zones.errors import InvalidMoveError

    try:
        node = GameEngine.apply_move(node, move)
    except InvalidMoveError as e:
        logger.warning(f"Rejected move: {e.message}")
"""

from typing import Any

__all__ = [
    "AIError",
    "ConfigurationError",
    "InvalidMoveError",
    "InvalidStateError",
    # Base error
    "KnightZonesError",
    "RulesViolationError",
]


class KnightZonesError(Exception):
    """Base exception for all Knight Zones errors.

    Attributes:
        code: Machine-readable error code for categorization
        message: Human-readable error description
        context: Additional context for debugging
    """
    code: str = "KNIGHT_ZONES_ERROR"

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


class RulesViolationError(KnightZonesError):
    """Action forbidden by the game rules.

    Attributes:
        rule_ref: Short name of the rule that was broken (e.g. "pass-only-when-stuck")
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


class InvalidStateError(KnightZonesError):
    """Corrupted or inconsistent game state.

    Raised when a caller-supplied state breaks the board invariants, such as
    both pieces sharing a square or a zone cell outside the membership table.
    """
    code: str = "INVALID_STATE"


class InvalidMoveError(KnightZonesError):
    """Move that cannot be applied to the current state.

    Raised for destinations that are not legal knight moves for the side to
    move, or for any move once the game is over.
    """
    code: str = "INVALID_MOVE"


# =============================================================================
# AI / Configuration Errors
# =============================================================================


class AIError(KnightZonesError):
    """Base class for AI-related errors."""
    code: str = "AI_ERROR"


class ConfigurationError(KnightZonesError):
    """Unknown difficulty token, AI type or malformed setting."""
    code: str = "CONFIGURATION_ERROR"
