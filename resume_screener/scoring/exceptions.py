class ScoringError(Exception):
    """Raised when scoring a resume fails."""


class ScoringValidationError(ScoringError):
    """Raised when the oracle's parsed answer violates the result contract."""


class ScoringNetworkError(ScoringError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
