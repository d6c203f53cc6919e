"""Domain-level exception hierarchy."""


class DomainError(Exception):
    """Base exception for service-layer errors."""

    def __init__(self, message: str = "Domain error") -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(DomainError):
    """Raised when a requested resource cannot be located."""


class ConflictError(DomainError):
    """Raised when a unique constraint or business rule is violated."""


class ValidationError(DomainError):
    """Raised when input fails validation rules."""


class UnauthorizedError(DomainError):
    """Raised when the caller's identity is missing or cannot be resolved."""
