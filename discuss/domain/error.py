"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Input rejected before it reaches the remote source."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"{field}: {message}")


class MutationInFlightError(DomainError):
    """Raised when a control submits again before its last mutation settled."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation} is already in progress")
