"""Domain layer errors."""


class DomainError(Exception):
    """A business rule rejected the operation; routes map these to 4xx."""


class ValidationError(DomainError):
    """Input breaks a field constraint such as a length limit."""


class NotAuthorizedError(DomainError):
    """Raised when an operation requires an administrator."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Administrator privileges required to {action}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InvalidTransitionError(DomainError):
    """Raised when a submission status change is not allowed."""

    def __init__(self, submission_id: str, current: str, target: str):
        super().__init__(
            f"Submission {submission_id} cannot move from {current} to {target}"
        )


class InvalidCredentialsError(DomainError):
    """Raised when an admin login does not match."""

    def __init__(self) -> None:
        super().__init__("Invalid email or password")


class TooManyAttemptsError(DomainError):
    """Raised when an email is locked out after repeated failed logins."""

    def __init__(self, retry_after_seconds: int):
        self.retry_after_seconds = retry_after_seconds
        minutes = max(1, -(-retry_after_seconds // 60))
        super().__init__(
            f"Too many login attempts. Please try again in {minutes} "
            f"minute{'s' if minutes != 1 else ''}."
        )
