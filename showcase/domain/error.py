"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class DuplicateError(DomainError):
    """Raised by a repository when a unique constraint rejects an insert."""

    pass


class DuplicateVoteError(DuplicateError):
    """A vote for this (submission, voter) pair already exists."""

    def __init__(self, submission_id: str, voter_id: str):
        self.submission_id = submission_id
        self.voter_id = voter_id
        super().__init__(f"User {voter_id} already voted on submission {submission_id}")


class DuplicateSubmissionError(DuplicateError):
    """A submission with this identifier already exists."""

    def __init__(self, submission_id: str):
        self.submission_id = submission_id
        super().__init__(f"Submission already exists: {submission_id}")


class InfrastructureError(Exception):
    """The backing store is unreachable or failed for reasons unrelated to
    business rules.

    Not a DomainError: callers surface it as a generic failure and may retry.
    """

    def __init__(self, operation: str, cause: Exception | None = None):
        self.operation = operation
        self.cause = cause
        message = f"Store operation failed: {operation}"
        if cause is not None:
            message = f"{message} ({type(cause).__name__})"
        super().__init__(message)
