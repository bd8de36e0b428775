"""Domain layer errors.

Every error that crosses the service boundary is one of these, so the
interface layer can report a typed error kind plus a message.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Malformed input (blank or oversized fields, bad paging, bad vote type)."""

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InvalidStateError(DomainError):
    """Raised when a transition is not permitted from the current state."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when the caller's role does not permit the operation."""

    def __init__(self, action: str, role: str):
        self.action = action
        self.role = role
        super().__init__(f"Access Denied: role {role} cannot {action}")


class StorageError(DomainError):
    """Transient storage failure (connection loss, timeout)."""

    def __init__(self, operation: str, cause: str):
        self.operation = operation
        super().__init__(f"Storage failure during {operation}: {cause}")
