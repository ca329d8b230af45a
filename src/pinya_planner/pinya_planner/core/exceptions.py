class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthorizationError(DomainError):
    """Raised when a caller lacks permission for an action."""


class NotFoundError(DomainError):
    """Raised when the target of an operation does not exist."""


class MissingLayoutIdError(NotFoundError):
    """Raised when update is called on a layout that was never saved."""


class LayoutNotFoundError(NotFoundError):
    """Raised when a layout id does not match any stored layout."""


class RoleInstanceNotFoundError(NotFoundError):
    """Raised when a role slot id is not part of the layout."""


class StorageError(DomainError):
    """Raised when the backing store rejects a read or write."""
