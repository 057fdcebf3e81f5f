class StoreError(Exception):
    """Base exception for all document store errors."""


class DocumentNotFoundError(StoreError):
    """Raised when a document cannot be found in the store."""


class UserNotFoundError(StoreError):
    """Raised when a user cannot be found in the store."""


class DuplicateUsernameError(StoreError):
    """Raised when creating a user whose username is already taken."""
