class UploadError(Exception):
    """Base exception for rejected uploads."""


class EmptyUploadError(UploadError):
    """Raised when no file content was provided."""


class UnsupportedFileTypeError(UploadError):
    """Raised when the MIME type is not on the allow list."""


class FileTooLargeError(UploadError):
    """Raised when the file exceeds the configured size limit."""


class InvalidDocumentError(UploadError):
    """Raised when the document metadata fails validation."""


class AccessDeniedError(Exception):
    """Raised when a user requests a document owned by someone else."""
