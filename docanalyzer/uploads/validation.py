from collections.abc import Sequence

from docanalyzer.analysis.models import DocumentCategory
from docanalyzer.uploads.exceptions import (
    EmptyUploadError,
    FileTooLargeError,
    UnsupportedFileTypeError,
)
from docanalyzer.uploads.models import UploadedFile

INVALID_FILE_TYPE_MESSAGE = (
    "Invalid file type. Only PDF, DOCX, JPG, and PNG files are allowed."
)

# Checked in order; the first matching keyword decides.
_FILE_NAME_HINTS: tuple[tuple[tuple[str, ...], DocumentCategory], ...] = (
    (("agreement", "contract"), DocumentCategory.AGREEMENT),
    (("deed",), DocumentCategory.DEED),
    (("invoice",), DocumentCategory.INVOICE),
)


def infer_document_type(file_name: str) -> str:
    """Guess the declared document type from the file name."""
    lowered = file_name.lower()
    for keywords, category in _FILE_NAME_HINTS:
        if any(keyword in lowered for keyword in keywords):
            return category.value
    return DocumentCategory.UNKNOWN.value


class UploadValidator:
    """Rejects uploads by MIME type and size before anything is stored."""

    def __init__(self, allowed_file_types: Sequence[str], max_size_bytes: int) -> None:
        self._allowed_file_types = frozenset(allowed_file_types)
        self._max_size_bytes = max_size_bytes

    def validate(self, upload: UploadedFile | None) -> UploadedFile:
        """Return the upload unchanged if it is acceptable.

        Raises:
            EmptyUploadError: if there is no file or it has no content.
            UnsupportedFileTypeError: if the MIME type is not allowed.
            FileTooLargeError: if the file is over the size limit.
        """
        if upload is None or upload.size == 0:
            raise EmptyUploadError("No file uploaded")
        if upload.mime_type not in self._allowed_file_types:
            raise UnsupportedFileTypeError(INVALID_FILE_TYPE_MESSAGE)
        if upload.size > self._max_size_bytes:
            raise FileTooLargeError(
                f"File '{upload.file_name}' is {upload.size} bytes; "
                f"the limit is {self._max_size_bytes} bytes"
            )
        return upload
