"""
Exceptions raised by the PDF toolkit.

Every operation failure surfaces as one of these. ``item_index`` is set when
the failure can be tied to a specific input record.
"""


class PdfToolkitError(Exception):
    """Base exception for all toolkit errors."""

    def __init__(self, message: str = "", item_index: int | None = None) -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        self.item_index = item_index

    @property
    def default_message(self) -> str:
        return "An unknown PDF toolkit error occurred."

    def __str__(self) -> str:
        if self.item_index is None:
            return self.message
        return f"{self.message} (item {self.item_index})"


class InvalidRangeSpec(PdfToolkitError, ValueError):
    """Raised when a page range specification is malformed or out of bounds."""

    @property
    def default_message(self) -> str:
        return "Invalid page range specification."


class InvalidOption(PdfToolkitError, ValueError):
    """Raised when an operation parameter has an unusable value."""

    @property
    def default_message(self) -> str:
        return "Invalid operation option."


class CorruptDocument(PdfToolkitError):
    """Raised when a byte buffer cannot be parsed as a PDF."""

    @property
    def default_message(self) -> str:
        return "Invalid or corrupted PDF file."


class NoInputDocuments(PdfToolkitError):
    """Raised when a merge ends up with nothing to merge."""

    @property
    def default_message(self) -> str:
        return "No PDFs to merge."


class RenderBackendUnavailable(PdfToolkitError):
    """Raised when the rasterizing backend cannot be loaded."""

    @property
    def default_message(self) -> str:
        return "PDF rendering backend (PyMuPDF) is not installed."


class RecognitionFailure(PdfToolkitError):
    """Raised when OCR fails for an image."""

    def __init__(
        self,
        message: str = "",
        item_index: int | None = None,
        page_number: int | None = None,
    ) -> None:
        super().__init__(message, item_index=item_index)
        self.page_number = page_number

    @property
    def default_message(self) -> str:
        return "Text recognition failed."


class MissingPayload(PdfToolkitError):
    """Raised when an input record has no payload under the requested name."""

    @property
    def default_message(self) -> str:
        return "Input record has no binary payload with the requested name."


class UnsupportedOperation(PdfToolkitError):
    """Raised for an unknown operation name."""

    @property
    def default_message(self) -> str:
        return "Unsupported operation."


class PreconditionViolation(PdfToolkitError):
    """Raised when an operation gets the wrong number of input records."""

    @property
    def default_message(self) -> str:
        return "Operation called with an unsupported number of input records."
