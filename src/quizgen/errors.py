"""Error taxonomy shared by the question generation pipeline."""
from __future__ import annotations


class QuizGenError(Exception):
    """Base exception carrying an HTTP status and a user-facing message."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInput(QuizGenError):
    """Raised for a missing file or a non-positive question count."""

    status_code = 400


class UnsupportedFormat(QuizGenError):
    """Raised when the uploaded file is neither PDF nor DOCX."""

    status_code = 400


class EmptyDocument(QuizGenError):
    """Raised when extraction produced no text."""

    status_code = 400


class ExtractionFailure(QuizGenError):
    """Raised when the document parser rejects the payload."""

    status_code = 422


class ExtractionTimeout(QuizGenError):
    """Raised when text extraction exceeds its time allowance."""

    status_code = 504


class ModelCallError(QuizGenError):
    """Base class for failures of the model-call capability."""

    status_code = 502


class ModelAccessDenied(ModelCallError):
    """Raised when the provider refuses access to the requested model."""


class ModelCallFailure(ModelCallError):
    """Raised for any other provider failure."""


class ModelCallTimeout(ModelCallError):
    """Raised when a single model call exceeds its timeout."""

    status_code = 504


__all__ = [
    "EmptyDocument",
    "ExtractionFailure",
    "ExtractionTimeout",
    "InvalidInput",
    "ModelAccessDenied",
    "ModelCallError",
    "ModelCallFailure",
    "ModelCallTimeout",
    "QuizGenError",
    "UnsupportedFormat",
]
