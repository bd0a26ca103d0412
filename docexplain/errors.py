"""Exceptions raised across the explanation engine boundary."""

EXPLANATION_FAILURE_MESSAGE = (
    "Unable to analyze the documentation at this time. "
    "Please check your content and try again."
)


class ExplanationError(RuntimeError):
    """Opaque failure surfaced to the caller when an explanation cannot be produced."""

    def __init__(self, message: str = EXPLANATION_FAILURE_MESSAGE):
        super().__init__(message)


class SessionBusyError(RuntimeError):
    """Raised when a request is submitted while another is still in flight."""


class UploadRejectedError(ValueError):
    """Raised when an uploaded file fails intake validation."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code
