# services/errors.py


class DocumentServiceError(Exception):
    """Base class for audit document service errors."""


class BackendUnavailable(DocumentServiceError):
    """The document store could not be reached or refused the query."""


class RecordNotFound(DocumentServiceError):
    """No candidate collection holds the requested audit."""


class RenderServiceError(DocumentServiceError):
    """The rendering API returned a non-success status or could not be reached."""

    def __init__(self, message: str, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class ValidationError(DocumentServiceError):
    """Required generation input is missing."""

    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__(f"Missing required fields: {', '.join(self.missing)}")
