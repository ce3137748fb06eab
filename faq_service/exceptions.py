"""
Error taxonomy for the FAQ service.

Every error carries the HTTP status it maps to and is rendered as JSON with an
``error`` field by the handlers registered in ``faq_service.main``.
"""
from typing import Optional


class FAQServiceError(Exception):
    """Base class for errors surfaced to API clients"""

    status_code = 500
    error = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.error)
        self.message = message

    def to_dict(self, expose_details: bool = True) -> dict:
        body = {"error": self.error}
        if self.message:
            body["message"] = self.message
        return body


class ValidationError(FAQServiceError):
    """Missing or blank required field, raised before any storage access"""

    status_code = 400
    error = "Validation failed"


class NotFoundError(FAQServiceError):
    """Update/delete target does not exist"""

    status_code = 404
    error = "FAQ not found"


class StorageError(FAQServiceError):
    """
    Underlying database failure.

    ``error`` is the operation label shown to clients ("Insert failed",
    "Update failed", ...); ``details`` is the engine message.
    """

    status_code = 500

    def __init__(self, error: str = "Database error", details: str = ""):
        super().__init__(details or error)
        self.error = error
        self.message = None
        self.details = details

    def to_dict(self, expose_details: bool = True) -> dict:
        body = {"error": self.error}
        if expose_details and self.details:
            body["details"] = self.details
        return body
