"""
Error taxonomy for the drafting pipeline.

Only configuration and generation failures are fatal for a request.
Normalization and rendering never raise, and a malformed model response
is recovered into a raw-text draft by the extractor.
"""
from typing import Any, Dict, Optional


class DraftingError(Exception):
    """Base class for errors that map to an HTTP error envelope."""

    status_code: int = 500
    error: str = "Internal Server Error"

    def __init__(self, details: Optional[str] = None):
        super().__init__(details or self.error)
        self.details = details

    def to_body(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"error": self.error}
        if self.details:
            body["details"] = self.details
        return body


class InvalidMethodError(DraftingError):
    status_code = 405
    error = "Method not allowed"


class InvalidRequestError(DraftingError):
    status_code = 400
    error = "Invalid JSON body"


class ConfigurationError(DraftingError):
    """Backend credential missing; raised before any external call."""

    status_code = 500
    error = "Server misconfigured"


class BackendError(DraftingError):
    """Generation call failed, timed out, or produced no text."""

    status_code = 500
    error = "Generation failed"


class EmptyResponseError(BackendError):
    error = "Empty response from generation backend"


class MalformedOutputError(Exception):
    """
    Structured parse failed on both attempts.
    Never surfaced to the caller: the extractor degrades to a raw-text draft.
    """
