"""
Itinerary Errors
================
Error taxonomy surfaced by the itinerary endpoint

- ValidationError: bad request input, 400, raised before any model call
- UpstreamEmptyError: the model returned no text, 500
- UpstreamFormatError: the model text is not a JSON object, 500 with raw text

None of these are retried; the caller resubmits.
"""

from typing import Any


class ItineraryError(Exception):
    """Base class for errors with a public HTTP mapping"""

    status_code: int = 500
    error_message: str = "Server error generating itinerary"

    def __init__(self, reason: str | None = None) -> None:
        super().__init__(reason or self.error_message)

    def to_payload(self) -> dict[str, Any]:
        """Response body for this error"""
        return {"error": self.error_message}


class ValidationError(ItineraryError):
    """Missing or unusable request field"""

    status_code = 400

    def __init__(self, reason: str, error_message: str) -> None:
        super().__init__(reason)
        self.error_message = error_message


class UpstreamEmptyError(ItineraryError):
    """The text generator returned nothing"""

    error_message = "No response from model"


class UpstreamFormatError(ItineraryError):
    """The text generator returned something that is not a JSON object"""

    error_message = "Model returned invalid JSON"

    def __init__(self, raw: str, reason: str | None = None) -> None:
        super().__init__(reason)
        self.raw = raw

    def to_payload(self) -> dict[str, Any]:
        return {"error": self.error_message, "raw": self.raw}
