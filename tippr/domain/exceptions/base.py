"""Base domain exception."""

from typing import Optional


class DomainException(Exception):
    """
    Base exception for all domain-level errors.

    The calculation engine itself reports bad input as data; these are raised
    by the application layer when a use case cannot proceed with that input.
    """

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def to_response(self, request_id: Optional[str] = None) -> dict:
        """Error body in the API's standard error format."""
        return {
            "error": self.code,
            "message": self.message,
            "request_id": request_id,
        }
