"""Domain errors raised by the service layer."""
from typing import Optional


class ApiError(Exception):
    """Error that maps onto an HTTP status when it reaches the API layer."""

    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class NotFoundError(ApiError):
    """The requested product does not exist."""

    status_code = 404
