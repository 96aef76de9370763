from typing import Optional


class BookingServiceError(Exception):
    """Base error carrying the HTTP status the error boundary should answer with."""

    status = 500

    def __init__(self, message: str = "", status: Optional[int] = None):
        super().__init__(message)
        if status is not None:
            self.status = status


class StorageError(BookingServiceError):
    """The booking could not be written to the document store."""


class InvalidBodyError(BookingServiceError):
    """The request body was declared as JSON but is not a usable JSON document."""

    status = 400
