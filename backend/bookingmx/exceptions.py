"""
Application exceptions

Services and the city graph raise these; main.py maps them to HTTP responses.
"""


class BookingError(Exception):
    """Base application error"""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(BookingError):
    """Requested resource does not exist"""

    status_code = 404


class ValidationError(BookingError):
    """Input rejected by a business rule"""

    status_code = 400
