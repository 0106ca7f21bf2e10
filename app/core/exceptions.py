"""
Domain exceptions raised by the services.
Each carries the HTTP status it is surfaced with; app.main turns them into
{"error": message} responses.
"""


class AppException(Exception):
    """Base exception for the goals API"""
    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class Unauthenticated(AppException):
    """Missing, malformed or rejected bearer credential"""
    status_code = 401

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class InvalidArgument(AppException):
    """Missing or malformed input, or an operation that needs state the caller lacks"""
    status_code = 400


class Forbidden(AppException):
    """Caller's role does not hold the required capability"""
    status_code = 403


class NotFound(AppException):
    """Resource is absent or not owned by the caller"""
    status_code = 404


class Conflict(AppException):
    """Operation not allowed from the caller's current team state"""
    status_code = 400
