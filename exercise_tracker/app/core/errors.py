"""
Domain exceptions raised by the store and the request parsers.

Each exception carries the HTTP status and the short ``error`` title
the endpoints put into the JSON body ``{"error": ..., "message": ...}``.
A missing user and a duplicate username are reported as 500, the same
as any storage failure; only malformed input is a 400.
"""


class StoreError(Exception):
    """Base class for failures surfaced through the API."""

    status_code = 500
    error = "Internal Server Error"

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message or self.__class__.__name__


class InvalidIdError(StoreError):
    """The path identifier is not a 24 character hex string."""

    status_code = 400
    error = "Invalid user ID"


class RequestValidationFailed(StoreError):
    """A request body is missing a field or a field has the wrong shape."""

    status_code = 400
    error = "Bad Request"


class UserNotFoundError(StoreError):
    """No user matches a well-formed identifier."""

    def __init__(self, user_id: str = "") -> None:
        super().__init__("User not found")
        self.user_id = user_id


class DuplicateKeyError(StoreError):
    """The username is already registered."""

    def __init__(self, username: str) -> None:
        super().__init__(f"Username '{username}' already exists")
        self.username = username
