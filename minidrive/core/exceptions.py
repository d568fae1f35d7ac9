"""Exceptions raised by the stores and the session gate.

Each one knows the status code and plain-text body it is rendered with; the
handler installed in ``minidrive.main`` does the rendering.
"""


class MiniDriveError(Exception):
    """Base class for errors that end a request with a plain-text response."""

    status_code = 500
    message = "Internal error."

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class AlreadyExists(MiniDriveError):
    """Raised when registering a login ID that is already taken."""

    status_code = 400
    message = "This login ID is already in use."


class InvalidCredentials(MiniDriveError):
    """Raised for an unknown login ID or a wrong password (never told apart)."""

    status_code = 401
    message = "Incorrect login ID or password."


class Unauthenticated(MiniDriveError):
    status_code = 401
    message = "Please log in."


class NotFound(MiniDriveError):
    status_code = 404
    message = "File not found."


class InvalidFileName(MiniDriveError):
    """Raised when an upload name would leave its storage directory."""

    status_code = 400
    message = "Invalid file name."
