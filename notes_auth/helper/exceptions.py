from fastapi import status


class AuthError(Exception):
    """Client-facing authentication failure with the status and message to return."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "Bad Request"

    def __init__(self, message: str = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class UserAlreadyExists(AuthError):
    message = "User already exists"


class UserNotFound(AuthError):
    message = "User does not exist"


class InvalidPassword(AuthError):
    message = "Invalid Password"
