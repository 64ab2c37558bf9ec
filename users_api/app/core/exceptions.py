"""Exceptions raised by the user store."""

from typing import Union


class UsersAPIError(Exception):
    """Base class for errors raised by this package."""


class UserNotFoundError(UsersAPIError):
    """Raised when an operation targets a user that does not exist.

    The application registers a handler that turns this into an HTTP
    404 response (see ``main.create_app``).
    """

    def __init__(self, user_id: Union[int, str]) -> None:
        self.user_id = user_id
        super().__init__(f"User with id {user_id} not found")
