"""FastAPI dependencies shared by the endpoint modules."""

from fastapi import Request

from users_api.app.services.user_store import UserStore


def get_user_store(request: Request) -> UserStore:
    """Return the user store the application was created with."""
    return request.app.state.user_store
