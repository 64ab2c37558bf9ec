"""
User endpoints for API v1.

Each route delegates to exactly one ``UserStore`` operation and
returns its result unchanged.  The store is resolved per request from
``app.state`` through ``get_user_store``; the routes hold no state.

``UserNotFoundError`` raised by the store propagates to the
application's exception handler, which answers with HTTP 404.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from users_api.app.api.dependencies import get_user_store
from users_api.app.schemas.user import UserCreate, UserUpdate
from users_api.app.services.user_store import UserStore


def create_router(store: UserStore) -> APIRouter:
    """Build the users router typed for ``store``'s identifiers and records.

    The in‑memory store uses integer identifiers, so a non‑numeric path
    id is rejected with 422 before reaching the store.
    """
    identifier_type = store.identifier_type
    read_schema = store.read_schema

    router = APIRouter()

    @router.get("", response_model=List[read_schema])
    async def list_users(user_store: UserStore = Depends(get_user_store)):
        """Return all users."""
        return await user_store.list_users()

    @router.post("", response_model=read_schema, status_code=status.HTTP_201_CREATED)
    async def create_user(
        user_in: UserCreate,
        user_store: UserStore = Depends(get_user_store),
    ):
        """Create a user and return it with its assigned id."""
        return await user_store.create_user(user_in)

    @router.get("/{user_id}", response_model=read_schema)
    async def get_user(
        user_id: identifier_type,
        user_store: UserStore = Depends(get_user_store),
    ):
        """Retrieve a single user by id.

        Returns HTTP 404 if the user does not exist.
        """
        user = await user_store.get_user(user_id)
        if user is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
        return user

    @router.put("/{user_id}", response_model=read_schema)
    async def update_user(
        user_id: identifier_type,
        user_in: UserUpdate,
        user_store: UserStore = Depends(get_user_store),
    ):
        """Update the fields present in the body."""
        return await user_store.update_user(user_id, user_in)

    @router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_user(
        user_id: identifier_type,
        user_store: UserStore = Depends(get_user_store),
    ) -> None:
        """Delete a user.  Deleting an unknown id also succeeds."""
        await user_store.delete_user(user_id)
        return None

    return router
