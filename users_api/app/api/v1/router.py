"""
Top‑level router for version 1 of the API.

Aggregates domain‑specific routers under a unified prefix.  Routers are
built for a concrete user store because path parameter and response
types depend on the store variant.
"""

from fastapi import APIRouter

from users_api.app.services.user_store import UserStore
from .endpoints import users


def build_router(store: UserStore) -> APIRouter:
    router = APIRouter()
    router.include_router(users.create_router(store), prefix="/users", tags=["users"])
    return router
