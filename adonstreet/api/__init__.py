"""HTTP routes."""

from fastapi import APIRouter, Depends

from adonstreet.api import auth, dashboard, health, resources, users
from adonstreet.api.auth import require_claims


def build_router(protect_resources: bool = True) -> APIRouter:
    """
    Assemble every route. Registration and login are always public; users,
    resources and dashboard sit behind the auth gate when protect_resources is set.
    """
    protected = [Depends(require_claims)] if protect_resources else []

    router = APIRouter()
    router.include_router(health.router, prefix="/health", tags=["health"])
    # Before users.router so /Users/me is not captured by /Users/{user_id}.
    router.include_router(auth.router, prefix="/Users", tags=["auth"])
    router.include_router(users.router, prefix="/Users", tags=["users"], dependencies=protected)
    for resource in resources.RESOURCES:
        router.include_router(
            resources.build_resource_router(resource),
            prefix=f"/{resource.name}",
            tags=[resource.name],
            dependencies=protected,
        )
    router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"], dependencies=protected)
    return router
