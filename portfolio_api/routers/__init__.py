from typing import Iterable, Iterator, Set, Tuple

from fastapi import APIRouter
from fastapi.dependencies.models import Dependant
from fastapi.routing import APIRoute

from portfolio_api.dependencies import get_current_admin
from .auth import router as auth_router
from .cms import router as cms_router
from .contact import router as contact_router
from .project import router as project_router
from .settings import router as settings_router
from .skill import router as skill_router

# Each resource router carries its own /api prefix
RESOURCE_ROUTERS = (
    auth_router,
    project_router,
    skill_router,
    cms_router,
    contact_router,
    settings_router,
)

router = APIRouter()

for resource_router in RESOURCE_ROUTERS:
    router.include_router(resource_router)


def _requires_admin(dependant: Dependant) -> bool:
    return any(
        dependency.call is get_current_admin or _requires_admin(dependency)
        for dependency in dependant.dependencies
    )


def _api_routes(routes: Iterable) -> Iterator[APIRoute]:
    # Included routers may be kept as wrapper entries instead of being flattened
    for route in routes:
        if isinstance(route, APIRoute):
            yield route
            continue

        nested = getattr(route, "routes", None)
        if nested is None:
            nested = getattr(getattr(route, "router", None), "routes", None)
        if nested:
            yield from _api_routes(nested)


def protected_routes(routes=None) -> Set[Tuple[str, str]]:
    """
    List every (method, path) pair that sits behind the admin gate.

    The gate is attached when each route is declared, so this just reads the
    route table; nothing is decided per request. Without arguments the
    resource routers are read directly.
    """
    if routes is None:
        routes = [route for r in RESOURCE_ROUTERS for route in r.routes]

    protected = set()
    for route in _api_routes(routes):
        if _requires_admin(route.dependant):
            for method in route.methods:
                protected.add((method, route.path))
    return protected
