from .auth import router as auth_router
from .diagnostics import router as diagnostics_router

_routers = [diagnostics_router, auth_router]

__all__ = ["get_routers"]


def get_routers():
    return _routers
