from matty.api.http.health import router as health_router
from matty.api.http.auth import router as auth_router
from matty.api.http.designs import router as designs_router

__all__ = [
    "health_router",
    "auth_router",
    "designs_router",
]
