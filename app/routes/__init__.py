"""Route handlers."""

from .analyze import router as analyze_router
from .catalog import router as catalog_router
from .community import router as community_router
from .fix import router as fix_router
from .health import router as health_router

__all__ = ["health_router", "analyze_router", "catalog_router", "fix_router", "community_router"]
