"""Health check route."""

from fastapi import APIRouter

from ..utils import checker_svc

router = APIRouter()


@router.get("/health")
def health() -> dict:
    """Liveness check, with the catalog the checker is serving."""
    return {
        "status": "ok",
        "catalog_source": checker_svc.checker.catalog.source,
        "features": len(checker_svc.checker.catalog),
    }
