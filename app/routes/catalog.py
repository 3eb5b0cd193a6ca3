"""Catalog routes: enumerate known features."""

from fastapi import APIRouter, HTTPException

from ..schemas import CatalogResponse, ErrorDetail, FeatureOut
from ..utils import checker_svc

router = APIRouter()


@router.get("/catalog", response_model=CatalogResponse)
def catalog() -> CatalogResponse:
    return checker_svc.catalog()


@router.get("/catalog/{feature_id}", response_model=FeatureOut, responses={404: {"model": ErrorDetail}})
def feature(feature_id: str) -> FeatureOut:
    out = checker_svc.feature(feature_id)
    if out is None:
        raise HTTPException(404, f"Unknown feature: {feature_id}")
    return out
