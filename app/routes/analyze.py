"""Analyze routes (single source and multi-file)."""

from fastapi import APIRouter

from ..schemas import AnalyzeRequest, AnalyzeResponse, ErrorDetail, MultiFileAnalyzeRequest, MultiFileAnalyzeResponse
from ..utils import run_analysis, run_multi_analysis

router = APIRouter()


@router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    responses={400: {"model": ErrorDetail}, 404: {"model": ErrorDetail}},
)
def analyze(req: AnalyzeRequest) -> AnalyzeResponse:
    """Detect web-platform features and score browser compatibility."""
    return run_analysis(req)


@router.post("/analyze/files", response_model=MultiFileAnalyzeResponse)
def analyze_files(req: MultiFileAnalyzeRequest) -> MultiFileAnalyzeResponse:
    """Analyze several server-side files; unreadable or unsupported paths are listed as skipped."""
    return run_multi_analysis(req.file_paths)
