"""Utility functions for the API."""

from deps import HTTPException, List, Path
from .schemas import AnalyzeRequest, AnalyzeResponse, MultiFileAnalyzeResponse
from .services import CheckerService

from baseline_checker.utils import is_supported_file

checker_svc = CheckerService()


def _checked_path(raw: str) -> Path:
    p = Path(raw)
    if not p.is_absolute():
        raise HTTPException(400, "file_path must be absolute")
    if not p.is_file():
        raise HTTPException(404, f"File not found: {raw}")
    return p


def run_analysis(req: AnalyzeRequest) -> AnalyzeResponse:
    """Run the checker on either a server-side file or inline code."""
    if req.file_path:
        p = _checked_path(req.file_path)
        try:
            return checker_svc.analyze_file(p)
        except OSError as e:
            raise HTTPException(400, f"Could not read file: {e}") from e
    if req.code is not None and req.language:
        return checker_svc.analyze_code(req.code, req.language)
    raise HTTPException(
        400,
        "Provide either (code + language) or file_path.",
    )


def run_multi_analysis(file_paths: List[str]) -> MultiFileAnalyzeResponse:
    """Analyze supported files; relative, missing or unsupported paths are reported as skipped."""
    paths: List[Path] = []
    skipped: List[str] = []
    for raw in file_paths:
        p = Path(raw)
        if p.is_absolute() and p.is_file() and is_supported_file(p):
            paths.append(p)
        else:
            skipped.append(raw)
    results = checker_svc.analyze_files(paths)
    skipped.extend(str(p) for p in paths if p not in results)
    return MultiFileAnalyzeResponse(files=list(results.values()), skipped=skipped)
