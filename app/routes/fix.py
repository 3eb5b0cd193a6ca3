"""Fix route: the two illustrative script rewrites."""

from fastapi import APIRouter

from ..schemas import FixRequest, FixResponse

from baseline_checker.fixes import apply_fixes

router = APIRouter()


@router.post("/fix", response_model=FixResponse)
def fix(req: FixRequest) -> FixResponse:
    """Rewrite `x.at(-1)` and guard `x.showModal()`. Other languages come back unchanged."""
    result = apply_fixes(req.code, req.language)
    return FixResponse(code=result.text, applied=result.applied, changed=result.changed)
