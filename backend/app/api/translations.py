"""
API endpoints for source/translation document pairing.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from ..models.translation import LineComparison, TranslationPathResult
from ..services.shared import translation_path_service
from ..services.translation_path_service import TranslationPathError

router = APIRouter()


class CounterpartRequest(BaseModel):
    path: str
    target_locale: Optional[str] = None


class CounterpartResponse(BaseModel):
    paths: TranslationPathResult
    line_comparison: Optional[LineComparison] = None


@router.post("/counterpart", response_model=CounterpartResponse)
def get_counterpart(request: CounterpartRequest):
    """
    Resolve the other side of a source/translation pair.

    Line counts are compared when both files exist.
    """
    try:
        paths = translation_path_service.counterpart_path(request.path, request.target_locale)
    except TranslationPathError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"code": e.code, "message": str(e)},
        )

    comparison = translation_path_service.compare_line_counts(paths.original_path, paths.translation_path)
    return CounterpartResponse(paths=paths, line_comparison=comparison)
