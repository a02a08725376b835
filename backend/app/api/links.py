"""
API endpoints for locale link validation.

This module exposes the link engine over REST: validate a document, read or
clear its stored diagnostics, and compute quick-fixes.
"""

import logging
from typing import List

from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel

from ..models.diagnostics import CodeAction, Diagnostic
from ..services.link_validation_service import InvalidDocumentError
from ..services.shared import link_fix_service, link_validation_service

logger = logging.getLogger(__name__)

router = APIRouter()


class DocumentRequest(BaseModel):
    """A document identity and its full current text."""
    path: str
    text: str


class DiagnosticsResponse(BaseModel):
    """Diagnostics currently stored for a document."""
    path: str
    count: int
    diagnostics: List[Diagnostic]


class FixResponse(BaseModel):
    """Quick-fixes for a document and the text with all of them applied."""
    path: str
    actions: List[CodeAction]
    fixed_text: str


@router.post("/validate", response_model=DiagnosticsResponse)
def validate_document(request: DocumentRequest):
    """
    Validate a document and replace its stored diagnostics.

    Returns:
        DiagnosticsResponse: the committed diagnostics
    """
    try:
        diagnostics = link_validation_service.validate_document(request.path, request.text)
    except InvalidDocumentError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    logger.info(f"🔗 Validated {request.path}: {len(diagnostics)} diagnostic(s)")
    return DiagnosticsResponse(path=request.path, count=len(diagnostics), diagnostics=diagnostics)


@router.get("/diagnostics", response_model=DiagnosticsResponse)
def get_diagnostics(path: str = Query(..., description="Document path")):
    """Get the diagnostics stored by the last validation of a document."""
    diagnostics = link_validation_service.get_diagnostics(path)
    return DiagnosticsResponse(path=path, count=len(diagnostics), diagnostics=diagnostics)


@router.delete("/diagnostics", status_code=status.HTTP_204_NO_CONTENT)
def clear_diagnostics(path: str = Query(..., description="Document path")):
    """Drop the stored diagnostics of a document."""
    link_validation_service.clear(path)


@router.post("/fix", response_model=FixResponse)
def fix_document(request: DocumentRequest):
    """
    Validate a document, then build a quick-fix for each diagnostic.

    The returned `fixed_text` has every fix applied; the stored diagnostics
    still describe the submitted text until the fixed text is validated.
    """
    try:
        diagnostics = link_validation_service.validate_document(request.path, request.text)
    except InvalidDocumentError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    actions = link_fix_service.code_actions(request.text, diagnostics)
    fixed_text = link_fix_service.apply_fixes(request.text, [a.fix for a in actions])
    return FixResponse(path=request.path, actions=actions, fixed_text=fixed_text)
