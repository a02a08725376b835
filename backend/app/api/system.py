"""
System information API endpoints.
"""

from typing import List

from fastapi import APIRouter
from pydantic import BaseModel

from .._version import __version__, __release_date__
from ..models.locale import LocaleInfo
from ..services.shared import link_validation_service

router = APIRouter()


class VersionResponse(BaseModel):
    """Response model for version information."""
    version: str
    release_date: str


class LocalesResponse(BaseModel):
    """Response model for the locale configuration."""
    neutral: str
    supported: List[LocaleInfo]


@router.get("/version", response_model=VersionResponse)
async def get_version():
    """
    Get the current LingoAssist backend version and release date.

    Returns:
        VersionResponse: Current version information including release date
    """
    return VersionResponse(version=__version__, release_date=__release_date__)


@router.get("/locales", response_model=LocalesResponse)
async def get_locales():
    """List the supported locales with their display names."""
    classifier = link_validation_service.classifier
    return LocalesResponse(neutral=classifier.neutral, supported=classifier.supported_locales())
