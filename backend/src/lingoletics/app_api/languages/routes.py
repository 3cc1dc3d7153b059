"""API routes describing content languages for the current user."""

from typing import List

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from lingoletics.shared.auth import User, get_current_user
from lingoletics.shared.rbac import Language, can_access_language
from lingoletics.shared.rbac.service import get_language_display_name, get_language_flag

router = APIRouter(prefix="/languages", tags=["languages"])


class LanguageResponse(BaseModel):
    language: Language
    display_name: str = Field(..., alias="displayName")
    flag: str
    accessible: bool

    model_config = {"populate_by_name": True}


@router.get("", response_model=List[LanguageResponse])
async def list_languages(user: User = Depends(get_current_user)):
    """Every content language, flagged with whether the user's role can access it."""
    return [
        LanguageResponse(
            language=language,
            display_name=get_language_display_name(language),
            flag=get_language_flag(language),
            accessible=can_access_language(user.role, language),
        )
        for language in Language
    ]
