"""API request schemas using Pydantic.

Request bodies accepted by the translations API. Internal structures live
in ``models.py`` as dataclasses; these schemas only validate input.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from modules.translations.models import TranslationEntry


class UpdateValueRequest(BaseModel):
    """Set one language value of a key. ``None`` or ``""`` clears it."""

    language: str = Field(..., min_length=1)
    value: Optional[str] = None


class ApproveRequest(BaseModel):
    """Approve the AI-written value of one language."""

    language: str = Field(..., min_length=1)


class ReplaceTranslationsRequest(BaseModel):
    """Replace the whole translations mapping."""

    translations: Dict[str, TranslationEntry]


class ScanRequest(BaseModel):
    """Optional glob patterns overriding the project's source patterns."""

    patterns: Optional[List[str]] = None


class TranslateRequest(BaseModel):
    """Translate missing values, optionally restricted to some keys."""

    keys: Optional[List[str]] = None


class TranslateSingleRequest(BaseModel):
    """Translate one value of one key."""

    key: str = Field(..., min_length=1)
    language: str = Field(..., min_length=1)
