"""Locale bundle generation endpoint."""

from typing import Any, Dict

from fastapi import APIRouter

from infrastructure.models import APIResponse
from infrastructure.services import ProjectConfigDep, TranslationStoreDep
from modules.translations.generator import generate_translation_sets

router = APIRouter(tags=["Generation"])


@router.post("/generate")
def generate(
    store: TranslationStoreDep, config: ProjectConfigDep
) -> APIResponse[Dict[str, Any]]:
    """Write ``<destination>/<lang>.json`` for every configured set."""
    files = generate_translation_sets(config, store)
    return APIResponse(
        success=True,
        data={"files": [item.to_dict() for item in files]},
        message=f"Generated {len(files)} translation files",
    )
