"""AI translation endpoints."""

from typing import Any, Dict, Optional

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from api.dependencies.translation_client import TranslationClientDep
from infrastructure.models import APIResponse, ErrorResponse
from infrastructure.services import ProjectConfigDep, SettingsDep, TranslationStoreDep
from modules.translations.schemas import TranslateRequest, TranslateSingleRequest
from modules.translations.translator import (
    translate_missing_strings,
    translate_single_string,
)

router = APIRouter(prefix="/translate", tags=["AI Translation"])


@router.post("")
def translate_missing(
    store: TranslationStoreDep,
    config: ProjectConfigDep,
    settings: SettingsDep,
    client: TranslationClientDep,
    body: Optional[TranslateRequest] = None,
) -> APIResponse[Dict[str, Any]]:
    """Fill every absent value with an AI translation pending approval."""
    results = translate_missing_strings(
        config,
        store,
        client,
        keys=body.keys if body else None,
        batch_size=settings.openai.BATCH_SIZE,
    )
    return APIResponse(
        success=True,
        data={
            "translatedCount": len(results),
            "translations": [item.to_dict() for item in results],
        },
        message=f"Translated {len(results)} strings",
    )


@router.post("/single", response_model=None)
def translate_single(
    body: TranslateSingleRequest,
    store: TranslationStoreDep,
    config: ProjectConfigDep,
    client: TranslationClientDep,
) -> APIResponse[Dict[str, Any]] | JSONResponse:
    """Translate one value of one key."""
    result = translate_single_string(config, store, client, body.key, body.language)
    if not result.is_success:
        status_code = 429 if result.error_code == "RATE_LIMITED" else 502
        headers = (
            {"Retry-After": str(result.retry_after)} if result.retry_after else None
        )
        return JSONResponse(
            status_code=status_code,
            content=ErrorResponse(
                error=result.message,
                error_code=result.error_code or "TRANSLATION_FAILED",
            ).model_dump(),
            headers=headers,
        )
    return APIResponse(success=True, data=result.data.to_dict())
