"""Translation listing and editing endpoints."""

from typing import Any, Dict, Optional

from fastapi import APIRouter

from infrastructure.logging import get_module_logger
from infrastructure.models import APIResponse
from infrastructure.services import ProjectConfigDep, TranslationStoreDep
from modules.translations.config import ProjectConfig
from modules.translations.models import TranslationsData
from modules.translations.schemas import (
    ApproveRequest,
    ReplaceTranslationsRequest,
    UpdateValueRequest,
)
from modules.translations.status import (
    StatusFilter,
    build_status_report,
    filter_statuses,
    sort_statuses,
    summarize,
)

logger = get_module_logger()
router = APIRouter(prefix="/translations", tags=["Translations"])


def serialize_document(
    data: TranslationsData,
    config: ProjectConfig,
    status_filter: StatusFilter = StatusFilter.ALL,
    search: Optional[str] = None,
) -> Dict[str, Any]:
    """Shape the store document and its status view for the editing UI."""
    report = build_status_report(
        data,
        config.master_language,
        config.available_languages,
        config.classify,
        config.complete_max_absent,
    )
    document = data.to_dict()
    return {
        **document,
        "groups": {item.key: item.group for item in report},
        "config": {
            "masterLanguage": config.master_language,
            "availableLanguages": config.available_languages,
        },
        "statuses": [
            item.to_dict()
            for item in sort_statuses(filter_statuses(report, status_filter, search))
        ],
        "stats": summarize(report).to_dict(),
    }


@router.get("")
def list_translations(
    store: TranslationStoreDep,
    config: ProjectConfigDep,
    filter: StatusFilter = StatusFilter.ALL,  # pylint: disable=redefined-builtin
    search: Optional[str] = None,
) -> APIResponse[Dict[str, Any]]:
    """List every key with its values, status, group and the overall counts."""
    data = store.read()
    return APIResponse(
        success=True, data=serialize_document(data, config, filter, search)
    )


@router.put("")
def replace_translations(
    body: ReplaceTranslationsRequest,
    store: TranslationStoreDep,
    config: ProjectConfigDep,
) -> APIResponse[Dict[str, Any]]:
    """Replace the whole translations mapping."""
    data = store.replace_translations(body.translations)
    return APIResponse(
        success=True,
        data=serialize_document(data, config),
        message=f"Saved {len(data.translations)} translation keys",
    )


@router.patch("/{key}")
def update_translation(
    key: str, body: UpdateValueRequest, store: TranslationStoreDep
) -> APIResponse[Dict[str, Any]]:
    """Set one language value of a key. Editing a value approves it."""
    data = store.set_value(key, body.language, body.value)
    logger.info("translation_updated", key=key, language=body.language)
    return APIResponse(
        success=True,
        data={"key": key, "translations": data.translations[key]},
    )


@router.post("/{key}/approve")
def approve_translation(
    key: str, body: ApproveRequest, store: TranslationStoreDep
) -> APIResponse[Dict[str, Any]]:
    """Approve one AI-written value of a key."""
    data = store.clear_pending_approval(body.language, key)
    return APIResponse(
        success=True,
        data={"key": key, "pendingApproval": data.pending_for_key(key)},
        message=f"Approved {body.language} translation for {key}",
    )


@router.post("/{key}/approve-all")
def approve_all_translations(
    key: str, store: TranslationStoreDep
) -> APIResponse[Dict[str, Any]]:
    """Approve every AI-written value of a key."""
    approved = store.clear_all_pending_approval_for_key(key)
    return APIResponse(
        success=True,
        data={"key": key, "approvedCount": approved},
        message=f"Approved {approved} translations for {key}",
    )


@router.post("/{key}/clear")
def clear_translations(
    key: str, store: TranslationStoreDep
) -> APIResponse[Dict[str, Any]]:
    """Reset every non-master value of a key."""
    data = store.clear_translations(key)
    logger.info("translations_cleared", key=key)
    return APIResponse(
        success=True,
        data={"key": key, "translations": data.translations[key]},
        message=f"Cleared translations for {key}",
    )
