"""Codebase scanning endpoints."""

from typing import Any, Dict, Optional

from fastapi import APIRouter

from infrastructure.models import APIResponse
from infrastructure.services import ProjectConfigDep, TranslationStoreDep
from modules.translations.extractor import check_unused_keys, extract_from_codebase
from modules.translations.schemas import ScanRequest

router = APIRouter(prefix="/extract", tags=["Extraction"])


@router.post("")
def extract(
    store: TranslationStoreDep,
    config: ProjectConfigDep,
    body: Optional[ScanRequest] = None,
) -> APIResponse[Dict[str, Any]]:
    """Scan the source tree and register every key not yet in the store."""
    patterns = body.patterns if body else None
    summary = extract_from_codebase(config, store, patterns)
    return APIResponse(
        success=True,
        data={
            "extracted": [item.to_dict() for item in summary.extracted],
            "added": summary.added,
            "existing": summary.existing,
        },
        message=f"Added {summary.added} new keys",
    )


@router.post("/check-unused")
def check_unused(
    store: TranslationStoreDep,
    config: ProjectConfigDep,
    body: Optional[ScanRequest] = None,
) -> APIResponse[Dict[str, Any]]:
    """Rescan the source tree and record which stored keys are no longer used."""
    patterns = body.patterns if body else None
    report = check_unused_keys(config, store, patterns)
    return APIResponse(
        success=True,
        data={
            "unusedKeys": report.unused_keys,
            "usedCount": len(report.used_keys),
            "totalKeys": report.total_keys,
        },
        message=f"Found {len(report.unused_keys)} unused keys",
    )
