"""Status classification, filtering and ordering of translation keys.

``classify_status`` is a pure function over one entry and the language
configuration. The threshold between ``complete`` and ``partial`` is an
explicit parameter: ``complete_max_absent`` is the largest number of absent
non-master languages a key may have and still be ``complete``. It defaults
to ``DEFAULT_COMPLETE_MAX_ABSENT`` (one), matching how the editing UI has
always labelled keys.
"""

from enum import Enum
from typing import Callable, Iterable, List, Optional, Sequence

from modules.translations.models import (
    KeyStatus,
    StatusSummary,
    TranslationEntry,
    TranslationsData,
    TranslationStatus,
)

DEFAULT_COMPLETE_MAX_ABSENT = 1


class StatusFilter(str, Enum):
    """Filters available on key listings."""

    ALL = "all"
    MISSING = "missing"
    PARTIAL = "partial"
    PENDING = "pending"
    COMPLETE = "complete"
    UNUSED = "unused"


def count_absent(
    entry: TranslationEntry, master_language: str, languages: Sequence[str]
) -> int:
    """Number of non-master languages without a value."""
    return sum(
        1
        for language in languages
        if language != master_language and entry.get(language) is None
    )


def classify_status(
    entry: TranslationEntry,
    master_language: str,
    languages: Sequence[str],
    complete_max_absent: int = DEFAULT_COMPLETE_MAX_ABSENT,
) -> TranslationStatus:
    """Derive the completeness status of one entry.

    Args:
        entry: Per-language values of a key.
        master_language: The master language (never counted).
        languages: Every configured language.
        complete_max_absent: Largest absent count still classified complete.

    Returns:
        ``MISSING`` when every non-master language is absent, ``PARTIAL``
        when more than ``complete_max_absent`` are absent, ``COMPLETE``
        otherwise. A configuration without target languages is complete.
    """
    targets = [language for language in languages if language != master_language]
    absent = count_absent(entry, master_language, languages)

    if targets and absent == len(targets):
        return TranslationStatus.MISSING
    if absent > complete_max_absent:
        return TranslationStatus.PARTIAL
    return TranslationStatus.COMPLETE


def build_status_report(
    data: TranslationsData,
    master_language: str,
    languages: Sequence[str],
    classify_group: Callable[[str], str],
    complete_max_absent: int = DEFAULT_COMPLETE_MAX_ABSENT,
) -> List[KeyStatus]:
    """Compute a ``KeyStatus`` for every key, in store order."""
    pending_keys = set()
    for identifier in data.pending_approval:
        pending_keys.add(identifier.partition(":")[2])
    unused = set(data.unused_keys)

    return [
        KeyStatus(
            key=key,
            translations=entry,
            status=classify_status(
                entry, master_language, languages, complete_max_absent
            ),
            group=classify_group(key),
            pending=key in pending_keys,
            unused=key in unused,
        )
        for key, entry in data.translations.items()
    ]


def _matches_search(item: KeyStatus, query: str) -> bool:
    if query in item.key.lower():
        return True
    return any(value and query in value.lower() for value in item.translations.values())


def _matches_filter(item: KeyStatus, status_filter: StatusFilter) -> bool:
    if status_filter is StatusFilter.UNUSED:
        return item.unused
    if status_filter is StatusFilter.PENDING:
        return item.pending
    if status_filter is StatusFilter.MISSING:
        return item.status is TranslationStatus.MISSING
    if status_filter is StatusFilter.PARTIAL:
        return item.status is TranslationStatus.PARTIAL
    if status_filter is StatusFilter.COMPLETE:
        return item.status is TranslationStatus.COMPLETE and not item.pending
    return True


def filter_statuses(
    items: Iterable[KeyStatus],
    status_filter: StatusFilter = StatusFilter.ALL,
    search: Optional[str] = None,
) -> List[KeyStatus]:
    """Apply a case-insensitive text search and a status filter.

    The search matches keys and any language value. ``COMPLETE`` excludes
    keys that still have values awaiting approval.
    """
    query = (search or "").strip().lower()
    return [
        item
        for item in items
        if (not query or _matches_search(item, query))
        and _matches_filter(item, status_filter)
    ]


def _sort_rank(item: KeyStatus) -> int:
    if item.status is TranslationStatus.MISSING:
        return 0
    if item.status is TranslationStatus.PARTIAL:
        return 1
    if item.pending:
        return 2
    return 3


def sort_statuses(items: Iterable[KeyStatus]) -> List[KeyStatus]:
    """Order missing, then partial, then pending, then complete (stable)."""
    return sorted(items, key=_sort_rank)


def summarize(items: Sequence[KeyStatus]) -> StatusSummary:
    """Count keys per status, plus pending and unused keys."""
    summary = StatusSummary(total=len(items))
    for item in items:
        if item.status is TranslationStatus.COMPLETE:
            summary.complete += 1
        elif item.status is TranslationStatus.PARTIAL:
            summary.partial += 1
        else:
            summary.missing += 1
        if item.pending:
            summary.pending += 1
        if item.unused:
            summary.unused += 1
    return summary
