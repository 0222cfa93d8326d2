"""Key extraction and codebase walking.

``extract_from_text`` applies the call-site scanner to one document,
validates keys, normalizes default values and attaches line numbers.
``walk_codebase`` resolves a file set from glob patterns and ignore rules
and concatenates the per-file results. ``extract_from_codebase`` and
``check_unused_keys`` feed those results into the translation store.

Unreadable source files are not skipped: ``SourceReadError`` propagates so
a scan never silently reports a partial codebase.
"""

import fnmatch
import re
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from infrastructure.logging import get_module_logger
from modules.translations.config import ProjectConfig
from modules.translations.errors import SourceReadError
from modules.translations.models import (
    ExtractedTranslation,
    ExtractionSummary,
    UnusedKeysReport,
    is_valid_key,
)
from modules.translations.scanner import iter_call_sites
from modules.translations.store import TranslationStore

logger = get_module_logger()

DEFAULT_PATTERNS = ("**/*.{ts,tsx,js,jsx}",)
DEFAULT_IGNORE_PATHS = (
    "**/node_modules/**",
    "**/dist/**",
    "**/build/**",
    "**/.git/**",
)

_WHITESPACE = re.compile(r"\s+")
_BRACES = re.compile(r"\{([^{}]*)\}")


def normalize_default_value(value: Optional[str]) -> Optional[str]:
    """Collapse whitespace runs to single spaces and trim.

    An empty result is treated as absent.
    """
    if value is None:
        return None
    normalized = _WHITESPACE.sub(" ", value).strip()
    return normalized or None


def line_number(text: str, offset: int) -> int:
    """1-based line of ``offset``: newlines before it plus one."""
    return text.count("\n", 0, offset) + 1


def extract_from_text(text: str, file: str = "<memory>") -> List[ExtractedTranslation]:
    """Extract every valid ``t(...)`` occurrence from ``text``.

    Args:
        text: Source text to scan.
        file: Path reported as the provenance of each occurrence.

    Returns:
        Occurrences in source order. Keys with characters outside
        ``[A-Za-z0-9_.-]`` are dropped.
    """
    results = []
    for call_site in iter_call_sites(text):
        if not is_valid_key(call_site.key):
            continue
        results.append(
            ExtractedTranslation(
                key=call_site.key,
                default_value=normalize_default_value(call_site.default_value),
                file=file,
                line=line_number(text, call_site.offset),
            )
        )
    return results


def extract_from_file(path: Path) -> List[ExtractedTranslation]:
    """Read ``path`` as UTF-8 and extract its occurrences.

    Raises:
        SourceReadError: If the file cannot be read or decoded.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("source_read_failed", file=str(path), error=str(e))
        raise SourceReadError(str(path), str(e)) from e
    return extract_from_text(text, file=str(path))


def expand_braces(pattern: str) -> List[str]:
    """Expand ``{a,b}`` alternatives, e.g. ``*.{ts,js}`` -> ``*.ts``, ``*.js``."""
    match = _BRACES.search(pattern)
    if match is None:
        return [pattern]
    expanded = []
    for option in match.group(1).split(","):
        candidate = pattern[: match.start()] + option + pattern[match.end() :]
        expanded.extend(expand_braces(candidate))
    return expanded


def is_ignored(relative_path: str, ignore_paths: Iterable[str]) -> bool:
    """Check a POSIX relative path against ignore globs.

    A leading ``**/`` also matches at the root, so ``**/dist/**`` ignores
    ``dist/app.js``.
    """
    for pattern in ignore_paths:
        for candidate in expand_braces(pattern):
            if fnmatch.fnmatchcase(relative_path, candidate):
                return True
            if candidate.startswith("**/") and fnmatch.fnmatchcase(
                relative_path, candidate[3:]
            ):
                return True
    return False


def resolve_files(
    source_root: Path,
    patterns: Optional[Sequence[str]] = None,
    ignore_paths: Optional[Sequence[str]] = None,
) -> List[Path]:
    """Resolve the sorted, de-duplicated list of files to scan."""
    root = Path(source_root)
    patterns = patterns or DEFAULT_PATTERNS
    ignore_paths = DEFAULT_IGNORE_PATHS if ignore_paths is None else ignore_paths

    files = set()
    for pattern in patterns:
        for expanded in expand_braces(pattern):
            for path in root.glob(expanded):
                if not path.is_file():
                    continue
                relative = path.relative_to(root).as_posix()
                if is_ignored(relative, ignore_paths):
                    continue
                files.add(path.resolve())
    return sorted(files)


def walk_codebase(
    source_root: Path,
    patterns: Optional[Sequence[str]] = None,
    ignore_paths: Optional[Sequence[str]] = None,
) -> List[ExtractedTranslation]:
    """Extract occurrences from every matching file under ``source_root``.

    Returns an empty list when no file matches.

    Raises:
        SourceReadError: If any matching file cannot be read.
    """
    files = resolve_files(source_root, patterns, ignore_paths)
    extracted: List[ExtractedTranslation] = []
    for path in files:
        extracted.extend(extract_from_file(path))

    logger.info(
        "codebase_scanned",
        source_root=str(source_root),
        file_count=len(files),
        occurrence_count=len(extracted),
    )
    return extracted


def extract_from_codebase(
    config: ProjectConfig,
    store: TranslationStore,
    patterns: Optional[Sequence[str]] = None,
) -> ExtractionSummary:
    """Scan the project and register every key not yet in the store.

    Args:
        config: Project configuration (source root, ignore list, patterns).
        store: Store receiving new keys.
        patterns: Optional glob patterns overriding ``config.patterns``.

    Returns:
        Every occurrence found plus the number of occurrences that added a
        key and the number that referenced an existing key.
    """
    extracted = walk_codebase(
        config.source_root, patterns or config.patterns, config.ignore_paths
    )
    added, existing = store.register_extracted(extracted)

    logger.info(
        "extraction_completed",
        found=len(extracted),
        added=added,
        existing=existing,
    )
    return ExtractionSummary(extracted=extracted, added=added, existing=existing)


def check_unused_keys(
    config: ProjectConfig,
    store: TranslationStore,
    patterns: Optional[Sequence[str]] = None,
) -> UnusedKeysReport:
    """Rescan the codebase and recompute the store's unused keys."""
    extracted = walk_codebase(
        config.source_root, patterns or config.patterns, config.ignore_paths
    )
    used = list(dict.fromkeys(item.key for item in extracted))
    data = store.recompute_unused_keys(used)

    logger.info(
        "unused_keys_checked",
        total_keys=len(data.translations),
        unused_count=len(data.unused_keys),
    )
    return UnusedKeysReport(
        unused_keys=list(data.unused_keys),
        used_keys=used,
        total_keys=len(data.translations),
    )
