"""Cleaner — the main API.  Scan records, classify, splice out removals.

Usage:
    from trash_cleaner import Cleaner, CleanerConfig

    cleaner = Cleaner(CleanerConfig(forbidden_patterns=(".ru", "yandex")))
    result = cleaner.clean(source)
    print(f"removed {result.removed_count}/{result.total_count}")
    path.write_text(result.modified_content)

Cleaning never touches the filesystem; reading, backups and writing
belong to the caller (see ``files`` and ``cli``).
"""

from __future__ import annotations
import os
from collections.abc import Sequence
from dataclasses import dataclass

from .classifier import DEFAULT_FORBIDDEN_PATTERNS, should_remove_item
from .log import get_logger
from .patterns import scan_records
from .types import Classification, ProcessResult, RemovedItem

log = get_logger(__name__)

DEFAULT_FILE = os.environ.get("TRASH_CLEANER_FILE", "src/bang.test.ts")

# ECMAScript whitespace set: includes the BOM, excludes \x1c-\x1f and \x85
_BLANK = " \t\n\v\f\r\xa0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"


@dataclass(frozen=True)
class CleanerConfig:
    """Configuration for the Cleaner."""
    forbidden_patterns: tuple[str, ...] = DEFAULT_FORBIDDEN_PATTERNS
    file_path: str = DEFAULT_FILE     # relative to cwd
    create_backup: bool = False       # write <file>.backup before overwriting
    dry_run: bool = False             # report only, never write


class Cleaner:
    """Removes records matching forbidden patterns from source text."""

    def __init__(self, config: CleanerConfig | None = None) -> None:
        self.config = config or CleanerConfig()

    def clean(self, source: str) -> ProcessResult:
        return process_content(source, self.config.forbidden_patterns)


def process_content(source: str, forbidden_patterns: Sequence[str]) -> ProcessResult:
    """Remove every record that matches a forbidden pattern.

    Spans are taken from the original text and spliced out in one pass.
    When nothing is removed the source comes back untouched.
    """
    records = scan_records(source)
    removed: list[RemovedItem] = []
    spans: list[tuple[int, int]] = []

    for record in records:
        result = should_remove_item(
            record.domain, record.service, record.url, record.tag, forbidden_patterns,
        )
        if not result.should_remove and record.command:
            result = _check_command(record.command, forbidden_patterns)

        if result.should_remove:
            spans.append((record.start, record.end))
            removed.append(RemovedItem(
                service=record.service,
                domain=record.domain,
                url=record.url,
                tag=record.tag,
                reason=result.reason,
            ))
            log.debug("record_removed", domain=record.domain, reason=result.reason)

    log.debug("records_scanned", total=len(records), removed=len(removed))

    if not spans:
        return ProcessResult(source, 0, len(records))

    parts: list[str] = []
    cursor = 0
    for start, end in spans:
        parts.append(source[cursor:start])
        cursor = end
    parts.append(source[cursor:])

    return ProcessResult(
        modified_content=remove_blank_lines("".join(parts)),
        removed_count=len(removed),
        total_count=len(records),
        removed_items=tuple(removed),
    )


def remove_blank_lines(content: str) -> str:
    """Drop every line that is empty or whitespace-only."""
    lines = content.split("\n")
    kept = [line for line in lines if line.strip(_BLANK)]
    if len(kept) < len(lines):
        log.debug("blank_lines_removed", count=len(lines) - len(kept))
    return "\n".join(kept)


def _check_command(command: str, forbidden_patterns: Sequence[str]) -> Classification:
    """Raw substring check on the command label, no word boundaries."""
    command_lower = command.lower()
    for pattern in forbidden_patterns:
        if pattern.lower() in command_lower:
            return Classification(True, f'Command "{command}" matches forbidden pattern "{pattern}"')
    return Classification(False)
