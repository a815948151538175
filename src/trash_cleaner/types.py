"""Core types."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Record:
    """A single record found in the source text."""
    command: str | None    # "c" field, optional
    domain: str
    service: str
    url: str | None
    tag: str | None
    start: int             # offset into the original text
    end: int               # exclusive, includes the trailing "},"


@dataclass(frozen=True, slots=True)
class Classification:
    """Keep/remove decision for one record."""
    should_remove: bool
    reason: str | None = None


@dataclass(frozen=True, slots=True)
class RemovedItem:
    """What the report shows for a removed record."""
    service: str
    domain: str
    url: str | None = None
    tag: str | None = None
    reason: str | None = None


@dataclass(frozen=True, slots=True)
class ProcessResult:
    """Result of cleaning one source text."""
    modified_content: str
    removed_count: int
    total_count: int
    removed_items: tuple[RemovedItem, ...] = ()
