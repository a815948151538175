"""Classifier — decides whether one record should be removed.

Rules run in a fixed order and the first one that fires wins, so the
reason reported for a record always comes from the most specific rule:

    1. missing domain/service       -> keep (invalid input)
    2. yandex anywhere              -> remove
    3. domain starts with "ru."     -> remove
    4. "Ru" language marker in name -> remove
    5. russian locale in URL        -> remove
    6. russian in service name      -> remove
    7. russian language tag         -> remove
    8. russian translation URL      -> remove
    9. caller's forbidden patterns  -> remove
"""

from __future__ import annotations
import re
from collections.abc import Sequence

from .types import Classification

DEFAULT_FORBIDDEN_PATTERNS: tuple[str, ...] = (
    ".ru",
    "russia",
    "russian",
    "russisch",
    "-russian",
    "yandex",
)

# Word boundaries are ASCII-only: a Cyrillic or accented letter next to
# "ru" still counts as a boundary
_BOUNDARY_FLAGS = re.IGNORECASE | re.ASCII

_SERVICE_RU_WORD = re.compile(r"\bRu\b", _BOUNDARY_FLAGS)
_SERVICE_RU_PAREN = re.compile(r"\(ru\b", _BOUNDARY_FLAGS)

_URL_LANG_PARAMS = ("hl=ru", "lang=ru", "#ru/", "/ru/", "language=ru")
_URL_LANG_PATH = re.compile(r"[#/]ru[/-]")
_URL_TRANSLATION_WORDS = ("russian", "russe", "russisch")
_URL_RUSSIAN_WORDS = ("-russian", "russian-", "/russian/", "russisch")

_RU_TAGS = frozenset({"ru", "ritru", "enru", "ruen", "frru", "deru"})
_TAG_PAIR = re.compile(r"[a-z]{2}ru")


def is_standalone_match(text: str, pattern: str) -> bool:
    """Case-insensitive match whose strictness scales with pattern length.

    Up to 2 chars the pattern must be a whole word, so "ru" never hits
    "rutgers".  From 3 to 5 chars one word boundary on either side is
    enough.  Longer patterns match on plain containment.
    """
    escaped = re.escape(pattern)
    if len(pattern) <= 2:
        return re.search(rf"\b{escaped}\b", text, _BOUNDARY_FLAGS) is not None
    if len(pattern) <= 5:
        return re.search(rf"\b{escaped}|{escaped}\b", text, _BOUNDARY_FLAGS) is not None
    return pattern.lower() in text.lower()


def should_remove_item(
    domain: str | None,
    service: str | None,
    url: str | None = None,
    tag: str | None = None,
    forbidden_patterns: Sequence[str] = DEFAULT_FORBIDDEN_PATTERNS,
) -> Classification:
    """Classify one record by its domain, service, url and tag."""
    if domain is None or service is None:
        return Classification(False, "Invalid input: domain or service is missing")

    domain_lower = domain.lower()
    service_lower = service.lower()
    url_lower = url.lower() if url else None

    if "yandex" in domain_lower or "yandex" in service_lower or (url_lower and "yandex" in url_lower):
        return Classification(True, f'Contains yandex service: "{service}"')

    if domain_lower.startswith("ru."):
        return Classification(True, f'Domain starts with "ru.": "{domain}"')

    if (
        _SERVICE_RU_WORD.search(service)
        or _SERVICE_RU_PAREN.search(service)
        or service_lower.endswith(" ru")
    ):
        return Classification(True, f'Service name contains russian language indicator: "{service}"')

    if url_lower:
        if any(p in url_lower for p in _URL_LANG_PARAMS) or _URL_LANG_PATH.search(url_lower):
            return Classification(True, f'URL contains russian language parameter: "{url}"')

    # Script and German spellings are matched case-sensitively
    if (
        "Russisch" in service
        or "Русск" in service
        or "russian" in service_lower
        or "-russ" in service_lower
    ):
        return Classification(True, f'Service contains russian language reference: "{service}"')

    if tag:
        if tag in _RU_TAGS or (tag.endswith("ru") and len(tag) <= 5 and _TAG_PAIR.search(tag)):
            return Classification(True, f'Tag contains russian language code: "{tag}"')

    if url_lower:
        if "/translation/" in url_lower and any(w in url_lower for w in _URL_TRANSLATION_WORDS):
            return Classification(True, f'URL contains russian translation service: "{url}"')
        if any(w in url_lower for w in _URL_RUSSIAN_WORDS):
            return Classification(True, f'URL contains russian language reference: "{url}"')

    for pattern in forbidden_patterns:
        pattern_lower = pattern.lower()

        if pattern.startswith(".") and len(pattern) > 1:
            # TLD: the suffix must be the domain's last dot-segment
            if (
                domain_lower.endswith(pattern_lower)
                and domain_lower.rfind(".") == len(domain_lower) - len(pattern_lower)
            ):
                return Classification(True, f"Domain has TLD {pattern}")
            if pattern_lower in service_lower:
                return Classification(True, f"Service contains TLD {pattern}")
            if url_lower and pattern_lower in url_lower:
                return Classification(True, f"URL contains TLD {pattern}")
            continue

        if is_standalone_match(domain_lower, pattern_lower):
            return Classification(True, f'Domain contains "{pattern}" as standalone term')
        if is_standalone_match(service_lower, pattern_lower):
            return Classification(True, f'Service contains "{pattern}" as standalone term')
        if url_lower and is_standalone_match(url_lower, pattern_lower):
            return Classification(True, f'URL contains "{pattern}" as standalone term')

    return Classification(False)
