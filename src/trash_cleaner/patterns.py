"""Record scanner — finds bang-shaped object literals in source text.

A record looks like:

    { c: "Tech", d: "doc.rust-lang.org", r: 67, s: "Rust Docs", sc: "Docs" },

``d`` and ``s`` are required and appear in that order, ``c`` may lead
the record.  ``u`` and ``t`` are optional and only captured where the
lazy filler reaches them first, i.e. directly after the service value
(or the url value, for ``t``).  Anything else is opaque filler.

This is a textual matcher, not a parser: filler containing ``},`` ends
the record early.
"""

from __future__ import annotations
import re

from .types import Record

_RECORD = re.compile(
    r'\{\s*(?:c:\s*"(?P<command>[^"]+)",\s*)?'
    r'd:\s*"(?P<domain>[^"]+)",'
    r'.*?s:\s*"(?P<service>[^"]+)"'
    r'.*?(?:u:\s*"(?P<url>[^"]+)")?'
    r'.*?(?:t:\s*"(?P<tag>[^"]+)")?'
    r'.*?\},',
    re.DOTALL,
)


def scan_records(text: str) -> list[Record]:
    """Return every record in text, left to right, with original offsets."""
    return [
        Record(
            command=m.group("command"),
            domain=m.group("domain"),
            service=m.group("service"),
            url=m.group("url"),
            tag=m.group("tag"),
            start=m.start(),
            end=m.end(),
        )
        for m in _RECORD.finditer(text)
    ]
