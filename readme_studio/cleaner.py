"""
Shared text clean-ups for form input and badge URLs.
"""
from __future__ import annotations
import re, unicodedata
from typing import List
from urllib.parse import quote

_PLUSPLUS = re.compile(r"\+\+")
_PLUS     = re.compile(r"\+")
_SPACE    = re.compile(r"\s+")

# characters encodeURIComponent leaves alone besides alphanumerics
_URI_COMPONENT_SAFE = "-_.!~*'()"


# ───────────────────────────────────────── form input ──
def clean_skill(raw: str) -> str:
    return unicodedata.normalize("NFKC", raw or "").strip()

def smart_split(text: str) -> List[str]:
    """Split a comma separated skills entry; spaces inside a skill are kept."""
    return [s for s in (clean_skill(x) for x in (text or "").split(",")) if s]


# ───────────────────────────────────────── badge urls ──
def encode_component(text: str) -> str:
    """Percent-encode text for a single URL path segment or query value."""
    return quote(text, safe=_URI_COMPONENT_SAFE)

def logo_slug(skill: str) -> str:
    """
    Simple Icons slug for a skill name.

    "C++" → "cplusplus", "Node.js" → "node.js"; characters such as "#" are
    left for URL encoding to deal with.
    """
    slug = _PLUSPLUS.sub("plusplus", skill)
    slug = _PLUS.sub("plus", slug)
    return _SPACE.sub("", slug).lower()
