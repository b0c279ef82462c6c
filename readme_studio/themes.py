"""Preview colour palettes."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class Palette:
    background: str
    text: str
    heading: str
    link: str


THEMES: Dict[str, Palette] = {
    "dark": Palette(
        background="#161B22",
        text="#E5E7EB",
        heading="#FFFFFF",
        link="#58A6FF",
    ),
    "light": Palette(
        background="#FFFFFF",
        text="#1F2937",
        heading="#111827",
        link="#2563EB",
    ),
    "neon": Palette(
        background="#0A0E27",
        text="#CFFAFE",
        heading="#22D3EE",
        link="#F472B6",
    ),
    "gradient": Palette(
        background="linear-gradient(135deg, rgba(88, 28, 135, 0.3), rgba(131, 24, 67, 0.3))",
        text="#F3E8FF",
        heading="#E879F9",
        link="#C084FC",
    ),
}

THEME_LABELS = {
    "dark": "🌙 Dark",
    "light": "☀️ Light",
    "neon": "⚡ Neon",
    "gradient": "✨ Gradient",
}

DEFAULT_THEME = "dark"


def get_palette(theme: str | None) -> Palette:
    """Palette for *theme*; unknown names fall back to dark."""
    return THEMES.get(theme or DEFAULT_THEME, THEMES[DEFAULT_THEME])
