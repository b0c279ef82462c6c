"""
Badge and stats-card URLs used in the generated README.

Skill badges are served by shields.io, stats cards by github-readme-stats.
"""

from __future__ import annotations
from typing import Dict

from readme_studio.cleaner import encode_component, logo_slug

SHIELDS_URL = "https://img.shields.io/badge"
STATS_URL = "https://github-readme-stats.vercel.app/api"
STREAK_URL = "https://github-readme-streak-stats.herokuapp.com/"
TROPHY_URL = "https://github-profile-trophy.vercel.app/"

SKILL_BADGE_COLOR = "05122A"

# card theme the composed README always uses
README_STATS_THEME = "radical"

# service → (alt text, badge colour, simple-icons logo, profile url template)
SOCIAL_BADGES = {
    "github":    ("GitHub",   "181717", "github",   "https://github.com/{}"),
    "linkedin":  ("LinkedIn", "0077B5", "linkedin", "https://linkedin.com/in/{}"),
    "twitter":   ("Twitter",  "1DA1F2", "twitter",  "https://twitter.com/{}"),
    "portfolio": ("Portfolio", "FF7139", "firefox", "{}"),
}

# preview theme → card theme
_STATS_THEMES = {
    "dark": "dark",
    "light": "default",
    "neon": "radical",
    "gradient": "tokyonight",
}
_TROPHY_THEMES = {
    "dark": "darkhub",
    "light": "flat",
    "neon": "radical",
    "gradient": "monokai",
}


def skill_badge(skill: str) -> str:
    url = (
        f"{SHIELDS_URL}/-{encode_component(skill)}-{SKILL_BADGE_COLOR}"
        f"?style=flat&logo={logo_slug(skill)}"
    )
    return f"![{skill}]({url})"


def social_badge(service: str, value: str) -> str:
    alt, color, logo, profile_url = SOCIAL_BADGES[service]
    label = "Portfolio" if service == "portfolio" else f"@{value}"
    badge = f"{SHIELDS_URL}/{label}-{color}?style=for-the-badge&logo={logo}&logoColor=white"
    return f"[![{alt}]({badge})]({profile_url.format(value)})"


def stats_card_url(username: str, card_theme: str = README_STATS_THEME) -> str:
    return f"{STATS_URL}?username={username}&show_icons=true&theme={card_theme}"


def top_langs_url(username: str, card_theme: str = README_STATS_THEME) -> str:
    return f"{STATS_URL}/top-langs/?username={username}&layout=compact&theme={card_theme}"


def stats_urls(username: str, theme: str = "dark") -> Dict[str, str]:
    """Stats, top-languages and streak card URLs matching a preview theme."""
    card_theme = _STATS_THEMES.get(theme, "dark")
    return {
        "stats": stats_card_url(username, card_theme),
        "top_langs": top_langs_url(username, card_theme),
        "streak": f"{STREAK_URL}?user={username}&theme={card_theme}",
    }


def trophy_url(username: str, theme: str = "dark") -> str:
    card_theme = _TROPHY_THEMES.get(theme, "darkhub")
    return f"{TROPHY_URL}?username={username}&theme={card_theme}&no-frame=true&margin-w=4"
