"""
Profile record → README markdown.

The README is a fixed sequence of sections. Each section has a predicate
deciding whether it appears and a builder producing its lines; a section
that appears is followed by exactly one blank line, one that doesn't leaves
no trace.
"""

from __future__ import annotations
from typing import Callable, List, Tuple

from readme_studio.badges import (
    skill_badge,
    social_badge,
    stats_card_url,
    top_langs_url,
)
from readme_studio.profile import SOCIAL_SERVICES, ProfileRecord

Section = Tuple[Callable[[ProfileRecord], bool], Callable[[ProfileRecord], List[str]]]


# ───────────────────────────────────────── builders ──
def _greeting(p: ProfileRecord) -> List[str]:
    github = p.socials.github
    if p.name and github:
        return [f"# Hi there! 👋 I'm {p.name} (@{github})"]
    if p.name:
        return [f"# Hi there! 👋 I'm {p.name}"]
    return [f"# Hi there! 👋 I'm @{github}"]


def _title(p: ProfileRecord) -> List[str]:
    return [f"## {p.title}"]


def _bio(p: ProfileRecord) -> List[str]:
    return [p.bio]


def _tech_stack(p: ProfileRecord) -> List[str]:
    return ["### 🛠️ Tech Stack", "", " ".join(skill_badge(s) for s in p.skills)]


def _projects(p: ProfileRecord) -> List[str]:
    lines = ["### 🚀 Featured Projects", ""]
    for project in p.projects:
        if not project.name:
            continue
        lines.append(f"- **[{project.name}]({project.link or '#'})** - {project.description}")
    return lines


def _connect(p: ProfileRecord) -> List[str]:
    lines = ["### 🔗 Connect with me", ""]
    for service in SOCIAL_SERVICES:
        if value := getattr(p.socials, service):
            lines.append(social_badge(service, value))
    return lines


def _stats(p: ProfileRecord) -> List[str]:
    github = p.socials.github
    return [
        "### 📊 GitHub Stats",
        "",
        f"![GitHub Stats]({stats_card_url(github)})",
        "",
        f"![Top Languages]({top_langs_url(github)})",
    ]


SECTIONS: List[Section] = [
    (lambda p: bool(p.name or p.socials.github), _greeting),
    (lambda p: bool(p.title), _title),
    (lambda p: bool(p.bio), _bio),
    (lambda p: bool(p.skills), _tech_stack),
    (lambda p: bool(p.projects), _projects),
    (lambda p: p.socials.has_any(), _connect),
    (lambda p: bool(p.show_stats and p.socials.github), _stats),
]


def compose(profile: ProfileRecord) -> str:
    """Build the README markdown for *profile*. An empty profile gives ""."""
    out = []
    for applies, build in SECTIONS:
        if applies(profile):
            out.append("\n".join(build(profile)) + "\n\n")
    return "".join(out)
