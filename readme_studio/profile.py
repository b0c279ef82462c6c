"""
Profile record and its edit operations.

Records are frozen; every operation returns a new snapshot so the shell can
hand the current record to the composer without it changing underneath.
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Any, Dict

from readme_studio.cleaner import clean_skill

SOCIAL_SERVICES = ("github", "linkedin", "twitter", "portfolio")
PROJECT_FIELDS = ("name", "description", "link")


@dataclass(frozen=True)
class Socials:
    github: str | None = None
    linkedin: str | None = None
    twitter: str | None = None
    portfolio: str | None = None

    def has_any(self) -> bool:
        return any(getattr(self, s) for s in SOCIAL_SERVICES)


@dataclass(frozen=True)
class Project:
    name: str = ""
    description: str = ""
    link: str = ""


@dataclass(frozen=True)
class ProfileRecord:
    name: str = ""
    title: str = ""
    bio: str = ""
    skills: tuple[str, ...] = ()
    socials: Socials = field(default_factory=Socials)
    projects: tuple[Project, ...] = ()
    show_stats: bool = False
    show_badges: bool = False


def empty_profile() -> ProfileRecord:
    """Record a new session starts with: nothing filled in, both toggles on."""
    return ProfileRecord(show_stats=True, show_badges=True)


# ───────────────────────────────────────── skills ──
def add_skill(profile: ProfileRecord, skill: str) -> ProfileRecord:
    skill = clean_skill(skill)
    if not skill or skill in profile.skills:
        return profile
    return replace(profile, skills=profile.skills + (skill,))


def remove_skill(profile: ProfileRecord, skill: str) -> ProfileRecord:
    return replace(profile, skills=tuple(s for s in profile.skills if s != skill))


# ───────────────────────────────────────── projects ──
def add_project(profile: ProfileRecord) -> ProfileRecord:
    return replace(profile, projects=profile.projects + (Project(),))


def update_project(profile: ProfileRecord, index: int, field_name: str, value: str) -> ProfileRecord:
    if field_name not in PROJECT_FIELDS:
        raise ValueError(f"Unknown project field: {field_name}")
    if not 0 <= index < len(profile.projects):
        raise IndexError(f"No project at index {index}")
    projects = list(profile.projects)
    projects[index] = replace(projects[index], **{field_name: value})
    return replace(profile, projects=tuple(projects))


def remove_project(profile: ProfileRecord, index: int) -> ProfileRecord:
    if not 0 <= index < len(profile.projects):
        raise IndexError(f"No project at index {index}")
    return replace(profile, projects=profile.projects[:index] + profile.projects[index + 1:])


# ───────────────────────────────────────── socials ──
def set_social(profile: ProfileRecord, service: str, value: str | None) -> ProfileRecord:
    if service not in SOCIAL_SERVICES:
        raise ValueError(f"Unknown social service: {service}")
    return replace(profile, socials=replace(profile.socials, **{service: value or None}))


# ───────────────────────────────────────── dict shape ──
def profile_from_dict(data: Dict[str, Any]) -> ProfileRecord:
    """Build a record from the camelCase dict shape used by templates."""
    skills: list[str] = []
    for s in data.get("skills", []):
        if s and s not in skills:
            skills.append(s)
    socials = data.get("socials", {}) or {}
    return ProfileRecord(
        name=data.get("name", "") or "",
        title=data.get("title", "") or "",
        bio=data.get("bio", "") or "",
        skills=tuple(skills),
        socials=Socials(**{s: socials.get(s) or None for s in SOCIAL_SERVICES}),
        projects=tuple(
            Project(
                name=p.get("name", "") or "",
                description=p.get("description", "") or "",
                link=p.get("link", "") or "",
            )
            for p in data.get("projects", [])
        ),
        show_stats=bool(data.get("showStats", False)),
        show_badges=bool(data.get("showBadges", False)),
    )
