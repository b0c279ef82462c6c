"""
Fill a profile from a public GitHub account.

Only empty fields are filled: anything the user already typed wins. Projects
are taken from the user's top repositories when the profile has none yet;
a failing repository lookup just means no projects.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, replace

from readme_studio.github_client import (
    ProfileSource,
    TransportError,
    UserNotFound,
    is_valid_username,
)
from readme_studio.profile import ProfileRecord, Project

log = logging.getLogger(__name__)

OK = "ok"
MISSING_INPUT = "missing_input"
INVALID_USERNAME = "invalid_username"
NOT_FOUND = "not_found"
FAILED = "failed"


@dataclass(frozen=True)
class FetchOutcome:
    status: str
    profile: ProfileRecord
    message: str

    @property
    def ok(self) -> bool:
        return self.status == OK


def _fill(current: str | None, fetched: str | None) -> str | None:
    return current or fetched or None


def fill_from_github(
    profile: ProfileRecord,
    username: str,
    source: ProfileSource,
    repo_limit: int = 3,
) -> FetchOutcome:
    """Look *username* up and merge what GitHub knows into *profile*."""
    username = (username or "").strip()
    if not username:
        return FetchOutcome(MISSING_INPUT, profile, "Please enter a GitHub username")
    if not is_valid_username(username):
        return FetchOutcome(INVALID_USERNAME, profile, "Invalid GitHub username format")

    try:
        user = source.fetch_user(username)
    except UserNotFound:
        log.info("GitHub user %s not found", username)
        return FetchOutcome(NOT_FOUND, profile, "GitHub user not found")
    except TransportError as e:
        log.warning("GitHub lookup for %s failed: %s", username, e)
        return FetchOutcome(FAILED, profile, "Failed to fetch GitHub data")

    socials = replace(
        profile.socials,
        github=_fill(profile.socials.github, user.login),
        twitter=_fill(profile.socials.twitter, user.twitter_username),
        portfolio=_fill(profile.socials.portfolio, user.blog),
    )
    merged = replace(
        profile,
        name=profile.name or user.name or "",
        bio=profile.bio or user.bio or "",
        socials=socials,
    )

    if not merged.projects:
        repos = source.fetch_repos(username, repo_limit)
        if repos:
            merged = replace(
                merged,
                projects=tuple(
                    Project(name=r.name, description=r.description or "", link=r.html_url)
                    for r in repos
                ),
            )

    return FetchOutcome(OK, merged, f"GitHub profile loaded: {user.login}")
