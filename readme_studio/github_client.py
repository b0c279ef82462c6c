"""
GitHub client abstraction used to pre-fill a profile.

This module provides a small interface over the public GitHub REST API so the
rest of the application only deals with `GitHubUser` / `RepoSummary` values
and a couple of exceptions, never with HTTP responses.
"""

from __future__ import annotations
import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List

import requests

from readme_studio import config

log = logging.getLogger(__name__)

_USERNAME_RE = re.compile(r"^[a-z0-9](?:[a-z0-9]|-(?=[a-z0-9])){0,38}$", re.I)


def is_valid_username(username: str) -> bool:
    """
    GitHub usernames: 1-39 alphanumerics or hyphens, no leading or
    trailing hyphen.
    """
    return bool(_USERNAME_RE.fullmatch(username or ""))


class GitHubError(Exception):
    """Base class for failures talking to GitHub."""


class UserNotFound(GitHubError):
    """The API answered 404 for the requested user."""


class TransportError(GitHubError):
    """Network failure, unexpected status or unreadable body."""


@dataclass(frozen=True)
class GitHubUser:
    login: str
    name: str | None = None
    bio: str | None = None
    blog: str | None = None
    twitter_username: str | None = None


@dataclass(frozen=True)
class RepoSummary:
    name: str
    description: str | None
    html_url: str
    fork: bool = False


class ProfileSource(ABC):
    """Abstract base class for anything that can look up GitHub users."""

    @abstractmethod
    def fetch_user(self, username: str) -> GitHubUser:
        """Return the user or raise `UserNotFound` / `TransportError`."""

    @abstractmethod
    def fetch_repos(self, username: str, limit: int = 6) -> List[RepoSummary]:
        """Return up to *limit* non-fork repositories, [] on any failure."""


class GitHubClient(ProfileSource):
    """REST implementation backed by a `requests.Session`."""

    def __init__(
        self,
        base_url: str | None = None,
        token: str | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ):
        self.base_url = (base_url or config.GITHUB_API_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else config.HTTP_TIMEOUT
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/vnd.github+json"})
        token = token or config.GITHUB_TOKEN
        if token:
            self.session.headers["Authorization"] = f"Bearer {token}"

    def _get(self, path: str, params: Dict[str, Any] | None = None) -> Any:
        url = f"{self.base_url}{path}"
        try:
            rsp = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(f"Request to {url} failed: {e}") from e

        if rsp.status_code == 404:
            raise UserNotFound(f"Not found: {url}")
        if not rsp.ok:
            if rsp.status_code == 403 and rsp.headers.get("X-RateLimit-Remaining") == "0":
                log.warning("GitHub rate limit reached; set GITHUB_TOKEN to raise it")
            raise TransportError(f"GitHub answered {rsp.status_code} for {url}")
        try:
            return rsp.json()
        except ValueError as e:
            raise TransportError(f"Malformed JSON from {url}") from e

    def fetch_user(self, username: str) -> GitHubUser:
        data = self._get(f"/users/{username}")
        if not isinstance(data, dict) or not data.get("login"):
            raise TransportError(f"Unexpected user payload for {username!r}")
        return GitHubUser(
            login=data["login"],
            name=data.get("name"),
            bio=data.get("bio"),
            blog=data.get("blog"),
            twitter_username=data.get("twitter_username"),
        )

    def fetch_repos(self, username: str, limit: int = 6) -> List[RepoSummary]:
        try:
            data = self._get(
                f"/users/{username}/repos",
                params={"sort": "stars", "per_page": limit},
            )
            repos = [
                RepoSummary(
                    name=r["name"],
                    description=r.get("description"),
                    html_url=r["html_url"],
                    fork=bool(r.get("fork", False)),
                )
                for r in data
            ]
        except (GitHubError, KeyError, TypeError) as e:
            log.warning("Could not fetch repositories for %s: %s", username, e)
            return []
        return [r for r in repos if not r.fork]


def get_github_client() -> ProfileSource:
    """Factory function returning a client built from configuration."""
    return GitHubClient()


# Create a global client instance
_github_client = None

def default_client() -> ProfileSource:
    """Shared client, created on first use."""
    global _github_client
    if _github_client is None:
        _github_client = get_github_client()
    return _github_client
