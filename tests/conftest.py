import pytest

from readme_studio.github_client import (
    GitHubUser,
    ProfileSource,
    RepoSummary,
    TransportError,
    UserNotFound,
)


class FakeSource(ProfileSource):
    """In-memory stand-in for the GitHub API."""

    def __init__(self, users=None, repos=None, fail=False):
        self.users = users or {}
        self.repos = repos or {}
        self.fail = fail
        self.user_calls = []
        self.repo_calls = []

    def fetch_user(self, username):
        self.user_calls.append(username)
        if self.fail:
            raise TransportError("boom")
        if username not in self.users:
            raise UserNotFound(username)
        return self.users[username]

    def fetch_repos(self, username, limit=6):
        self.repo_calls.append((username, limit))
        return [r for r in self.repos.get(username, []) if not r.fork][:limit]


class FakeResponse:
    def __init__(self, status_code=200, payload=None, headers=None, bad_json=False):
        self.status_code = status_code
        self._payload = payload
        self.headers = headers or {}
        self._bad_json = bad_json

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._bad_json:
            raise ValueError("not json")
        return self._payload


class FakeSession:
    """Records GET calls and answers with queued responses or raises."""

    def __init__(self, responses=None, error=None):
        self.headers = {}
        self.responses = list(responses or [])
        self.error = error
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.responses.pop(0)


@pytest.fixture
def ada():
    return GitHubUser(
        login="ada",
        name="Ada Lovelace",
        bio="First programmer.",
        blog="https://ada.dev",
        twitter_username="ada_l",
    )


@pytest.fixture
def ada_repos():
    return [
        RepoSummary("engine", "Analytical engine notes", "https://github.com/ada/engine"),
        RepoSummary("fork-of-x", "forked", "https://github.com/ada/fork-of-x", fork=True),
        RepoSummary("bernoulli", None, "https://github.com/ada/bernoulli"),
    ]


@pytest.fixture
def source(ada, ada_repos):
    return FakeSource(users={"ada": ada}, repos={"ada": ada_repos})
