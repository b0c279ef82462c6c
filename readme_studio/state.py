"""
Studio state owned by the shell.

The shell keeps one `StudioState` and replaces it wholesale on every change;
the composer and renderer only ever see the snapshot they were handed.
"""

from __future__ import annotations
import logging
import threading
from dataclasses import dataclass, field, replace

from readme_studio.autofill import FetchOutcome
from readme_studio.profile import ProfileRecord, empty_profile
from readme_studio.themes import DEFAULT_THEME, THEMES

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class StudioState:
    profile: ProfileRecord = field(default_factory=empty_profile)
    theme: str = DEFAULT_THEME

    def with_profile(self, profile: ProfileRecord) -> "StudioState":
        return replace(self, profile=profile)

    def with_theme(self, theme: str) -> "StudioState":
        return replace(self, theme=theme if theme in THEMES else DEFAULT_THEME)


class FetchGuard:
    """
    Generation counter for GitHub fetches.

    Every fetch takes a ticket before it starts. When it finishes, its result
    is used only if no newer fetch has been started in the meantime.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._generation = 0

    def begin(self) -> int:
        with self._lock:
            self._generation += 1
            return self._generation

    def is_current(self, ticket: int) -> bool:
        with self._lock:
            return ticket == self._generation

    def apply(self, state: StudioState, ticket: int, outcome: FetchOutcome) -> StudioState:
        """State after *outcome*; unchanged if the ticket is stale or the fetch failed."""
        if not self.is_current(ticket):
            log.info("Discarding result of stale fetch #%d", ticket)
            return state
        if not outcome.ok:
            return state
        return state.with_profile(outcome.profile)
