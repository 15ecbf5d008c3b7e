"""Pytest configuration and fixtures."""

import pytest

from factories import make_event, make_repo


@pytest.fixture(scope="session")
def anyio_backend():
    """Configure anyio backend for async tests."""
    return "asyncio"


@pytest.fixture
def sample_repos():
    return [
        make_repo("linguist", stars=1200, forks=300, description="Language detection", language="Ruby"),
        make_repo("hello-world", stars=50, forks=40, description="My first repo"),
        make_repo("spoon-knife", stars=12, forks=90, description="Fork me", language="HTML"),
    ]


@pytest.fixture
def sample_events():
    return [
        make_event("PushEvent", "octocat/linguist", minutes_ago=1, commit_count=2),
        make_event("PushEvent", "octocat/linguist", minutes_ago=5),
        make_event("PushEvent", "octocat/hello-world", minutes_ago=10),
        make_event("IssuesEvent", "octocat/linguist", minutes_ago=20, action="opened"),
        make_event("IssuesEvent", "github/docs", minutes_ago=30, action="closed"),
        make_event("WatchEvent", "torvalds/linux", minutes_ago=40),
    ]
