"""Builders for test data."""

from datetime import datetime, timedelta, timezone

from gitact.models import Event, EventKind, RepositoryRecord

BASE_TIME = datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)


def make_repo(
    name: str,
    stars: int = 0,
    forks: int = 0,
    description: str = "",
    language: str | None = None,
    private: bool = False,
    owner: str = "octocat",
) -> RepositoryRecord:
    return RepositoryRecord(
        name=name,
        full_name=f"{owner}/{name}",
        description=description,
        url=f"https://github.com/{owner}/{name}",
        clone_url=f"https://github.com/{owner}/{name}.git",
        stars=stars,
        forks=forks,
        language=language,
        created_at=BASE_TIME - timedelta(days=365),
        updated_at=BASE_TIME,
        private=private,
    )


def make_event(
    event_type: str,
    repo: str = "octocat/hello",
    minutes_ago: int = 0,
    **extra,
) -> Event:
    return Event(
        kind=EventKind.from_type(event_type),
        type=event_type,
        repo_name=repo,
        repo_url=f"https://api.github.com/repos/{repo}",
        created_at=BASE_TIME - timedelta(minutes=minutes_ago),
        **extra,
    )


def repo_payload(name: str, stars: int = 0, private: bool = False, **extra) -> dict:
    """A /users/{user}/repos item as the GitHub API returns it."""
    payload = {
        "name": name,
        "full_name": f"octocat/{name}",
        "description": None,
        "html_url": f"https://github.com/octocat/{name}",
        "clone_url": f"https://github.com/octocat/{name}.git",
        "stargazers_count": stars,
        "forks_count": 0,
        "language": None,
        "created_at": "2024-01-15T12:00:00Z",
        "updated_at": "2025-01-15T12:00:00Z",
        "private": private,
    }
    payload.update(extra)
    return payload


def event_payload(event_type: str, repo: str = "octocat/hello", **payload) -> dict:
    """A /users/{user}/events item as the GitHub API returns it."""
    return {
        "id": "1",
        "type": event_type,
        "actor": {"login": "octocat"},
        "repo": {"name": repo, "url": f"https://api.github.com/repos/{repo}"},
        "payload": payload,
        "created_at": "2025-01-15T12:00:00Z",
    }
