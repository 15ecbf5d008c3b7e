"""Per-repository activity derived from an event batch."""

from datetime import datetime

from gitact.models import Event, RepoActivity


def aggregate_by_repository(events: list[Event]) -> list[RepoActivity]:
    """Group events by repository name, most active first.

    Events without a repository name are skipped. Equal counts keep the
    order in which the repository was first seen.
    """
    counts: dict[str, int] = {}
    last_seen: dict[str, datetime] = {}
    for event in events:
        name = event.repo_name
        if not name:
            continue
        counts[name] = counts.get(name, 0) + 1
        if name not in last_seen or event.created_at > last_seen[name]:
            last_seen[name] = event.created_at

    activity = [
        RepoActivity(
            name=name,
            count=count,
            last_activity=last_seen[name],
            url=f"https://github.com/{name}",
            clone_url=f"https://github.com/{name}.git",
        )
        for name, count in counts.items()
    ]
    return sorted(activity, key=lambda r: -r.count)
