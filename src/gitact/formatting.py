"""Text helpers shared by the dashboard views and the report."""

from gitact.models import Event, EventKind

EVENT_ICONS: dict[EventKind, str] = {
    EventKind.push: "✏",
    EventKind.issues: "☒",
    EventKind.watch: "☆",
    EventKind.fork: "⑂",
    EventKind.create: "﹢",
    EventKind.delete: "␀",
    EventKind.pull_request: "♺",
    EventKind.release: "𝌚",
    EventKind.public: "℗",
    EventKind.other: "≝",
}


def format_number(n: int) -> str:
    """Compact count: 950, 1.2k, 3.4M."""
    if n >= 1_000_000:
        return f"{n / 1_000_000:.1f}M"
    if n >= 1000:
        return f"{n / 1000:.1f}k"
    return str(n)


def truncate(text: str, width: int = 80) -> str:
    if len(text) > width:
        return text[: width - 3] + "..."
    return text


def event_icon(event: Event) -> str:
    return EVENT_ICONS[event.kind]


def describe_event(event: Event) -> str:
    """One-line summary of an event for the activity feed."""
    repo = event.repo_name
    if event.kind is EventKind.push:
        if event.commit_count:
            s = "s" if event.commit_count != 1 else ""
            return f"Pushed {event.commit_count} commit{s} to {repo}"
        return f"Pushed to {repo}"
    if event.kind is EventKind.issues:
        return f"Issue in {repo}"
    if event.kind is EventKind.watch:
        return f"Starred {repo}"
    if event.kind is EventKind.fork:
        return f"Forked {repo}"
    if event.kind is EventKind.create:
        if event.ref_type and event.ref_type != "repository":
            return f"Created {event.ref_type} {event.ref} in {repo}"
        return f"Created {repo}"
    if event.kind is EventKind.pull_request:
        return f"PR in {repo}"
    return f"{event.type.removesuffix('Event')} in {repo}"
