"""Activity statistics: event counters, weighted score and grade."""

from collections import Counter

from gitact.models import (
    AggregateStats,
    Event,
    EventKind,
    Grade,
    RepositoryRecord,
    RepositorySummary,
)

SCORE_WEIGHTS: dict[str, float] = {
    "push": 1.0,
    "pull_request": 3.0,
    "create": 1.0,
    "issues": 1.5,
    "watch": 0.5,
}

# Lower score bound of each grade above F, ascending.
GRADE_THRESHOLDS: list[tuple[float, Grade]] = [
    (1, Grade.d),
    (3, Grade.c),
    (8, Grade.b),
    (15, Grade.b_plus),
    (25, Grade.a),
    (40, Grade.a_plus),
    (70, Grade.s),
    (100, Grade.s_plus),
]


def compute_stats(events: list[Event]) -> AggregateStats:
    """Count events by kind in a single pass."""
    counts: Counter[str] = Counter()
    for event in events:
        counts[event.kind.name] += 1
    return AggregateStats(total=len(events), **counts)


def weighted_score(stats: AggregateStats) -> float:
    return sum(getattr(stats, field) * weight for field, weight in SCORE_WEIGHTS.items())


def grade_for(stats: AggregateStats) -> Grade:
    """Map stats to a letter grade; no events always grades F."""
    if stats.total == 0:
        return Grade.f
    score = weighted_score(stats)
    grade = Grade.f
    for threshold, band in GRADE_THRESHOLDS:
        if score >= threshold:
            grade = band
    return grade


def summarize_repositories(repos: list[RepositoryRecord]) -> RepositorySummary:
    """Totals, averages, leaders and language counts over a repository set."""
    if not repos:
        return RepositorySummary()

    languages: dict[str, int] = {}
    most_starred = repos[0]
    most_forked = repos[0]
    for repo in repos:
        if repo.language:
            languages[repo.language] = languages.get(repo.language, 0) + 1
        if repo.stars > most_starred.stars:
            most_starred = repo
        if repo.forks > most_forked.forks:
            most_forked = repo

    total_stars = sum(r.stars for r in repos)
    total_forks = sum(r.forks for r in repos)
    return RepositorySummary(
        total_repositories=len(repos),
        total_stars=total_stars,
        total_forks=total_forks,
        average_stars=total_stars / len(repos),
        average_forks=total_forks / len(repos),
        most_starred=most_starred,
        most_forked=most_forked,
        languages=languages,
    )
