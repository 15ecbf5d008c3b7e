"""One-shot repository report for ``gitact --repos``."""

import logging
from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from gitact.analysis.stats import summarize_repositories
from gitact.config import Settings
from gitact.errors import FetchError
from gitact.fetcher import GitHubFetcher
from gitact.formatting import format_number
from gitact.models import RepositoryRecord

logger = logging.getLogger(__name__)


def render_statistics(repos: list[RepositoryRecord], console: Console) -> None:
    console.print("\n[bold]=== Public Repository Statistics ===[/bold]")
    if not repos:
        console.print("No public repositories found.")
        return

    summary = summarize_repositories(repos)
    console.print(f"📊 Total Repositories: {summary.total_repositories}")
    console.print(f"⭐ Total Stars: {summary.total_stars}")
    console.print(f"🍴 Total Forks: {summary.total_forks}")
    console.print(f"📈 Average Stars per Repository: {summary.average_stars:.1f}")
    console.print(f"📈 Average Forks per Repository: {summary.average_forks:.1f}")
    if summary.most_starred is not None:
        console.print(
            f"\n🏆 Most Starred Repository: {summary.most_starred.full_name} "
            f"({summary.most_starred.stars} stars)",
            markup=False,
        )
    if summary.most_forked is not None:
        console.print(
            f"🏆 Most Forked Repository: {summary.most_forked.full_name} "
            f"({summary.most_forked.forks} forks)",
            markup=False,
        )

    if summary.languages:
        table = Table(title="📝 Programming Languages Used", title_justify="left")
        table.add_column("Language")
        table.add_column("Repositories", justify="right")
        for lang, count in sorted(summary.languages.items(), key=lambda kv: (-kv[1], kv[0])):
            table.add_row(lang, str(count))
        console.print(table)


def render_repositories(repos: list[RepositoryRecord], console: Console) -> None:
    console.print(f"\n[bold]=== Public Repositories ({len(repos)} total) ===[/bold]")
    if not repos:
        console.print("No public repositories found.")
        return

    table = Table(show_lines=False)
    table.add_column("#", justify="right")
    table.add_column("Repository")
    table.add_column("⭐", justify="right")
    table.add_column("🍴", justify="right")
    table.add_column("Language")
    table.add_column("Created")
    table.add_column("Updated")
    table.add_column("Description", overflow="fold")
    ordered = sorted(repos, key=lambda r: r.stars, reverse=True)
    for i, repo in enumerate(ordered, start=1):
        table.add_row(
            str(i),
            Text(repo.full_name),
            format_number(repo.stars),
            format_number(repo.forks),
            repo.language or "-",
            f"{repo.created_at:%Y-%m-%d}",
            f"{repo.updated_at:%Y-%m-%d}",
            Text(repo.description),
        )
    console.print(table)

    total_stars = sum(r.stars for r in repos)
    console.print(
        f"\n📊 Summary: {len(repos)} repositories with {total_stars} total stars"
    )


async def show_public_repos(
    username: str,
    settings: Settings,
    console: Optional[Console] = None,
    fetcher: Optional[GitHubFetcher] = None,
) -> int:
    """Fetch and print the report. Returns the process exit code."""
    console = console or Console()
    fetcher = fetcher or GitHubFetcher(
        token=settings.github_token,
        base_url=settings.api_base_url,
        timeout=settings.request_timeout_seconds,
    )
    console.print(f"🔍 Fetching public repositories for user: {username}", markup=False)
    try:
        repos = await fetcher.fetch_public_repositories(
            username, max_pages=settings.max_repo_pages
        )
    except FetchError as e:
        logger.error("report for %s failed: %s", username, e)
        Console(stderr=True).print(
            f"❌ Error fetching public repositories: {e}", markup=False
        )
        return 1
    finally:
        await fetcher.close()

    render_statistics(repos, console)
    render_repositories(repos, console)
    return 0
