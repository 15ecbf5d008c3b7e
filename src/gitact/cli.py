"""CLI entry point for gitact."""

import argparse
import asyncio
import sys
from typing import Optional

from gitact import __version__
from gitact.config import Settings, load_settings
from gitact.errors import ConfigError, FetchError

KEYS_HELP = """\
interactive dashboard views:
  Repository List   browse repos with search
  Table View        stars, forks, language, last update
  Statistics        totals, languages, activity grade
  Activity Feed     recent GitHub activity timeline

navigation:
  ↑/↓ or j/k    navigate items
  ←/→ or h/l    switch between views
  tab           next view
  /             search repositories (in list view)
  c             copy git clone command
  x             copy repository URL
  o             open repository in browser
  r             refresh all data
  ?             toggle help
  q/esc         quit

Set GITHUB_TOKEN to raise the API rate limit from 60 to 5 000 requests/hour.
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gitact",
        description="Explore a GitHub user's repositories and activity in the terminal.",
        epilog=KEYS_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("username", nargs="?", help="GitHub username")
    parser.add_argument(
        "--repos",
        metavar="USERNAME",
        help="print every public repository with statistics and exit",
    )
    parser.add_argument(
        "-v", "--version", action="version", version=f"gitact {__version__}"
    )
    return parser


async def warn_on_rate_limit(settings: Settings) -> None:
    """Advisory rate limit check; never blocks startup."""
    from gitact.fetcher import GitHubFetcher

    fetcher = GitHubFetcher(
        token=settings.github_token,
        base_url=settings.api_base_url,
        timeout=settings.request_timeout_seconds,
    )
    try:
        status = await fetcher.ensure_rate_limit(settings.rate_limit_warning_threshold)
    except FetchError as e:
        print(f"⚠️  Rate limit warning: {e}", file=sys.stderr)
        print("💡 Set GITHUB_TOKEN environment variable for higher limits\n", file=sys.stderr)
    else:
        print(f"🔄 GitHub API Rate Limit: {status.remaining}/{status.limit} requests remaining")
    finally:
        await fetcher.close()


def main(argv: Optional[list[str]] = None) -> int:
    """Parse arguments and launch the dashboard or the report."""
    from dotenv import load_dotenv

    load_dotenv()  # Load .env file (e.g. GITHUB_TOKEN)

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    from gitact.log_setup import setup_logger

    if args.repos is not None:
        username = args.repos.strip()
        if not username:
            print("error: username can't be empty", file=sys.stderr)
            return 1
        setup_logger(settings.log_level, settings.log_file, interactive=False)
        from gitact.report import show_public_repos

        return asyncio.run(show_public_repos(username, settings))

    username = (args.username or "").strip()
    if not username:
        parser.print_usage(sys.stderr)
        print("error: username can't be empty", file=sys.stderr)
        return 1

    setup_logger(settings.log_level, settings.log_file, interactive=True)
    asyncio.run(warn_on_rate_limit(settings))

    from gitact.app import GitActApp

    app = GitActApp(username, settings=settings)
    try:
        app.run()
    except Exception as e:
        print(f"error during the launch: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
