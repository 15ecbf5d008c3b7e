"""GitHub data fetching via REST API."""

import logging
from datetime import datetime, timezone
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from gitact import __version__
from gitact.errors import (
    DecodeError,
    HTTPStatusError,
    NetworkError,
    RateLimitedError,
    UserNotFoundError,
)
from gitact.models import Event, EventKind, RateLimitStatus, RepositoryRecord

logger = logging.getLogger(__name__)


def _parse_timestamp(raw: str) -> datetime:
    return datetime.fromisoformat(raw.replace("Z", "+00:00"))


def _rate_limit_reset(resp: httpx.Response) -> Optional[datetime]:
    reset = resp.headers.get("x-ratelimit-reset", "")
    if not reset.isdigit():
        return None
    return datetime.fromtimestamp(int(reset), tz=timezone.utc)


class GitHubFetcher:
    """Fetches a user's events and public repositories from the GitHub REST API."""

    def __init__(
        self,
        token: Optional[str] = None,
        base_url: str = "https://api.github.com",
        timeout: float = 10.0,
    ) -> None:
        self.token = token
        self.base_url = base_url
        self.timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    # ── HTTP plumbing ─────────────────────────────────────────────────────

    @property
    def headers(self) -> dict[str, str]:
        h: dict[str, str] = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
            "User-Agent": f"gitact/{__version__}",
        }
        if self.token:
            h["Authorization"] = f"Bearer {self.token}"
        return h

    async def _client_instance(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers=self.headers,
                timeout=self.timeout,
            )
        return self._client

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def _get(self, path: str, username: Optional[str] = None, **kwargs) -> Any:  # type: ignore[no-untyped-def]
        """GET ``path`` and return decoded JSON, mapping failures to ``FetchError``."""
        client = await self._client_instance()
        try:
            resp = await client.get(path, **kwargs)
        except httpx.TransportError as e:
            raise NetworkError(f"request to GitHub failed: {e}") from e

        if resp.status_code == 404 and username is not None:
            raise UserNotFoundError(username)
        if resp.status_code in (403, 429) and (
            "rate limit" in resp.text.lower()
            or resp.headers.get("x-ratelimit-remaining") == "0"
        ):
            has_token = bool(self.token)
            hint = (
                "wait for the reset and retry"
                if has_token
                else "set GITHUB_TOKEN to get 5 000 req/hour"
            )
            raise RateLimitedError(
                f"GitHub API rate limit exceeded ({hint})",
                status_code=resp.status_code,
                reset_at=_rate_limit_reset(resp),
            )
        if not resp.is_success:
            raise HTTPStatusError(
                f"http error {resp.status_code}",
                status_code=resp.status_code,
            )

        try:
            return resp.json()
        except ValueError as e:
            raise DecodeError(f"error parsing JSON: {e}") from e

    # ── Events ────────────────────────────────────────────────────────────

    async def fetch_events(self, username: str) -> list[Event]:
        """Fetch the user's recent public events, newest first as the API returns them."""
        raw = await self._get(f"/users/{username}/events", username=username)
        if not isinstance(raw, list):
            raise DecodeError("expected a JSON list of events")

        events: list[Event] = []
        try:
            for item in raw:
                repo = item.get("repo") or {}
                payload = item.get("payload") or {}
                subject = payload.get("issue") or payload.get("pull_request") or {}
                events.append(
                    Event(
                        kind=EventKind.from_type(item["type"]),
                        type=item["type"],
                        repo_name=repo.get("name", ""),
                        repo_url=repo.get("url", ""),
                        created_at=_parse_timestamp(item["created_at"]),
                        actor=(item.get("actor") or {}).get("login", ""),
                        action=payload.get("action") or "",
                        ref_type=payload.get("ref_type") or "",
                        ref=payload.get("ref") or "",
                        commit_count=len(payload.get("commits") or []),
                        title=subject.get("title") or "",
                    )
                )
        except (AttributeError, KeyError, TypeError, ValueError, ValidationError) as e:
            raise DecodeError(f"malformed event payload: {e}") from e
        logger.info("fetched %d events for %s", len(events), username)
        return events

    # ── Repositories ──────────────────────────────────────────────────────

    async def fetch_public_repositories(
        self, username: str, max_pages: int = 10
    ) -> list[RepositoryRecord]:
        """Fetch all public repositories, most starred first.

        Records flagged private are dropped even if the API returns them.
        """
        per_page = 100
        repos: list[RepositoryRecord] = []
        for page in range(1, max_pages + 1):
            data = await self._get(
                f"/users/{username}/repos",
                username=username,
                params={
                    "type": "public",
                    "per_page": str(per_page),
                    "page": str(page),
                },
            )
            if not isinstance(data, list):
                raise DecodeError("expected a JSON list of repositories")
            if not data:
                break
            for item in data:
                record = self._parse_repository(item)
                if not record.private:
                    repos.append(record)
            if len(data) < per_page:
                break

        repos.sort(key=lambda r: r.stars, reverse=True)
        logger.info("fetched %d public repositories for %s", len(repos), username)
        return repos

    @staticmethod
    def _parse_repository(item: dict) -> RepositoryRecord:
        try:
            return RepositoryRecord(
                name=item["name"],
                full_name=item["full_name"],
                description=item.get("description") or "",
                url=item["html_url"],
                clone_url=item["clone_url"],
                stars=item.get("stargazers_count", 0),
                forks=item.get("forks_count", 0),
                language=item.get("language") or None,
                created_at=_parse_timestamp(item["created_at"]),
                updated_at=_parse_timestamp(item["updated_at"]),
                private=bool(item.get("private", False)),
            )
        except (AttributeError, KeyError, TypeError, ValueError, ValidationError) as e:
            raise DecodeError(f"malformed repository payload: {e}") from e

    # ── Rate limit ────────────────────────────────────────────────────────

    async def check_rate_limit(self) -> RateLimitStatus:
        """Read the core rate limit bucket."""
        data = await self._get("/rate_limit")
        try:
            core = data["resources"]["core"]
            return RateLimitStatus(
                limit=core["limit"],
                remaining=core["remaining"],
                reset_at=datetime.fromtimestamp(int(core["reset"]), tz=timezone.utc),
            )
        except (KeyError, TypeError, ValueError, ValidationError) as e:
            raise DecodeError(f"error parsing rate limit response: {e}") from e

    async def ensure_rate_limit(self, threshold: int = 10) -> RateLimitStatus:
        """Raise ``RateLimitedError`` when fewer than ``threshold`` requests remain."""
        status = await self.check_rate_limit()
        if status.remaining < threshold:
            raise RateLimitedError(
                f"rate limit almost exhausted: {status.remaining}/{status.limit} "
                f"remaining, resets at {status.reset_at:%H:%M:%S}",
                reset_at=status.reset_at,
            )
        return status
