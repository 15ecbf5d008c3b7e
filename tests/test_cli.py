"""Tests for the CLI entry point."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from gitact import __version__
from gitact.cli import build_parser, main, warn_on_rate_limit
from gitact.config import Settings
from gitact.errors import RateLimitedError
from gitact.models import RateLimitStatus

from factories import BASE_TIME


@pytest.fixture(autouse=True)
def isolated(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in ("GITHUB_TOKEN", "GH_TOKEN", "GITACT_LOG_LEVEL", "GITACT_MAX_REPO_PAGES"):
        monkeypatch.delenv(name, raising=False)
    with patch("dotenv.load_dotenv"), patch("gitact.log_setup.setup_logger"):
        yield


class TestBuildParser:
    def test_username_positional(self):
        args = build_parser().parse_args(["octocat"])
        assert args.username == "octocat"
        assert args.repos is None

    def test_repos_flag(self):
        args = build_parser().parse_args(["--repos", "octocat"])
        assert args.repos == "octocat"
        assert args.username is None

    def test_epilog_lists_keys(self):
        help_text = build_parser().format_help()
        assert "copy git clone command" in help_text
        assert "GITHUB_TOKEN" in help_text


class TestMain:
    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert capsys.readouterr().out.strip() == f"gitact {__version__}"

    def test_missing_username(self, capsys):
        assert main([]) == 1
        err = capsys.readouterr().err
        assert "usage:" in err
        assert "username can't be empty" in err

    def test_blank_username(self, capsys):
        assert main(["   "]) == 1
        assert "username can't be empty" in capsys.readouterr().err

    def test_blank_repos_username(self, capsys):
        assert main(["--repos", ""]) == 1
        assert "username can't be empty" in capsys.readouterr().err

    def test_invalid_config(self, monkeypatch, capsys):
        monkeypatch.setenv("GITACT_LOG_LEVEL", "LOUD")
        assert main(["octocat"]) == 1
        assert "invalid configuration" in capsys.readouterr().err

    def test_repos_report(self):
        report = AsyncMock(return_value=0)
        with patch("gitact.report.show_public_repos", report):
            assert main(["--repos", " octocat "]) == 0
        username, settings = report.call_args.args
        assert username == "octocat"
        assert isinstance(settings, Settings)

    def test_repos_report_failure_code(self):
        with patch("gitact.report.show_public_repos", AsyncMock(return_value=1)):
            assert main(["--repos", "ghost"]) == 1

    def test_launches_dashboard(self):
        app = MagicMock()
        with (
            patch("gitact.cli.warn_on_rate_limit", AsyncMock()) as warn,
            patch("gitact.app.GitActApp", return_value=app) as app_cls,
        ):
            assert main(["octocat"]) == 0
        warn.assert_awaited_once()
        assert app_cls.call_args.args == ("octocat",)
        app.run.assert_called_once()

    def test_launch_failure(self, capsys):
        app = MagicMock()
        app.run.side_effect = RuntimeError("no terminal")
        with (
            patch("gitact.cli.warn_on_rate_limit", AsyncMock()),
            patch("gitact.app.GitActApp", return_value=app),
        ):
            assert main(["octocat"]) == 1
        assert "error during the launch: no terminal" in capsys.readouterr().err


class TestWarnOnRateLimit:
    @pytest.mark.asyncio
    async def test_reports_remaining(self, capsys):
        status = RateLimitStatus(limit=60, remaining=42, reset_at=BASE_TIME)
        with patch("gitact.fetcher.GitHubFetcher.ensure_rate_limit", AsyncMock(return_value=status)):
            await warn_on_rate_limit(Settings(_env_file=None))
        assert "42/60 requests remaining" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_warns_without_blocking(self, capsys):
        error = RateLimitedError("rate limit almost exhausted: 2/60 remaining")
        with patch("gitact.fetcher.GitHubFetcher.ensure_rate_limit", AsyncMock(side_effect=error)):
            await warn_on_rate_limit(Settings(_env_file=None))
        err = capsys.readouterr().err
        assert "Rate limit warning" in err
        assert "GITHUB_TOKEN" in err
