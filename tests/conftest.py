"""Shared pytest fixtures and test helpers for dnfolio tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner

from dnfolio.config.settings import DnfolioSettings
from dnfolio.infrastructure.site import Site
from tests.helpers import write_post


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's DNFOLIO_* environment out of the tests."""
    monkeypatch.delenv("DNFOLIO_CONFIG", raising=False)
    monkeypatch.delenv("DNFOLIO_SITE_ROOT", raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """Temporary site directory with an empty ``posts/`` content root."""
    (tmp_path / "posts").mkdir()
    return tmp_path


@pytest.fixture
def content_root(site_root: Path) -> Path:
    return site_root / "posts"


@pytest.fixture
def settings(site_root: Path) -> DnfolioSettings:
    return DnfolioSettings.from_cli(site_root=site_root)


@pytest.fixture
def site(settings: DnfolioSettings) -> Site:
    return Site(settings)


@pytest.fixture
def sample_posts(content_root: Path) -> Path:
    """Three published posts and one newer draft.

    Display order: tech/001-hello, tech/002-rust, diary/2024-01-01.
    """
    write_post(
        content_root,
        "tech",
        "001-hello",
        title="Hello",
        created="2024-01-03",
        tags=["python", "web"],
        description="First post",
        body="# Hello\n\nWelcome.\n",
    )
    write_post(content_root, "diary", "2024-01-01", title="New Year", created="2024-01-01", tags=["life"])
    write_post(content_root, "tech", "002-rust", title="Rust", created="2024-01-02", tags=["rust", "python"])
    write_post(content_root, "tech", "003-draft", title="Draft", created="2024-02-01", published=False)
    return content_root


@pytest.fixture
def _isolated_site(site_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the temp site root so the CLI resolves it.

    Use via ``@pytest.mark.usefixtures("_isolated_site")`` on command test
    classes.
    """
    monkeypatch.chdir(site_root)


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Iterator[None]:
    """Undo the handler swap ``configure_logging`` does on every CLI invocation."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
