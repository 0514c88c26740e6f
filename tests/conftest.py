"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def _read_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


@pytest.fixture
def docs_html() -> str:
    return _read_fixture("docs_page.html")


@pytest.fixture
def plain_article_html() -> str:
    return _read_fixture("plain_article.html")


@pytest.fixture
def docs_html_path() -> Path:
    return FIXTURES_DIR / "docs_page.html"
