"""Shared fixtures for vcs-prompt tests."""

import os
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_vcs_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep version control tools from seeing repositories above tmp_path.

    Args:
        tmp_path: Pytest temporary directory fixture
        monkeypatch: Pytest monkeypatch fixture
    """
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path.parent))
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Test User")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "test@example.com")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Test User")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "test@example.com")
    monkeypatch.setenv("HGUSER", "Test User <test@example.com>")
    for name in list(os.environ):
        if name.startswith("VCS_PROMPT_"):
            monkeypatch.delenv(name)
