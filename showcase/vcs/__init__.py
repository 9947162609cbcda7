"""Content sources for Showcase."""

import os

from showcase.config.loader import resolve_github_user
from showcase.config.models import ShowcaseConfig
from showcase.vcs.base import ContentSource
from showcase.vcs.crawler import STATUS_DIRS, ProjectCrawler
from showcase.vcs.github import GitHubContentSource
from showcase.vcs.models import (
    UNCATEGORIZED,
    ContentEntry,
    ProjectDescriptor,
    ProjectMetadata,
    RepoInfo,
)

TOKEN_ENV = "GITHUB_TOKEN"


def create_source(config: ShowcaseConfig) -> GitHubContentSource:
    """Create the GitHub content source described by config.

    The owner comes from GITHUB_USER when set, else from the config file.
    A GITHUB_TOKEN is used if present but never required.
    """
    return GitHubContentSource(
        owner=resolve_github_user(config),
        repo=config.github_repo,
        token=os.environ.get(TOKEN_ENV, "").strip() or None,
        api_root=config.api_root,
        cache_ttl=config.cache_ttl,
        timeout=config.request_timeout,
    )


__all__ = [
    "STATUS_DIRS",
    "UNCATEGORIZED",
    "ContentEntry",
    "ContentSource",
    "GitHubContentSource",
    "ProjectCrawler",
    "ProjectDescriptor",
    "ProjectMetadata",
    "RepoInfo",
    "create_source",
]
