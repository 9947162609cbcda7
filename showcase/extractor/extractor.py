"""Reads each project's Markdown file and parses it."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable

from showcase.errors import RemoteError
from showcase.extractor.parser import parse_metadata
from showcase.vcs.base import ContentSource
from showcase.vcs.crawler import ProjectCrawler
from showcase.vcs.models import ContentEntry, ProjectDescriptor, ProjectMetadata

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"


def find_markdown_file(entries: Iterable[ContentEntry]) -> ContentEntry | None:
    """First Markdown file in listing order that can actually be downloaded."""
    for entry in entries:
        if entry.name.lower().endswith(MARKDOWN_SUFFIX) and entry.download_url:
            return entry
    return None


class MetadataExtractor:
    """Extracts card metadata for projects found by a ProjectCrawler.

    Every public method returns an empty default on failure; remote errors
    are logged here and never reach the caller.
    """

    def __init__(self, crawler: ProjectCrawler) -> None:
        self.crawler = crawler

    @property
    def source(self) -> ContentSource:
        return self.crawler.source

    async def extract(self, name_or_path: str) -> ProjectMetadata:
        try:
            content = await self._read_markdown(name_or_path)
        except RemoteError as e:
            logger.warning("Error extracting metadata for %s: %s", name_or_path, e)
            return ProjectMetadata()
        if content is None:
            return ProjectMetadata()
        return parse_metadata(content)

    async def extract_description(self, name_or_path: str) -> tuple[str, str | None]:
        """Return (description, redirect_url) for a project."""
        metadata = await self.extract(name_or_path)
        return metadata.description, metadata.redirect_url

    async def extract_tags(self, name_or_path: str) -> list[str]:
        metadata = await self.extract(name_or_path)
        return metadata.tags

    async def extract_many(self, descriptors: Iterable[ProjectDescriptor]) -> list[ProjectMetadata]:
        """Extract metadata for every descriptor concurrently, in input order."""
        return list(await asyncio.gather(*(self.extract(d.path) for d in descriptors)))

    async def get_project_files(self, name_or_path: str) -> list[ContentEntry]:
        try:
            path = await self.crawler.resolve_project_path(name_or_path)
            if path is None:
                return []
            return await self.source.list_directory(path)
        except RemoteError as e:
            logger.warning("Error fetching project files for %s: %s", name_or_path, e)
            return []

    async def get_file_content(self, url: str) -> str:
        try:
            return await self.source.fetch_raw(url)
        except RemoteError as e:
            logger.warning("Error fetching file content: %s", e)
            return ""

    async def _read_markdown(self, name_or_path: str) -> str | None:
        path = await self.crawler.resolve_project_path(name_or_path)
        if path is None:
            logger.debug("No folder found for %s", name_or_path)
            return None
        entries = await self.source.list_directory(path)
        markdown = find_markdown_file(entries)
        if markdown is None:
            logger.debug("No Markdown file in %s", path)
            return None
        return await self.source.fetch_raw(markdown.download_url)
