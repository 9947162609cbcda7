"""Walks status folders and resolves bare project names."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from showcase.errors import RemoteError
from showcase.vcs.base import ContentSource
from showcase.vcs.models import UNCATEGORIZED, ContentEntry, ProjectDescriptor

logger = logging.getLogger(__name__)

# Recognized status buckets, in lookup order.
STATUS_DIRS: tuple[str, ...] = ("Completed", "In Progress", "Incomplete")


class ProjectCrawler:
    """Turns the repository layout into a flat list of project descriptors.

    Expected layout is two levels deep: status folders at the root, one
    folder per project beneath each. Repos without status folders are
    treated as a flat list of uncategorized projects.
    """

    def __init__(self, source: ContentSource, status_dirs: Sequence[str] = STATUS_DIRS) -> None:
        self.source = source
        self.status_dirs = tuple(status_dirs)

    async def discover(self) -> list[ProjectDescriptor]:
        """Discover every project folder. Returns [] if the root can't be listed."""
        try:
            root = await self.source.list_directory("")
        except RemoteError as e:
            logger.warning("Error fetching projects: %s", e)
            return []

        directories = [entry for entry in root if entry.type == "dir"]
        status_roots = [d for d in directories if d.name in self.status_dirs]

        if not status_roots:
            # Legacy layout: projects live at the repo root
            return _ungrouped(directories)

        projects: list[ProjectDescriptor] = []
        for status_dir in status_roots:
            try:
                children = await self.source.list_directory(status_dir.name)
            except RemoteError as e:
                logger.warning("Skipping status folder %s: %s", status_dir.name, e)
                continue
            for child in children:
                if child.type != "dir":
                    continue
                projects.append(
                    ProjectDescriptor(
                        name=child.name,
                        path=f"{status_dir.name}/{child.name}",
                        status=status_dir.name,
                    )
                )

        if not projects:
            non_status = [d for d in directories if d.name not in self.status_dirs]
            return _ungrouped(non_status)

        return projects

    async def resolve_project_path(self, name_or_path: str) -> str | None:
        """Return the real path for a bare project name, or None if not found.

        Anything containing a slash is trusted as-is. Bare names are looked up
        at the root first, then under each status folder in order.
        """
        if "/" in name_or_path:
            return name_or_path
        if not name_or_path.strip():
            return None

        candidates = [name_or_path, *(f"{status}/{name_or_path}" for status in self.status_dirs)]
        for candidate in candidates:
            if await self._exists(candidate):
                return candidate
        logger.debug("Could not resolve project %r", name_or_path)
        return None

    async def _exists(self, path: str) -> bool:
        try:
            await self.source.list_directory(path)
        except RemoteError:
            return False
        return True


def _ungrouped(directories: list[ContentEntry]) -> list[ProjectDescriptor]:
    return [
        ProjectDescriptor(name=d.name, path=d.name, status=UNCATEGORIZED)
        for d in directories
    ]
