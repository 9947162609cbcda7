"""Joins discovered projects, extracted metadata and styles into gallery cards."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from urllib.parse import quote

from showcase.config.styles import folder_class_for
from showcase.extractor.extractor import MetadataExtractor
from showcase.gallery.models import ProjectCard
from showcase.vcs.models import ProjectDescriptor, ProjectMetadata

logger = logging.getLogger(__name__)

DETAIL_ROUTE = "/project"


def detail_href(path: str) -> str:
    """Link to the detail page; the whole path is one encoded segment."""
    return f"{DETAIL_ROUTE}/{quote(path, safe='')}"


def make_card(
    descriptor: ProjectDescriptor,
    metadata: ProjectMetadata,
    tag_color_map: Mapping[str, str],
    folder_classes: Mapping[str, str],
) -> ProjectCard:
    tag_classes = {
        tag.lower(): tag_color_map[tag.lower()]
        for tag in metadata.tags
        if tag.lower() in tag_color_map
    }
    return ProjectCard(
        name=descriptor.name,
        path=descriptor.path,
        type=descriptor.type,
        status=descriptor.status,
        tags=list(metadata.tags),
        description=metadata.description,
        redirect_url=metadata.redirect_url,
        tag_classes=tag_classes,
        folder_classes=folder_class_for(descriptor.status, folder_classes),
        href=metadata.redirect_url or detail_href(descriptor.path),
    )


async def build_gallery(
    extractor: MetadataExtractor,
    *,
    tag_color_map: Mapping[str, str],
    folder_classes: Mapping[str, str],
) -> list[ProjectCard]:
    """Discover projects, extract their metadata concurrently, build cards.

    Returns cards in discovery order. A project whose Markdown can't be
    read still gets a card, just without description or tags.
    """
    descriptors = await extractor.crawler.discover()
    if not descriptors:
        return []
    metadata = await extractor.extract_many(descriptors)
    logger.info("built gallery with %d projects", len(descriptors))
    return [
        make_card(descriptor, meta, tag_color_map, folder_classes)
        for descriptor, meta in zip(descriptors, metadata)
    ]
