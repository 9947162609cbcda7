"""Showcase - project gallery built from a GitHub projects repository."""

from showcase.config import ShowcaseConfig, get_config, load_config
from showcase.errors import ConfigError, RemoteError, ShowcaseError
from showcase.extractor import MetadataExtractor, parse_metadata
from showcase.gallery import (
    GalleryRenderer,
    GalleryState,
    ProjectCard,
    build_gallery,
    build_tag_filter_groups,
    filter_projects,
)
from showcase.vcs import (
    ContentSource,
    GitHubContentSource,
    ProjectCrawler,
    ProjectDescriptor,
    ProjectMetadata,
    create_source,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "ContentSource",
    "GalleryRenderer",
    "GalleryState",
    "GitHubContentSource",
    "MetadataExtractor",
    "ProjectCard",
    "ProjectCrawler",
    "ProjectDescriptor",
    "ProjectMetadata",
    "RemoteError",
    "ShowcaseConfig",
    "ShowcaseError",
    "build_gallery",
    "build_tag_filter_groups",
    "create_source",
    "filter_projects",
    "get_config",
    "load_config",
    "parse_metadata",
]
