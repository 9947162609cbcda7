"""Gallery cards, filtering and static rendering."""

from showcase.gallery.builder import build_gallery, detail_href, make_card
from showcase.gallery.filters import (
    ALL_STATUSES,
    GalleryState,
    build_tag_filter_groups,
    filter_projects,
    format_category_label,
    status_options,
)
from showcase.gallery.models import ProjectCard, StatusOption, TagFilterGroup, TagOption
from showcase.gallery.renderer import GalleryRenderer

__all__ = [
    "ALL_STATUSES",
    "GalleryRenderer",
    "GalleryState",
    "ProjectCard",
    "StatusOption",
    "TagFilterGroup",
    "TagOption",
    "build_gallery",
    "build_tag_filter_groups",
    "detail_href",
    "filter_projects",
    "format_category_label",
    "make_card",
    "status_options",
]
