"""Lookup tables derived from the tag and status sections of the config."""

from __future__ import annotations

from collections.abc import Mapping

from .models import StatusStyleConfig, TagCategoryConfig

DEFAULT_STATUS_FOLDER_CLASS = "bg-muted text-muted-foreground"

DEFAULT_STATUS_FOLDER_CLASSES: dict[str, str] = {
    "completed": "bg-green-100 text-green-700",
    "in progress": "bg-amber-100 text-amber-700",
    "incomplete": "bg-red-100 text-red-700",
    "uncategorized": DEFAULT_STATUS_FOLDER_CLASS,
}


def build_tag_color_map(tag_categories: dict[str, TagCategoryConfig]) -> dict[str, str]:
    """Map each lower-cased tag to its category's classes.

    A tag listed under several categories takes the classes of the last one.
    """
    colors: dict[str, str] = {}
    for category in tag_categories.values():
        for tag in category.tags:
            colors[tag.lower()] = category.classes
    return colors


def build_status_folder_classes(status_styles: dict[str, StatusStyleConfig]) -> dict[str, str]:
    """Merge configured folder classes over the built-in defaults."""
    overrides = {
        key: style.folder_classes
        for key, style in status_styles.items()
        if style.folder_classes
    }
    return {**DEFAULT_STATUS_FOLDER_CLASSES, **overrides}


def folder_class_for(status: str | None, folder_classes: Mapping[str, str]) -> str:
    key = (status or "uncategorized").lower()
    return folder_classes.get(key, DEFAULT_STATUS_FOLDER_CLASS)
