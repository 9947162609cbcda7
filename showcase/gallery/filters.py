"""Gallery filtering, tag grouping and filter-bar state.

Everything here is synchronous and side-effect free apart from
GalleryState's own fields; the browser-side script in the rendered page
applies the same rules.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping, Sequence

from pydantic import BaseModel, Field

from showcase.config.models import TagCategoryConfig
from showcase.gallery.models import ProjectCard, StatusOption, TagFilterGroup, TagOption
from showcase.vcs.models import UNCATEGORIZED

ALL_STATUSES = "all"
OTHER_GROUP_KEY = "other"
OTHER_GROUP_LABEL = "Other"
ESCAPE_KEY = "Escape"


def _label_key(label: str) -> tuple[str, str]:
    return (label.casefold(), label)


def _status_value(card: ProjectCard) -> str:
    return (card.status or UNCATEGORIZED).lower()


def format_category_label(value: str) -> str:
    """Turn a config key like ``webFrameworks`` or ``dev_ops`` into ``Web Frameworks``."""
    label = re.sub(r"([a-z])([A-Z])", r"\1 \2", value)
    label = re.sub(r"[-_]+", " ", label)
    label = re.sub(r"\s+", " ", label)
    label = re.sub(r"\b\w", lambda m: m.group(0).upper(), label)
    return label.strip()


def matches(
    card: ProjectCard,
    search_term: str = "",
    status_filter: str = ALL_STATUSES,
    selected_tags: Iterable[str] = (),
) -> bool:
    term = search_term.strip().lower()
    if term not in card.name.lower():
        return False

    wanted_status = status_filter.strip().lower()
    if wanted_status != ALL_STATUSES and _status_value(card) != wanted_status:
        return False

    # Every selected tag must be present (AND, not OR)
    project_tags = {tag.lower() for tag in card.tags}
    return all(tag.lower() in project_tags for tag in selected_tags)


def filter_projects(
    projects: Iterable[ProjectCard],
    search_term: str = "",
    status_filter: str = ALL_STATUSES,
    selected_tags: Iterable[str] = (),
) -> list[ProjectCard]:
    """Return the visible subset of projects, preserving order."""
    selected = list(selected_tags)
    return [
        card
        for card in projects
        if matches(card, search_term, status_filter, selected)
    ]


def status_options(projects: Iterable[ProjectCard]) -> list[StatusOption]:
    """Distinct statuses present in the projects, sorted by label."""
    seen: dict[str, str] = {}
    for card in projects:
        label = card.status or UNCATEGORIZED
        seen.setdefault(label.lower(), label)
    options = [StatusOption(value=value, label=label) for value, label in seen.items()]
    return sorted(options, key=lambda o: _label_key(o.label))


def build_tag_filter_groups(
    projects: Iterable[ProjectCard],
    tag_categories: Mapping[str, TagCategoryConfig],
    tag_color_map: Mapping[str, str],
) -> list[TagFilterGroup]:
    """Group the tags used by projects into the configured categories.

    Tags are deduplicated case-insensitively and labelled with the first
    casing seen. Only tags some project actually carries are offered.
    Tags no category claims land in a trailing "Other" group.
    """
    labels: dict[str, str] = {}
    for card in projects:
        for tag in card.tags:
            value = tag.strip().lower()
            if value:
                labels.setdefault(value, tag.strip())

    consumed: set[str] = set()
    groups: list[TagFilterGroup] = []

    categories = sorted(
        ((key, format_category_label(key), config) for key, config in tag_categories.items()),
        key=lambda entry: _label_key(entry[1]),
    )
    for key, label, config in categories:
        options: dict[str, TagOption] = {}
        for tag in config.tags:
            value = tag.strip().lower()
            if not value or value not in labels:
                continue
            consumed.add(value)
            options[value] = TagOption(
                value=value,
                label=labels[value],
                classes=tag_color_map.get(value, config.classes),
            )
        if options:
            ordered = sorted(options.values(), key=lambda o: _label_key(o.label))
            groups.append(TagFilterGroup(key=key, label=label, tags=ordered))

    leftovers = [
        TagOption(value=value, label=label, classes=tag_color_map.get(value, ""))
        for value, label in labels.items()
        if value not in consumed
    ]
    if leftovers:
        leftovers.sort(key=lambda o: _label_key(o.label))
        groups.append(TagFilterGroup(key=OTHER_GROUP_KEY, label=OTHER_GROUP_LABEL, tags=leftovers))

    return groups


def tag_options_by_value(groups: Iterable[TagFilterGroup]) -> dict[str, TagOption]:
    options: dict[str, TagOption] = {}
    for group in groups:
        for option in group.tags:
            options[option.value] = option
    return options


class GalleryState(BaseModel):
    """Filter-bar state: search box, status select and the tag dropdown.

    The dropdown is the only stateful widget; it is either open or closed,
    and Escape or a click outside it closes it.
    """

    search_term: str = ""
    status_filter: str = ALL_STATUSES
    selected_tags: list[str] = Field(default_factory=list)
    tag_dropdown_open: bool = False

    @property
    def has_active_filters(self) -> bool:
        return (
            bool(self.search_term.strip())
            or self.status_filter != ALL_STATUSES
            or bool(self.selected_tags)
        )

    @property
    def dropdown_label(self) -> str:
        count = len(self.selected_tags)
        if count == 0:
            return "All tags"
        return f"{count} tag{'s' if count > 1 else ''} selected"

    def toggle_tag(self, tag: str) -> None:
        value = tag.strip().lower()
        if not value:
            return
        if value in self.selected_tags:
            self.selected_tags = [t for t in self.selected_tags if t != value]
        else:
            self.selected_tags = [*self.selected_tags, value]

    def clear_tags(self) -> None:
        self.selected_tags = []

    def reset(self) -> None:
        self.search_term = ""
        self.status_filter = ALL_STATUSES
        self.selected_tags = []

    def toggle_dropdown(self) -> None:
        self.tag_dropdown_open = not self.tag_dropdown_open

    def close_dropdown(self) -> None:
        self.tag_dropdown_open = False

    def handle_key(self, key: str) -> None:
        if self.tag_dropdown_open and key == ESCAPE_KEY:
            self.close_dropdown()

    def handle_click(self, inside_dropdown: bool) -> None:
        if self.tag_dropdown_open and not inside_dropdown:
            self.close_dropdown()

    def visible(self, projects: Iterable[ProjectCard]) -> list[ProjectCard]:
        return filter_projects(projects, self.search_term, self.status_filter, self.selected_tags)

    def selected_tag_badges(self, groups: Sequence[TagFilterGroup]) -> list[TagOption]:
        """Badges for the selected tags, sorted by label; unknown tags get no styling."""
        known = tag_options_by_value(groups)
        badges = [
            known.get(value, TagOption(value=value, label=value))
            for value in self.selected_tags
        ]
        return sorted(badges, key=lambda o: _label_key(o.label))
