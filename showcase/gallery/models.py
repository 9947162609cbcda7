"""Pydantic models for gallery cards and filter options."""

from pydantic import BaseModel, Field

from showcase.vcs.models import UNCATEGORIZED


class ProjectCard(BaseModel):
    """A project as displayed in the gallery: descriptor, metadata and styling."""

    name: str
    path: str
    type: str = "dir"
    status: str = UNCATEGORIZED
    tags: list[str] = Field(default_factory=list)
    description: str = ""
    redirect_url: str | None = None
    tag_classes: dict[str, str] = Field(
        default_factory=dict, description="lower-cased tag -> badge classes"
    )
    folder_classes: str = ""
    href: str = ""

    @property
    def is_external(self) -> bool:
        return self.redirect_url is not None

    def classes_for(self, tag: str) -> str:
        return self.tag_classes.get(tag.lower(), "")


class StatusOption(BaseModel):
    value: str
    label: str


class TagOption(BaseModel):
    value: str = Field(description="lower-cased tag used for matching")
    label: str = Field(description="first-seen original casing")
    classes: str = ""


class TagFilterGroup(BaseModel):
    key: str
    label: str
    tags: list[TagOption]
