"""Pydantic models for remote listings and discovered projects."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

UNCATEGORIZED = "Uncategorized"


class ContentEntry(BaseModel):
    """One item of a repository contents listing."""

    name: str
    path: str
    type: Literal["file", "dir"]
    download_url: str | None = None


class RepoInfo(BaseModel):
    """Repository-level details shown in the gallery header."""

    full_name: str = Field(description="Full name including owner (e.g. owner/repo)")
    description: str | None = None
    default_branch: str = "main"
    url: str = ""


class ProjectDescriptor(BaseModel):
    """A discovered project folder, before its Markdown metadata is read."""

    model_config = ConfigDict(frozen=True)

    name: str
    path: str = Field(description="Slash-joined location under the repo root")
    type: Literal["dir"] = "dir"
    status: str = UNCATEGORIZED


class ProjectMetadata(BaseModel):
    """Fields extracted from a project's Markdown file."""

    tags: list[str] = Field(default_factory=list)
    description: str = ""
    redirect_url: str | None = None
