from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TagCategoryConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    classes: str
    tags: list[str]


class StatusStyleConfig(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    folder_classes: str = Field(alias="folderClasses")


class OutputConfig(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    base_dir: str = Field(default="site", alias="baseDir")
    write_json: bool = Field(default=True, alias="writeJson")
    title: str = "Projects"


class ShowcaseConfig(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    github_user: str = Field(alias="githubUser")
    github_repo: str = Field(default="projects", alias="githubRepo")
    api_root: str = Field(default="https://api.github.com", alias="apiRoot")
    cache_ttl: int = Field(default=3600, ge=0, alias="cacheTtl")
    request_timeout: float = Field(default=10.0, gt=0, alias="requestTimeout")
    tag_categories: dict[str, TagCategoryConfig] = Field(
        default_factory=dict, alias="tagCategories"
    )
    status_styles: dict[str, StatusStyleConfig] = Field(
        default_factory=dict, alias="statusStyles"
    )
    output: OutputConfig = Field(default_factory=OutputConfig)
    log_level: Literal["debug", "info", "warn", "error"] = Field(
        default="info", alias="logLevel"
    )
    log_format: Literal["text", "json"] = Field(default="text", alias="logFormat")

    @field_validator("github_user", mode="before")
    @classmethod
    def _require_github_user(cls, value: Any) -> str:
        text = str(value).strip() if value is not None else ""
        if not text:
            raise ValueError("githubUser must be a non-empty value")
        return text

    @field_validator("tag_categories", mode="before")
    @classmethod
    def _drop_incomplete_categories(cls, value: Any) -> dict:
        # Malformed categories are skipped rather than rejected
        if not isinstance(value, dict):
            return {}
        kept: dict[str, dict] = {}
        for key, entry in value.items():
            if isinstance(entry, TagCategoryConfig):
                entry = entry.model_dump()
            if not isinstance(entry, dict):
                continue
            classes = str(entry.get("classes") or "").strip()
            raw_tags = entry.get("tags")
            tags = (
                [str(t).strip() for t in raw_tags if t is not None and str(t).strip()]
                if isinstance(raw_tags, list)
                else []
            )
            if classes and tags:
                kept[str(key)] = {"classes": classes, "tags": tags}
        return kept

    @field_validator("status_styles", mode="before")
    @classmethod
    def _normalize_status_styles(cls, value: Any) -> dict:
        if not isinstance(value, dict):
            return {}
        kept: dict[str, dict] = {}
        for key, entry in value.items():
            if isinstance(entry, StatusStyleConfig):
                entry = entry.model_dump()
            if not isinstance(entry, dict):
                continue
            normalized_key = str(key).strip().lower()
            if not normalized_key:
                continue
            raw = entry.get("folderClasses", entry.get("folder_classes"))
            folder_classes = str(raw or "").strip()
            if folder_classes:
                kept[normalized_key] = {"folderClasses": folder_classes}
        return kept
