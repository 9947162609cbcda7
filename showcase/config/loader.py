"""YAML config loading with env var expansion and a process-wide snapshot."""

import os
import re
import threading
from pathlib import Path

import yaml
from pydantic import ValidationError

from showcase.errors import ConfigError

from .models import ShowcaseConfig
from .styles import build_status_folder_classes, build_tag_color_map

GITHUB_USER_ENV = "GITHUB_USER"
ENVIRONMENT_ENV = "SHOWCASE_ENV"

_lock = threading.Lock()
_cached_config: ShowcaseConfig | None = None
_cached_tag_colors: dict[str, str] | None = None
_cached_folder_classes: dict[str, str] | None = None


def _candidate_paths(cli_path: str | None) -> list[Path]:
    if cli_path:
        # An explicit path never falls through to the defaults
        return [Path(cli_path)]
    return [
        Path("./showcase.yaml"),
        Path("./config.yaml"),
        Path.home() / ".showcase" / "config.yaml",
    ]


def load_config(cli_path: str | None = None) -> ShowcaseConfig:
    """Load config with resolution order: CLI > project-local > user-global.

    There are no defaults to fall back on: `githubUser` has to come from
    a file, so a missing file is as fatal as an invalid one.
    """
    candidates = _candidate_paths(cli_path)
    path = next((p for p in candidates if p.is_file()), None)
    if path is None:
        looked_in = ", ".join(str(p) for p in candidates)
        raise ConfigError(f"Config file not found (looked in: {looked_in})")

    try:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{path} is empty or invalid")

    raw = _expand_env_vars(raw)
    try:
        return ShowcaseConfig(**raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid config in {path}: {e}") from e


def _expand_env_vars(obj: object) -> object:
    """Recursively expand ${VAR} references in strings."""
    if isinstance(obj, str):
        return re.sub(r"\$\{(\w+)\}", lambda m: os.environ.get(m.group(1), ""), obj)
    elif isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


def is_production() -> bool:
    return os.environ.get(ENVIRONMENT_ENV, "").strip().lower() == "production"


def get_config(cli_path: str | None = None) -> ShowcaseConfig:
    """Return the config snapshot.

    In production the first successful load is reused for the life of the
    process; otherwise the file is re-read on every call.
    """
    global _cached_config
    if not is_production():
        return load_config(cli_path)
    with _lock:
        if _cached_config is None:
            _cached_config = load_config(cli_path)
        return _cached_config


def get_tag_color_map(cli_path: str | None = None) -> dict[str, str]:
    global _cached_tag_colors
    if not is_production():
        return build_tag_color_map(get_config(cli_path).tag_categories)
    config = get_config(cli_path)
    with _lock:
        if _cached_tag_colors is None:
            _cached_tag_colors = build_tag_color_map(config.tag_categories)
        return _cached_tag_colors


def get_status_folder_classes(cli_path: str | None = None) -> dict[str, str]:
    global _cached_folder_classes
    if not is_production():
        return build_status_folder_classes(get_config(cli_path).status_styles)
    config = get_config(cli_path)
    with _lock:
        if _cached_folder_classes is None:
            _cached_folder_classes = build_status_folder_classes(config.status_styles)
        return _cached_folder_classes


def resolve_github_user(config: ShowcaseConfig) -> str:
    """GITHUB_USER from the environment wins over the config file."""
    from_env = os.environ.get(GITHUB_USER_ENV, "").strip()
    return from_env or config.github_user


def get_github_user(cli_path: str | None = None) -> str:
    return resolve_github_user(get_config(cli_path))


def reset_config_cache() -> None:
    """Drop every cached snapshot. Used by tests and config reloads."""
    global _cached_config, _cached_tag_colors, _cached_folder_classes
    with _lock:
        _cached_config = None
        _cached_tag_colors = None
        _cached_folder_classes = None


# Default YAML template for `showcase config init`
DEFAULT_CONFIG_TEMPLATE = """\
# showcase.yaml

# GitHub account that owns the projects repository (GITHUB_USER overrides)
githubUser: "your-github-user"
githubRepo: "projects"
# apiRoot: "https://api.github.com"

# Seconds a fetched listing or file is reused before refetching
cacheTtl: 3600
requestTimeout: 10

# Tag badge colours, grouped into filter categories
tagCategories:
  languages:
    classes: "bg-blue-100 text-blue-700"
    tags: [Python, TypeScript, Go, Rust]
  frameworks:
    classes: "bg-purple-100 text-purple-700"
    tags: [React, Next.js, FastAPI]

# Folder icon colours per status bucket (keys are case-insensitive)
statusStyles:
  Completed:
    folderClasses: "bg-green-100 text-green-700"
  In Progress:
    folderClasses: "bg-amber-100 text-amber-700"

# Static gallery output
output:
  baseDir: "site"
  writeJson: true
  title: "Projects"

# Logging
logLevel: "info"              # debug | info | warn | error
logFormat: "text"             # text | json
"""
