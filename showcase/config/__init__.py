from .loader import (
    get_config,
    get_github_user,
    get_status_folder_classes,
    get_tag_color_map,
    load_config,
    reset_config_cache,
    resolve_github_user,
)
from .models import (
    OutputConfig,
    ShowcaseConfig,
    StatusStyleConfig,
    TagCategoryConfig,
)
from .styles import (
    DEFAULT_STATUS_FOLDER_CLASS,
    build_status_folder_classes,
    build_tag_color_map,
)

__all__ = [
    "DEFAULT_STATUS_FOLDER_CLASS",
    "OutputConfig",
    "ShowcaseConfig",
    "StatusStyleConfig",
    "TagCategoryConfig",
    "build_status_folder_classes",
    "build_tag_color_map",
    "get_config",
    "get_github_user",
    "get_status_folder_classes",
    "get_tag_color_map",
    "load_config",
    "reset_config_cache",
    "resolve_github_user",
]
