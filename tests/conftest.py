"""Shared test fixtures for Showcase."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from showcase.config import ShowcaseConfig, reset_config_cache
from showcase.errors import RemoteError
from showcase.vcs.base import ContentSource
from showcase.vcs.models import ContentEntry, RepoInfo

ALPHA_URL = "https://raw.example.com/octo/projects/main/Completed/Alpha/README.md"
BETA_URL = "https://raw.example.com/octo/projects/main/In%20Progress/Beta/beta.md"

ALPHA_MARKDOWN = """\
[Alpha](https://alpha.example.com)

**Project Description:** A fast thing.

**Languages & Technologies:** Python, FastAPI, Docker
"""

BETA_MARKDOWN = """\
Beta

**Project Description:** Work in progress.

**Languages & Technologies:** TypeScript, React
"""


def _dir(parent: str, name: str) -> ContentEntry:
    path = f"{parent}/{name}" if parent else name
    return ContentEntry(name=name, path=path, type="dir")


def _file(parent: str, name: str, download_url: str | None = None) -> ContentEntry:
    path = f"{parent}/{name}" if parent else name
    return ContentEntry(name=name, path=path, type="file", download_url=download_url)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    """No ambient GitHub or environment settings leak into tests."""
    for var in ("GITHUB_USER", "GITHUB_TOKEN", "SHOWCASE_ENV"):
        monkeypatch.delenv(var, raising=False)
    reset_config_cache()
    yield
    reset_config_cache()


@pytest.fixture
def sample_tree():
    """Two status folders, a non-status folder and a stray file at the root."""
    return {
        "": [
            _dir("", "Completed"),
            _dir("", "In Progress"),
            _dir("", "Notes"),
            _file("", "README.md", "https://raw.example.com/README.md"),
        ],
        "Completed": [
            _dir("Completed", "Alpha"),
            _file("Completed", "notes.txt"),
        ],
        "In Progress": [
            _dir("In Progress", "Beta"),
        ],
        "Completed/Alpha": [
            _file("Completed/Alpha", "screenshot.png", "https://raw.example.com/shot.png"),
            _file("Completed/Alpha", "README.md", ALPHA_URL),
        ],
        "In Progress/Beta": [
            _file("In Progress/Beta", "beta.md", BETA_URL),
        ],
    }


@pytest.fixture
def sample_files():
    return {
        ALPHA_URL: ALPHA_MARKDOWN,
        BETA_URL: BETA_MARKDOWN,
    }


@pytest.fixture
def sample_repo_info():
    return RepoInfo(
        full_name="octo/projects",
        description="Things I have built",
        default_branch="main",
        url="https://github.com/octo/projects",
    )


@pytest.fixture
def make_source(sample_repo_info):
    """Build a mock ContentSource backed by an in-memory tree.

    Paths missing from the tree and URLs missing from the file map
    raise RemoteError, the same as a real source would.
    """

    def _make(tree: dict[str, list[ContentEntry]], files: dict[str, str] | None = None):
        files = files or {}

        async def _list(path: str = "") -> list[ContentEntry]:
            if path not in tree:
                raise RemoteError("list", path or "/")
            return list(tree[path])

        async def _fetch(url: str) -> str:
            if url not in files:
                raise RemoteError("fetch", url)
            return files[url]

        source = MagicMock(spec=ContentSource)
        source.list_directory = AsyncMock(side_effect=_list)
        source.fetch_raw = AsyncMock(side_effect=_fetch)
        source.describe_repo = AsyncMock(return_value=sample_repo_info)
        source.aclose = AsyncMock()
        return source

    return _make


@pytest.fixture
def mock_source(make_source, sample_tree, sample_files):
    return make_source(sample_tree, sample_files)


@pytest.fixture
def sample_config():
    return ShowcaseConfig(
        github_user="octo",
        tag_categories={
            "languages": {"classes": "bg-blue-100 text-blue-700", "tags": ["Python", "TypeScript"]},
            "frameworks": {"classes": "bg-purple-100 text-purple-700", "tags": ["React", "FastAPI"]},
        },
        status_styles={"Completed": {"folderClasses": "bg-emerald-100"}},
    )


@pytest.fixture
def config_file(tmp_path):
    """A minimal valid showcase.yaml in a temp directory."""
    path = tmp_path / "showcase.yaml"
    path.write_text(
        'githubUser: "octo"\n'
        'githubRepo: "projects"\n'
        'logLevel: "warn"\n'
        "tagCategories:\n"
        "  languages:\n"
        '    classes: "bg-blue-100 text-blue-700"\n'
        "    tags: [Python, TypeScript]\n"
        "  frameworks:\n"
        '    classes: "bg-purple-100 text-purple-700"\n'
        "    tags: [React, FastAPI]\n"
    )
    return path
