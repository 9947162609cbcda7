"""GitHub content source: PyGithub for listings, httpx for raw files."""

import asyncio
import logging
import time
from collections.abc import Callable
from functools import cached_property

import httpx
from github import Auth, Github, GithubException
from github.Repository import Repository

from showcase.errors import RemoteError
from showcase.vcs.base import ContentSource
from showcase.vcs.cache import TTLCache
from showcase.vcs.models import ContentEntry, RepoInfo

logger = logging.getLogger(__name__)

DEFAULT_API_ROOT = "https://api.github.com"


class GitHubContentSource(ContentSource):
    """Reads project folders from a single GitHub repository.

    PyGithub is synchronous, so all blocking calls are wrapped
    with asyncio.to_thread() to avoid blocking the event loop.
    Every listing and raw fetch goes through one shared TTL cache.
    """

    def __init__(
        self,
        owner: str,
        repo: str,
        *,
        token: str | None = None,
        api_root: str = DEFAULT_API_ROOT,
        cache_ttl: float = 3600,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if not owner or not repo:
            raise ValueError("Both owner and repo are required.")
        self.owner = owner
        self.repo = repo
        self._token = token or None
        self._api_root = api_root.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._cache = TTLCache(cache_ttl, clock=clock)
        self._http: httpx.AsyncClient | None = None

    @property
    def repo_id(self) -> str:
        return f"{self.owner}/{self.repo}"

    @cached_property
    def _client(self) -> Github:
        auth = Auth.Token(self._token) if self._token else None
        return Github(auth=auth, base_url=self._api_root, timeout=int(self._timeout))

    @cached_property
    def _repo(self) -> Repository:
        # lazy: no request until the first get_contents()
        return self._client.get_repo(self.repo_id, lazy=True)

    def _http_client(self) -> httpx.AsyncClient:
        if self._http is None:
            self._http = httpx.AsyncClient(
                timeout=self._timeout,
                follow_redirects=True,
                transport=self._transport,
            )
        return self._http

    async def list_directory(self, path: str = "") -> list[ContentEntry]:
        """List files and directories at a path in the repository."""
        key = ("contents", path)
        cached = self._cache.get(key)
        if cached is not None:
            return list(cached)

        def _sync() -> list[ContentEntry]:
            contents = self._repo.get_contents(path)
            # get_contents returns a single item for files, list for dirs
            if not isinstance(contents, list):
                contents = [contents]
            return [
                ContentEntry(
                    name=c.name,
                    path=c.path,
                    type="dir" if c.type == "dir" else "file",
                    download_url=c.download_url,
                )
                for c in contents
            ]

        try:
            entries = await asyncio.to_thread(_sync)
        except (GithubException, OSError) as e:
            raise RemoteError("list", path or "/", e) from e

        logger.debug("listed %s/%s (%d entries)", self.repo_id, path, len(entries))
        self._cache.set(key, entries)
        return list(entries)

    async def fetch_raw(self, url: str) -> str:
        """Fetch raw file text from a download_url."""
        key = ("raw", url)
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        try:
            resp = await self._http_client().get(url)
            resp.raise_for_status()
        except httpx.HTTPError as e:
            raise RemoteError("fetch", url, e) from e

        text = resp.text
        self._cache.set(key, text)
        return text

    async def describe_repo(self) -> RepoInfo:
        """Get repository-level details."""
        key = ("repo", self.repo_id)
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        def _sync() -> RepoInfo:
            repo = self._client.get_repo(self.repo_id)
            return RepoInfo(
                full_name=repo.full_name,
                description=repo.description,
                default_branch=repo.default_branch,
                url=repo.html_url,
            )

        try:
            info = await asyncio.to_thread(_sync)
        except (GithubException, OSError) as e:
            raise RemoteError("describe", self.repo_id, e) from e

        self._cache.set(key, info)
        return info

    async def aclose(self) -> None:
        if self._http is not None:
            await self._http.aclose()
            self._http = None
        if "_client" in self.__dict__:
            self._client.close()

    async def __aenter__(self) -> "GitHubContentSource":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
