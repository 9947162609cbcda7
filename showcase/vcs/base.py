"""Abstract content source interface for Showcase."""

from abc import ABC, abstractmethod

from showcase.vcs.models import ContentEntry, RepoInfo


class ContentSource(ABC):
    """Read-only access to the repository that holds the project folders.

    Implementations raise RemoteError on any failure; deciding what an
    empty result looks like is left to the caller.
    """

    @abstractmethod
    async def list_directory(self, path: str = "") -> list[ContentEntry]:
        """List files and directories at a path in the repository.

        Args:
            path: Directory path within the repo (empty string for root).
        """
        ...

    @abstractmethod
    async def fetch_raw(self, url: str) -> str:
        """Fetch the raw text behind a listing entry's download_url."""
        ...

    @abstractmethod
    async def describe_repo(self) -> RepoInfo:
        """Get repository-level details."""
        ...

    async def aclose(self) -> None:
        """Release any network resources held by the source."""
        return None
