from __future__ import annotations

from typing import Protocol


class BlobStore(Protocol):
    """Port for the binary storage holding attachment files and thumbnails."""

    def exists(self, key: str) -> bool: ...
    def delete(self, key: str) -> None:
        """Remove the blob. Raises FileNotFoundError when it does not exist."""
        ...
