from __future__ import annotations

import fsspec

from application.ports.blob_store import BlobStore


class FsspecBlobStore(BlobStore):
    """Blob store over any fsspec filesystem (local, s3://, memory://, ...)."""

    def __init__(self, base_url: str, *, storage_options: dict | None = None) -> None:
        self.base_url = base_url.rstrip("/")
        self.storage_options = storage_options or {}

    def _url(self, key: str) -> str:
        return f"{self.base_url}/{key}"

    def exists(self, key: str) -> bool:
        fs, path = fsspec.core.url_to_fs(self._url(key), **self.storage_options)
        return fs.exists(path)

    def delete(self, key: str) -> None:
        fs, path = fsspec.core.url_to_fs(self._url(key), **self.storage_options)
        fs.rm(path)
