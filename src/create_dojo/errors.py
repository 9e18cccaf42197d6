"""Exceptions raised by the scaffolding pipeline."""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for every error the pipeline can raise."""


class ValidationError(ScaffoldError):
    """A user-provided value was rejected."""


class FetchError(ScaffoldError):
    """The template fetcher exited with a non-zero status."""

    def __init__(self, ref: str, status: int) -> None:
        self.ref = ref
        self.status = status
        super().__init__(f"Failed to clone template: {ref} (exit status {status})")


class ManifestError(ScaffoldError):
    """package.json is missing, unreadable or not the expected shape."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class NetworkError(ScaffoldError):
    """The registry lookup for the latest version failed."""


class FilesystemError(ScaffoldError):
    """A project directory could not be created."""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        super().__init__(f"Could not create directory {path}: {cause.strerror or cause}")
