"""
JobStorage Protocol - interface for job-scoped file storage operations.

This is the persistence boundary of the pipeline: the renderer only ever
produces bytes, and storage decides where they end up.

Design goals:
- Hide internal folder structure
- Keep storage as the single authority over paths
- Let a job's outputs be discarded wholesale when it is re-run
"""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field


class JobStorageError(Exception):
    """Base class for storage-related errors."""


class JobDirectoryCreationError(JobStorageError):
    def __init__(self, job_id: str | int):
        self.job_id: str | int = job_id
        super().__init__(f"Failed to create storage directory for job '{job_id}'")


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class SavedJobFile(BaseModel):
    """Metadata of a saved job file."""

    relative_path: str = Field(
        ...,
        description="Relative path of the saved file within the job storage",
    )
    size: int = Field(
        ...,
        ge=0,
        description="File size in bytes",
    )

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Storage Protocol
# ---------------------------------------------------------------------------


@runtime_checkable
class JobStorage(Protocol):
    """
    Protocol for job-scoped file storage.

    Implementations own:
    - storage root
    - directory layout
    - lifecycle management

    Callers interact ONLY via job_id and relative paths.
    """

    # ---------------------------------------------------------------------
    # Job lifecycle
    # ---------------------------------------------------------------------

    def create_directory(self, job_id: str) -> None:
        """Create storage directory for a job (no-op if it exists)."""
        ...

    def remove(self, job_id: str, relative_path: str | None = None) -> bool:
        """
        Remove all files of a job, or only the file/folder at ``relative_path``.

        Returns:
            True if something was removed, False otherwise.
        """
        ...

    # ---------------------------------------------------------------------
    # Writing
    # ---------------------------------------------------------------------

    async def save(
        self,
        job_id: str,
        relative_path: str,
        data: bytes,
        *,
        mkdirs: bool = True,
    ) -> SavedJobFile:
        """
        Write bytes into job storage.

        Returns:
            Metadata of the saved file.
        """
        ...

    def allocate_path(
        self,
        job_id: str,
        relative_path: str,
        *,
        mkdirs: bool = True,
    ) -> Path:
        """
        Allocate a filesystem path for writing.

        Storage retains control of layout; caller owns writing.
        """
        ...

    # ---------------------------------------------------------------------
    # Reading / resolving
    # ---------------------------------------------------------------------

    async def read_bytes(self, job_id: str, relative_path: str) -> bytes:
        """Read a stored file completely."""
        ...

    def resolve_path(
        self,
        job_id: str,
        relative_path: str | None = None,
    ) -> Path:
        """
        Resolve a job-relative path to an absolute filesystem path.
        """
        ...
