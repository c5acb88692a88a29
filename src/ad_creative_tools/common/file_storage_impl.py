from __future__ import annotations

import logging
import shutil
from os import PathLike
from pathlib import Path
from typing_extensions import override

import aiofiles

from .job_storage import JobDirectoryCreationError, JobStorage, SavedJobFile

logger = logging.getLogger(__name__)


class LocalFileStorage(JobStorage):
    """
    Local filesystem implementation of JobStorage.

    Layout:
        base_dir/
            <job_id>/
                <relative_path>
    """

    def __init__(self, base_dir: str | PathLike[str]):
        self._base_dir: Path = Path(base_dir).expanduser().resolve()
        self._base_dir.mkdir(parents=True, exist_ok=True)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _job_dir(self, job_id: str) -> Path:
        return self._base_dir / job_id

    def _safe_path(self, job_id: str, relative_path: str | None = None) -> Path:
        """
        Resolve and validate a job-relative path.
        Prevents path traversal.
        """
        base = self._job_dir(job_id).resolve()

        path = base if relative_path is None else (base / relative_path)
        resolved = path.resolve()

        if base not in resolved.parents and resolved != base:
            raise ValueError("Invalid relative path (path traversal detected)")

        return resolved

    # ------------------------------------------------------------------
    # Job lifecycle
    # ------------------------------------------------------------------

    @override
    def create_directory(self, job_id: str) -> None:
        try:
            self._job_dir(job_id).mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise JobDirectoryCreationError(job_id) from exc

    @override
    def remove(self, job_id: str, relative_path: str | None = None) -> bool:
        target = self._safe_path(job_id, relative_path)
        if not target.exists():
            return False
        try:
            if target.is_dir():
                shutil.rmtree(target)
            else:
                target.unlink()
        except OSError as exc:
            logger.warning(f"Failed to remove {target}: {exc}")
            return False
        return True

    # ------------------------------------------------------------------
    # Writing
    # ------------------------------------------------------------------

    @override
    async def save(
        self,
        job_id: str,
        relative_path: str,
        data: bytes,
        *,
        mkdirs: bool = True,
    ) -> SavedJobFile:
        dst = self.allocate_path(job_id, relative_path, mkdirs=mkdirs)

        async with aiofiles.open(dst, "wb") as f:
            _ = await f.write(data)

        return SavedJobFile(relative_path=relative_path, size=len(data))

    @override
    def allocate_path(
        self,
        job_id: str,
        relative_path: str,
        *,
        mkdirs: bool = True,
    ) -> Path:
        self.create_directory(job_id)
        path = self._safe_path(job_id, relative_path)
        if mkdirs:
            path.parent.mkdir(parents=True, exist_ok=True)
        return path

    # ------------------------------------------------------------------
    # Reading / resolving
    # ------------------------------------------------------------------

    @override
    async def read_bytes(self, job_id: str, relative_path: str) -> bytes:
        path = self._safe_path(job_id, relative_path)
        if not path.is_file():
            raise FileNotFoundError(f"Input file not found: {relative_path}")
        async with aiofiles.open(path, "rb") as f:
            return await f.read()

    @override
    def resolve_path(
        self,
        job_id: str,
        relative_path: str | None = None,
    ) -> Path:
        return self._safe_path(job_id, relative_path)
