"""ComputeModule - Abstract base class for compute tasks."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Callable, Generic

from pydantic import ValidationError

from .job_storage import JobStorage
from .schema_job import JobRecordUpdate, JobStatus, P, Q

logger = logging.getLogger(__name__)


class ComputeModule(ABC, Generic[P, Q]):
    """
    Stateless, template-method based compute module.

    - Params are validated once and passed through
    - run() owns persistence
    - Q contains metadata only
    """

    schema: type[P]

    @property
    @abstractmethod
    def task_type(self) -> str: ...

    @abstractmethod
    async def run(
        self,
        job_id: str,
        params: P,
        storage: JobStorage,
        progress_callback: Callable[[int], None] | None = None,
    ) -> Q:
        """
        Execute task.

        - May persist data via storage
        - Must return metadata only
        """
        ...

    async def execute(
        self,
        job_id: str,
        params: Mapping[str, object],
        storage: JobStorage,
        progress_callback: Callable[[int], None] | None = None,
    ) -> JobRecordUpdate:
        try:
            validated = self.schema.model_validate(params)

            output = await self.run(
                job_id,
                validated,
                storage,
                progress_callback,
            )

            return JobRecordUpdate(
                status=JobStatus.completed,
                output=output.model_dump(),
                progress=100,
            )

        except ValidationError as exc:
            logger.warning(f"Invalid params for {self.task_type} job {job_id}: {exc}")
            return JobRecordUpdate(
                status=JobStatus.error,
                error_message=str(exc),
            )

        except Exception as exc:
            logger.error(f"{self.task_type} job {job_id} failed: {exc}")
            return JobRecordUpdate(
                status=JobStatus.error,
                error_message=str(exc),
            )
