"""Ad resize task implementation."""

import asyncio
import logging
from pathlib import PurePosixPath
from typing import Callable
from typing_extensions import override

from ...common.compute_module import ComputeModule
from ...common.config import AdResizeConfig
from ...common.format_catalog import FormatCatalog, default_catalog
from ...common.job_storage import JobStorage
from .algo.batch_generate import generate
from .algo.source_decoder import load_source_image
from .schema import AdResizeOutput, AdResizeParams, RenderedAdFile

logger = logging.getLogger(__name__)


class AdResizeTask(ComputeModule[AdResizeParams, AdResizeOutput]):
    """Compute module rendering one uploaded image into the selected ad formats."""

    schema: type[AdResizeParams] = AdResizeParams

    def __init__(
        self,
        config: AdResizeConfig | None = None,
        catalog: FormatCatalog | None = None,
    ):
        self.config: AdResizeConfig = config if config is not None else AdResizeConfig()
        if catalog is None:
            catalog = (
                FormatCatalog.from_json(self.config.catalog_path)
                if self.config.catalog_path
                else default_catalog()
            )
        self.catalog: FormatCatalog = catalog

    @property
    @override
    def task_type(self) -> str:
        return "ad_resize"

    @override
    async def run(
        self,
        job_id: str,
        params: AdResizeParams,
        storage: JobStorage,
        progress_callback: Callable[[int], None] | None = None,
    ) -> AdResizeOutput:
        data = await storage.read_bytes(job_id, params.input_path)
        source = await load_source_image(data)

        if progress_callback:
            progress_callback(10)

        # A re-run replaces previous results entirely
        if storage.remove(job_id, params.output_dir):
            logger.info(f"Discarded previous results of job {job_id}")

        assets = generate(
            source,
            params.format_ids,
            catalog=self.catalog,
            config=self.config,
        )

        if self.config.delay_seconds > 0:
            await asyncio.sleep(self.config.delay_seconds)

        files: list[RenderedAdFile] = []
        try:
            for index, asset in enumerate(assets):
                relative_path = str(PurePosixPath(params.output_dir) / asset.filename)
                saved = await storage.save(job_id, relative_path, asset.encoded_image)
                files.append(
                    RenderedAdFile(
                        format_id=asset.format.id,
                        name=asset.format.name,
                        width=asset.format.width,
                        height=asset.format.height,
                        relative_path=saved.relative_path,
                        size=saved.size,
                    )
                )

                if progress_callback:
                    progress = 10 + int((index + 1) / len(assets) * 90)
                    progress_callback(progress)
        except Exception:
            # No partial results survive a failed job
            _ = storage.remove(job_id, params.output_dir)
            raise

        logger.info(f"Job {job_id}: rendered {len(files)} ad format(s)")
        return AdResizeOutput(files=files)
