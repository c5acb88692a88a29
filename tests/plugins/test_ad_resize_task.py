"""Unit and integration tests for the ad resize task.

Tests schema validation, task execution against local job storage,
re-run semantics, progress reporting and error conversion.
"""

import json
import time
from pathlib import Path
from typing_extensions import override

import pytest
import pytest_asyncio

from ad_creative_tools.common.config import AdResizeConfig
from ad_creative_tools.common.file_storage_impl import LocalFileStorage
from ad_creative_tools.common.format_catalog import FormatCatalog
from ad_creative_tools.common.schema_job import JobStatus
from ad_creative_tools.plugins.ad_resize.schema import AdResizeOutput, AdResizeParams
from ad_creative_tools.plugins.ad_resize.task import AdResizeTask
from tests.helpers import open_png

JOB_ID = "test-job-123"
INPUT_PATH = "input/source.png"

# ============================================================================
# SCHEMA TESTS
# ============================================================================


def test_ad_resize_params_defaults():
    params = AdResizeParams(input_path=INPUT_PATH)

    assert params.format_ids == []
    assert params.output_dir == "output"


def test_ad_resize_params_strips_blank_ids():
    params = AdResizeParams(input_path=INPUT_PATH, format_ids=[" ig-story ", "", "  "])

    assert params.format_ids == ["ig-story"]


def test_ad_resize_params_requires_input_path():
    with pytest.raises(ValueError):
        _ = AdResizeParams.model_validate({"format_ids": ["ig-story"]})


def test_ad_resize_output_default():
    assert AdResizeOutput().files == []


# ============================================================================
# TASK TESTS
# ============================================================================


@pytest_asyncio.fixture
async def uploaded(storage: LocalFileStorage, synthetic_png_bytes: bytes) -> LocalFileStorage:
    _ = await storage.save(JOB_ID, INPUT_PATH, synthetic_png_bytes)
    return storage


def test_ad_resize_task_type():
    assert AdResizeTask().task_type == "ad_resize"


@pytest.mark.asyncio
async def test_ad_resize_task_run_success(uploaded: LocalFileStorage):
    params = AdResizeParams(input_path=INPUT_PATH, format_ids=["ig-story", "fb-ig-square"])

    output = await AdResizeTask().run(JOB_ID, params, uploaded)

    assert isinstance(output, AdResizeOutput)
    assert [f.format_id for f in output.files] == ["fb-ig-square", "ig-story"]
    assert [f.relative_path for f in output.files] == [
        "output/ad-fb-ig-square.png",
        "output/ad-ig-story.png",
    ]

    for entry in output.files:
        path = uploaded.resolve_path(JOB_ID, entry.relative_path)
        assert path.is_file()
        assert path.stat().st_size == entry.size
        with open(path, "rb") as f:
            assert open_png(f.read()).size == (entry.width, entry.height)


@pytest.mark.asyncio
async def test_ad_resize_task_rerun_discards_previous_results(
    uploaded: LocalFileStorage, small_catalog: FormatCatalog
):
    task = AdResizeTask(catalog=small_catalog)

    _ = await task.run(
        JOB_ID, AdResizeParams(input_path=INPUT_PATH, format_ids=["square", "tall"]), uploaded
    )
    output = await task.run(
        JOB_ID, AdResizeParams(input_path=INPUT_PATH, format_ids=["wide"]), uploaded
    )

    assert [f.format_id for f in output.files] == ["wide"]
    output_dir = uploaded.resolve_path(JOB_ID, "output")
    assert sorted(p.name for p in output_dir.iterdir()) == ["ad-wide.png"]
    # The upload itself survives a re-run
    assert uploaded.resolve_path(JOB_ID, INPUT_PATH).is_file()


@pytest.mark.asyncio
async def test_ad_resize_task_custom_output_dir(
    uploaded: LocalFileStorage, small_catalog: FormatCatalog
):
    params = AdResizeParams(input_path=INPUT_PATH, format_ids=["square"], output_dir="ads/v2")

    output = await AdResizeTask(catalog=small_catalog).run(JOB_ID, params, uploaded)

    assert output.files[0].relative_path == "ads/v2/ad-square.png"
    assert uploaded.resolve_path(JOB_ID, "ads/v2/ad-square.png").is_file()


@pytest.mark.asyncio
async def test_ad_resize_task_progress_callback(
    uploaded: LocalFileStorage, small_catalog: FormatCatalog
):
    params = AdResizeParams(input_path=INPUT_PATH, format_ids=small_catalog.ids)
    progress_values: list[int] = []

    def progress_callback(progress: int):
        progress_values.append(progress)

    _ = await AdResizeTask(catalog=small_catalog).run(JOB_ID, params, uploaded, progress_callback)

    assert progress_values == sorted(progress_values)
    assert progress_values[-1] == 100


@pytest.mark.asyncio
async def test_ad_resize_task_file_not_found(storage: LocalFileStorage):
    params = AdResizeParams(input_path="input/missing.png", format_ids=["ig-story"])

    with pytest.raises(FileNotFoundError):
        _ = await AdResizeTask().run(JOB_ID, params, storage)


@pytest.mark.asyncio
async def test_ad_resize_task_applies_delay(
    uploaded: LocalFileStorage, small_catalog: FormatCatalog
):
    task = AdResizeTask(config=AdResizeConfig(delay_seconds=0.05), catalog=small_catalog)
    params = AdResizeParams(input_path=INPUT_PATH, format_ids=["square"])

    start = time.perf_counter()
    _ = await task.run(JOB_ID, params, uploaded)

    assert time.perf_counter() - start >= 0.05


def test_ad_resize_task_loads_catalog_from_config(tmp_path: Path):
    catalog_file = tmp_path / "formats.json"
    catalog_file.write_text(
        json.dumps([{"id": "x-post", "name": "X Post", "width": 1600, "height": 900}]),
        encoding="utf-8",
    )

    task = AdResizeTask(config=AdResizeConfig(catalog_path=str(catalog_file)))

    assert task.catalog.ids == ["x-post"]


# ============================================================================
# EXECUTE (ERROR CONVERSION)
# ============================================================================


@pytest.mark.asyncio
async def test_ad_resize_execute_completed(uploaded: LocalFileStorage, small_catalog: FormatCatalog):
    update = await AdResizeTask(catalog=small_catalog).execute(
        JOB_ID,
        {"input_path": INPUT_PATH, "format_ids": ["tall"]},
        uploaded,
    )

    assert update.status == JobStatus.completed
    assert update.progress == 100
    assert update.output is not None
    assert update.output["files"][0]["format_id"] == "tall"


@pytest.mark.asyncio
async def test_ad_resize_execute_no_formats_selected(uploaded: LocalFileStorage):
    update = await AdResizeTask().execute(
        JOB_ID,
        {"input_path": INPUT_PATH, "format_ids": []},
        uploaded,
    )

    assert update.status == JobStatus.error
    assert update.error_message is not None
    assert "NoFormatsSelectedError" in update.error_message
    assert update.output is None


@pytest.mark.asyncio
async def test_ad_resize_execute_invalid_params(storage: LocalFileStorage):
    update = await AdResizeTask().execute(JOB_ID, {"format_ids": "ig-story"}, storage)

    assert update.status == JobStatus.error
    assert update.error_message


@pytest.mark.asyncio
async def test_ad_resize_execute_undecodable_source(storage: LocalFileStorage):
    _ = await storage.save(JOB_ID, INPUT_PATH, b"not an image")

    update = await AdResizeTask().execute(
        JOB_ID,
        {"input_path": INPUT_PATH, "format_ids": ["ig-story"]},
        storage,
    )

    assert update.status == JobStatus.error
    assert "SourceDecodeError" in (update.error_message or "")
    assert not storage.resolve_path(JOB_ID, "output").exists()


class _FailingSecondSaveStorage(LocalFileStorage):
    """Local storage whose second write in the output directory fails."""

    def __init__(self, base_dir: Path):
        super().__init__(base_dir)
        self.output_saves: int = 0

    @override
    async def save(self, job_id: str, relative_path: str, data: bytes, *, mkdirs: bool = True):
        if relative_path.startswith("output/"):
            self.output_saves += 1
            if self.output_saves == 2:
                raise OSError("disk full")
        return await super().save(job_id, relative_path, data, mkdirs=mkdirs)


@pytest.mark.asyncio
async def test_ad_resize_execute_failed_save_leaves_no_partial_results(
    tmp_path: Path, synthetic_png_bytes: bytes
):
    storage = _FailingSecondSaveStorage(tmp_path / "storage")
    _ = await storage.save(JOB_ID, INPUT_PATH, synthetic_png_bytes)

    update = await AdResizeTask().execute(
        JOB_ID,
        {"input_path": INPUT_PATH, "format_ids": ["fb-ig-square", "ig-story"]},
        storage,
    )

    assert update.status == JobStatus.error
    assert "disk full" in (update.error_message or "")
    assert storage.output_saves == 2
    assert not storage.resolve_path(JOB_ID, "output/ad-fb-ig-square.png").exists()
    assert not storage.resolve_path(JOB_ID, "output").exists()
    assert storage.resolve_path(JOB_ID, INPUT_PATH).is_file()


def test_job_status_values():
    assert {status.value for status in JobStatus} == {"completed", "error"}
