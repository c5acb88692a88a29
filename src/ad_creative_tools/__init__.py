"""ad_creative_tools - render one image into a fixed set of ad formats."""

from .common.compute_module import ComputeModule
from .common.config import AdResizeConfig
from .common.errors import (
    AdCreativeError,
    FormatNotFoundError,
    InvalidDimensionsError,
    MissingSourceError,
    NoFormatsSelectedError,
    SourceDecodeError,
    UnsupportedMediaError,
)
from .common.file_storage_impl import LocalFileStorage
from .common.format_catalog import DEFAULT_AD_FORMATS, FormatCatalog, default_catalog
from .common.job_storage import JobStorage, SavedJobFile
from .common.schema_job import JobRecordUpdate, JobStatus
from .common.schemas import AdFormat, ResizedAsset, SourceImage
from .plugins.ad_resize import AdResizeOutput, AdResizeParams, AdResizeTask
from .plugins.ad_resize.algo import (
    BatchGenerator,
    Placement,
    composite_resize,
    compute_placement,
    decode_data_url,
    decode_source_image,
    generate,
    load_source_image,
)

__version__ = "0.1.0"

__all__ = [
    "AdCreativeError",
    "AdFormat",
    "AdResizeConfig",
    "AdResizeOutput",
    "AdResizeParams",
    "AdResizeTask",
    "BatchGenerator",
    "ComputeModule",
    "DEFAULT_AD_FORMATS",
    "FormatCatalog",
    "FormatNotFoundError",
    "InvalidDimensionsError",
    "JobRecordUpdate",
    "JobStatus",
    "JobStorage",
    "LocalFileStorage",
    "MissingSourceError",
    "NoFormatsSelectedError",
    "Placement",
    "ResizedAsset",
    "SavedJobFile",
    "SourceDecodeError",
    "SourceImage",
    "UnsupportedMediaError",
    "__version__",
    "composite_resize",
    "compute_placement",
    "decode_data_url",
    "decode_source_image",
    "default_catalog",
    "generate",
    "load_source_image",
]
