"""Common module - errors, schemas, catalog, storage and base classes."""

from .compute_module import ComputeModule
from .config import AdResizeConfig
from .errors import (
    AdCreativeError,
    FormatNotFoundError,
    InvalidDimensionsError,
    MissingSourceError,
    NoFormatsSelectedError,
    SourceDecodeError,
    UnsupportedMediaError,
)
from .file_storage_impl import LocalFileStorage
from .format_catalog import DEFAULT_AD_FORMATS, FormatCatalog, default_catalog
from .job_storage import JobStorage, SavedJobFile
from .schema_job import BaseJobParams, JobRecordUpdate, JobStatus, TaskOutput
from .schemas import AdFormat, ResizedAsset, SourceImage

__all__ = [
    "AdCreativeError",
    "AdFormat",
    "AdResizeConfig",
    "BaseJobParams",
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
    "ResizedAsset",
    "SavedJobFile",
    "SourceDecodeError",
    "SourceImage",
    "TaskOutput",
    "UnsupportedMediaError",
    "default_catalog",
]
