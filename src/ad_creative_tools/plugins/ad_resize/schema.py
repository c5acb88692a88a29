"""Ad resize parameters and output schemas."""

from pydantic import BaseModel, Field, field_validator

from ...common.schema_job import BaseJobParams, TaskOutput


class AdResizeParams(BaseJobParams):
    """Parameters for the ad resize task.

    Attributes:
        input_path: Uploaded source image, relative to the job storage
        format_ids: Ids of the ad formats to render. Unknown ids are ignored.
        output_dir: Job-relative folder receiving the ``ad-<id>.png`` files
    """

    format_ids: list[str] = Field(
        default_factory=list,
        description="Ad format ids to render (catalog order is used for output)",
    )
    output_dir: str = Field(
        default="output",
        min_length=1,
        description="Job-relative directory for rendered assets",
    )

    @field_validator("format_ids")
    @classmethod
    def strip_format_ids(cls, v: list[str]) -> list[str]:
        return [fid.strip() for fid in v if fid.strip()]


class RenderedAdFile(BaseModel):
    """One rendered ad format as persisted in job storage."""

    format_id: str = Field(..., description="Ad format id")
    name: str = Field(..., description="Ad format display name")
    width: int = Field(..., gt=0, description="Width in pixels")
    height: int = Field(..., gt=0, description="Height in pixels")
    relative_path: str = Field(..., description="Job-relative path of the PNG")
    size: int = Field(..., ge=0, description="File size in bytes")


class AdResizeOutput(TaskOutput):
    """Rendered files in catalog order."""

    files: list[RenderedAdFile] = Field(default_factory=list)
